from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from keyed_store.observability.domain.logging import LogMessage


@runtime_checkable
class LogSink(Protocol):
    # Destination for structured store log messages.
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink.emit must be implemented")


class StdoutLogSink:
    # One compact JSON object per line on stdout, or on the given stream.
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        # sys.stdout is resolved per call so redirected streams are honoured.
        stream = self._stream if self._stream is not None else sys.stdout
        print(json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str), file=stream)


class JsonlLogSink:
    # File-backed structured log sink; appends and flushes on every message.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: TextIO | None = self._path.open("a", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    def emit(self, message: LogMessage) -> None:
        if self._file is None:
            raise ValueError(f"JsonlLogSink for {self._path} is closed")
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=str)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent so CLI shutdown paths can call it unconditionally.
        if self._file is None:
            return
        self._file.close()
        self._file = None

    def __enter__(self) -> JsonlLogSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
