from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

import yaml

SnapshotFormat = Literal["json", "yaml"]
SUPPORTED_FORMATS: tuple[str, ...] = ("json", "yaml")


class Dumpable(Protocol):
    # Anything exposing a full mapping snapshot, such as KeyedStore.
    def dump(self) -> dict[str, object]: ...


@dataclass(frozen=True, slots=True)
class SnapshotWriter:
    # Serializes a store snapshot to disk; writes to a temp file and replaces atomically.
    path: Path
    fmt: SnapshotFormat = "json"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.fmt not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported snapshot format: {self.fmt!r} (expected one of {SUPPORTED_FORMATS})")

    def write(self, source: Dumpable) -> Path:
        text = render_snapshot(source.dump(), self.fmt)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            temp_path.write_text(text, encoding=self.encoding)
            temp_path.replace(self.path)
        finally:
            # After a successful replace the temp path no longer exists.
            temp_path.unlink(missing_ok=True)
        return self.path


def render_snapshot(elements: dict[str, object], fmt: str) -> str:
    if fmt == "json":
        # Opaque values that are not JSON-native are rendered through str().
        return json.dumps(elements, ensure_ascii=False, indent=2, default=str) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(elements, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unsupported snapshot format: {fmt!r} (expected one of {SUPPORTED_FORMATS})")


def write_snapshot(source: Dumpable, path: Path, *, fmt: SnapshotFormat = "json") -> Path:
    return SnapshotWriter(path=path, fmt=fmt).write(source)
