from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

from keyed_store.config.models import LoggingConfig, StoreAppConfig
from keyed_store.integration.keyed_store import KeyedStore
from keyed_store.observability.adapters.logging import JsonlLogSink, LogSink, StdoutLogSink


def build_log_sink(logging: LoggingConfig, *, stream: TextIO | None = None) -> LogSink | None:
    # Logging is optional; "none" keeps the store silent. stream redirects the stdout sink.
    if logging.sink == "none":
        return None

    if logging.sink == "stdout":
        return StdoutLogSink(stream=stream)

    if logging.sink == "jsonl":
        assert logging.path is not None  # validated by config model
        return JsonlLogSink(Path(logging.path))

    raise ValueError(f"Unsupported log sink: {logging.sink}")


def build_store_from_config(
    config: StoreAppConfig,
    *,
    log_sink: LogSink | None = None,
) -> KeyedStore[Any]:
    # Initial elements go through construction validation, then entries are replayed in order.
    # Store errors propagate unchanged so callers see the exact failing kind.
    store: KeyedStore[Any] = KeyedStore(config.store.elements, log_sink=log_sink)
    for entry in config.store.entries:
        if entry.op == "add":
            store.add(entry.key, entry.value)
        elif entry.op == "set":
            store.set(entry.key, entry.value)
        else:
            store.unset(entry.key)
    return store
