from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from typing import Generic, TypeVar

from keyed_store.integration.errors import DuplicateKeyError, InvalidKeyError, KeyExistsError, NotFoundError
from keyed_store.observability.adapters.logging import LogSink
from keyed_store.observability.domain.logging import LogMessage

V = TypeVar("V")


def normalize_key(key: object) -> str:
    # Normalization is a plain whitespace strip; non-strings and blank keys are rejected.
    if not isinstance(key, str):
        raise InvalidKeyError(f"ID must be a string, got {type(key).__name__}.", key=key)
    trimmed = key.strip()
    if trimmed == "":
        raise InvalidKeyError("ID must be a non-empty string. Note: IDs are trimmed automatically.", key=key)
    return trimmed


class KeyedStore(Generic[V]):
    """In-memory mapping of trimmed string keys to opaque values.

    Keys are trimmed by construction, ``set`` and ``add``. ``get``, ``has`` and
    ``unset`` match the stored key exactly and never trim their argument, so
    ``store.set(" a ", 1)`` is visible through ``store.get("a")`` only.
    """

    __slots__ = ("_elements", "_log_sink")

    def __init__(self, initial: Mapping[str, V] | None = None, *, log_sink: LogSink | None = None) -> None:
        self._log_sink = log_sink
        self._elements: dict[str, V] = _normalize_initial(initial or {})
        self._log("debug", "store.created", size=len(self._elements))

    def set(self, id: str, value: V) -> None:
        try:
            key = normalize_key(id)
        except InvalidKeyError as exc:
            self._log("warning", "store.set.rejected", key=id, reason=str(exc))
            raise
        self._elements[key] = value
        self._log("debug", "store.set", key=key)

    def add(self, id: str, value: V) -> None:
        # Strict insert: a blank trimmed key can never exist, so validating first keeps the error kinds.
        try:
            key = normalize_key(id)
        except InvalidKeyError as exc:
            self._log("warning", "store.add.rejected", key=id, reason=str(exc))
            raise
        if self.has(key):
            self._log("warning", "store.add.rejected", key=key, reason="exists")
            raise KeyExistsError(key)
        self._elements[key] = value
        self._log("debug", "store.add", key=key)

    def unset(self, id: str) -> None:
        removed = self._elements.pop(id, _MISSING) is not _MISSING
        self._log("debug", "store.unset", key=id, removed=removed)

    def dump(self) -> dict[str, V]:
        return dict(self._elements)

    def keys(self) -> list[str]:
        return list(self._elements)

    def get(self, id: str) -> V:
        try:
            return self._elements[id]
        except KeyError:
            raise NotFoundError(id) from None

    def has(self, id: str) -> bool:
        return id in self._elements

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and self.has(id)

    def __getitem__(self, id: str) -> V:
        return self.get(id)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"KeyedStore({self._elements!r})"

    def _log(self, level: str, message: str, **fields: object) -> None:
        if self._log_sink is None:
            return
        self._log_sink.emit(LogMessage(level=level, message=message, fields=fields))


_MISSING = object()


def _normalize_initial(initial: Mapping[str, V]) -> dict[str, V]:
    # Validity is checked for every key before uniqueness so the error kind is deterministic.
    raw_keys = list(initial.keys())
    for raw in raw_keys:
        if not isinstance(raw, str) or raw.strip() == "":
            raise InvalidKeyError("All keys must be non-empty strings.", key=raw)

    trimmed = [raw.strip() for raw in raw_keys]
    duplicates = [key for key, count in Counter(trimmed).items() if count > 1]
    if duplicates:
        raise DuplicateKeyError("Keys must be unique after trimming.", keys=duplicates)

    return dict(zip(trimmed, initial.values()))
