from __future__ import annotations

from typing import Generic, Protocol, TypeVar, runtime_checkable

V_co = TypeVar("V_co", covariant=True)


@runtime_checkable
class ServiceLookup(Protocol[V_co]):
    # Narrow read-only contract handed to consumers: existence check plus lookup.
    def has(self, id: str) -> bool:
        raise NotImplementedError("ServiceLookup.has must be implemented")

    def get(self, id: str) -> V_co:
        # Must raise NotFoundError when the id is absent.
        raise NotImplementedError("ServiceLookup.get must be implemented")


class ReadOnlyLookup(Generic[V_co]):
    # View that hides every mutating operation of the wrapped lookup.
    __slots__ = ("_source",)

    def __init__(self, source: ServiceLookup[V_co]) -> None:
        if not isinstance(source, ServiceLookup):
            raise TypeError(f"ReadOnlyLookup requires a ServiceLookup, got {type(source).__name__}")
        self._source = source

    def has(self, id: str) -> bool:
        return self._source.has(id)

    def get(self, id: str) -> V_co:
        return self._source.get(id)

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and self._source.has(id)

    def __repr__(self) -> str:
        return f"ReadOnlyLookup({self._source!r})"


def read_only(source: ServiceLookup[V_co]) -> ReadOnlyLookup[V_co]:
    # Convenience for composition code that passes the store down as a lookup only.
    if isinstance(source, ReadOnlyLookup):
        return source
    return ReadOnlyLookup(source)
