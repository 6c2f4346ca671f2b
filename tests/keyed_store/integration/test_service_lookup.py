from __future__ import annotations

import pytest

from keyed_store.integration.errors import NotFoundError
from keyed_store.integration.keyed_store import KeyedStore
from keyed_store.integration.service_lookup import ReadOnlyLookup, ServiceLookup, read_only


class _Greeter:
    # Consumer that depends only on the narrow lookup contract.
    def __init__(self, lookup: ServiceLookup[str]) -> None:
        self._lookup = lookup

    def greeting(self) -> str:
        if not self._lookup.has("greeting"):
            return "hello"
        return self._lookup.get("greeting")


def test_keyed_store_satisfies_service_lookup() -> None:
    assert isinstance(KeyedStore(), ServiceLookup)


def test_read_only_view_exposes_lookup_only() -> None:
    store: KeyedStore[int] = KeyedStore({"a": 1})
    view = read_only(store)

    assert isinstance(view, ReadOnlyLookup)
    assert isinstance(view, ServiceLookup)
    assert view.has("a") is True
    assert view.get("a") == 1
    assert "a" in view
    for name in ("set", "add", "unset", "dump", "keys"):
        assert not hasattr(view, name)


def test_read_only_view_tracks_later_store_mutations() -> None:
    store: KeyedStore[int] = KeyedStore()
    view = read_only(store)
    store.set(" late ", 5)
    assert view.get("late") == 5


def test_read_only_view_propagates_not_found() -> None:
    view = read_only(KeyedStore())
    with pytest.raises(NotFoundError) as excinfo:
        view.get("missing")
    assert excinfo.value.key == "missing"


def test_read_only_is_idempotent() -> None:
    view = read_only(KeyedStore())
    assert read_only(view) is view


def test_read_only_rejects_objects_without_lookup_api() -> None:
    with pytest.raises(TypeError):
        ReadOnlyLookup(object())  # type: ignore[arg-type]


def test_consumer_receives_store_through_context_passing() -> None:
    # Store is assembled by the caller and handed down as a read-only lookup.
    store: KeyedStore[str] = KeyedStore()
    greeter = _Greeter(read_only(store))
    assert greeter.greeting() == "hello"
    store.add("greeting", "hi there")
    assert greeter.greeting() == "hi there"
