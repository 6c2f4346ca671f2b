# Integration package: the keyed store, its lookup contract and error taxonomy.

from keyed_store.integration.errors import (
    DuplicateKeyError,
    InvalidKeyError,
    KeyedStoreError,
    KeyExistsError,
    NotFoundError,
)
from keyed_store.integration.keyed_store import KeyedStore, normalize_key
from keyed_store.integration.service_lookup import ReadOnlyLookup, ServiceLookup, read_only

__all__ = [
    "KeyedStore",
    "normalize_key",
    "ServiceLookup",
    "ReadOnlyLookup",
    "read_only",
    "KeyedStoreError",
    "InvalidKeyError",
    "DuplicateKeyError",
    "KeyExistsError",
    "NotFoundError",
]
