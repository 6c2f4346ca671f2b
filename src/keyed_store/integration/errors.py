from __future__ import annotations

from collections.abc import Iterable


class KeyedStoreError(Exception):
    # Common base for every error raised by keyed stores.
    pass


class InvalidKeyError(KeyedStoreError, ValueError):
    # Raised when a key is not a string or trims to an empty string.
    def __init__(self, message: str, *, key: object = None) -> None:
        super().__init__(message)
        self.key = key


class DuplicateKeyError(KeyedStoreError, ValueError):
    # Raised at construction when several raw keys collapse to the same trimmed key.
    def __init__(self, message: str, *, keys: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.keys = sorted(keys)


class KeyExistsError(KeyedStoreError, RuntimeError):
    # Raised by strict insert when the trimmed key is already stored.
    def __init__(self, key: str) -> None:
        super().__init__(f'ID "{key}" already exists in the store. Note: IDs are trimmed automatically.')
        self.key = key


class NotFoundError(KeyedStoreError, LookupError):
    # Raised by exact-match lookup; carries the queried key unchanged.
    def __init__(self, key: str) -> None:
        super().__init__(f"{key} not found.")
        self.key = key
