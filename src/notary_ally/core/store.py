"""
JSON key-value store with read-through defaults and write-through persistence.

The store never raises on persistence problems: a value that cannot be read
falls back to the caller's default, and a value that cannot be written is
logged and dropped. In-memory state stays authoritative for the session.

Usage:
    store = KeyValueStore(LocalStorage("~/.notary-ally/storage"), namespace="notary_ally")
    appointments = PersistedValue(store, "notary_appointments", [])
    appointments.set([*appointments.get(), new_item])
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from loguru import logger

from .storage import StorageBackend, StorageError

T = TypeVar("T")


class KeyValueStore:
    """JSON (de)serialization over a StorageBackend, under a key namespace."""

    def __init__(self, backend: StorageBackend, namespace: str = ""):
        self.backend = backend
        self.namespace = namespace.strip("/")

    def _full_key(self, key: str) -> str:
        return f"{self.namespace}/{key}" if self.namespace else key

    def read(self, key: str, default: T) -> T:
        """Return the decoded value under key, or default if absent or unreadable."""
        full_key = self._full_key(key)
        try:
            raw = self.backend.get_item(full_key)
        except (StorageError, OSError) as e:
            logger.error(f'Error reading storage key "{full_key}": {e}')
            return default
        if raw is None or raw == "":
            return default
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.warning(f'Error reading storage key "{full_key}": {e}')
            return default

    def write(self, key: str, value: Any) -> bool:
        """Encode and persist value. Failures are logged; returns False if nothing was stored."""
        full_key = self._full_key(key)
        try:
            encoded = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f'Error serializing storage key "{full_key}": {e}')
            return False
        try:
            self.backend.set_item(full_key, encoded)
        except (StorageError, OSError) as e:
            logger.error(f'Error setting storage key "{full_key}": {e}')
            return False
        return True

    def remove(self, key: str) -> bool:
        try:
            return self.backend.remove_item(self._full_key(key))
        except (StorageError, OSError) as e:
            logger.error(f'Error removing storage key "{self._full_key(key)}": {e}')
            return False

    def clear(self) -> int:
        """Drop every key in this store's namespace."""
        prefix = f"{self.namespace}/" if self.namespace else ""
        removed = self.backend.clear(prefix)
        logger.info(f"Cleared {removed} stored key(s) under '{prefix or '<root>'}'")
        return removed


class PersistedValue(Generic[T]):
    """A single value bound to a store key.

    The value is read once at construction (falling back to ``default``) and
    every ``set`` writes the whole value back. ``get`` never touches the
    backend again.
    """

    def __init__(self, store: KeyValueStore, key: str, default: T):
        self.store = store
        self.key = key
        self.default = default
        self._value: T = store.read(key, default)

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        self.store.write(self.key, value)

    def update(self, fn: Callable[[T], T]) -> T:
        """Apply fn to the current value, store and return the result."""
        new_value = fn(self._value)
        self.set(new_value)
        return new_value

    def reload(self) -> T:
        """Re-read from the store, discarding the in-memory value."""
        self._value = self.store.read(self.key, self.default)
        return self._value

    def __repr__(self) -> str:
        return f"PersistedValue(key='{self.key}')"
