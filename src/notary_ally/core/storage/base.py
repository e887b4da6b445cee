"""
Abstract base class for storage backends.

Backends hold opaque string values under string keys. Serialization is the
caller's concern (see ``notary_ally.core.store``).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..exceptions import NotaryAllyError


class StorageBackend(ABC):
    """Abstract base class for key-value storage backends."""

    def __init__(self, quota_bytes: int | None = None, **config):
        self.quota_bytes = quota_bytes
        self.config = config

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a string. Raises StorageQuotaError when the quota would be exceeded."""

    @abstractmethod
    def remove_item(self, key: str) -> bool:
        """Remove a key. Returns True if removed, False if it didn't exist."""

    @abstractmethod
    def keys(self, prefix: str = "") -> Iterator[str]:
        """Iterate keys with an optional prefix filter."""

    def clear(self, prefix: str = "") -> int:
        """Remove every key matching prefix. Returns the number removed."""
        removed = 0
        for key in list(self.keys(prefix)):
            if self.remove_item(key):
                removed += 1
        return removed

    def exists(self, key: str) -> bool:
        return self.get_item(key) is not None

    def _check_quota(self, used_bytes: int, key: str, value: str) -> None:
        """Raise StorageQuotaError if writing value would push usage past the quota."""
        if self.quota_bytes is None:
            return
        needed = used_bytes + len(key.encode("utf-8")) + len(value.encode("utf-8"))
        if needed > self.quota_bytes:
            raise StorageQuotaError(
                f"Writing '{key}' needs {needed} bytes, quota is {self.quota_bytes} bytes."
            )


class StorageError(NotaryAllyError):
    """Base exception for storage errors."""


class StoragePermissionError(StorageError):
    """Raised when a storage operation is not permitted."""


class StorageQuotaError(StorageError):
    """Raised when storage quota is exceeded."""
