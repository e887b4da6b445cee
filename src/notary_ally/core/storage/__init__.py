"""
Storage backends for notary_ally.

A durable string-to-string substrate in the shape of browser local storage,
with a filesystem backend and an in-memory backend.
"""

from .base import (
    StorageBackend,
    StorageError,
    StoragePermissionError,
    StorageQuotaError,
)
from .local import LocalStorage
from .memory import MemoryStorage

__all__ = [
    "LocalStorage",
    "MemoryStorage",
    "StorageBackend",
    "StorageError",
    "StoragePermissionError",
    "StorageQuotaError",
]
