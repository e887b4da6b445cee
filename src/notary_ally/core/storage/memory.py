"""In-memory storage backend for tests and throwaway sessions."""

from collections.abc import Iterator

from .base import StorageBackend


class MemoryStorage(StorageBackend):
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, quota_bytes: int | None = None, **config):
        super().__init__(quota_bytes=quota_bytes, **config)
        self._items: dict[str, str] = {}

    def _used_bytes(self, excluding: str | None = None) -> int:
        return sum(
            len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in self._items.items() if k != excluding
        )

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._check_quota(self._used_bytes(excluding=key), key, value)
        self._items[key] = value

    def remove_item(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def keys(self, prefix: str = "") -> Iterator[str]:
        for key in list(self._items):
            if key.startswith(prefix):
                yield key
