"""
Local filesystem storage backend.

Each key is stored as ``<base_path>/<key>.json``. Writes go to a temp file
that is then swapped into place, so a crash mid-write leaves the previous
value intact.
"""

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from .base import StorageBackend, StorageError, StoragePermissionError

_SUFFIX = ".json"


class LocalStorage(StorageBackend):
    """Stores each key as a UTF-8 file under base_path."""

    def __init__(self, base_path: str = "~/.notary-ally/storage", quota_bytes: int | None = None, **config):
        super().__init__(quota_bytes=quota_bytes, **config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path_for(self, key: str) -> Path:
        """Map a key to its file, refusing keys that would land outside base_path."""
        cleaned = key.strip()
        problem = None
        if not cleaned:
            problem = "empty key"
        elif "\x00" in cleaned or "\\" in cleaned:
            problem = "null byte or backslash in key"
        elif cleaned.startswith(("/", "~")):
            problem = "absolute key"
        if problem is None:
            path = (self.base_path / f"{cleaned}{_SUFFIX}").resolve()
            if path.is_relative_to(self.base_path):
                return path
            problem = "key escapes the storage directory"
        raise StoragePermissionError(f"Rejected storage key {key!r}: {problem}.")

    def _used_bytes(self, excluding: Path | None = None) -> int:
        total = 0
        for path in self.base_path.rglob(f"*{_SUFFIX}"):
            if excluding is not None and path == excluding:
                continue
            key = str(path.relative_to(self.base_path))[: -len(_SUFFIX)]
            total += len(key.encode("utf-8")) + path.stat().st_size
        return total

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        if self.quota_bytes is not None:
            self._check_quota(self._used_bytes(excluding=path), key, value)

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except PermissionError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Stored {len(value)} chars under '{key}'")

    def remove_item(self, key: str) -> bool:
        path = self._path_for(key)
        if path.exists():
            path.unlink()
            return True
        return False

    def keys(self, prefix: str = "") -> Iterator[str]:
        for path in sorted(self.base_path.rglob(f"*{_SUFFIX}")):
            key = path.relative_to(self.base_path).as_posix()[: -len(_SUFFIX)]
            if prefix and not key.startswith(prefix):
                continue
            yield key
