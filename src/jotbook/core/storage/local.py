"""
Local filesystem storage backend.

Each slot is one ``<key>.json`` file under ``base_path``.
"""

from pathlib import Path

from loguru import logger

from ..utils.file_io import atomic_write
from .base import KeyValueStorage, StoragePermissionError

_SLOT_SUFFIX = ".json"


class LocalStorage(KeyValueStorage):
    """Local filesystem key-value storage."""

    def __init__(self, base_path: str = "~/.jotbook-data/storage", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Storage key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Storage key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key + _SLOT_SUFFIX)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / key_path).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        return full_path

    def get_item(self, key: str) -> str | None:
        path = self._get_full_path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            logger.warning(f"Slot '{key}' is not valid UTF-8: {e}")
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self._get_full_path(key)
        try:
            atomic_write(str(path), value)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
