"""
Storage backends for jotbook.

A storage backend is a flat key-value map of text slots, the way a browser's
local storage is. The local filesystem backend is the default; the memory
backend keeps slots in-process.
"""

from .base import (
    KeyValueStorage,
    StorageError,
    StoragePermissionError,
)
from .local import LocalStorage
from .memory import MemoryStorage

__all__ = [
    "KeyValueStorage",
    "LocalStorage",
    "MemoryStorage",
    "StorageError",
    "StoragePermissionError",
]
