"""
Abstract base class for storage backends.

Slots are read and written whole. Writes are synchronous from the caller's
point of view; there is no batching.
"""

from abc import ABC, abstractmethod

from ..exceptions import JotbookError


class KeyValueStorage(ABC):
    """Abstract base class for key-value slot storage."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the slot's text, or None if the slot is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Replace the slot's text."""


class StorageError(JotbookError):
    """Base exception for storage errors."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""
