"""
Jotbook exception hierarchy.

All jotbook exceptions inherit from JotbookError, so the CLI can catch every
recoverable failure in one place while still distinguishing specific modes.
"""


class JotbookError(Exception):
    """Base exception class for all jotbook errors."""


class ConfigurationError(JotbookError):
    """Raised for configuration errors (missing keys, invalid values)."""


class ValidationError(JotbookError):
    """Raised when user input is rejected before any mutation."""


class EmptyEntryError(ValidationError):
    """Raised when saving a draft that is empty after trimming whitespace."""

    def __init__(self, message: str = "Entry is empty. Please write something before saving."):
        super().__init__(message)


class EntryNotFoundError(JotbookError, KeyError):
    """Raised when an entry id does not exist in the store."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Entry not found"


class ImportFormatError(JotbookError):
    """Raised when an import file is not valid JSON or not a journal export."""
