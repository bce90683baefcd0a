"""Core data model for journal entries.

An Entry lives in Python as a dataclass with snake_case fields and travels
as a camelCase JSON record, both in the persisted slot and in export files.
"""

from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 11


def generate_id() -> str:
    """Return a new entry id: ``entry_<epoch-ms>_<base-36 suffix>``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"entry_{int(time.time() * 1000)}_{suffix}"


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. ``2026-01-02T03:04:05.678Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC.

    Returns None for empty or unparseable input.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        dt = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def date_part(timestamp: str) -> str:
    """Return the date portion of an ISO timestamp (everything before ``T``)."""
    return timestamp.split("T")[0]


@dataclass
class Entry:
    """One journal record.

    Attributes:
        id: Opaque unique identifier, immutable once assigned.
        content: Free-form text body, stored exactly as written.
        created_at: ISO-8601 creation time, never changed after creation.
        updated_at: ISO-8601 time of the last content save.
    """

    id: str
    content: str
    created_at: str
    updated_at: str

    @classmethod
    def create(cls, content: str, now: str | None = None, entry_id: str | None = None) -> Entry:
        now = now or utc_now_iso()
        return cls(id=entry_id or generate_id(), content=content, created_at=now, updated_at=now)

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """Build an Entry from a camelCase record.

        Unknown keys are dropped. A missing ``updatedAt`` falls back to
        ``createdAt``.

        Raises:
            ValueError: If ``data`` is not a mapping or has no usable id.
        """
        if not isinstance(data, dict):
            raise ValueError("Entry record must be an object")
        entry_id = data.get("id")
        if not entry_id or not isinstance(entry_id, str):
            raise ValueError("Entry record must have a string id")

        content = data.get("content")
        created_at = data.get("createdAt") or ""
        updated_at = data.get("updatedAt") or created_at
        return cls(
            id=entry_id,
            content=content if isinstance(content, str) else "",
            created_at=str(created_at),
            updated_at=str(updated_at),
        )

    def __repr__(self) -> str:
        preview = self.content[:30] + "..." if len(self.content) > 30 else self.content
        return f"Entry(id='{self.id}', created_at='{self.created_at}', content={preview!r})"
