"""Display helpers for entry lists: titles, previews, timestamps."""

from __future__ import annotations

from .models import parse_timestamp

TITLE_MAX_LENGTH = 60
PREVIEW_MAX_LENGTH = 180
TITLE_FALLBACK = "Journal Entry"
PREVIEW_FALLBACK = "(No preview)"
MISSING_TIMESTAMP = "—"


def entry_title(content: str | None) -> str:
    """First non-blank line of ``content``, cut to 60 characters."""
    for line in (content or "").split("\n"):
        if line.strip():
            return line[:TITLE_MAX_LENGTH]
    return TITLE_FALLBACK


def entry_preview(content: str | None) -> str:
    """First 180 characters of ``content``, line breaks included."""
    preview = (content or "")[:PREVIEW_MAX_LENGTH]
    return preview or PREVIEW_FALLBACK


def format_timestamp(value: str | None) -> str:
    """Render an ISO timestamp in local time, e.g. ``Jan 02, 2026, 03:04 PM``.

    Unparseable values are returned unchanged.
    """
    if not value:
        return MISSING_TIMESTAMP
    dt = parse_timestamp(value)
    if dt is None:
        return value
    try:
        return dt.astimezone().strftime("%b %d, %Y, %I:%M %p")
    except (OverflowError, ValueError, OSError):
        # instants at the edge of the datetime range can't shift to local time
        return value
