"""Derived entry views: substring search plus chronological sort.

Everything here is a pure function of the entry list and the current
filter state. Views are recomputed from scratch on every change.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from .models import Entry, parse_timestamp

_EARLIEST = datetime.min.replace(tzinfo=UTC)

NO_MATCHES_MESSAGE = "No entries match your search."
NO_ENTRIES_MESSAGE = "No entries yet. Write one with `jotbook write`."


class SortOrder(StrEnum):
    DESC = "desc"
    ASC = "asc"

    @property
    def label(self) -> str:
        return "Newest first" if self is SortOrder.DESC else "Oldest first"


@dataclass
class QueryState:
    """Transient filter state for the entry list."""

    search: str = ""
    sort_order: SortOrder = SortOrder.DESC

    def __post_init__(self):
        self.sort_order = SortOrder(self.sort_order)


def filter_entries(entries: Iterable[Entry], query: str) -> list[Entry]:
    """Keep entries whose content contains ``query``, ignoring case.

    The query is trimmed first; an empty query keeps everything.
    """
    needle = (query or "").strip().casefold()
    if not needle:
        return list(entries)
    return [e for e in entries if needle in (e.content or "").casefold()]


def _created_key(entry: Entry) -> datetime:
    # Unparseable timestamps sort as the earliest possible instant
    return parse_timestamp(entry.created_at) or _EARLIEST


def sort_entries(entries: Iterable[Entry], order: SortOrder | str = SortOrder.DESC) -> list[Entry]:
    """Sort by creation time. Stable: ties keep their stored order."""
    order = SortOrder(order)
    return sorted(entries, key=_created_key, reverse=order is SortOrder.DESC)


def derive_view(entries: Iterable[Entry], state: QueryState | None = None) -> list[Entry]:
    """Filter then sort ``entries`` for display."""
    state = state or QueryState()
    return sort_entries(filter_entries(entries, state.search), state.sort_order)


def empty_view_message(state: QueryState) -> str:
    return NO_MATCHES_MESSAGE if state.search.strip() else NO_ENTRIES_MESSAGE
