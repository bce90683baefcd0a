"""Journal entries: storage, search and sort, and JSON export/import."""

from .models import Entry, generate_id, utc_now_iso
from .query import QueryState, SortOrder, derive_view
from .session import JournalSession
from .store import EntryStore, merge_entries

__all__ = [
    "Entry",
    "EntryStore",
    "JournalSession",
    "QueryState",
    "SortOrder",
    "derive_view",
    "generate_id",
    "merge_entries",
    "utc_now_iso",
]
