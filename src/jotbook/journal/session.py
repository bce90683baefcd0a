"""Editor session over an EntryStore.

Tracks what the editor shows (the active entry id and the draft text) and
the list filters, and guards destructive actions behind a confirmation.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from loguru import logger

from ..core.exceptions import EntryNotFoundError
from . import exchange
from .models import Entry, utc_now_iso
from .query import QueryState, derive_view
from .store import EntryStore

DELETE_PROMPT = "Delete this entry? This cannot be undone."
CLEAR_ALL_PROMPT = "Clear ALL entries? This cannot be undone."


def _decline(_message: str) -> bool:
    return False


class JournalSession:
    """Editor and list state bound to one store.

    Args:
        store: The entry store to operate on.
        confirm: Called with a yes/no question before destructive actions.
            Defaults to always declining.
        state: Initial search and sort settings.
    """

    def __init__(
        self,
        store: EntryStore,
        confirm: Callable[[str], bool] = _decline,
        state: QueryState | None = None,
    ) -> None:
        self.store = store
        self.confirm = confirm
        self.state = state or QueryState()
        self.active_id: str | None = None
        self.draft: str = ""

    # -- editor -------------------------------------------------------------

    @property
    def mode(self) -> str:
        return "Edit" if self.active_id else "New"

    @property
    def active_entry(self) -> Entry | None:
        return self.store.get(self.active_id) if self.active_id else None

    def new(self) -> None:
        """Reset the editor to a blank draft."""
        self.active_id = None
        self.draft = ""

    cancel = new

    def edit(self, entry_id: str) -> Entry:
        entry = self.store.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(f"Entry not found: {entry_id}")
        self.active_id = entry.id
        self.draft = entry.content or ""
        return entry

    def save(self, draft: str | None = None) -> Entry:
        """Save the draft; a new entry becomes the active one."""
        if draft is not None:
            self.draft = draft
        entry = self.store.save(self.draft, active_id=self.active_id)
        self.active_id = entry.id
        return entry

    # -- destructive actions -----------------------------------------------

    def delete(self, entry_id: str) -> bool:
        """Delete after confirmation. Returns False if declined or unknown."""
        if not self.confirm(DELETE_PROMPT):
            logger.debug(f"Delete of {entry_id} declined")
            return False
        removed = self.store.delete(entry_id)
        if self.active_id == entry_id:
            self.new()
        return removed

    def clear_all(self) -> bool:
        if not self.confirm(CLEAR_ALL_PROMPT):
            logger.debug("Clear all declined")
            return False
        self.store.clear_all()
        self.new()
        return True

    # -- list ---------------------------------------------------------------

    def view(self) -> list[Entry]:
        return derive_view(self.store.entries, self.state)

    # -- exchange -----------------------------------------------------------

    def export_all(self, directory: str | Path) -> Path:
        now = utc_now_iso()
        envelope = exchange.build_export_all(self.store.entries, now=now)
        return exchange.write_export(directory, exchange.export_all_filename(now), envelope)

    def export_entry(self, entry_id: str, directory: str | Path) -> Path:
        entry = self.store.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(f"Entry not found: {entry_id}")
        envelope = exchange.build_export_entry(entry)
        return exchange.write_export(directory, exchange.export_entry_filename(entry), envelope)

    def export_active(self, directory: str | Path) -> Path | None:
        if self.active_entry is None:
            return None
        return self.export_entry(self.active_id, directory)

    async def import_file(self, path: str | Path) -> str:
        """Import an export file and return the user-facing summary."""
        count = await exchange.import_file(self.store, path)
        return exchange.import_summary(count)
