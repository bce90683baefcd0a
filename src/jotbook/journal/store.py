"""Entry store — the single source of truth for journal entries.

The whole collection lives in one storage slot as a JSON array. It is read
once by ``load()`` and rewritten in full after every mutation.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable

from loguru import logger

from ..core.config import DEFAULT_STORAGE_KEY
from ..core.exceptions import EmptyEntryError, EntryNotFoundError
from ..core.storage import KeyValueStorage
from .models import Entry, utc_now_iso


def merge_entries(existing: Iterable[Entry], candidates: Iterable[Entry]) -> list[Entry]:
    """Overlay ``candidates`` onto ``existing`` keyed by id.

    Existing entries keep their position; a candidate with a known id
    replaces that entry wholesale, and unknown ids are appended in order.
    When ids repeat among the candidates, the last one wins.
    """
    merged: dict[str, Entry] = {entry.id: entry for entry in existing}
    for candidate in candidates:
        merged[candidate.id] = candidate
    return list(merged.values())


class EntryStore:
    """Ordered, id-keyed entry collection persisted to a key-value slot.

    Example::

        store = EntryStore(LocalStorage("~/.jotbook-data/storage"))
        store.load()
        entry = store.save("Dear diary...")
        store.save("Dear diary, edited", active_id=entry.id)
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self.storage = storage
        self.key = key
        self._clock = clock
        self._entries: dict[str, Entry] = {}
        self._loaded = False

    # -- persistence --------------------------------------------------------

    def load(self) -> int:
        """Read the persisted collection, replacing in-memory state.

        Missing, malformed, or non-array payloads leave the store empty.
        Returns the number of entries loaded.
        """
        self._entries = {}
        self._loaded = True

        raw = self.storage.get_item(self.key)
        if raw is None:
            logger.debug(f"No persisted entries under '{self.key}'")
            return 0

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupted entry slot '{self.key}': {e}")
            return 0
        if not isinstance(parsed, list):
            logger.warning(f"Ignoring entry slot '{self.key}': expected a JSON array")
            return 0

        for record in parsed:
            try:
                entry = Entry.from_dict(record)
            except ValueError as e:
                logger.warning(f"Skipping unreadable stored entry: {e}")
                continue
            self._entries[entry.id] = entry

        logger.debug(f"Loaded {len(self._entries)} entries from '{self.key}'")
        return len(self._entries)

    def flush(self) -> None:
        """Write the full collection to storage."""
        payload = json.dumps([entry.to_dict() for entry in self._entries.values()], ensure_ascii=False)
        self.storage.set_item(self.key, payload)
        logger.debug(f"Flushed {len(self._entries)} entries to '{self.key}'")

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    # -- reads --------------------------------------------------------------

    @property
    def entries(self) -> list[Entry]:
        """Entries in insertion order."""
        self._ensure_loaded()
        return list(self._entries.values())

    def get(self, entry_id: str) -> Entry | None:
        self._ensure_loaded()
        return self._entries.get(entry_id)

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        self._ensure_loaded()
        return entry_id in self._entries

    # -- mutations ----------------------------------------------------------

    def save(self, draft: str, active_id: str | None = None) -> Entry:
        """Create a new entry or update the active one.

        The draft is validated trimmed but stored as written.

        Raises:
            EmptyEntryError: If the draft is blank.
            EntryNotFoundError: If ``active_id`` names no stored entry.
        """
        if not draft or not draft.strip():
            raise EmptyEntryError()
        self._ensure_loaded()

        now = self._clock()
        if not active_id:
            entry = Entry.create(draft, now=now)
            while entry.id in self._entries:
                entry = Entry.create(draft, now=now)
            self._entries[entry.id] = entry
            logger.debug(f"Created entry {entry.id}")
        else:
            existing = self._entries.get(active_id)
            if existing is None:
                raise EntryNotFoundError(f"Entry not found: {active_id}")
            entry = Entry(
                id=existing.id,
                content=draft,
                created_at=existing.created_at,
                updated_at=now,
            )
            self._entries[entry.id] = entry
            logger.debug(f"Updated entry {entry.id}")

        self.flush()
        return entry

    def delete(self, entry_id: str) -> bool:
        """Remove one entry. Returns False if the id was not stored."""
        self._ensure_loaded()
        removed = self._entries.pop(entry_id, None) is not None
        if removed:
            self.flush()
            logger.info(f"Deleted entry {entry_id}")
        return removed

    def clear_all(self) -> int:
        """Remove every entry. Returns how many were removed."""
        self._ensure_loaded()
        count = len(self._entries)
        self._entries = {}
        self.flush()
        logger.info(f"Cleared {count} entries")
        return count

    def merge(self, candidates: Iterable[Entry]) -> int:
        """Upsert entries by id (see ``merge_entries``). Returns the candidate count."""
        self._ensure_loaded()
        candidates = list(candidates)
        merged = merge_entries(self._entries.values(), candidates)
        self._entries = {entry.id: entry for entry in merged}
        self.flush()
        return len(candidates)
