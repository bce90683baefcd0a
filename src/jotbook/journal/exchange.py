"""Export and import of journal entries as versioned JSON envelopes.

Two envelope shapes exist, both written and accepted:

    {"version": 2, "exportedAt": "<ISO-8601>", "entries": [Entry, ...]}
    {"version": 2, "exportedAt": "<ISO-8601>", "entry": Entry}

Import validates the whole file before touching the store, then merges the
candidates by id: known ids are replaced wholesale, new ids are appended.
The ``version`` field is recorded but not checked.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from ..core.exceptions import ImportFormatError
from ..core.utils.file_io import read_text_async, safe_write
from .models import Entry, date_part, generate_id, utc_now_iso
from .store import EntryStore

EXPORT_VERSION = 2

INVALID_FILE_MESSAGE = "Invalid journal export file."
IMPORT_FAILED_MESSAGE = "Failed to import file. Please check the file format."


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def build_export_all(entries: list[Entry], now: str | None = None) -> dict[str, Any]:
    return {
        "version": EXPORT_VERSION,
        "exportedAt": now or utc_now_iso(),
        "entries": [entry.to_dict() for entry in entries],
    }


def build_export_entry(entry: Entry, now: str | None = None) -> dict[str, Any]:
    return {
        "version": EXPORT_VERSION,
        "exportedAt": now or utc_now_iso(),
        "entry": entry.to_dict(),
    }


def export_all_filename(now: str | None = None) -> str:
    return f"journal-export-{date_part(now or utc_now_iso())}.json"


def export_entry_filename(entry: Entry) -> str:
    return f"journal-entry-{date_part(entry.created_at or utc_now_iso())}.json"


def _free_path(path: Path) -> Path:
    """Return ``path``, or the first of ``<stem>-1<suffix>``, ``<stem>-2<suffix>``... not taken."""
    candidate = path
    n = 1
    while candidate.exists():
        candidate = path.with_name(f"{path.stem}-{n}{path.suffix}")
        n += 1
    return candidate


def write_export(directory: str | Path, filename: str, envelope: dict[str, Any]) -> Path:
    """Write an envelope as pretty-printed JSON and return the file path.

    Existing files are never overwritten; a numeric suffix is added instead.
    """
    path = _free_path(Path(directory).expanduser() / filename)
    safe_write(str(path), json.dumps(envelope, indent=2, ensure_ascii=False))
    count = len(envelope["entries"]) if "entries" in envelope else 1
    logger.info(f"Exported {count} entries to {path}")
    return path


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------


def parse_import(text: str) -> list[dict[str, Any]]:
    """Parse an export file into raw candidate records.

    Raises:
        ImportFormatError: If the text is not JSON, or matches neither
            envelope shape.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise ImportFormatError(IMPORT_FAILED_MESSAGE) from e

    if not isinstance(data, dict):
        raise ImportFormatError(INVALID_FILE_MESSAGE)

    if isinstance(data.get("entries"), list):
        candidates = data["entries"]
    elif isinstance(data.get("entry"), dict):
        candidates = [data["entry"]]
    else:
        raise ImportFormatError(INVALID_FILE_MESSAGE)

    if not all(isinstance(c, dict) for c in candidates):
        raise ImportFormatError(INVALID_FILE_MESSAGE)

    logger.debug(f"Parsed import envelope version={data.get('version')!r} with {len(candidates)} candidates")
    return candidates


def normalize_candidate(
    candidate: dict[str, Any],
    now: str | None = None,
    id_factory: Callable[[], str] = generate_id,
) -> Entry:
    """Fill in missing fields on a copy of ``candidate`` and build an Entry.

    Missing id gets a fresh one, missing ``createdAt`` becomes now, missing
    ``updatedAt`` copies ``createdAt``, and non-string content becomes "".
    """
    record = dict(candidate)
    if not record.get("id"):
        record["id"] = id_factory()
    elif not isinstance(record["id"], str):
        record["id"] = str(record["id"])
    if not record.get("createdAt"):
        record["createdAt"] = now or utc_now_iso()
    if not record.get("updatedAt"):
        record["updatedAt"] = record["createdAt"]
    if not isinstance(record.get("content"), str):
        record["content"] = ""
    return Entry.from_dict(record)


def import_text(store: EntryStore, text: str, now: str | None = None) -> int:
    """Validate, normalize, and merge an export file's text into ``store``.

    Returns the number of entries imported. The store is untouched on error.
    """
    candidates = parse_import(text)
    now = now or utc_now_iso()
    entries = [normalize_candidate(c, now=now) for c in candidates]
    count = store.merge(entries)
    logger.info(f"Imported {count} entries")
    return count


async def import_file(store: EntryStore, path: str | os.PathLike) -> int:
    """Read ``path`` and import it. The read is the only suspension point."""
    try:
        text = await read_text_async(os.fspath(path), encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read import file {path}: {e}")
        raise ImportFormatError(IMPORT_FAILED_MESSAGE) from e
    return import_text(store, text)


def import_summary(count: int) -> str:
    noun = "entry" if count == 1 else "entries"
    return f"Import complete. Imported {count} {noun}."
