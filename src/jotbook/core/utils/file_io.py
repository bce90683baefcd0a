"""
File I/O utilities: safe writes and async reads.

All functions operate on explicit paths — no implicit directory lookups.
"""

from __future__ import annotations

import os

import aiofiles


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, mode, encoding=encoding) as f:
        f.write(content)


def atomic_write(filepath: str, content: str, encoding: str = "utf-8") -> None:
    """Write content via a sibling temp file and rename it into place.

    Readers never observe a half-written file.
    """
    tmp_path = f"{filepath}.tmp"
    safe_write(tmp_path, content, encoding=encoding)
    os.replace(tmp_path, filepath)


async def read_text_async(filepath: str, encoding: str = "utf-8") -> str:
    """Read a whole text file without blocking the event loop."""
    async with aiofiles.open(filepath, encoding=encoding) as f:
        return await f.read()
