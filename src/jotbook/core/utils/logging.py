"""
Loguru sinks for jotbook.

Console output stays terse so it doesn't clutter command results. When a
log directory is given, a rotating ``jotbook.log`` there keeps a record of
every store mutation at DEBUG level, whatever the console level is.
"""

import os
import sys

from loguru import logger

LOG_FILENAME = "jotbook.log"


def setup_logging(level: str = "WARNING", log_dir: str | None = None) -> str | None:
    """
    Replace loguru's default sink with jotbook's.

    Args:
        level: Minimum console level (DEBUG, INFO, WARNING, ERROR), any case.
        log_dir: Directory for the rotating log file. None disables it.

    Returns:
        The log file path, or None when only the console is used.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{level}</level>: {message}")

    if not log_dir:
        return None

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, LOG_FILENAME)
    logger.add(
        log_file,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function} | {message}",
        rotation="1 MB",
        retention=5,
        encoding="utf-8",
    )
    return log_file
