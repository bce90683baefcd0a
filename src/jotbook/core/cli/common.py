"""Shared setup logic for CLI commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from jotbook.core.config import Config
from jotbook.core.exceptions import ConfigurationError

JOTBOOK_DIR = Path.home() / ".jotbook"
CONFIG_PATH = JOTBOOK_DIR / "config.yaml"


@dataclass
class CliContext:
    config: Config
    verbose: bool = False


def load_config(config_file: str | None = None, data_dir: str | None = None) -> Config:
    """Load config from ``config_file`` or ~/.jotbook/config.yaml."""
    path = config_file or str(CONFIG_PATH)
    config = Config(config_file=path, data_dir=data_dir)
    if data_dir:
        # --data-dir beats file and env settings
        defaults = Config(config_file=None, env_prefix="", data_dir=data_dir)
        config.set("paths", defaults.get("paths"))
    return config


def init_context(ctx: click.Context, config_file: str | None, data_dir: str | None, verbose: bool) -> None:
    from jotbook.core.utils.logging import setup_logging

    try:
        config = load_config(config_file, data_dir)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING"))
    log_dir = config.get_path("log_dir") if config.get_bool("logging.to_file", True) else None
    setup_logging(level=level, log_dir=log_dir)
    ctx.obj = CliContext(config=config, verbose=verbose)


def open_session(ctx: click.Context, assume_yes: bool = False, sort_order: str | None = None):
    """Build a JournalSession over the configured storage slot.

    Destructive actions prompt on the terminal unless ``assume_yes``.
    """
    from jotbook.core.storage import LocalStorage
    from jotbook.journal import EntryStore, JournalSession, QueryState

    config: Config = ctx.find_object(CliContext).config
    storage = LocalStorage(config.get_path("storage_dir"))
    store = EntryStore(storage, key=config.get("storage.key"))
    store.load()

    def confirm(message: str) -> bool:
        return assume_yes or click.confirm(message, default=False)

    try:
        state = QueryState(sort_order=sort_order or config.get("view.sort_order", "desc"))
    except ValueError as e:
        raise click.ClickException(f"Invalid sort order: {e}") from e
    return JournalSession(store, confirm=confirm, state=state)


def read_text(text: str | None, initial: str = "") -> str:
    """Resolve entry text from an argument, piped stdin, or the user's editor."""
    if text is not None:
        return text
    stdin = click.get_text_stream("stdin")
    if not stdin.isatty():
        return stdin.read()
    edited = click.edit(initial)
    return edited if edited is not None else initial


def export_dir(ctx: click.Context, out: str | None) -> str:
    if out:
        return out
    config: Config = ctx.find_object(CliContext).config
    return config.get_path("export_dir")


def exit_cancelled() -> None:
    click.echo("Cancelled.")
    sys.exit(0)
