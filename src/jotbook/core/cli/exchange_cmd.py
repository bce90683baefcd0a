"""jotbook export / import — JSON backups."""

from __future__ import annotations

import asyncio

import click

from jotbook.core.exceptions import JotbookError

from .common import export_dir, open_session


@click.command()
@click.option("--entry", "entry_id", default=None, help="Export only this entry.")
@click.option("--out", type=click.Path(file_okay=False), default=None, help="Directory to write the file into.")
@click.pass_context
def export(ctx: click.Context, entry_id: str | None, out: str | None) -> None:
    """Export all entries (or one) to a JSON file."""
    session = open_session(ctx)
    directory = export_dir(ctx, out)
    try:
        if entry_id:
            path = session.export_entry(entry_id, directory)
        else:
            path = session.export_all(directory)
    except JotbookError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Exported to {path}")


@click.command(name="import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_(ctx: click.Context, file: str) -> None:
    """Import entries from a jotbook JSON export, merging by id."""
    session = open_session(ctx)
    try:
        message = asyncio.run(session.import_file(file))
    except JotbookError as e:
        raise click.ClickException(str(e)) from e
    click.echo(message)
