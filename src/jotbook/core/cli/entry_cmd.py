"""jotbook write / edit / show / delete / clear."""

from __future__ import annotations

import click

from jotbook.core.exceptions import JotbookError

from .common import exit_cancelled, open_session, read_text


@click.command()
@click.argument("text", required=False)
@click.pass_context
def write(ctx: click.Context, text: str | None) -> None:
    """Write a new entry from TEXT, stdin, or your editor."""
    session = open_session(ctx)
    try:
        entry = session.save(read_text(text))
    except JotbookError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Saved {entry.id}")


@click.command()
@click.argument("entry_id")
@click.argument("text", required=False)
@click.pass_context
def edit(ctx: click.Context, entry_id: str, text: str | None) -> None:
    """Replace the content of entry ENTRY_ID."""
    session = open_session(ctx)
    try:
        entry = session.edit(entry_id)
        updated = session.save(read_text(text, initial=entry.content))
    except JotbookError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Updated {updated.id}")


@click.command()
@click.argument("entry_id")
@click.pass_context
def show(ctx: click.Context, entry_id: str) -> None:
    """Print one entry in full."""
    from jotbook.journal.formatting import entry_title, format_timestamp

    session = open_session(ctx)
    try:
        entry = session.edit(entry_id)
    except JotbookError as e:
        raise click.ClickException(str(e)) from e
    click.echo(click.style(entry_title(entry.content), bold=True))
    click.echo(f"Created: {format_timestamp(entry.created_at)}")
    click.echo(f"Updated: {format_timestamp(entry.updated_at)}")
    click.echo("")
    click.echo(entry.content)


@click.command()
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def delete(ctx: click.Context, entry_id: str, yes: bool) -> None:
    """Delete one entry. This cannot be undone."""
    session = open_session(ctx, assume_yes=yes)
    if entry_id not in session.store:
        raise click.ClickException(f"Entry not found: {entry_id}")
    if not session.delete(entry_id):
        exit_cancelled()
    click.echo(f"Deleted {entry_id}")


@click.command()
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_context
def clear(ctx: click.Context, yes: bool) -> None:
    """Delete ALL entries. This cannot be undone."""
    session = open_session(ctx, assume_yes=yes)
    count = len(session.store)
    if not session.clear_all():
        exit_cancelled()
    click.echo(f"Cleared {count} entries.")
