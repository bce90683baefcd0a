"""jotbook list — search and sort entries."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from .common import open_session


@click.command(name="list")
@click.option("--search", "-s", default="", help="Case-insensitive text to look for.")
@click.option("--sort", "sort_order", type=click.Choice(["desc", "asc"]), default=None, help="Newest or oldest first.")
@click.option("--plain", is_flag=True, help="Tab-separated output without formatting.")
@click.pass_context
def list_(ctx: click.Context, search: str, sort_order: str | None, plain: bool) -> None:
    """List entries, newest first by default."""
    from jotbook.journal.formatting import entry_preview, entry_title, format_timestamp
    from jotbook.journal.query import empty_view_message

    session = open_session(ctx, sort_order=sort_order)
    session.state.search = search
    entries = session.view()

    if not entries:
        click.echo(empty_view_message(session.state))
        return

    if plain:
        for entry in entries:
            click.echo(f"{entry.id}\t{entry.created_at}\t{entry_title(entry.content)}")
        return

    table = Table(title=f"Entries ({session.state.sort_order.label})")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Created", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Preview")
    for entry in entries:
        table.add_row(
            entry.id,
            format_timestamp(entry.created_at),
            entry_title(entry.content),
            entry_preview(entry.content).replace("\n", " "),
        )
    Console().print(table)
