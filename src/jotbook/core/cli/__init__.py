"""Jotbook CLI — write, browse, and exchange journal entries."""

import click

from jotbook import __version__


@click.group()
@click.version_option(version=__version__, package_name="jotbook")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML or JSON config file.",
)
@click.option("--data-dir", type=click.Path(file_okay=False), default=None, help="Directory holding journal data.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, data_dir: str | None, verbose: bool) -> None:
    """Jotbook — a private journal stored on this machine."""
    from .common import init_context

    init_context(ctx, config_file=config_file, data_dir=data_dir, verbose=verbose)


# Register subcommands
from .entry_cmd import clear, delete, edit, show, write
from .exchange_cmd import export, import_
from .list_cmd import list_

main.add_command(write)
main.add_command(edit)
main.add_command(show)
main.add_command(delete)
main.add_command(clear)
main.add_command(list_)
main.add_command(export)
main.add_command(import_)
