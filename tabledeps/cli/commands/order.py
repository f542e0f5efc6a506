"""
Order command implementation.
"""

import typer

from tabledeps.cli.context import CommandContext
from tabledeps.cli.utils import handle_error
from tabledeps.output.text import render_table_list


def cmd_order(
    project_folder: str,
    connection: str = "default",
    verbose: bool = False,
    drop: bool = False,
) -> None:
    """Print the order in which all tables can be created (or dropped)."""
    try:
        ctx = CommandContext(project_folder=project_folder, connection=connection, verbose=verbose)
        resolver = ctx.load_resolver()
        tables = resolver.drop_order() if drop else resolver.creation_order()

        typer.echo("Drop order:" if drop else "Creation order:")
        if tables:
            typer.echo(render_table_list(tables))
        else:
            typer.echo("  (no tables)")
    except Exception as e:
        handle_error(e, verbose)
