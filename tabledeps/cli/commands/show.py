"""
Show command implementation.
"""

import typer

from tabledeps.cli.context import CommandContext
from tabledeps.cli.utils import handle_error
from tabledeps.output.text import render_schema


def cmd_show(
    project_folder: str,
    connection: str = "default",
    verbose: bool = False,
) -> None:
    """Print every table with its columns and foreign key dependencies."""
    try:
        ctx = CommandContext(project_folder=project_folder, connection=connection, verbose=verbose)
        schema = ctx.load_schema()

        if not len(schema):
            typer.echo(f"No tables found in schema {ctx.adapter.catalog_schema}")
            return

        typer.echo(render_schema(schema), nl=False)
    except Exception as e:
        handle_error(e, verbose)
