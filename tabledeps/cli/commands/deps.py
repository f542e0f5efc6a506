"""
Deps command implementation.
"""

import typer

from tabledeps.cli.context import CommandContext
from tabledeps.cli.utils import handle_error
from tabledeps.output.text import render_table_list


def cmd_deps(
    project_folder: str,
    table: str,
    connection: str = "default",
    verbose: bool = False,
    transitive: bool = False,
    dependents: bool = False,
) -> None:
    """
    Print the dependencies (or dependents) of a table.

    Args:
        project_folder: Folder holding the connection configuration
        table: Table reference, optionally schema-qualified
        connection: Name of the connection configuration
        verbose: Enable verbose output
        transitive: Follow foreign keys through every hop
        dependents: List referencing tables instead of referenced ones
    """
    try:
        ctx = CommandContext(project_folder=project_folder, connection=connection, verbose=verbose)
        table_name = ctx.resolve_table_name(table)
        resolver = ctx.load_resolver()

        if table_name not in resolver.schema:
            raise LookupError(f"Table {table_name} not found in schema {ctx.adapter.catalog_schema}")

        if dependents:
            label = "dependents"
            tables = (
                resolver.transitive_dependents(table_name)
                if transitive
                else resolver.direct_dependents(table_name)
            )
        else:
            label = "dependencies"
            tables = (
                resolver.transitive_dependencies(table_name)
                if transitive
                else resolver.direct_dependencies(table_name)
            )

        scope = "Transitive" if transitive else "Direct"
        typer.echo(f"{scope} {label} of {table_name}:")
        if tables:
            typer.echo(render_table_list(tables))
        else:
            typer.echo("  (none)")
    except Exception as e:
        handle_error(e, verbose)
