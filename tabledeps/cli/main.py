"""
tabledeps CLI Main Module

Command-line interface for inspecting foreign key dependencies between tables.
"""

from typing import Any, Literal

import typer

from tabledeps.cli.commands import cmd_deps, cmd_export, cmd_order, cmd_show

OutputFormat = Literal["json", "yaml", "mermaid"]


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_format(value: str) -> OutputFormat:
    """Validate format option (json, yaml or mermaid)."""
    if value not in ["json", "yaml", "mermaid"]:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid format '{value}'. Must be 'json', 'yaml' or 'mermaid'."
        )
    return value  # type: ignore[return-value]


app = typer.Typer(
    name="tabledeps",
    help="tabledeps - foreign key dependencies between database tables",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
PROJECT_FOLDER_ARG = typer.Argument(
    None, help="Folder containing pyproject.toml or tabledeps.toml"
)
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
CONNECTION_OPTION = typer.Option(
    "default", "-c", "--connection", help="Name of the connection configuration"
)


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def show(
    ctx: typer.Context,
    project_folder: str | None = PROJECT_FOLDER_ARG,
    connection: str = CONNECTION_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show tables, columns and their foreign key dependencies."""
    _check_required_argument(ctx, "project_folder", project_folder)
    cmd_show(project_folder=project_folder, connection=connection, verbose=verbose)


@app.command()
def deps(
    ctx: typer.Context,
    project_folder: str | None = PROJECT_FOLDER_ARG,
    table: str | None = typer.Argument(None, help="Table name, optionally schema-qualified"),
    connection: str = CONNECTION_OPTION,
    verbose: bool = VERBOSE_OPTION,
    transitive: bool = typer.Option(
        False, "-t", "--transitive", help="Follow foreign keys through every hop"
    ),
    dependents: bool = typer.Option(
        False, "-d", "--dependents", help="List tables referencing the table instead"
    ),
) -> None:
    """List the tables a table depends on."""
    _check_required_argument(ctx, "project_folder", project_folder)
    _check_required_argument(ctx, "table", table)
    cmd_deps(
        project_folder=project_folder,
        table=table,
        connection=connection,
        verbose=verbose,
        transitive=transitive,
        dependents=dependents,
    )


@app.command()
def order(
    ctx: typer.Context,
    project_folder: str | None = PROJECT_FOLDER_ARG,
    connection: str = CONNECTION_OPTION,
    verbose: bool = VERBOSE_OPTION,
    drop: bool = typer.Option(False, "--drop", help="Print drop order instead"),
) -> None:
    """Print the order in which all tables can be created."""
    _check_required_argument(ctx, "project_folder", project_folder)
    cmd_order(project_folder=project_folder, connection=connection, verbose=verbose, drop=drop)


@app.command()
def export(
    ctx: typer.Context,
    project_folder: str | None = PROJECT_FOLDER_ARG,
    connection: str = CONNECTION_OPTION,
    verbose: bool = VERBOSE_OPTION,
    format: str = typer.Option(
        "json",
        "-f",
        "--format",
        help="Output format: json, yaml or mermaid",
        callback=validate_format,
    ),
    output_file: str | None = typer.Option(
        None, "-o", "--output", help="Output file (default: stdout)"
    ),
) -> None:
    """Export the schema and its dependencies."""
    _check_required_argument(ctx, "project_folder", project_folder)
    cmd_export(
        project_folder=project_folder,
        connection=connection,
        verbose=verbose,
        format=format,
        output_file=output_file,
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
