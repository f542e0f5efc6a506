"""
Export command implementation.
"""

from typing import Literal

import typer

from tabledeps.cli.context import CommandContext
from tabledeps.cli.utils import handle_error
from tabledeps.output.exporter import SchemaExporter
from tabledeps.output.visualizer import DependencyVisualizer

# Type alias for output format
OutputFormat = Literal["json", "yaml", "mermaid"]


def cmd_export(
    project_folder: str,
    connection: str = "default",
    verbose: bool = False,
    format: OutputFormat = "json",
    output_file: str | None = None,
) -> None:
    """
    Export the schema model with its dependencies.

    Writes to output_file when given, otherwise to stdout.
    """
    try:
        ctx = CommandContext(project_folder=project_folder, connection=connection, verbose=verbose)
        resolver = ctx.load_resolver()

        if format == "mermaid":
            visualizer = DependencyVisualizer()
            if output_file:
                path = visualizer.save_mermaid_diagram(resolver.schema, output_file)
                typer.echo(f"Mermaid diagram saved to {path}")
            else:
                typer.echo(visualizer.generate_mermaid_diagram(resolver.schema))
            return

        exporter = SchemaExporter(resolver)
        if output_file:
            path = exporter.export(resolver.schema, output_file, format)
            typer.echo(f"Exported {len(resolver.schema)} tables to {path}")
        elif format == "yaml":
            typer.echo(exporter.to_yaml(resolver.schema), nl=False)
        else:
            typer.echo(exporter.to_json(resolver.schema))
    except Exception as e:
        handle_error(e, verbose)
