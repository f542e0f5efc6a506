"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import logging
import traceback

import typer


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")


def handle_error(error: Exception, show_traceback: bool = False) -> None:
    """
    Print an error and exit with status 1.

    Args:
        error: The exception that occurred
        show_traceback: Whether to print the traceback as well
    """
    error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
    typer.echo(f"{error_prefix}{error}", err=True)
    if show_traceback:
        traceback.print_exc()
    raise typer.Exit(1)
