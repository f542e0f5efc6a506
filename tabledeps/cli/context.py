"""
Command context for shared setup across CLI commands.
"""

from pathlib import Path

from tabledeps.adapters.registry import get_adapter
from tabledeps.engine.config import load_database_config
from tabledeps.engine.inspector import SchemaInspector
from tabledeps.model.schema import SchemaModel
from tabledeps.resolver.dependency_resolver import DependencyResolver
from tabledeps.shared.exceptions import TableReferenceError
from tabledeps.shared.names import split_table_reference

from .utils import setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: logging, loading the connection configuration and
    creating the catalog adapter.
    """

    def __init__(
        self,
        project_folder: str,
        connection: str = "default",
        verbose: bool = False,
    ):
        """
        Initialize command context from parameters.

        Args:
            project_folder: Folder holding pyproject.toml or tabledeps.toml
            connection: Name of the connection configuration
            verbose: Enable verbose output
        """
        self.verbose = verbose
        setup_logging(self.verbose)

        self.project_path = Path(project_folder).resolve()
        if not self.project_path.is_dir():
            raise FileNotFoundError(f"Project folder not found: {project_folder}")

        self.config = load_database_config(connection, self.project_path)
        self.adapter = get_adapter(self.config)

    @property
    def dialect(self) -> str:
        return self.adapter.get_default_dialect()

    def load_schema(self) -> SchemaModel:
        """Connect, read the catalog and build the schema model."""
        self.adapter.connect()
        try:
            return SchemaInspector(self.adapter).build_schema()
        finally:
            self.adapter.disconnect()

    def load_resolver(self) -> DependencyResolver:
        return DependencyResolver(self.load_schema())

    def resolve_table_name(self, reference: str) -> str:
        """
        Turn a user supplied table reference into a model table name.

        Raises:
            TableReferenceError: If the reference names another schema
        """
        schema_name, table_name = split_table_reference(reference, self.dialect)
        if schema_name and schema_name != self.adapter.catalog_schema:
            raise TableReferenceError(
                f"Table {reference} is outside the inspected schema {self.adapter.catalog_schema}"
            )
        return table_name
