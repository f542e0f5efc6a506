"""
Schema inspection: catalog reads to schema model.

SchemaInspector ties a CatalogReader to the graph builder and the schema
model. inspect_database() does the same for a database described by an
AdapterConfig and takes care of the connection.
"""

import logging
from typing import Any

from tabledeps.adapters.base import AdapterConfig
from tabledeps.adapters.registry import get_adapter
from tabledeps.catalog.reader import CatalogReader, CatalogSnapshot, read_catalog
from tabledeps.graph.builder import DependencyGraphBuilder
from tabledeps.graph.types import DependencyGraph
from tabledeps.model.schema import SchemaModel
from tabledeps.resolver.dependency_resolver import DependencyResolver
from tabledeps.shared.diagnostics import DiagnosticCallback

logger = logging.getLogger(__name__)


class SchemaInspector:
    """Builds the dependency graph and schema model from a catalog reader."""

    def __init__(
        self, reader: CatalogReader, on_diagnostic: DiagnosticCallback | None = None
    ) -> None:
        self.reader = reader
        self.on_diagnostic = on_diagnostic

    def read_catalog(self) -> CatalogSnapshot:
        return read_catalog(self.reader)

    def build_graph(self) -> DependencyGraph:
        """Read both catalog listings and fold them into a dependency graph."""
        snapshot = self.read_catalog()
        return DependencyGraphBuilder(self.on_diagnostic).build_from_snapshot(snapshot)

    def build_schema(self) -> SchemaModel:
        """Read the catalog and build the schema model."""
        return SchemaModel.from_graph(self.build_graph())

    def resolver(self) -> DependencyResolver:
        """Build the schema model and wrap it in a DependencyResolver."""
        return DependencyResolver(self.build_schema(), self.on_diagnostic)


def inspect_database(
    config: AdapterConfig | dict[str, Any],
    on_diagnostic: DiagnosticCallback | None = None,
) -> SchemaModel:
    """
    Connect to a database and build its schema model.

    Args:
        config: Adapter configuration (AdapterConfig or dict)
        on_diagnostic: Optional callback for skipped catalog data

    Returns:
        SchemaModel of the configured schema

    Raises:
        ValueError: If the configuration is invalid
        CatalogRowError: If the catalog returns an incomplete row
    """
    adapter = get_adapter(config)
    adapter.connect()
    try:
        schema = SchemaInspector(adapter, on_diagnostic).build_schema()
        logger.info(f"Inspected {len(schema)} tables in schema {adapter.catalog_schema}")
        return schema
    finally:
        adapter.disconnect()
