"""
JSON and YAML export of schema models.
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal

import yaml

from tabledeps.model.schema import Column, SchemaModel, Table
from tabledeps.resolver.dependency_resolver import DependencyResolver
from tabledeps.shared.exceptions import DependencyCycleError, OutputGenerationError

logger = logging.getLogger(__name__)

ExportFormat = Literal["json", "yaml"]


class SchemaExporter:
    """Serializes a schema model, optionally with resolved dependencies."""

    def __init__(self, resolver: DependencyResolver | None = None) -> None:
        self.resolver = resolver

    def to_dict(self, schema: SchemaModel) -> dict[str, Any]:
        """
        Convert a schema model to plain data.

        When a resolver is set, each table gets its direct dependencies and the
        document gets a creation order (``null`` if the schema has a cycle).
        """
        document: dict[str, Any] = {"tables": [self._table_to_dict(table) for table in schema]}

        if self.resolver is not None:
            try:
                document["creation_order"] = [t.name for t in self.resolver.creation_order()]
            except DependencyCycleError as e:
                logger.warning(f"No creation order: {e}")
                document["creation_order"] = None
                document["cycles"] = e.cycles

        return document

    def to_json(self, schema: SchemaModel) -> str:
        return json.dumps(self.to_dict(schema), indent=2, ensure_ascii=False)

    def to_yaml(self, schema: SchemaModel) -> str:
        return yaml.dump(
            self.to_dict(schema),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def export(
        self, schema: SchemaModel, output_file: str | Path, format: ExportFormat = "json"
    ) -> Path:
        """
        Write the schema to a file.

        Args:
            schema: Schema model to export
            output_file: Destination path
            format: "json" or "yaml"

        Returns:
            Path to the exported file

        Raises:
            OutputGenerationError: If the format is unknown or writing fails
        """
        if format not in ("json", "yaml"):
            raise OutputGenerationError(f"Unsupported export format: {format}")

        try:
            output_path = Path(output_file)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            content = self.to_json(schema) if format == "json" else self.to_yaml(schema)
            output_path.write_text(content, encoding="utf-8")
            logger.info(f"Exported {len(schema)} tables to {output_path}")
            return output_path
        except OSError as e:
            raise OutputGenerationError(f"Failed to export schema: {e}") from e

    def _table_to_dict(self, table: Table) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": table.name,
            "columns": [self._column_to_dict(column) for column in table.columns],
        }
        if self.resolver is not None:
            data["dependencies"] = [t.name for t in self.resolver.direct_dependencies(table.name)]
        return data

    def _column_to_dict(self, column: Column) -> dict[str, Any]:
        dependency = column.dependent_on
        return {
            "name": column.name,
            "data_type": column.data_type,
            "is_nullable": column.is_nullable,
            "dependent_on": None
            if dependency is None
            else {
                "table_name": dependency.table_name,
                "column_name": dependency.column_name,
                "data_type": dependency.data_type,
                "is_nullable": dependency.is_nullable,
            },
        }
