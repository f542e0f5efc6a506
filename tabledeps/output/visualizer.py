"""
Mermaid visualization of table dependencies.
"""

import logging
from pathlib import Path

from tabledeps.model.schema import SchemaModel
from tabledeps.resolver.dependency_resolver import DependencyResolver
from tabledeps.shared.exceptions import DependencyCycleError, OutputGenerationError

logger = logging.getLogger(__name__)


class DependencyVisualizer:
    """Handles visualization of table dependencies."""

    def generate_mermaid_diagram(self, schema: SchemaModel) -> str:
        """
        Generate a Mermaid diagram of the table dependencies.

        Edges point from the referenced table to the referencing table and are
        labelled with the referencing column.

        Args:
            schema: The schema model

        Returns:
            Mermaid diagram as a string
        """
        resolver = DependencyResolver(schema)
        node_ids = self._node_ids(schema.table_names)
        mermaid_lines = ["graph LR"]

        for table in schema:
            mermaid_lines.append(f'    {node_ids[table.name]}["{table.name}"]')

        for table in schema:
            for column in table.foreign_key_columns:
                target = column.dependent_on.table_name
                if target not in schema:
                    continue
                mermaid_lines.append(
                    f"    {node_ids[target]} -->|{column.name}| {node_ids[table.name]}"
                )

        try:
            order = resolver.creation_order()
        except DependencyCycleError as e:
            mermaid_lines.append("")
            mermaid_lines.append("    %% Circular Dependencies Detected:")
            for cycle in e.cycles:
                mermaid_lines.append(f"    %% {' → '.join(cycle)}")
        else:
            if order:
                mermaid_lines.append("")
                mermaid_lines.append("    %% Creation Order:")
                for i, table in enumerate(order, 1):
                    mermaid_lines.append(f"    %% {i}. {table.name}")

        return "\n".join(mermaid_lines)

    def save_mermaid_diagram(self, schema: SchemaModel, output_file: str | Path) -> Path:
        """
        Save the dependency diagram as a Mermaid file.

        Raises:
            OutputGenerationError: If the file cannot be written
        """
        try:
            output_path = Path(output_file)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.generate_mermaid_diagram(schema), encoding="utf-8")
            logger.info(f"Mermaid diagram saved to {output_path}")
            return output_path
        except OSError as e:
            raise OutputGenerationError(f"Failed to save Mermaid diagram: {e}") from e

    def _node_ids(self, table_names: list[str]) -> dict[str, str]:
        """Map table names to distinct Mermaid node ids, suffixing collisions."""
        node_ids: dict[str, str] = {}
        used: set[str] = set()

        for name in table_names:
            base = self._escape_mermaid_node(name)
            node_id = base
            suffix = 2
            while node_id in used:
                node_id = f"{base}_{suffix}"
                suffix += 1
            used.add(node_id)
            node_ids[name] = node_id

        return node_ids

    def _escape_mermaid_node(self, node_name: str) -> str:
        """
        Escape special characters in node names for Mermaid compatibility.

        Args:
            node_name: The node name to escape

        Returns:
            Escaped node name safe for Mermaid
        """
        escaped = node_name
        for char in ".- ()[]{}:;,'\"":
            escaped = escaped.replace(char, "_")

        # Ensure it starts with a letter or underscore
        if escaped and not escaped[0].isalpha() and escaped[0] != "_":
            escaped = "_" + escaped

        return escaped
