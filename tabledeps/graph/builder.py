"""
Dependency graph building from catalog rows.
"""

import logging
from collections.abc import Iterable

from tabledeps.catalog.reader import CatalogSnapshot
from tabledeps.catalog.rows import (
    CatalogRecord,
    ColumnRow,
    ForeignKeyRow,
    decode_column_rows,
    decode_foreign_key_rows,
)
from tabledeps.shared.diagnostics import Diagnostic, DiagnosticCallback, DiagnosticKind, report

from .types import ColumnKey, ColumnMeta, DependencyGraph

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Folds the column listing and the foreign key listing into one graph."""

    def __init__(self, on_diagnostic: DiagnosticCallback | None = None) -> None:
        self.on_diagnostic = on_diagnostic

    def build_graph(
        self,
        column_rows: Iterable[ColumnRow | CatalogRecord],
        foreign_key_rows: Iterable[ForeignKeyRow | CatalogRecord] = (),
    ) -> DependencyGraph:
        """
        Build a column-level dependency graph.

        Every column row becomes an entry without a dependency. Each foreign key
        row then marks its referencing column as dependent on the referenced
        column. Foreign keys whose referencing column is not in the column
        listing are skipped and reported.

        Args:
            column_rows: Column listing rows (decoded or raw records)
            foreign_key_rows: Foreign key rows (decoded or raw records)

        Returns:
            Mapping of ColumnKey -> ColumnMeta in column row order

        Raises:
            CatalogRowError: If a row is missing a required field
        """
        columns = decode_column_rows(column_rows)
        foreign_keys = decode_foreign_key_rows(foreign_key_rows)

        graph: DependencyGraph = {}

        for row in columns:
            key = ColumnKey(table=row.table_name, column=row.column_name)
            if key in graph:
                logger.debug(f"Column {key} listed more than once, keeping the last row")
            graph[key] = ColumnMeta(data_type=row.data_type, is_nullable=row.is_nullable)

        for fk in foreign_keys:
            key = ColumnKey(table=fk.referencing_table, column=fk.referencing_column)
            target = ColumnKey(table=fk.referenced_table, column=fk.referenced_column)

            meta = graph.get(key)
            if meta is None:
                report(
                    logger,
                    self.on_diagnostic,
                    Diagnostic(
                        kind=DiagnosticKind.UNMATCHED_FOREIGN_KEY,
                        message=f"Skipping foreign key {key} -> {target}: column {key} is not in the column listing",
                        table_name=key.table,
                        column_name=key.column,
                    ),
                )
                continue

            if meta.dependent_on is not None and meta.dependent_on != target:
                report(
                    logger,
                    self.on_diagnostic,
                    Diagnostic(
                        kind=DiagnosticKind.REPLACED_FOREIGN_KEY,
                        message=f"Column {key} already references {meta.dependent_on}, replacing with {target}",
                        table_name=key.table,
                        column_name=key.column,
                    ),
                )

            meta.dependent_on = target

        edges = sum(1 for meta in graph.values() if meta.dependent_on is not None)
        logger.debug(f"Built dependency graph with {len(graph)} columns and {edges} edges")
        return graph

    def build_from_snapshot(self, snapshot: CatalogSnapshot) -> DependencyGraph:
        """Build a graph from a CatalogSnapshot."""
        return self.build_graph(snapshot.columns, snapshot.foreign_keys)


def build_dependency_graph(
    column_rows: Iterable[ColumnRow | CatalogRecord],
    foreign_key_rows: Iterable[ForeignKeyRow | CatalogRecord] = (),
    on_diagnostic: DiagnosticCallback | None = None,
) -> DependencyGraph:
    """Convenience wrapper around DependencyGraphBuilder.build_graph."""
    return DependencyGraphBuilder(on_diagnostic).build_graph(column_rows, foreign_key_rows)
