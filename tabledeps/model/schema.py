"""
Table-level schema model built from a dependency graph.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from tabledeps.graph.types import DependencyGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnDependency:
    """
    The column a foreign key column points at.

    ``data_type`` and ``is_nullable`` are those of the referencing column,
    not of the referenced one.
    """

    table_name: str
    column_name: str
    data_type: str
    is_nullable: str


@dataclass(frozen=True)
class Column:
    name: str
    data_type: str
    is_nullable: str
    dependent_on: ColumnDependency | None = None

    @property
    def nullable(self) -> bool:
        return self.is_nullable.upper() == "YES"


@dataclass(frozen=True)
class Table:
    name: str
    columns: tuple[Column, ...] = ()

    @property
    def foreign_key_columns(self) -> list[Column]:
        """Columns that reference another column."""
        return [column for column in self.columns if column.dependent_on is not None]

    def get_column(self, column_name: str) -> Column | None:
        return next((column for column in self.columns if column.name == column_name), None)


class SchemaModel:
    """
    Read-only collection of tables.

    Tables keep the order in which they were first seen in the graph, and
    columns keep graph order within each table.
    """

    def __init__(self, tables: list[Table] | tuple[Table, ...] = ()) -> None:
        self._tables: dict[str, Table] = {}
        for table in tables:
            if table.name in self._tables:
                raise ValueError(f"Duplicate table name: {table.name}")
            self._tables[table.name] = table

    @classmethod
    def from_graph(cls, graph: DependencyGraph) -> "SchemaModel":
        """
        Build a schema model from a column-level dependency graph.

        Args:
            graph: Mapping of ColumnKey -> ColumnMeta

        Returns:
            SchemaModel with one Table per distinct table name
        """
        grouped: dict[str, list[Column]] = {}

        for key, meta in graph.items():
            dependency = None
            if meta.dependent_on is not None:
                dependency = ColumnDependency(
                    table_name=meta.dependent_on.table,
                    column_name=meta.dependent_on.column,
                    data_type=meta.data_type,
                    is_nullable=meta.is_nullable,
                )

            grouped.setdefault(key.table, []).append(
                Column(
                    name=key.column,
                    data_type=meta.data_type,
                    is_nullable=meta.is_nullable,
                    dependent_on=dependency,
                )
            )

        tables = [Table(name=name, columns=tuple(columns)) for name, columns in grouped.items()]
        logger.debug(f"Built schema model with {len(tables)} tables")
        return cls(tables)

    @property
    def tables(self) -> list[Table]:
        return list(self._tables.values())

    @property
    def table_names(self) -> list[str]:
        return list(self._tables.keys())

    def get_table(self, table_name: str) -> Table | None:
        return self._tables.get(table_name)

    def get_column(self, table_name: str, column_name: str) -> Column | None:
        table = self.get_table(table_name)
        if table is None:
            return None
        return table.get_column(column_name)

    def __iter__(self) -> Iterator[Table]:
        return iter(self._tables.values())

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, table_name: object) -> bool:
        return table_name in self._tables

    def __repr__(self) -> str:
        return f"SchemaModel(tables={self.table_names!r})"
