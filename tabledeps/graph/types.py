"""
Column-level dependency graph types.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnKey:
    """Identifies a column by table and column name."""

    table: str
    column: str

    def __str__(self) -> str:
        return f"{self.table}.{self.column}"


@dataclass
class ColumnMeta:
    """Column attributes plus the column it references, if any."""

    data_type: str
    is_nullable: str
    dependent_on: ColumnKey | None = None


# Insertion order is catalog row order; the schema model relies on it.
DependencyGraph = dict[ColumnKey, ColumnMeta]
