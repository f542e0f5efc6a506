"""
tabledeps

Foreign key dependency analysis for relational database schemas.
"""

from .adapters import DuckDBAdapter, PostgreSQLAdapter
from .catalog import ColumnRow, ForeignKeyRow, StaticCatalogReader
from .engine import SchemaInspector, inspect_database
from .graph import build_dependency_graph
from .model import Column, ColumnDependency, SchemaModel, Table
from .resolver import DependencyResolver
from .shared import (
    CatalogRowError,
    Diagnostic,
    DiagnosticKind,
    DependencyCycleError,
    TableDepsError,
)

__all__ = [
    "build_dependency_graph",
    "SchemaModel",
    "Table",
    "Column",
    "ColumnDependency",
    "DependencyResolver",
    "SchemaInspector",
    "inspect_database",
    "ColumnRow",
    "ForeignKeyRow",
    "StaticCatalogReader",
    "DuckDBAdapter",
    "PostgreSQLAdapter",
    "Diagnostic",
    "DiagnosticKind",
    "TableDepsError",
    "CatalogRowError",
    "DependencyCycleError",
]
