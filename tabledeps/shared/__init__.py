"""
Shared utilities: exceptions, diagnostics and table name parsing.
"""

from .diagnostics import Diagnostic, DiagnosticCallback, DiagnosticKind
from .exceptions import (
    CatalogError,
    CatalogRowError,
    DependencyCycleError,
    OutputGenerationError,
    TableDepsError,
    TableReferenceError,
)
from .names import split_table_reference

__all__ = [
    "Diagnostic",
    "DiagnosticCallback",
    "DiagnosticKind",
    "CatalogError",
    "CatalogRowError",
    "DependencyCycleError",
    "OutputGenerationError",
    "TableDepsError",
    "TableReferenceError",
    "split_table_reference",
]
