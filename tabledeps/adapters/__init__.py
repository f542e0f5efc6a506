"""
Catalog adapters for reading table and foreign key metadata.

Each adapter lives in its own subpackage and registers itself with the
adapter registry on import.
"""

from .base import AdapterConfig, CatalogAdapter
from .duckdb import DuckDBAdapter
from .postgresql import PostgreSQLAdapter
from .registry import (
    AdapterRegistry,
    get_adapter,
    is_adapter_supported,
    list_available_adapters,
    register_adapter,
)

__all__ = [
    # Base classes and configuration
    "CatalogAdapter",
    "AdapterConfig",
    # Registry and factory functions
    "AdapterRegistry",
    "get_adapter",
    "register_adapter",
    "list_available_adapters",
    "is_adapter_supported",
    # Available adapters
    "DuckDBAdapter",
    "PostgreSQLAdapter",
]
