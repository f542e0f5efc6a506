"""
Configuration types for catalog adapters.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class AdapterConfig:
    """Configuration for catalog adapters."""

    # Database connection
    type: str
    host: str | None = None
    port: int | None = None
    database: str | None = None
    user: str | None = None
    password: str | None = None
    path: str | None = None  # For file-based databases like DuckDB

    # Schema whose tables are inspected (adapter default when None)
    schema: str | None = None

    # Connection settings
    connection_timeout: int = 30
    query_timeout: int = 300

    # Additional custom settings
    extra: dict[str, Any] | None = None
