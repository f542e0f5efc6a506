"""
Engine: configuration loading and schema inspection.
"""

from .config import DatabaseConfigManager, load_database_config
from .inspector import SchemaInspector, inspect_database

__all__ = [
    "DatabaseConfigManager",
    "load_database_config",
    "SchemaInspector",
    "inspect_database",
]
