"""
DuckDB catalog adapter package.
"""

from .adapter import DuckDBAdapter

__all__ = ["DuckDBAdapter"]
