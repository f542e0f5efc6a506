"""
PostgreSQL catalog adapter package.
"""

from .adapter import PostgreSQLAdapter

__all__ = ["PostgreSQLAdapter"]
