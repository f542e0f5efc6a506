"""
Schema model: tables, columns and their foreign key dependencies.
"""

from .schema import Column, ColumnDependency, SchemaModel, Table

__all__ = ["Column", "ColumnDependency", "SchemaModel", "Table"]
