"""
Catalog layer: typed rows, decoders and the reader port.
"""

from .reader import CatalogReader, CatalogSnapshot, StaticCatalogReader, read_catalog
from .rows import (
    CatalogRecord,
    ColumnRow,
    ForeignKeyRow,
    decode_column_rows,
    decode_foreign_key_rows,
)

__all__ = [
    "CatalogReader",
    "CatalogRecord",
    "CatalogSnapshot",
    "StaticCatalogReader",
    "read_catalog",
    "ColumnRow",
    "ForeignKeyRow",
    "decode_column_rows",
    "decode_foreign_key_rows",
]
