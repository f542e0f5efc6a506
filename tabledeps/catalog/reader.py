"""
Catalog reader port.

Anything that can list columns and foreign keys can feed the graph builder:
database adapters implement this protocol, and StaticCatalogReader serves
fixed rows for tests and offline use.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .rows import (
    CatalogRecord,
    ColumnRow,
    ForeignKeyRow,
    decode_column_rows,
    decode_foreign_key_rows,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class CatalogReader(Protocol):
    """Two independent catalog reads."""

    def read_columns(self) -> list[ColumnRow]: ...

    def read_foreign_keys(self) -> list[ForeignKeyRow]: ...


@dataclass(frozen=True)
class CatalogSnapshot:
    """Result of both catalog reads."""

    columns: list[ColumnRow]
    foreign_keys: list[ForeignKeyRow]


class StaticCatalogReader:
    """CatalogReader over rows held in memory."""

    def __init__(
        self,
        columns: Iterable[CatalogRecord],
        foreign_keys: Iterable[CatalogRecord] = (),
    ) -> None:
        self._columns = decode_column_rows(columns)
        self._foreign_keys = decode_foreign_key_rows(foreign_keys)

    def read_columns(self) -> list[ColumnRow]:
        return list(self._columns)

    def read_foreign_keys(self) -> list[ForeignKeyRow]:
        return list(self._foreign_keys)


def read_catalog(reader: CatalogReader) -> CatalogSnapshot:
    """
    Run both catalog reads and return them together.

    Args:
        reader: Any CatalogReader implementation

    Returns:
        CatalogSnapshot holding the column and foreign key rows
    """
    columns = reader.read_columns()
    foreign_keys = reader.read_foreign_keys()
    logger.debug(f"Read {len(columns)} columns and {len(foreign_keys)} foreign keys")
    return CatalogSnapshot(columns=columns, foreign_keys=foreign_keys)
