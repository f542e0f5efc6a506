"""
Typed catalog rows and their decoders.

Catalog queries return either mappings (column name -> value) or positional
tuples straight from a DB-API cursor. Both are accepted; positional records
must follow the field order of the row dataclass.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any

from tabledeps.shared.exceptions import CatalogRowError

CatalogRecord = Mapping[str, Any] | Sequence[Any]


@dataclass(frozen=True)
class ColumnRow:
    """One row of the column listing."""

    table_name: str
    column_name: str
    data_type: str
    is_nullable: str


@dataclass(frozen=True)
class ForeignKeyRow:
    """One column pair of a foreign key constraint."""

    referencing_table: str
    referencing_column: str
    referenced_table: str
    referenced_column: str
    referencing_data_type: str
    referencing_is_nullable: str
    referenced_data_type: str | None = None
    referenced_is_nullable: str | None = None


COLUMN_ROW_FIELDS = tuple(f.name for f in fields(ColumnRow))
FOREIGN_KEY_ROW_FIELDS = tuple(f.name for f in fields(ForeignKeyRow))
FOREIGN_KEY_REQUIRED_FIELDS = FOREIGN_KEY_ROW_FIELDS[:6]


def _extract(
    record: CatalogRecord,
    field_names: tuple[str, ...],
    required: tuple[str, ...],
    row_index: int,
    kind: str,
) -> dict[str, Any]:
    if isinstance(record, Mapping):
        values = {name: record.get(name) for name in field_names}
    elif isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
        if len(record) < len(required):
            raise CatalogRowError(
                f"{kind} row {row_index} has {len(record)} values, expected at least {len(required)}",
                row_index=row_index,
            )
        values = dict(zip(field_names, record))
        for name in field_names[len(record):]:
            values[name] = None
    else:
        raise CatalogRowError(
            f"{kind} row {row_index} must be a mapping or a sequence, got {type(record).__name__}",
            row_index=row_index,
        )

    for name in required:
        value = values[name]
        if value is None or (isinstance(value, str) and not value.strip()):
            raise CatalogRowError(
                f"{kind} row {row_index} is missing required field '{name}'",
                row_index=row_index,
                field=name,
            )
        values[name] = str(value)

    return values


def decode_column_rows(records: Iterable[CatalogRecord]) -> list[ColumnRow]:
    """
    Decode raw column listing records.

    Args:
        records: Mappings or positional tuples (table_name, column_name,
            data_type, is_nullable); ColumnRow instances are checked the same way

    Returns:
        List of ColumnRow in input order

    Raises:
        CatalogRowError: If any record is missing a required field
    """
    rows = []
    for index, record in enumerate(records):
        if isinstance(record, ColumnRow):
            record = asdict(record)
        values = _extract(record, COLUMN_ROW_FIELDS, COLUMN_ROW_FIELDS, index, "Column")
        rows.append(ColumnRow(**values))
    return rows


def decode_foreign_key_rows(records: Iterable[CatalogRecord]) -> list[ForeignKeyRow]:
    """
    Decode raw foreign key listing records.

    The referenced side's data type and nullability are optional; everything
    else is required.

    Raises:
        CatalogRowError: If any record is missing a required field
    """
    rows = []
    for index, record in enumerate(records):
        if isinstance(record, ForeignKeyRow):
            record = asdict(record)
        values = _extract(
            record, FOREIGN_KEY_ROW_FIELDS, FOREIGN_KEY_REQUIRED_FIELDS, index, "Foreign key"
        )
        rows.append(ForeignKeyRow(**values))
    return rows
