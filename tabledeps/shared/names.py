"""
Table reference parsing.
"""

from sqlglot import exp
from sqlglot.errors import ParseError

from .exceptions import TableReferenceError


def split_table_reference(reference: str, dialect: str | None = None) -> tuple[str | None, str]:
    """
    Split a possibly schema-qualified table reference into (schema, table).

    Quoting follows the given SQL dialect, so ``"Orders"`` keeps its case and
    ``public.orders`` yields ``("public", "orders")``.

    Args:
        reference: Table reference as typed by a user
        dialect: sqlglot dialect name (e.g. "duckdb", "postgres")

    Returns:
        Tuple of schema name (or None) and table name

    Raises:
        TableReferenceError: If the reference is empty or not a table name
    """
    if not reference or not reference.strip():
        raise TableReferenceError("Table reference must not be empty")

    try:
        table = exp.to_table(reference.strip(), dialect=dialect)
    except ParseError as e:
        raise TableReferenceError(f"Invalid table reference '{reference}': {e}") from e

    if not table.name:
        raise TableReferenceError(f"Invalid table reference '{reference}'")

    return (table.db or None, table.name)
