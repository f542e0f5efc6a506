"""
Plain-text rendering of schema models.
"""

from collections.abc import Iterable

from tabledeps.model.schema import Column, SchemaModel, Table


def render_column(column: Column) -> str:
    line = f" -> {column.name} |{column.data_type}| nullable: {column.is_nullable}"
    dependency = column.dependent_on
    if dependency is not None:
        line += (
            f" (dependent on {dependency.table_name}.{dependency.column_name}"
            f" |{dependency.data_type}| nullable: {dependency.is_nullable})"
        )
    return line


def render_schema(schema: SchemaModel) -> str:
    """
    Render every table and its columns.

    Example:
        = orders
         -> id |int4| nullable: NO
         -> customer_id |int4| nullable: YES (dependent on customers.id |int4| nullable: YES)
    """
    lines = []
    for table in schema:
        lines.append(f"= {table.name}")
        lines.extend(render_column(column) for column in table.columns)
    return "\n".join(lines) + ("\n" if lines else "")


def render_table_list(tables: Iterable[Table]) -> str:
    """Render tables as a numbered list, one per line."""
    return "\n".join(f"{i}. {table.name}" for i, table in enumerate(tables, 1))
