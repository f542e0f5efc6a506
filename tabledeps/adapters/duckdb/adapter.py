"""
DuckDB catalog adapter.

Columns come from information_schema; foreign keys come from
duckdb_constraints(), which lists each constraint once with its column lists.
"""

from typing import Any

import duckdb

from tabledeps.adapters.base import CatalogAdapter
from tabledeps.adapters.registry import register_adapter
from tabledeps.catalog.rows import CatalogRecord


class DuckDBAdapter(CatalogAdapter):
    """DuckDB catalog adapter."""

    COLUMNS_QUERY = """
        SELECT c.table_name, c.column_name, c.data_type, c.is_nullable
        FROM information_schema.columns AS c
        INNER JOIN information_schema.tables AS t
          ON t.table_catalog = c.table_catalog
          AND t.table_schema = c.table_schema
          AND t.table_name = c.table_name
        WHERE c.table_schema = ?
          AND t.table_type = 'BASE TABLE'
        ORDER BY c.table_name, c.ordinal_position
    """

    FOREIGN_KEYS_QUERY = """
        SELECT table_name, constraint_column_names, referenced_table, referenced_column_names
        FROM duckdb_constraints()
        WHERE constraint_type = 'FOREIGN KEY'
          AND schema_name = ?
        ORDER BY table_name, constraint_index
    """

    def get_default_dialect(self) -> str:
        return "duckdb"

    def get_default_schema(self) -> str:
        return "main"

    def connect(self) -> None:
        """Open the DuckDB database file (or an in-memory database)."""
        db_path = self.config.path or ":memory:"
        read_only = bool((self.config.extra or {}).get("read_only", False))
        if db_path == ":memory:":
            read_only = False

        try:
            self.connection = duckdb.connect(db_path, read_only=read_only)
            self.logger.info(f"Connected to DuckDB: {db_path}")
        except Exception as e:
            self.logger.error(f"Failed to connect to DuckDB: {e}")
            raise

    def disconnect(self) -> None:
        """Close the DuckDB connection."""
        if self.connection:
            self.connection.close()
            self.connection = None
            self.logger.info("Disconnected from DuckDB database")

    def execute_query(self, query: str, params: list[Any] | None = None) -> list[Any]:
        """Execute a SQL query and return all result rows."""
        self._require_connection()

        try:
            result = self.connection.execute(query, params).fetchall()
            self.logger.debug(f"Executed query: {' '.join(query.split())[:100]}...")
            return result
        except Exception as e:
            self.logger.error(f"Error executing query: {e}")
            raise

    def _fetch_foreign_key_records(self, schema: str) -> list[CatalogRecord]:
        """Expand each constraint into one record per column pair."""
        column_types = {
            (table, column): (data_type, is_nullable)
            for table, column, data_type, is_nullable in self._fetch_column_records(schema)
        }

        records = []
        for table, columns, referenced_table, referenced_columns in self.execute_query(
            self.FOREIGN_KEYS_QUERY, [schema]
        ):
            for column, referenced_column in zip(columns or [], referenced_columns or []):
                data_type, is_nullable = column_types.get((table, column), (None, None))
                ref_type, ref_nullable = column_types.get(
                    (referenced_table, referenced_column), (None, None)
                )
                records.append(
                    {
                        "referencing_table": table,
                        "referencing_column": column,
                        "referenced_table": referenced_table,
                        "referenced_column": referenced_column,
                        "referencing_data_type": data_type,
                        "referencing_is_nullable": is_nullable,
                        "referenced_data_type": ref_type,
                        "referenced_is_nullable": ref_nullable,
                    }
                )
        return records


register_adapter("duckdb", DuckDBAdapter)
