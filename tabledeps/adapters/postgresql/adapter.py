"""
PostgreSQL catalog adapter.

Column types are reported by udt_name (int4, varchar, ...). Foreign key
columns are paired with the referenced columns through
position_in_unique_constraint, so multi-column constraints yield one row per
column pair.
"""

from typing import Any

from tabledeps.adapters.base import AdapterConfig, CatalogAdapter
from tabledeps.adapters.registry import register_adapter


class PostgreSQLAdapter(CatalogAdapter):
    """PostgreSQL catalog adapter."""

    REQUIRED_FIELDS = ["type", "host", "user", "database"]

    COLUMNS_QUERY = """
        SELECT c.table_name, c.column_name, c.udt_name, c.is_nullable
        FROM information_schema.tables AS t
        INNER JOIN information_schema.columns AS c
          ON c.table_schema = t.table_schema
          AND c.table_name = t.table_name
        WHERE t.table_schema = %s
          AND t.table_type = 'BASE TABLE'
        ORDER BY c.table_name, c.ordinal_position
    """

    FOREIGN_KEYS_QUERY = """
        SELECT
            kcu.table_name AS referencing_table,
            kcu.column_name AS referencing_column,
            ref.table_name AS referenced_table,
            ref.column_name AS referenced_column,
            native_cols.udt_name AS referencing_data_type,
            native_cols.is_nullable AS referencing_is_nullable,
            foreign_cols.udt_name AS referenced_data_type,
            foreign_cols.is_nullable AS referenced_is_nullable
        FROM information_schema.referential_constraints AS rc
        INNER JOIN information_schema.key_column_usage AS kcu
          ON kcu.constraint_schema = rc.constraint_schema
          AND kcu.constraint_name = rc.constraint_name
        INNER JOIN information_schema.key_column_usage AS ref
          ON ref.constraint_schema = rc.unique_constraint_schema
          AND ref.constraint_name = rc.unique_constraint_name
          AND ref.ordinal_position = kcu.position_in_unique_constraint
        INNER JOIN information_schema.columns AS native_cols
          ON native_cols.table_schema = kcu.table_schema
          AND native_cols.table_name = kcu.table_name
          AND native_cols.column_name = kcu.column_name
        INNER JOIN information_schema.columns AS foreign_cols
          ON foreign_cols.table_schema = ref.table_schema
          AND foreign_cols.table_name = ref.table_name
          AND foreign_cols.column_name = ref.column_name
        WHERE kcu.table_schema = %s
        ORDER BY kcu.table_name, kcu.constraint_name, kcu.ordinal_position
    """

    def __init__(self, config: AdapterConfig | dict[str, Any]) -> None:
        try:
            import psycopg2  # noqa: F401
        except ImportError:
            raise ImportError(
                "psycopg2 is not installed. Install it with: pip install 'tabledeps[postgresql]'"
            ) from None

        super().__init__(config)

    def get_default_dialect(self) -> str:
        return "postgres"

    def get_default_schema(self) -> str:
        return "public"

    def connect(self) -> None:
        """Establish connection to PostgreSQL database."""
        connection_params = {
            "host": self.config.host,
            "port": self.config.port or 5432,
            "dbname": self.config.database,
            "user": self.config.user,
            "password": self.config.password,
            "connect_timeout": self.config.connection_timeout,
            "options": f"-c statement_timeout={self.config.query_timeout * 1000}",
        }

        try:
            import psycopg2

            self.connection = psycopg2.connect(**connection_params)
            self.logger.info(
                f"Connected to PostgreSQL: {self.config.host}:{connection_params['port']}/{self.config.database}"
            )
        except Exception as e:
            self.logger.error(f"Failed to connect to PostgreSQL: {e}")
            raise

    def disconnect(self) -> None:
        """Close the PostgreSQL connection."""
        if self.connection:
            self.connection.close()
            self.connection = None
            self.logger.info("Disconnected from PostgreSQL database")

    def execute_query(self, query: str, params: list[Any] | None = None) -> list[Any]:
        """Execute a SQL query and return all result rows."""
        self._require_connection()

        try:
            cursor = self.connection.cursor()
            try:
                cursor.execute(query, params)
                result = cursor.fetchall()
            finally:
                cursor.close()
            self.logger.debug(f"Executed query: {' '.join(query.split())[:100]}...")
            return result
        except Exception as e:
            self.logger.error(f"Error executing query: {e}")
            raise


register_adapter("postgresql", PostgreSQLAdapter)
