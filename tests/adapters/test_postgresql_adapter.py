"""
Tests for the PostgreSQL catalog adapter with a mocked driver.
"""

import sys
from unittest.mock import MagicMock, patch

import pytest

from tabledeps.adapters.postgresql.adapter import PostgreSQLAdapter
from tabledeps.catalog.rows import ColumnRow, ForeignKeyRow


@pytest.fixture
def mock_psycopg2():
    psycopg2 = MagicMock()
    with patch.dict(sys.modules, {"psycopg2": psycopg2}):
        yield psycopg2


@pytest.fixture
def pg_config():
    return {
        "type": "postgresql",
        "host": "localhost",
        "database": "shop",
        "user": "reader",
        "password": "secret",
    }


@pytest.fixture
def pg_adapter(mock_psycopg2, pg_config):
    adapter = PostgreSQLAdapter(pg_config)
    adapter.connect()
    return adapter


def _cursor(adapter, rows):
    cursor = MagicMock()
    cursor.fetchall.return_value = rows
    adapter.connection.cursor.return_value = cursor
    return cursor


class TestPostgreSQLAdapter:
    def test_missing_driver(self, pg_config):
        with patch.dict(sys.modules, {"psycopg2": None}):
            with pytest.raises(ImportError, match="psycopg2 is not installed"):
                PostgreSQLAdapter(pg_config)

    def test_required_fields(self, mock_psycopg2):
        with pytest.raises(ValueError, match="Missing required fields"):
            PostgreSQLAdapter({"type": "postgresql", "host": "localhost"})

    def test_defaults(self, mock_psycopg2, pg_config):
        adapter = PostgreSQLAdapter(pg_config)

        assert adapter.get_default_dialect() == "postgres"
        assert adapter.catalog_schema == "public"

    def test_connect_parameters(self, mock_psycopg2, pg_config):
        adapter = PostgreSQLAdapter(dict(pg_config, query_timeout=60))
        adapter.connect()

        mock_psycopg2.connect.assert_called_once_with(
            host="localhost",
            port=5432,
            dbname="shop",
            user="reader",
            password="secret",
            connect_timeout=30,
            options="-c statement_timeout=60000",
        )

    def test_disconnect(self, pg_adapter):
        connection = pg_adapter.connection

        pg_adapter.disconnect()

        connection.close.assert_called_once()
        assert pg_adapter.connection is None

    def test_read_columns(self, pg_adapter):
        cursor = _cursor(pg_adapter, [("orders", "id", "int4", "NO")])

        rows = pg_adapter.read_columns()

        assert rows == [ColumnRow("orders", "id", "int4", "NO")]
        cursor.execute.assert_called_once_with(PostgreSQLAdapter.COLUMNS_QUERY, ["public"])
        cursor.close.assert_called_once()

    def test_read_foreign_keys_uses_configured_schema(self, mock_psycopg2, pg_config):
        adapter = PostgreSQLAdapter(dict(pg_config, schema="sales"))
        adapter.connect()
        cursor = _cursor(
            adapter,
            [("orders", "customer_id", "customers", "id", "int4", "YES", "int4", "NO")],
        )

        rows = adapter.read_foreign_keys()

        assert rows == [
            ForeignKeyRow("orders", "customer_id", "customers", "id", "int4", "YES", "int4", "NO")
        ]
        cursor.execute.assert_called_once_with(PostgreSQLAdapter.FOREIGN_KEYS_QUERY, ["sales"])

    def test_cursor_closed_on_error(self, pg_adapter):
        cursor = _cursor(pg_adapter, [])
        cursor.execute.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            pg_adapter.read_columns()

        cursor.close.assert_called_once()
