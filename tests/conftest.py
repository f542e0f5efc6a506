"""
Pytest configuration and shared fixtures for tabledeps tests.
"""

import tempfile
from pathlib import Path

import pytest

from tabledeps.adapters.duckdb.adapter import DuckDBAdapter
from tabledeps.graph.builder import build_dependency_graph
from tabledeps.model.schema import SchemaModel
from tabledeps.resolver.dependency_resolver import DependencyResolver


@pytest.fixture
def column_rows():
    """Column listing for line_items -> orders -> customers."""
    return [
        {"table_name": "customers", "column_name": "id", "data_type": "int4", "is_nullable": "NO"},
        {"table_name": "customers", "column_name": "name", "data_type": "varchar", "is_nullable": "YES"},
        {"table_name": "orders", "column_name": "id", "data_type": "int4", "is_nullable": "NO"},
        {"table_name": "orders", "column_name": "customer_id", "data_type": "int4", "is_nullable": "YES"},
        {"table_name": "line_items", "column_name": "id", "data_type": "int4", "is_nullable": "NO"},
        {"table_name": "line_items", "column_name": "order_id", "data_type": "int4", "is_nullable": "NO"},
    ]


@pytest.fixture
def foreign_key_rows():
    """Foreign keys matching column_rows."""
    return [
        {
            "referencing_table": "orders",
            "referencing_column": "customer_id",
            "referenced_table": "customers",
            "referenced_column": "id",
            "referencing_data_type": "int4",
            "referencing_is_nullable": "YES",
            "referenced_data_type": "int4",
            "referenced_is_nullable": "NO",
        },
        {
            "referencing_table": "line_items",
            "referencing_column": "order_id",
            "referenced_table": "orders",
            "referenced_column": "id",
            "referencing_data_type": "int4",
            "referencing_is_nullable": "NO",
            "referenced_data_type": "int4",
            "referenced_is_nullable": "NO",
        },
    ]


@pytest.fixture
def schema(column_rows, foreign_key_rows):
    """Schema model for the line_items -> orders -> customers chain."""
    return SchemaModel.from_graph(build_dependency_graph(column_rows, foreign_key_rows))


@pytest.fixture
def resolver(schema):
    return DependencyResolver(schema)


@pytest.fixture
def temp_project_dir():
    """Create a temporary project directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def duckdb_config():
    """Create DuckDB configuration."""
    return {"type": "duckdb", "path": ":memory:"}


@pytest.fixture
def duckdb_adapter(duckdb_config):
    """Create a connected in-memory DuckDB adapter."""
    adapter = DuckDBAdapter(duckdb_config)
    adapter.connect()
    yield adapter
    adapter.disconnect()


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "duckdb: tests that run against an in-memory DuckDB database")
    config.addinivalue_line("markers", "slow: tests that start a subprocess")
