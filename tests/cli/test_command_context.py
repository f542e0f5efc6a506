"""
Tests for the shared CLI command context.
"""

import logging
from unittest.mock import patch

import pytest

from tabledeps.cli.context import CommandContext
from tabledeps.graph.builder import build_dependency_graph
from tabledeps.model.schema import SchemaModel
from tabledeps.shared.exceptions import TableReferenceError


@pytest.fixture
def duckdb_project(temp_project_dir, monkeypatch):
    monkeypatch.delenv("TABLEDEPS_DB_TYPE", raising=False)
    monkeypatch.delenv("TABLEDEPS_DB_PATH", raising=False)
    monkeypatch.delenv("TABLEDEPS_DB_SCHEMA", raising=False)
    (temp_project_dir / "tabledeps.toml").write_text(
        '[connection]\ntype = "duckdb"\npath = ":memory:"\n'
    )
    return temp_project_dir


class TestCommandContext:
    def test_missing_project_folder(self, temp_project_dir):
        with pytest.raises(FileNotFoundError, match="Project folder not found"):
            CommandContext(project_folder=str(temp_project_dir / "missing"))

    def test_adapter_from_config(self, duckdb_project):
        ctx = CommandContext(project_folder=str(duckdb_project))

        assert ctx.config.type == "duckdb"
        assert ctx.dialect == "duckdb"
        assert ctx.adapter.catalog_schema == "main"

    def test_load_schema_disconnects(self, duckdb_project):
        ctx = CommandContext(project_folder=str(duckdb_project))

        schema = ctx.load_schema()

        assert len(schema) == 0
        assert ctx.adapter.connection is None

    @pytest.mark.parametrize(
        "reference,expected",
        [("orders", "orders"), ("main.orders", "orders"), ('"Orders"', "Orders")],
    )
    def test_resolve_table_name(self, duckdb_project, reference, expected):
        ctx = CommandContext(project_folder=str(duckdb_project))

        assert ctx.resolve_table_name(reference) == expected

    def test_resolve_table_name_other_schema(self, duckdb_project):
        ctx = CommandContext(project_folder=str(duckdb_project))

        with pytest.raises(TableReferenceError, match="outside the inspected schema main"):
            ctx.resolve_table_name("archive.orders")

    def test_skipped_references_are_logged(self, duckdb_project, caplog):
        schema = SchemaModel.from_graph(
            build_dependency_graph(
                [("employees", "id", "int4", "NO"), ("employees", "manager_id", "int4", "YES")],
                [("employees", "manager_id", "employees", "id", "int4", "YES")],
            )
        )
        ctx = CommandContext(project_folder=str(duckdb_project))

        with patch("tabledeps.cli.context.SchemaInspector") as mock_inspector_class:
            mock_inspector_class.return_value.build_schema.return_value = schema
            with caplog.at_level(logging.WARNING):
                resolver = ctx.load_resolver()
                assert resolver.transitive_dependencies("employees") == []

        assert "Ignoring self-reference employees.manager_id -> employees.id" in caplog.text
        assert not hasattr(ctx, "handle_error")
