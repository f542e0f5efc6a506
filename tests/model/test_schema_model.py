"""
Tests for the schema model.
"""

import pytest

from tabledeps.graph.builder import build_dependency_graph
from tabledeps.graph.types import ColumnKey, ColumnMeta
from tabledeps.model.schema import Column, ColumnDependency, SchemaModel, Table


class TestSchemaModelFromGraph:
    def test_one_table_per_name_in_first_seen_order(self, schema):
        assert schema.table_names == ["customers", "orders", "line_items"]
        assert len(schema) == 3

    def test_columns_keep_graph_order(self, schema):
        orders = schema.get_table("orders")

        assert [column.name for column in orders.columns] == ["id", "customer_id"]

    def test_dependency_copies_referencing_attributes(self, schema):
        column = schema.get_column("orders", "customer_id")

        assert column.dependent_on == ColumnDependency(
            table_name="customers", column_name="id", data_type="int4", is_nullable="YES"
        )

    def test_columns_without_dependency(self, schema):
        assert schema.get_column("customers", "id").dependent_on is None

    def test_interleaved_rows_are_grouped(self):
        graph = build_dependency_graph(
            [
                ("orders", "id", "int4", "NO"),
                ("customers", "id", "int4", "NO"),
                ("orders", "total", "numeric", "YES"),
            ]
        )

        schema = SchemaModel.from_graph(graph)

        assert schema.table_names == ["orders", "customers"]
        assert [c.name for c in schema.get_table("orders").columns] == ["id", "total"]

    def test_empty_graph(self):
        schema = SchemaModel.from_graph({})

        assert len(schema) == 0
        assert schema.tables == []

    def test_graph_is_not_modified(self):
        graph = {ColumnKey("orders", "id"): ColumnMeta("int4", "NO")}

        SchemaModel.from_graph(graph)

        assert graph == {ColumnKey("orders", "id"): ColumnMeta("int4", "NO")}


class TestSchemaModel:
    def test_lookup(self, schema):
        assert "orders" in schema
        assert "invoices" not in schema
        assert schema.get_table("invoices") is None
        assert schema.get_column("orders", "missing") is None
        assert schema.get_column("invoices", "id") is None

    def test_iteration(self, schema):
        assert [table.name for table in schema] == schema.table_names

    def test_duplicate_table_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate table name: orders"):
            SchemaModel([Table("orders"), Table("orders")])

    def test_repr(self, schema):
        assert repr(schema) == "SchemaModel(tables=['customers', 'orders', 'line_items'])"


class TestTable:
    def test_foreign_key_columns(self, schema):
        orders = schema.get_table("orders")

        assert [c.name for c in orders.foreign_key_columns] == ["customer_id"]
        assert schema.get_table("customers").foreign_key_columns == []

    def test_column_nullable(self):
        assert Column("id", "int4", "YES").nullable is True
        assert Column("id", "int4", "NO").nullable is False
