"""
Tests for Mermaid diagram generation.
"""

from tabledeps.graph.builder import build_dependency_graph
from tabledeps.model.schema import SchemaModel
from tabledeps.output.visualizer import DependencyVisualizer


class TestDependencyVisualizer:
    def test_generate_mermaid_diagram(self, schema):
        diagram = DependencyVisualizer().generate_mermaid_diagram(schema)

        lines = diagram.split("\n")
        assert lines[0] == "graph LR"
        assert '    customers["customers"]' in lines
        assert "    customers -->|customer_id| orders" in lines
        assert "    orders -->|order_id| line_items" in lines
        assert "    %% Creation Order:" in lines
        assert "    %% 1. customers" in lines
        assert "    %% 3. line_items" in lines

    def test_cycle_comments(self):
        graph = build_dependency_graph(
            [("a", "b_id", "int4", "YES"), ("b", "a_id", "int4", "YES")],
            [
                ("a", "b_id", "b", "a_id", "int4", "YES"),
                ("b", "a_id", "a", "b_id", "int4", "YES"),
            ],
        )

        diagram = DependencyVisualizer().generate_mermaid_diagram(SchemaModel.from_graph(graph))

        assert "%% Circular Dependencies Detected:" in diagram
        assert "%% a → b → a" in diagram
        assert "Creation Order" not in diagram

    def test_edges_to_unknown_tables_are_skipped(self):
        graph = build_dependency_graph(
            [("orders", "customer_id", "int4", "YES")],
            [("orders", "customer_id", "customers", "id", "int4", "YES")],
        )

        diagram = DependencyVisualizer().generate_mermaid_diagram(SchemaModel.from_graph(graph))

        assert "-->" not in diagram

    def test_empty_schema(self):
        assert DependencyVisualizer().generate_mermaid_diagram(SchemaModel()) == "graph LR"

    def test_escape_node_names(self):
        visualizer = DependencyVisualizer()

        assert visualizer._escape_mermaid_node("order-items") == "order_items"
        assert visualizer._escape_mermaid_node("2024_sales") == "_2024_sales"

    def test_save_mermaid_diagram(self, schema, tmp_path):
        output = DependencyVisualizer().save_mermaid_diagram(schema, tmp_path / "deps.mmd")

        assert output.read_text().startswith("graph LR")

    def test_colliding_node_names_get_distinct_ids(self):
        graph = build_dependency_graph(
            [("a_b", "id", "int4", "NO"), ("a.b", "id", "int4", "NO"), ("a.b", "parent_id", "int4", "YES")],
            [("a.b", "parent_id", "a_b", "id", "int4", "YES")],
        )

        diagram = DependencyVisualizer().generate_mermaid_diagram(SchemaModel.from_graph(graph))

        lines = diagram.split("\n")
        assert '    a_b["a_b"]' in lines
        assert '    a_b_2["a.b"]' in lines
        assert "    a_b -->|parent_id| a_b_2" in lines
