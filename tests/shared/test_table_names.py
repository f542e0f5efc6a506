"""
Tests for table reference parsing and shared exceptions.
"""

import pytest

from tabledeps.shared.exceptions import DependencyCycleError, TableReferenceError
from tabledeps.shared.names import split_table_reference


class TestSplitTableReference:
    @pytest.mark.parametrize(
        "reference,dialect,expected",
        [
            ("orders", None, (None, "orders")),
            ("public.orders", "postgres", ("public", "orders")),
            ('"Order Items"', "postgres", (None, "Order Items")),
            ("  main.orders  ", "duckdb", ("main", "orders")),
        ],
    )
    def test_valid_references(self, reference, dialect, expected):
        assert split_table_reference(reference, dialect) == expected

    @pytest.mark.parametrize("reference", ["", "   "])
    def test_empty_reference(self, reference):
        with pytest.raises(TableReferenceError, match="must not be empty"):
            split_table_reference(reference)


class TestDependencyCycleError:
    def test_single_cycle(self):
        error = DependencyCycleError([["a", "b", "a"]])

        assert error.cycle == ["a", "b", "a"]
        assert str(error) == "Cycle detected involving table a: a -> b -> a"

    def test_several_cycles(self):
        error = DependencyCycleError([["a", "b", "a"], ["x", "y", "x"]])

        assert error.cycles == [["a", "b", "a"], ["x", "y", "x"]]
        assert str(error).endswith("(and 1 more)")
