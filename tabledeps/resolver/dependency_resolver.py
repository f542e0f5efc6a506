"""
Dependency resolution over a schema model.
"""

import logging
from collections.abc import Callable
from graphlib import CycleError, TopologicalSorter

from tabledeps.model.schema import SchemaModel, Table
from tabledeps.shared.diagnostics import Diagnostic, DiagnosticCallback, DiagnosticKind, report
from tabledeps.shared.exceptions import DependencyCycleError

logger = logging.getLogger(__name__)

Neighbours = Callable[[str], list[str]]


class DependencyResolver:
    """
    Answers table dependency questions for a SchemaModel.

    A table depends on another table when one of its columns references a
    column of that table. Lookups of unknown tables return empty results;
    references to tables missing from the model are skipped and reported.
    """

    def __init__(
        self, schema: SchemaModel, on_diagnostic: DiagnosticCallback | None = None
    ) -> None:
        self.schema = schema
        self.on_diagnostic = on_diagnostic
        self._reported_self_references: set[str] = set()

        self._dependents: dict[str, list[str]] = {name: [] for name in schema.table_names}
        for table in schema:
            for dep_name in self._dependency_names(table, report_missing=False):
                if table.name not in self._dependents[dep_name]:
                    self._dependents[dep_name].append(table.name)

    def direct_dependencies(self, table_name: str) -> list[Table]:
        """
        Get the tables referenced by the columns of a table.

        One entry per foreign key column, in column order, so a table referenced
        by several columns appears several times. A self-referencing table is
        returned as its own dependency.

        Args:
            table_name: Name of the table

        Returns:
            List of referenced tables (empty for unknown tables)
        """
        table = self.schema.get_table(table_name)
        if table is None:
            logger.debug(f"Table {table_name} not found in schema")
            return []
        return [self.schema.get_table(name) for name in self._dependency_names(table)]

    def transitive_dependencies(self, table_name: str) -> list[Table]:
        """
        Get every table that must exist before a table can be populated.

        Each table appears once and always after the tables it depends on,
        so ``line_items -> orders -> customers`` yields ``[customers, orders]``.
        The table itself is not included. Self-references are skipped and
        reported once as SELF_REFERENCE diagnostics.

        Args:
            table_name: Name of the table

        Returns:
            Tables in dependency-first order (empty for unknown tables)

        Raises:
            DependencyCycleError: If a cycle is reachable from the table
        """
        return self._walk(table_name, self._dependencies_of)

    def direct_dependents(self, table_name: str) -> list[Table]:
        """Get the tables with at least one column referencing a table."""
        if table_name not in self.schema:
            return []
        return [self.schema.get_table(name) for name in self._dependents[table_name]]

    def transitive_dependents(self, table_name: str) -> list[Table]:
        """
        Get every table that must be dropped before a table can be dropped.

        The most distant dependents come first, so the result can be dropped
        front to back. Self-references are skipped and reported.

        Raises:
            DependencyCycleError: If a cycle is reachable from the table
        """
        return self._walk(table_name, self._dependents_of)

    def creation_order(self) -> list[Table]:
        """
        Order all tables so every table comes after the tables it references.

        Returns:
            All tables of the model in creation order

        Raises:
            DependencyCycleError: If the model contains a cycle
        """
        ts = TopologicalSorter()
        for table in self.schema:
            ts.add(table.name, *self._dependencies_of(table.name))

        try:
            order = list(ts.static_order())
        except CycleError:
            raise DependencyCycleError(self.find_cycles()) from None

        return [self.schema.get_table(name) for name in order]

    def drop_order(self) -> list[Table]:
        """Order all tables so every table comes before the tables it references."""
        return list(reversed(self.creation_order()))

    def find_cycles(self) -> list[list[str]]:
        """
        Detect circular dependencies using DFS.

        Returns:
            List of cycles found, each closed by repeating its first table
            (empty if there are no cycles)
        """
        visited: set[str] = set()
        cycles = []

        for start in self.schema.table_names:
            if start in visited:
                continue

            visited.add(start)
            path = [start]
            stack = [iter(self._dependencies_of(start))]

            while stack:
                node = next(stack[-1], None)
                if node is None:
                    stack.pop()
                    path.pop()
                    continue
                if node in path:
                    cycles.append(path[path.index(node):] + [node])
                    continue
                if node in visited:
                    continue
                visited.add(node)
                path.append(node)
                stack.append(iter(self._dependencies_of(node)))

        return cycles

    def _walk(self, table_name: str, neighbours: Neighbours) -> list[Table]:
        """Iterative post-order DFS from a table, excluding the table itself."""
        if table_name not in self.schema:
            logger.debug(f"Table {table_name} not found in schema")
            return []

        ordered: list[Table] = []
        visited = {table_name}
        path = [table_name]
        stack = [iter(neighbours(table_name))]

        while stack:
            node = next(stack[-1], None)
            if node is None:
                stack.pop()
                finished = path.pop()
                if stack:
                    ordered.append(self.schema.get_table(finished))
                continue
            if node in path:
                raise DependencyCycleError([path[path.index(node):] + [node]])
            if node in visited:
                continue
            visited.add(node)
            path.append(node)
            stack.append(iter(neighbours(node)))

        return ordered

    def _dependencies_of(self, table_name: str) -> list[str]:
        table = self.schema.get_table(table_name)
        names = []
        for name in self._dependency_names(table):
            if name == table_name:
                self._report_self_references(table)
            elif name not in names:
                names.append(name)
        return names

    def _dependents_of(self, table_name: str) -> list[str]:
        names = self._dependents.get(table_name, [])
        if table_name in names:
            self._report_self_references(self.schema.get_table(table_name))
        return [name for name in names if name != table_name]

    def _report_self_references(self, table: Table) -> None:
        """Report the self-referencing columns of a table, once per resolver."""
        if table.name in self._reported_self_references:
            return
        self._reported_self_references.add(table.name)

        for column in table.foreign_key_columns:
            dependency = column.dependent_on
            if dependency.table_name != table.name:
                continue
            report(
                logger,
                self.on_diagnostic,
                Diagnostic(
                    kind=DiagnosticKind.SELF_REFERENCE,
                    message=(
                        f"Ignoring self-reference {table.name}.{column.name} -> "
                        f"{dependency.table_name}.{dependency.column_name}"
                    ),
                    table_name=table.name,
                    column_name=column.name,
                ),
            )

    def _dependency_names(self, table: Table, report_missing: bool = True) -> list[str]:
        names = []
        for column in table.foreign_key_columns:
            target = column.dependent_on.table_name
            if target in self.schema:
                names.append(target)
            elif report_missing:
                report(
                    logger,
                    self.on_diagnostic,
                    Diagnostic(
                        kind=DiagnosticKind.MISSING_TARGET_TABLE,
                        message=f"Column {table.name}.{column.name} references unknown table {target}",
                        table_name=table.name,
                        column_name=column.name,
                    ),
                )
        return names
