"""
Custom exceptions for tabledeps.
"""


class TableDepsError(Exception):
    """Base exception for all tabledeps errors."""

    pass


class CatalogError(TableDepsError):
    """Raised when catalog data cannot be read or decoded."""

    pass


class CatalogRowError(CatalogError):
    """Raised when a catalog row is missing a required field."""

    def __init__(self, message: str, row_index: int | None = None, field: str | None = None):
        super().__init__(message)
        self.row_index = row_index
        self.field = field


class DependencyCycleError(TableDepsError):
    """Raised when foreign keys form a cycle between tables."""

    def __init__(self, cycles: list[list[str]]):
        self.cycles = cycles
        self.cycle = cycles[0] if cycles else []
        table = self.cycle[0] if self.cycle else "?"
        path = " -> ".join(self.cycle)
        message = f"Cycle detected involving table {table}: {path}"
        if len(cycles) > 1:
            message += f" (and {len(cycles) - 1} more)"
        super().__init__(message)


class TableReferenceError(TableDepsError):
    """Raised when a table reference cannot be parsed."""

    pass


class OutputGenerationError(TableDepsError):
    """Raised when output generation fails."""

    pass
