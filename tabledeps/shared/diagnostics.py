"""
Diagnostics for catalog data that is skipped instead of rejected.

Unmatched foreign keys, references to unknown tables and self-references
skipped by transitive lookups are tolerated, but each occurrence is logged and
handed to an optional callback so callers can see what was left out.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable


class DiagnosticKind(Enum):
    """Kinds of tolerated catalog inconsistencies."""

    UNMATCHED_FOREIGN_KEY = "unmatched_foreign_key"
    REPLACED_FOREIGN_KEY = "replaced_foreign_key"
    MISSING_TARGET_TABLE = "missing_target_table"
    SELF_REFERENCE = "self_reference"


@dataclass(frozen=True)
class Diagnostic:
    """A single tolerated inconsistency."""

    kind: DiagnosticKind
    message: str
    table_name: str | None = None
    column_name: str | None = None


DiagnosticCallback = Callable[[Diagnostic], None]


def report(
    logger: logging.Logger,
    callback: DiagnosticCallback | None,
    diagnostic: Diagnostic,
) -> None:
    """Log a diagnostic and forward it to the callback, if any."""
    logger.warning(diagnostic.message)
    if callback is not None:
        callback(diagnostic)
