"""
Column-level foreign key graph.
"""

from .builder import DependencyGraphBuilder, build_dependency_graph
from .types import ColumnKey, ColumnMeta, DependencyGraph

__all__ = [
    "ColumnKey",
    "ColumnMeta",
    "DependencyGraph",
    "DependencyGraphBuilder",
    "build_dependency_graph",
]
