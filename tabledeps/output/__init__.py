"""
Output layer: text rendering, JSON/YAML export and Mermaid diagrams.
"""

from .exporter import ExportFormat, SchemaExporter
from .text import render_column, render_schema, render_table_list
from .visualizer import DependencyVisualizer

__all__ = [
    "DependencyVisualizer",
    "ExportFormat",
    "SchemaExporter",
    "render_column",
    "render_schema",
    "render_table_list",
]
