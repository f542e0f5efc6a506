"""
Base adapter classes and configuration.
"""

from .config import AdapterConfig
from .core import CatalogAdapter

__all__ = [
    "AdapterConfig",
    "CatalogAdapter",
]
