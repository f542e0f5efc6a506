"""
Dependency resolution over a schema model.
"""

from .dependency_resolver import DependencyResolver

__all__ = ["DependencyResolver"]
