"""
Adapter registry for managing catalog adapters.

Adapters register themselves on import; the registry creates them from
configuration by database type.
"""

import logging
from typing import Any

from .base import AdapterConfig, CatalogAdapter


class AdapterRegistry:
    """Registry for managing catalog adapters."""

    def __init__(self):
        self._adapters: dict[str, type[CatalogAdapter]] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, adapter_type: str, adapter_class: type[CatalogAdapter]) -> None:
        """
        Register a catalog adapter.

        Args:
            adapter_type: Database type identifier (e.g., 'duckdb', 'postgresql')
            adapter_class: Adapter class that implements CatalogAdapter
        """
        self._adapters[adapter_type.lower()] = adapter_class
        self.logger.debug(f"Registered adapter: {adapter_type} -> {adapter_class.__name__}")

    def get_adapter_class(self, adapter_type: str) -> type[CatalogAdapter] | None:
        """Get adapter class for a database type, or None if not registered."""
        return self._adapters.get(adapter_type.lower())

    def create_adapter(self, config: AdapterConfig | dict[str, Any]) -> CatalogAdapter:
        """
        Create an adapter instance from configuration.

        Args:
            config: Adapter configuration (AdapterConfig or dict)

        Returns:
            Configured, not yet connected adapter instance

        Raises:
            ValueError: If adapter type is missing or not supported
        """
        if isinstance(config, AdapterConfig):
            adapter_type = config.type
        else:
            adapter_type = config.get("type")

        if not adapter_type:
            raise ValueError("Database type is required")

        adapter_class = self.get_adapter_class(adapter_type)
        if not adapter_class:
            supported_types = sorted(self._adapters.keys())
            raise ValueError(
                f"Unsupported database type: {adapter_type}. Supported types: {supported_types}"
            )

        return adapter_class(config)

    def list_adapters(self) -> list[str]:
        """Get list of registered adapter types."""
        return list(self._adapters.keys())

    def is_supported(self, adapter_type: str) -> bool:
        """Check if an adapter type is supported."""
        return adapter_type.lower() in self._adapters


# Global registry instance
_registry = AdapterRegistry()


def register_adapter(adapter_type: str, adapter_class: type[CatalogAdapter]) -> None:
    """Register an adapter with the global registry."""
    _registry.register(adapter_type, adapter_class)


def get_adapter(config: AdapterConfig | dict[str, Any]) -> CatalogAdapter:
    """Get an adapter instance from configuration."""
    return _registry.create_adapter(config)


def list_available_adapters() -> list[str]:
    """Get list of available adapter types."""
    return _registry.list_adapters()


def is_adapter_supported(adapter_type: str) -> bool:
    """Check if an adapter type is supported."""
    return _registry.is_supported(adapter_type)
