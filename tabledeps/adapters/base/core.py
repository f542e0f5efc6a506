"""
Core catalog adapter base class.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Any

from tabledeps.catalog.rows import (
    CatalogRecord,
    ColumnRow,
    ForeignKeyRow,
    decode_column_rows,
    decode_foreign_key_rows,
)

from .config import AdapterConfig


class CatalogAdapter(ABC):
    """
    Abstract base class for catalog adapters.

    An adapter owns one database connection and implements the CatalogReader
    protocol by running its catalog queries against the configured schema.
    Subclasses provide the connection handling and the two catalog queries.
    """

    # Override in subclasses to define required fields
    REQUIRED_FIELDS = ["type"]

    # Catalog queries, parameterized by schema name
    COLUMNS_QUERY: str = ""
    FOREIGN_KEYS_QUERY: str = ""

    def __init__(self, config: AdapterConfig | dict[str, Any]) -> None:
        self.connection = None
        self.logger = logging.getLogger(self.__class__.__name__)

        config_dict = asdict(config) if isinstance(config, AdapterConfig) else dict(config)

        # Validate configuration first
        self._validate_config(config_dict)

        self.config = self._create_adapter_config(config_dict)

    def _validate_config(self, config_dict: dict[str, Any]) -> None:
        """Validate configuration against adapter requirements."""
        missing = {
            field for field in self.REQUIRED_FIELDS if config_dict.get(field) in (None, "")
        }
        if missing:
            raise ValueError(
                f"Missing required fields for {self.__class__.__name__}: {sorted(missing)}"
            )

        self._validate_field_types(config_dict)
        self._validate_field_values(config_dict)

    def _validate_field_types(self, config_dict: dict[str, Any]) -> None:
        """Validate field types."""
        if config_dict.get("port") is not None:
            if not isinstance(config_dict["port"], int):
                raise ValueError("Port must be an integer")

        for field in ("connection_timeout", "query_timeout"):
            if config_dict.get(field) is not None and not isinstance(config_dict[field], int):
                raise ValueError(f"{field.replace('_', ' ').capitalize()} must be an integer")

    def _validate_field_values(self, config_dict: dict[str, Any]) -> None:
        """Validate field values."""
        if config_dict.get("port") is not None:
            if not (1 <= config_dict["port"] <= 65535):
                raise ValueError("Port must be between 1 and 65535")

        for field in ("connection_timeout", "query_timeout"):
            if config_dict.get(field) is not None and config_dict[field] <= 0:
                raise ValueError(f"{field.replace('_', ' ').capitalize()} must be positive")

    def _create_adapter_config(self, config_dict: dict[str, Any]) -> AdapterConfig:
        """Create AdapterConfig from validated dictionary."""
        return AdapterConfig(
            type=config_dict["type"],
            host=config_dict.get("host"),
            port=config_dict.get("port"),
            database=config_dict.get("database"),
            user=config_dict.get("user"),
            password=config_dict.get("password"),
            path=config_dict.get("path"),
            schema=config_dict.get("schema"),
            connection_timeout=config_dict.get("connection_timeout") or 30,
            query_timeout=config_dict.get("query_timeout") or 300,
            extra=config_dict.get("extra"),
        )

    @abstractmethod
    def get_default_dialect(self) -> str:
        """Get the sqlglot dialect name for this database."""
        pass

    @abstractmethod
    def get_default_schema(self) -> str:
        """Get the schema inspected when none is configured."""
        pass

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close the database connection."""
        pass

    @abstractmethod
    def execute_query(self, query: str, params: list[Any] | None = None) -> list[Any]:
        """Execute a SQL query and return all result rows."""
        pass

    @property
    def catalog_schema(self) -> str:
        """Schema whose tables are inspected."""
        return self.config.schema or self.get_default_schema()

    def read_columns(self) -> list[ColumnRow]:
        """
        Read the column listing of the configured schema.

        Returns:
            Decoded column rows ordered by table

        Raises:
            RuntimeError: If not connected
            CatalogRowError: If the catalog returns an incomplete row
        """
        self._require_connection()
        rows = decode_column_rows(self._fetch_column_records(self.catalog_schema))
        self.logger.info(f"Read {len(rows)} columns from schema {self.catalog_schema}")
        return rows

    def read_foreign_keys(self) -> list[ForeignKeyRow]:
        """
        Read the foreign key column pairs of the configured schema.

        Raises:
            RuntimeError: If not connected
            CatalogRowError: If the catalog returns an incomplete row
        """
        self._require_connection()
        rows = decode_foreign_key_rows(self._fetch_foreign_key_records(self.catalog_schema))
        self.logger.info(f"Read {len(rows)} foreign key columns from schema {self.catalog_schema}")
        return rows

    def _fetch_column_records(self, schema: str) -> list[CatalogRecord]:
        return self.execute_query(self.COLUMNS_QUERY, [schema])

    def _fetch_foreign_key_records(self, schema: str) -> list[CatalogRecord]:
        return self.execute_query(self.FOREIGN_KEYS_QUERY, [schema])

    def _require_connection(self) -> None:
        if not self.connection:
            raise RuntimeError("Not connected to database. Call connect() first.")

    def get_database_info(self) -> dict[str, Any]:
        """Get information about the current database connection."""
        return {
            "adapter_type": self.__class__.__name__,
            "database_type": self.config.type,
            "dialect": self.get_default_dialect(),
            "schema": self.catalog_schema,
            "is_connected": self.connection is not None,
        }
