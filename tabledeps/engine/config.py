"""
Database configuration management.

This module handles loading database configurations from pyproject.toml or
tabledeps.toml and environment variables with proper precedence and validation.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from tabledeps.adapters.base import AdapterConfig

PROJECT_CONFIG_FILE = "tabledeps.toml"


class DatabaseConfigManager:
    """Manages database configurations from multiple sources."""

    def __init__(self, project_root: str | Path | None = None) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self, config_name: str = "default") -> AdapterConfig:
        """
        Load database configuration from TOML files and environment variables.

        Args:
            config_name: Name of the configuration to load (default: "default")

        Returns:
            AdapterConfig object with merged configuration

        Raises:
            ValueError: If configuration is invalid or missing
        """
        toml_config = self._load_toml_config(config_name)
        env_config = self._load_env_config()

        # Env vars override toml
        merged_config = self._merge_configs(toml_config, env_config)

        return self._create_adapter_config(merged_config)

    def _load_toml_config(self, config_name: str) -> dict[str, Any]:
        """Load configuration from pyproject.toml or tabledeps.toml."""
        pyproject = self.project_root / "pyproject.toml"
        if pyproject.exists():
            data = self._read_toml(pyproject)
            tool_config = data.get("tool", {}).get("tabledeps", {})

            if "database" in tool_config:
                return dict(tool_config["database"])

            databases = tool_config.get("databases", {})
            if isinstance(databases, dict) and config_name in databases:
                return dict(databases[config_name])

        project_file = self.project_root / PROJECT_CONFIG_FILE
        if project_file.exists():
            data = self._read_toml(project_file)

            connections = data.get("connections", {})
            if isinstance(connections, dict) and config_name in connections:
                return dict(connections[config_name])

            if "connection" in data:
                return dict(data["connection"])

        self.logger.debug(f"No database configuration '{config_name}' found in {self.project_root}")
        return {}

    def _read_toml(self, toml_file: Path) -> dict[str, Any]:
        try:
            with open(toml_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {toml_file}: {e}") from e

    def _load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}

        env_mappings = {
            "TABLEDEPS_DB_TYPE": "type",
            "TABLEDEPS_DB_HOST": "host",
            "TABLEDEPS_DB_PORT": "port",
            "TABLEDEPS_DB_DATABASE": "database",
            "TABLEDEPS_DB_USER": "user",
            "TABLEDEPS_DB_PASSWORD": "password",
            "TABLEDEPS_DB_PATH": "path",
            "TABLEDEPS_DB_SCHEMA": "schema",
        }

        for env_var, config_key in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                if config_key == "port" and value.isdigit():
                    env_config[config_key] = int(value)
                else:
                    env_config[config_key] = value

        return env_config

    def _merge_configs(
        self, toml_config: dict[str, Any], env_config: dict[str, Any]
    ) -> dict[str, Any]:
        """Merge TOML and environment configurations."""
        merged = toml_config.copy()
        merged.update(env_config)
        return merged

    def _create_adapter_config(self, config_dict: dict[str, Any]) -> AdapterConfig:
        """Create AdapterConfig from dictionary."""
        if not config_dict:
            raise ValueError("No database configuration found")

        db_type = config_dict.get("type")
        if not db_type:
            raise ValueError("Database type is required")

        path = config_dict.get("path")
        if path and path != ":memory:" and not Path(path).is_absolute():
            path = str(self.project_root / path)

        return AdapterConfig(
            type=db_type,
            host=config_dict.get("host"),
            port=config_dict.get("port"),
            database=config_dict.get("database"),
            user=config_dict.get("user"),
            password=config_dict.get("password"),
            path=path,
            schema=config_dict.get("schema"),
            connection_timeout=config_dict.get("connection_timeout", 30),
            query_timeout=config_dict.get("query_timeout", 300),
            extra=config_dict.get("extra"),
        )


def load_database_config(
    config_name: str = "default", project_root: str | Path | None = None
) -> AdapterConfig:
    """
    Convenience function to load database configuration.

    Args:
        config_name: Name of the configuration to load
        project_root: Project root directory (defaults to current directory)

    Returns:
        AdapterConfig object
    """
    manager = DatabaseConfigManager(project_root)
    return manager.load_config(config_name)
