"""
Configuration management for Taskboard.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage store, cascade and logging settings
without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict
import logging


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Merge nested overrides into base in place."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


class ConfigManager:
    """
    Manages configuration loading and access for Taskboard.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load config.yaml on top of the built-in defaults."""
        self._config = self._get_default_config()

        if not self.config_path.exists():
            logging.warning(f"Configuration file not found: {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                overrides = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration from {self.config_path}: {e}")
            return

        if not isinstance(overrides, dict):
            logging.error(f"Configuration in {self.config_path} is not a mapping, using defaults")
            return

        _merge(self._config, overrides)
        logging.info(f"Configuration loaded from {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "database": {
                "filename": "taskboard.db",
                "read_only": False
            },
            "cascade": {
                "transactional": True
            },
            "integrity": {
                "check_parent_on_create": True
            },
            "paths": {
                "log_file": "taskboard.log"
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "database.filename")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("database.filename")  # Returns "taskboard.db"
            config.get("cascade.transactional")  # Returns True
        """
        value: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        section_values = self._config.get(section)
        return dict(section_values) if isinstance(section_values, dict) else {}

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def database_filename(self) -> str:
        """Get database filename."""
        return self.get("database.filename", "taskboard.db")

    @property
    def database_read_only(self) -> bool:
        """Whether the store is opened read-only."""
        return bool(self.get("database.read_only", False))

    @property
    def cascade_transactional(self) -> bool:
        """Whether cascading deletes run inside one store transaction."""
        return bool(self.get("cascade.transactional", True))

    @property
    def check_parent_on_create(self) -> bool:
        """Whether creating a list or card verifies its parent exists."""
        return bool(self.get("integrity.check_parent_on_create", True))

    @property
    def log_filename(self) -> str:
        """Get log file name."""
        return self.get("paths.log_file", "taskboard.log")

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_format(self) -> str:
        return self.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
