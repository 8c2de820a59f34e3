"""
Configuration module for GitHub Reports.

This module provides centralized configuration with environment variable
support and sensible defaults for all components.
"""

import copy
import json
import logging
from typing import Any, Dict, Optional

# Default values
DEFAULT_CONFIG = {
    # GitHub API settings
    "github_api": {
        "rest_base_url": "https://api.github.com",
        "pool_connections": 10,
    },

    # Logging settings
    "logging": {
        "level": "INFO",
        "enable_debug_file": True,
    },
}

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class Config:
    """Configuration manager for GitHub Reports."""

    def __init__(self, config_file: Optional[str] = None, environment=None, logger=None):
        """Initialize configuration from file and environment variables.

        Args:
            config_file: Optional path to configuration file
            environment: Environment instance for accessing environment variables
            logger: Logger instance
        """
        self._config = copy.deepcopy(DEFAULT_CONFIG)

        self.environment = environment
        self.logger = logger

        if config_file:
            self._load_from_file(config_file)

        # Override with environment variables
        self._load_from_env()

        self._init_derived_settings()

        if self.logger:
            self.logger.debug("Configuration initialized")

    def _load_from_file(self, config_file: str):
        """Load configuration from JSON file.

        Args:
            config_file: Path to configuration file
        """
        try:
            with open(config_file, 'r') as f:
                file_config = json.load(f)

            self._update_nested_dict(self._config, file_config)

            if self.logger:
                self.logger.info(f"Loaded configuration from {config_file}")
        except (OSError, ValueError) as e:
            if self.logger:
                self.logger.warning(f"Error loading configuration from {config_file}: {e}")

    def _load_from_env(self):
        """Load configuration from environment variables."""
        if not self.environment:
            if self.logger:
                self.logger.warning("No environment instance provided, skipping environment variable loading")
            return

        get_env = self.environment.get

        # GitHub API settings
        if api_url := get_env("GITHUB_API_URL"):
            self._config["github_api"]["rest_base_url"] = api_url

        if pool_connections := get_env("GITHUB_POOL_CONNECTIONS"):
            try:
                self._config["github_api"]["pool_connections"] = int(pool_connections)
            except ValueError:
                pass

        # Logging settings
        if log_level := get_env("LOG_LEVEL"):
            self._config["logging"]["level"] = log_level

        if self.logger:
            self.logger.debug("Loaded configuration from environment variables")

    def _update_nested_dict(self, target: Dict, source: Dict):
        """Update nested dictionary recursively.

        Args:
            target: Target dictionary to update
            source: Source dictionary with new values
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_nested_dict(target[key], value)
            else:
                target[key] = value

    def _init_derived_settings(self):
        """Initialize settings derived from other configuration values."""
        level = self._config["logging"]["level"]
        if isinstance(level, str) and level.upper() in LOG_LEVELS:
            self._config["logging"]["level"] = LOG_LEVELS[level.upper()]

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation path.

        Args:
            key_path: Dot notation path to configuration value (e.g., "github_api.rest_base_url")
            default: Default value to return if path not found

        Returns:
            Configuration value or default
        """
        value = self._config

        for part in key_path.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any):
        """Set configuration value using dot notation path.

        Args:
            key_path: Dot notation path to configuration value
            value: Value to set
        """
        parts = key_path.split('.')

        config = self._config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        """Get the entire configuration dictionary.

        Returns:
            Configuration dictionary
        """
        return self._config
