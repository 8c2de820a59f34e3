"""Environment configuration management for GitHub Reports."""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

TOKEN_KEYS = ("GITHUB_TOKEN", "TOKEN")


class Environment:
    """Manages environment configuration without global state."""

    def __init__(self, env_file: Optional[str] = None):
        """Initialize the environment configuration.

        Args:
            env_file: Path to .env file (optional)
        """
        self._values = {}
        self.env_file_path = None

        # Load from specified .env file or the one in the working directory
        if env_file:
            self.load_env_file(env_file)
        else:
            default_env_path = Path.cwd() / '.env'
            if default_env_path.exists():
                self.load_env_file(str(default_env_path))

        # Always load from os.environ to allow overrides
        self._values.update(os.environ)

        logger.debug("Environment initialized")

    def load_env_file(self, dotenv_path: str) -> bool:
        """Load environment variables from .env file.

        Args:
            dotenv_path: Path to .env file

        Returns:
            True if file was loaded successfully, False otherwise
        """
        env_path = Path(dotenv_path)
        if not env_path.exists():
            logger.warning(f".env file not found at {dotenv_path}")
            return False

        logger.info(f"Loading environment variables from: {dotenv_path}")

        # Load values from .env file without modifying os.environ
        env_values = dotenv_values(dotenv_path=dotenv_path)
        self._values.update({k: v for k, v in env_values.items() if v is not None})

        self.env_file_path = dotenv_path

        self._log_loaded_values()

        return True

    def _log_loaded_values(self):
        """Log loaded environment variables with sensitive data masked."""
        for key in ['GITHUB_API_URL', 'LOG_LEVEL']:
            if key in self._values:
                logger.info(f"Loaded {key}={self._values[key]}")

        for key in TOKEN_KEYS:
            if key in self._values and self._values[key]:
                masked = '*' * len(self._values[key])
                logger.info(f"Loaded {key}={masked}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get an environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            Value of environment variable or default
        """
        return self._values.get(key, default)

    def set(self, key: str, value: Any):
        """Set an environment variable (does not modify os.environ).

        Args:
            key: Environment variable name
            value: Value to set
        """
        self._values[key] = value

    def get_github_token(self) -> Optional[str]:
        """Get the GitHub access token.

        GITHUB_TOKEN takes precedence over TOKEN. Blank values are ignored.

        Returns:
            The token, or None if none is configured
        """
        for key in TOKEN_KEYS:
            token = self.get(key)
            if token and str(token).strip():
                logger.debug(f"Using GitHub token from {key}")
                return str(token).strip()

        logger.error("GITHUB_TOKEN environment variable is not set")
        return None

    def as_dict(self) -> Dict[str, str]:
        """Get all environment variables as a dictionary.

        Returns:
            Dictionary of all environment variables
        """
        return dict(self._values)
