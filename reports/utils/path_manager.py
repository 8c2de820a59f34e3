"""
Path management utilities for GitHub Reports.

This module provides centralized path management for application directories.
"""
from pathlib import Path
from typing import Optional


class PathManager:
    """Manages paths for logs and other application directories."""

    def __init__(self, base_dir: Optional[Path] = None):
        """Initialize the path manager.

        Args:
            base_dir: Optional base directory for all paths. If not provided,
                     defaults to the current working directory.
        """
        self.base_dir = base_dir or Path(".")
        self._logs_dir = None

    def get_logs_dir(self) -> Path:
        """Get the logs directory path, creating it if needed.

        Returns:
            Path object for the logs directory
        """
        if self._logs_dir is None:
            self._logs_dir = self.base_dir / "logs"
            self._logs_dir.mkdir(exist_ok=True, parents=True)
        return self._logs_dir
