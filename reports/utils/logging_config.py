"""Logging configuration for GitHub Reports."""

import logging
from pathlib import Path
from typing import List, Optional


class LogManager:
    """Manages logging configuration without global state."""

    def __init__(self, log_level: int = logging.INFO,
                 logs_dir: Optional[Path] = None,
                 console: bool = True,
                 enable_debug_file: bool = True):
        """Initialize the log manager.

        Args:
            log_level: Logging level (e.g., logging.INFO)
            logs_dir: Path to logs directory
            console: Whether to enable console logging
            enable_debug_file: Whether to enable debug file logging
        """
        self.log_level = log_level
        self.console_enabled = console
        self.debug_file_enabled = enable_debug_file

        self.logs_dir = logs_dir or Path("logs")
        self.logs_dir.mkdir(exist_ok=True, parents=True)

        self._configure_logging()

        # Store loggers
        self._loggers = {}

        self.get_logger(__name__).debug(f"Log manager initialized with log_level={self.log_level}, "
                                        f"logs_dir={self.logs_dir}")

    def _configure_logging(self):
        """Configure logging with file and console handlers."""
        # Reset existing logging configuration
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        api_logger = logging.getLogger("reports.api")
        for handler in api_logger.handlers[:]:
            api_logger.removeHandler(handler)

        # The debug file needs DEBUG records to reach the handlers
        root_level = logging.DEBUG if self.debug_file_enabled else self.log_level
        logging.root.setLevel(root_level)

        console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if self.console_enabled:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(console_formatter)
            console_handler.setLevel(self.log_level)
            logging.root.addHandler(console_handler)

        self._add_file_handler("reports.log", file_formatter, self.log_level)
        self._add_file_handler("github_api.log", file_formatter, self.log_level,
                               ["reports.api"])

        if self.debug_file_enabled:
            self._add_file_handler("reports_debug.log", file_formatter, logging.DEBUG)

    def _add_file_handler(self, filename: str, formatter: logging.Formatter,
                          level: int, logger_names: Optional[List[str]] = None):
        """Add a file handler to specific loggers or root logger.

        Args:
            filename: Log filename
            formatter: Log formatter
            level: Log level
            logger_names: Optional list of logger names to add handler to
        """
        handler = logging.FileHandler(self.logs_dir / filename)
        handler.setFormatter(formatter)
        handler.setLevel(level)

        if logger_names:
            for logger_name in logger_names:
                logging.getLogger(logger_name).addHandler(handler)
        else:
            logging.root.addHandler(handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger with the specified name.

        Args:
            name: Logger name (usually __name__)

        Returns:
            Logger instance
        """
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)

        return self._loggers[name]
