"""Application class for GitHub Reports.

This module provides the main Application class that wires the components
together (logging, environment, configuration, HTTP connections and the API
client) and runs the command selected on the command line.

Components can be injected through the constructor; anything not injected
is created during initialize().
"""

import logging
import os
from collections import Counter
from typing import Dict, List

from reports.api.api_client import GitHubAPI
from reports.api.github_exceptions import (
    ConfigException, InitializationError, MissingConfigError
)
from reports.api.models import Event, Repo
from reports.cli.args import parse_args
from reports.cli.environment import Environment
from reports.core.config import Config
from reports.utils.connection_manager import ConnectionManager
from reports.utils.error_handling import log_error
from reports.utils.logging_config import LogManager
from reports.utils.path_manager import PathManager


class Application:
    """Main application for GitHub Reports.

    Attributes:
        args: Command-line arguments
        components: Dictionary of initialized components
    """

    def __init__(self, args=None, log_manager=None, path_manager=None, environment=None, api=None):
        """Initialize the application with optional injected dependencies.

        Args:
            args: Command-line arguments (optional, will parse if not provided)
            log_manager: LogManager instance for logging configuration and access
            path_manager: PathManager instance for consistent file path handling
            environment: Environment instance for configuration and env variables
            api: GitHubAPI instance to use instead of building one from the token
        """
        self.args = args or parse_args()

        self.components = {}

        if log_manager:
            self.components['log_manager'] = log_manager
            self._init_logger = log_manager.get_logger(__name__)
        else:
            self._init_logger = logging.getLogger(__name__)

        if path_manager:
            self.components['path_manager'] = path_manager

        if environment:
            self.components['environment'] = environment

        if api:
            self.components['api'] = api

        self.logger = self._init_logger

    def initialize(self):
        """Initialize all application components.

        Returns:
            Self for method chaining

        Raises:
            MissingConfigError: When no GitHub token is configured
            InitializationError: When component initialization fails
        """
        try:
            if 'path_manager' not in self.components:
                self._init_path_manager()

            if 'environment' not in self.components:
                self._init_environment()

            if 'config' not in self.components:
                self._init_config()

            if 'log_manager' not in self.components:
                self._init_logging()

            if 'connection_manager' not in self.components:
                self._init_connection_manager()

            if 'api' not in self.components:
                self._init_api()

            self.logger = self.get_component('log_manager').get_logger(__name__)
            self.logger.debug("Application initialized successfully")

            return self
        except ConfigException:
            raise
        except Exception as e:
            log_error(self._init_logger, "Application initialization failed", exception=e,
                      level="critical", component="Application", operation="initialize")
            raise InitializationError(f"Failed to initialize application: {str(e)}") from e

    def _init_path_manager(self):
        """Initialize path manager."""
        self.components['path_manager'] = PathManager()

    def _init_environment(self):
        """Initialize environment configuration."""
        env = Environment(env_file=getattr(self.args, 'env_file', None))
        self.components['environment'] = env
        self._init_logger.debug("Environment initialized")

    def _init_config(self):
        """Initialize configuration."""
        env = self.get_component('environment')
        app_config = Config(config_file=getattr(self.args, 'config', None),
                            environment=env, logger=self._init_logger)
        self.components['config'] = app_config

    def _init_logging(self):
        """Initialize logging system.

        The --log-level argument wins over the configured level.
        """
        config = self.get_component('config')
        if getattr(self.args, 'log_level', None):
            log_level = getattr(logging, self.args.log_level)
        else:
            log_level = config.get("logging.level", logging.INFO)

        log_manager = LogManager(
            log_level=log_level,
            logs_dir=self.get_component('path_manager').get_logs_dir(),
            enable_debug_file=config.get("logging.enable_debug_file", True)
        )
        self.components['log_manager'] = log_manager

        self._init_logger = log_manager.get_logger(__name__)
        self._init_logger.debug("Logging initialized")

    def _init_connection_manager(self):
        """Initialize connection manager."""
        config = self.get_component('config')
        connection_manager = ConnectionManager(
            pool_connections=config.get("github_api.pool_connections", 10)
        )
        self.components['connection_manager'] = connection_manager
        self._init_logger.debug("Connection manager initialized")

    def _init_api(self):
        """Initialize the GitHub API client.

        Raises:
            MissingConfigError: When no GitHub token is available
        """
        env = self.get_component('environment')
        token = env.get_github_token()
        if not token:
            error_msg = "No GitHub token available. Set GITHUB_TOKEN in the environment or .env file"
            log_error(self._init_logger, error_msg, level="critical",
                      component="Application", operation="_init_api")
            raise MissingConfigError(error_msg)

        config = self.get_component('config')
        self.components['api'] = GitHubAPI(
            token,
            base_url=config.get("github_api.rest_base_url", "https://api.github.com"),
            connection_manager=self.get_component('connection_manager')
        )

    def get_component(self, name, default=None):
        """Get a component by name.

        Args:
            name: Component name
            default: Value returned when the component does not exist

        Returns:
            The component, or default
        """
        return self.components.get(name, default)

    def run(self) -> int:
        """Run the selected command.

        Request failures are not handled here; they propagate to the caller.

        Returns:
            int: Exit code (0 for success)
        """
        api = self.get_component('api')
        command = self.args.command
        self.logger.debug(f"Running command {command}")

        if command == "activity":
            self._print_activity(api.public_events_for_user(self.args.username))
        elif command == "repositories":
            self._print_repositories(api.public_repos_for_user(self.args.username, forks=self.args.forks))
        elif command == "gist":
            with open(self.args.file, 'r') as f:
                contents = f.read()
            gist = api.create_private_gist(self.args.description, os.path.basename(self.args.file), contents)
            print(gist.url)
        elif command == "starred":
            if api.repo_starred(self.args.repo):
                print(f"{self.args.repo} is starred")
            else:
                print(f"{self.args.repo} is not starred")
        elif command == "star":
            api.star_repo(self.args.repo)
            print(f"Starred {self.args.repo}")
        elif command == "unstar":
            api.unstar_repo(self.args.repo)
            print(f"Unstarred {self.args.repo}")
        else:
            log_error(self.logger, f"Unknown command: {command}", component="Application", operation="run")
            return 1

        return 0

    def _print_activity(self, events: List[Event]):
        """Print one line per event followed by a count per event type."""
        for event in events:
            print(f"{event.type} {event.repo_name}")

        counts = Counter(event.type for event in events)
        print(f"\n{len(events)} events")
        for event_type, count in counts.most_common():
            print(f"  {event_type}: {count}")

    def _print_repositories(self, repos: List[Repo]):
        """Print one line per repository with its languages, largest first."""
        for repo in repos:
            print(f"{repo.name}: {self._format_languages(repo.languages)}")

    @staticmethod
    def _format_languages(languages: Dict[str, int]) -> str:
        if not languages:
            return "no languages"
        ordered = sorted(languages.items(), key=lambda item: item[1], reverse=True)
        return ", ".join(f"{language} ({size})" for language, size in ordered)
