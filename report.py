#!/usr/bin/env python3
"""GitHub Reports main entry point."""

import logging
import sys

from reports.api.github_exceptions import (
    ApplicationException, ConfigException, GitHubException, InitializationError
)
from reports.cli.args import parse_args
from reports.core.application import Application
from reports.utils.error_handling import log_error


def main(argv=None):
    """Main entry point for GitHub Reports."""
    args = parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        app = Application(args=args).initialize()
        return app.run()
    except (InitializationError, ConfigException) as e:
        log_error(logger, "Application initialization failed", exception=e, level="critical",
                  component="main", operation="initialize")
        return 2
    except GitHubException as e:
        log_error(logger, "GitHub request failed", exception=e, level="error",
                  component="main", operation=args.command)
        return 1
    except ApplicationException as e:
        log_error(logger, "Application error", exception=e, level="critical",
                  component="main", operation="run")
        return 1
    except Exception as e:
        log_error(logger, "Fatal error", exception=e, level="critical",
                  component="main", operation="unknown")
        return 3


if __name__ == "__main__":
    sys.exit(main())
