"""
Error handling utilities for GitHub Reports.

This module provides utility functions for consistent error reporting
across the codebase.
"""

import logging
from datetime import datetime
from typing import Optional

from reports.api.github_exceptions import RequestFailure


def format_error_context(error: Exception, operation: str = "", **additional_context) -> dict:
    """Format error information with context for consistent error reporting.

    Request failures also contribute their method, URL and status.

    Args:
        error: The exception that was raised
        operation: Name of the operation that failed
        **additional_context: Additional context to include

    Returns:
        Dictionary with formatted error information
    """
    error_info = {
        "error_type": error.__class__.__name__,
        "message": str(error),
        "timestamp": datetime.now().isoformat(),
        "operation": operation,
    }

    if isinstance(error, RequestFailure):
        error_info.update({
            "method": error.method,
            "url": error.url,
            "status": error.status,
        })

    error_info.update(additional_context)

    return error_info


def log_error(
    logger: logging.Logger,
    message: str,
    exception: Optional[Exception] = None,
    level: str = "error",
    **context
) -> None:
    """Log errors with consistent format and context.

    Args:
        logger: Logger to use
        message: Error message
        exception: Optional exception that caused the error
        level: Log level (critical, error, warning, info)
        **context: Additional context to include (component, operation, etc.)

    Example:
        log_error(logger, "Failed to list repositories", exception=e,
                  component="Application", operation="repositories")
    """
    context_str = ""
    if context:
        context_str = " Context: " + ", ".join(f"{k}={v}" for k, v in context.items())

    full_message = f"{message}{context_str}"

    exc_info = exception is not None

    if level == "critical":
        logger.critical(full_message, exc_info=exc_info)
    elif level == "error":
        logger.error(full_message, exc_info=exc_info)
    elif level == "warning":
        logger.warning(full_message, exc_info=exc_info)
    else:
        logger.info(full_message)
