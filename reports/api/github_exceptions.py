"""
Exceptions for GitHub Reports.

This module contains common exceptions used throughout the codebase.
All components should use these exception classes for consistency.
"""

# Base exceptions for different components
class GitHubException(Exception):
    """Base exception for all GitHub-related errors."""
    pass


class ConfigException(Exception):
    """Base exception for all configuration-related errors."""
    pass


class ApplicationException(Exception):
    """Base exception for application-level errors."""
    pass


# GitHub API exceptions
class RequestFailure(GitHubException):
    """Exception raised when a response status is not one the caller accepts.

    Attributes:
        method: HTTP method of the failed request (upper case)
        url: Request URL
        status: Response status code
        body: Raw response body
    """

    def __init__(self, method: str, url: str, status: int, body: str):
        self.method = method
        self.url = url
        self.status = status
        self.body = body
        super().__init__(f"{method} to {url} returned {status}\n{body}")


# Config exceptions
class ConfigurationError(ConfigException):
    """Exception raised when there's an error in configuration."""
    pass


class MissingConfigError(ConfigException):
    """Exception raised when a required configuration value is missing."""
    pass


# Application exceptions
class InitializationError(ApplicationException):
    """Exception raised when component initialization fails."""
    pass
