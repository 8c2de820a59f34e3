"""
GitHub API interface package for GitHub Reports.

This package provides the REST API client, its value types and the
exceptions it raises.
"""

# Import main components for convenient access
from reports.api.api_client import GitHubAPI
from reports.api.models import Event, Repo, Gist
from reports.api.github_exceptions import RequestFailure
