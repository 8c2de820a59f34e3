"""
GitHub API client for GitHub Reports.

This module provides the client used by the reports: authenticated REST
calls with explicit accepted statuses, transparent pagination through the
``Link`` header, and the domain operations built on top of them (events,
repositories with languages, private gists and stars).
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

import requests

from reports.api.github_api_utils import extract_next_page_url
from reports.api.github_exceptions import RequestFailure
from reports.api.models import Event, Gist, Repo
from reports.utils.connection_manager import ConnectionManager

# Configure logging
logger = logging.getLogger(__name__)

# GitHub API endpoints
GITHUB_REST_API_URL = "https://api.github.com"

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
DEFAULT_ACCEPTED_STATUSES = (200, 201)


class GitHubAPI:
    """Client for the subset of GitHub's REST API used by the reports.

    Every call is a single attempt. Any response whose status is not in the
    accepted set of the call site raises RequestFailure, which propagates to
    the caller unchanged.
    """

    def __init__(self, token: str, base_url: str = GITHUB_REST_API_URL,
                 connection_manager: Optional[ConnectionManager] = None):
        """Initialize the API client.

        Args:
            token: GitHub access token sent with every request
            base_url: Root URL of the REST API
            connection_manager: Optional manager for the HTTP session
        """
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.connection_manager = connection_manager or ConnectionManager()

    @property
    def token(self) -> str:
        return self._token

    @property
    def session(self) -> requests.Session:
        """HTTP session, created on first use and reused afterwards."""
        return self.connection_manager.get_session()

    def public_events_for_user(self, username: str) -> List[Event]:
        """List the public events of a user across all pages.

        Args:
            username: GitHub login

        Returns:
            Events in the order the API returned them
        """
        url = f"{self.base_url}/users/{username}/events/public"
        events = self.fetch_all_pages(url)

        return [Event(type=event["type"], repo_name=event["repo"]["name"]) for event in events]

    def public_repos_for_user(self, username: str, forks: bool = False) -> List[Repo]:
        """List the public repositories of a user with their languages.

        Each kept repository costs one extra request for its language
        breakdown. Forks are skipped entirely unless ``forks`` is set.

        Args:
            username: GitHub login
            forks: Whether to include forked repositories

        Returns:
            Repositories in listing order
        """
        url = f"{self.base_url}/users/{username}/repos"
        repos = self.fetch_all_pages(url)

        results = []
        for repo in repos:
            if not forks and repo.get("fork"):
                logger.debug(f"Skipping fork {repo.get('full_name')}")
                continue

            language_url = f"{self.base_url}/repos/{repo['full_name']}/languages"
            response = self.perform("GET", language_url, accepted_statuses=(200,))

            results.append(Repo(name=repo["name"], languages=response.json()))

        return results

    def create_private_gist(self, description: str, filename: str, contents: str) -> Gist:
        """Create a private gist holding a single file.

        Args:
            description: Gist description
            filename: Name of the file inside the gist
            contents: File contents

        Returns:
            The created gist
        """
        url = f"{self.base_url}/gists"
        payload = {
            "description": description,
            "public": False,
            "files": {
                filename: {
                    "content": contents,
                },
            },
        }

        response = self.perform("POST", url, body=payload, accepted_statuses=(200, 201))

        gist = Gist(url=response.json()["html_url"])
        logger.info(f"Created private gist {gist.url}")
        return gist

    def repo_starred(self, full_repo_name: str) -> bool:
        """Check whether the authenticated user has starred a repository.

        Args:
            full_repo_name: Repository as ``owner/name``

        Returns:
            True if starred, False otherwise
        """
        url = self._starred_url(full_repo_name)
        response = self.perform("GET", url, accepted_statuses=(204, 404))

        return response.status_code == 204

    def star_repo(self, full_repo_name: str) -> None:
        """Star a repository for the authenticated user."""
        self.perform("PUT", self._starred_url(full_repo_name), accepted_statuses=(204,))
        logger.info(f"Starred {full_repo_name}")

    def unstar_repo(self, full_repo_name: str) -> None:
        """Remove the authenticated user's star from a repository."""
        self.perform("DELETE", self._starred_url(full_repo_name), accepted_statuses=(204,))
        logger.info(f"Unstarred {full_repo_name}")

    def fetch_all_pages(self, url: str) -> List[Dict[str, Any]]:
        """Collect every element of a paginated JSON array listing.

        Pages are requested one after another, following the ``rel="next"``
        entry of each response's Link header until there is none.

        Args:
            url: URL of the first page

        Returns:
            Elements of all pages, in page order

        Raises:
            RequestFailure: If any page request fails
        """
        results = []
        page = 0

        while url:
            page += 1
            response = self.perform("GET", url, accepted_statuses=(200,))
            items = response.json()
            logger.debug(f"Fetched page {page} with {len(items)} items from {url}")

            results.extend(items)
            url = extract_next_page_url(response.headers.get("Link"))

        return results

    def perform(self, method: str, url: str, body: Optional[Dict[str, Any]] = None,
                accepted_statuses: Iterable[int] = DEFAULT_ACCEPTED_STATUSES) -> requests.Response:
        """Execute a single authenticated REST call.

        Args:
            method: One of GET, POST, PUT or DELETE
            url: Fully qualified request URL
            body: Optional JSON request body
            accepted_statuses: Status codes considered successful

        Returns:
            The raw response

        Raises:
            ValueError: If the method is not supported
            RequestFailure: If the response status is not accepted
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        accepted = set(accepted_statuses)

        # Set up headers with token authentication
        headers = {
            "Authorization": f"token {self._token}",
            "Accept": "application/vnd.github.v3+json",
        }

        response = self.session.request(method, url, headers=headers, json=body)
        logger.debug(f"{method} {url} -> {response.status_code}")

        if response.status_code not in accepted:
            failure = RequestFailure(method, url, response.status_code, response.text)
            logger.error(f"REST API error: {method} to {url} returned {response.status_code} "
                         f"(accepted: {sorted(accepted)})")
            raise failure

        return response

    def _starred_url(self, full_repo_name: str) -> str:
        return f"{self.base_url}/user/starred/{full_repo_name}"
