"""
Connection management utilities for HTTP requests.

This module provides the HTTP session used by the API client. The session
is created on first use and reused for the lifetime of the manager.
"""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

# Configure connection pooling
DEFAULT_POOL_CONNECTIONS = 10
DEFAULT_POOL_MAXSIZE = 10


class ConnectionManager:
    """Manages a single pooled HTTP session.

    Requests are single-attempt: the adapter is configured so that urllib3
    never retries a failed connection or a failing status on its own.
    """

    def __init__(self, pool_connections: int = DEFAULT_POOL_CONNECTIONS,
                 pool_maxsize: Optional[int] = None):
        """Initialize the connection manager.

        Args:
            pool_connections: Number of connection pools to cache
            pool_maxsize: Maximum connections per pool (defaults to pool_connections)
        """
        self.pool_connections = pool_connections
        self.pool_maxsize = pool_maxsize or pool_connections
        self.session = None

    def get_session(self) -> requests.Session:
        """Get the shared session, creating it on first use.

        Returns:
            Requests session configured for connection reuse
        """
        if self.session is None:
            self.session = self._create_session()
            logger.debug(f"Created new connection pool (pool_connections={self.pool_connections}, "
                         f"pool_maxsize={self.pool_maxsize})")
        return self.session

    def _create_session(self) -> requests.Session:
        """Create a requests session with connection pooling and no retries.

        Returns:
            Configured requests session
        """
        session = requests.Session()

        adapter = HTTPAdapter(
            pool_connections=self.pool_connections,
            pool_maxsize=self.pool_maxsize,
            max_retries=Retry(total=0, read=False)
        )

        # Mount adapters for both http and https
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session
