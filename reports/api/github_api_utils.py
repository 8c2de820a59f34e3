"""
GitHub API utilities for GitHub Reports.

This module provides helper functions for processing REST API responses,
currently the ``Link`` header parsing used to follow paginated listings.
"""
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

NEXT_RELATION_PATTERN = re.compile(r'rel="next"')
LINK_URL_PATTERN = re.compile(r"<([^>]*)>")


def extract_next_page_url(link_header: Optional[str]) -> Optional[str]:
    """Extract the URL of the next page from a ``Link`` header value.

    The header is split on commas and the first segment carrying
    ``rel="next"`` is used. The URL is whatever sits between its angle
    brackets, e.g. ``<https://api.github.com/user/repos?page=2>; rel="next"``.

    Args:
        link_header: Raw ``Link`` header value, or None if the response had none

    Returns:
        The next page URL, or None when there is no next page
    """
    if not link_header:
        return None

    next_segment = None
    for segment in link_header.split(","):
        if NEXT_RELATION_PATTERN.search(segment):
            next_segment = segment
            break

    if next_segment is None:
        return None

    match = LINK_URL_PATTERN.search(next_segment)
    if not match or not match.group(1).strip():
        logger.debug(f"Ignoring next link without a URL: {next_segment.strip()}")
        return None

    return match.group(1).strip()
