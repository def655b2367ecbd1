"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def extract_domain(url: str | None) -> str:
    """Extract the site domain from an article URL.

    Args:
        url: The URL to extract the domain from.

    Returns:
        The lowercased domain without a 'www.' prefix, or "Unknown" if the
        URL has no host.
    """
    if not url:
        return "Unknown"
    try:
        domain = (urlparse(url).hostname or "").lower()
    except ValueError:
        logger.warning(f"Could not parse url {url}")
        return "Unknown"
    if not domain:
        logger.warning(f"Could not get domain from url {url}")
        return "Unknown"
    if domain.startswith("www."):
        domain = domain[4:]
    return domain
