"""Article retrieval from the GNews API."""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from claimcheck.data import Article
from claimcheck.exceptions import RetrievalError
from claimcheck.url import extract_domain

GNEWS_API_URL = "https://gnews.io/api/v4/search"

logger = logging.getLogger(__name__)


class GNewsRetriever:
    """Retrieve news articles using the GNews API.

    GNews reports the outlet name and homepage separately, so the article's
    ``site`` is taken from the outlet homepage domain, falling back to the
    article URL's domain.

    Args:
        api_key: GNews API key (defaults to GNEWS_API_KEY env var).
        lang: Language code for results (default: "en").
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        lang: str = "en",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("GNEWS_API_KEY")
        if not self._api_key:
            raise ValueError("GNews API key required. Pass api_key or set GNEWS_API_KEY env var.")
        self._lang = lang
        self._timeout = timeout

    async def retrieve(
        self,
        query: str,
        *,
        max_results: int = 10,
    ) -> list[Article]:
        """Retrieve articles matching the claim text.

        Args:
            query: Free-text claim to search for.
            max_results: Maximum articles to return (max 100).

        Returns:
            Articles in the order returned by GNews.

        Raises:
            RetrievalError: If the request fails or returns a non-success status
                or a malformed payload.
        """
        params: dict[str, str | int] = {
            "q": query,
            "lang": self._lang,
            "max": min(max_results, 100),  # GNews max is 100
            "apikey": self._api_key,  # type: ignore[dict-item]
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.get(GNEWS_API_URL, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                msg = f"API request failed: {e.response.status_code}"
                raise RetrievalError(msg) from e
            except httpx.HTTPError as e:
                msg = f"API request failed: {e}"
                raise RetrievalError(msg) from e

        try:
            data = response.json()
        except ValueError as e:
            raise RetrievalError("API returned a non-JSON body") from e

        items = data.get("articles", []) if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise RetrievalError("Expected a list of articles in GNews response")

        articles = [_to_article(item) for item in items if isinstance(item, dict)]
        logger.info("GNews returned %d articles", len(articles))
        return articles


def _to_article(item: dict[str, Any]) -> Article:
    source = item.get("source") or {}
    url = item.get("url") or ""
    site_url = source.get("url") if isinstance(source, dict) else None
    return Article(
        title=item.get("title") or "",
        url=url,
        site=extract_domain(site_url or url),
        body=item.get("content") or item.get("description") or "",
        published_at=item.get("publishedAt"),
    )
