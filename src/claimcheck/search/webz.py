"""Article retrieval from the webz.io News API Lite."""

import logging
import os

import httpx

from claimcheck.data import Article
from claimcheck.exceptions import RetrievalError
from claimcheck.search.parsing import articles_from_payload

WEBZ_API_URL = "https://api.webz.io/newsApiLite"

logger = logging.getLogger(__name__)


class WebzRetriever:
    """Retrieve news articles using the webz.io News API Lite.

    Args:
        api_key: webz.io API token (defaults to WEBZ_API_KEY env var).
        sort: Result ordering requested from the API (default "published").
        timeout: HTTP timeout in seconds.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        sort: str = "published",
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.environ.get("WEBZ_API_KEY")
        if not self._api_key:
            raise ValueError("Webz.io API key required. Pass api_key or set WEBZ_API_KEY env var.")
        self._sort = sort
        self._timeout = timeout

    async def retrieve(
        self,
        query: str,
        *,
        max_results: int = 10,
    ) -> list[Article]:
        """Retrieve the most recent articles matching the claim text.

        Args:
            query: Free-text claim to search for.
            max_results: Maximum articles to request.

        Returns:
            Articles in the order returned by webz.io.

        Raises:
            RetrievalError: If the request fails or returns a non-success status
                or a malformed payload.
        """
        params: dict[str, str | int] = {
            "token": self._api_key,  # type: ignore[dict-item]
            "q": query,
            "size": max_results,
            "sort": self._sort,
        }

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                response = await client.get(WEBZ_API_URL, params=params)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                msg = f"API request failed: {e.response.status_code}"
                raise RetrievalError(msg) from e
            except httpx.HTTPError as e:
                msg = f"API request failed: {e}"
                raise RetrievalError(msg) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise RetrievalError("API returned a non-JSON body") from e

        articles = articles_from_payload(payload, key="posts")
        logger.info("webz.io returned %d articles", len(articles))
        return articles[:max_results]
