"""Retriever serving a fixed set of articles."""

import json
import logging
from pathlib import Path

from claimcheck.data import Article
from claimcheck.search.parsing import articles_from_payload

logger = logging.getLogger(__name__)


class StaticRetriever:
    """Return the same pre-fetched articles for every claim.

    Useful for offline runs and for replaying a saved provider response.

    Args:
        articles: Articles to serve.
    """

    def __init__(self, articles: list[Article]) -> None:
        self._articles = list(articles)

    @classmethod
    def from_file(cls, path: Path | str) -> "StaticRetriever":
        """Load articles from a JSON file of webz.io-style posts.

        The file may hold a bare list of posts or an object with a ``posts`` key.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            RetrievalError: If the posts container is not a list.
        """
        path = Path(path)
        with path.open() as f:
            payload = json.load(f)
        articles = articles_from_payload(payload, key="posts")
        logger.info(f"Loaded {len(articles)} articles from {path}")
        return cls(articles)

    async def retrieve(
        self,
        query: str,
        *,
        max_results: int = 10,
    ) -> list[Article]:
        return self._articles[:max_results]
