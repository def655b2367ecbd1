from typing import Protocol

from claimcheck.data import Article


class ArticleRetriever(Protocol):
    """Interface for fetching candidate news articles for a claim."""

    async def retrieve(
        self,
        query: str,
        *,
        max_results: int = 10,
    ) -> list[Article]:
        """Retrieve articles matching the claim text.

        Args:
            query: Free-text claim to search for.
            max_results: Maximum articles to return.

        Returns:
            Articles in provider order.

        Raises:
            RetrievalError: If the provider is unavailable or responds with an error.
        """
        ...
