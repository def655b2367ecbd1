"""Protocol for verdict analysis."""

from collections.abc import Sequence
from typing import Protocol

from claimcheck.data import Article, VerdictOutcome


class VerdictAnalyzer(Protocol):
    """Interface for classifying a claim from its retrieved articles."""

    def analyze(self, articles: Sequence[Article], query: str) -> VerdictOutcome:
        """Decide a verdict and pick the articles that count as evidence.

        Args:
            articles: Retrieved articles, in provider order.
            query: The claim being checked.

        Returns:
            The verdict and its supporting articles, in input order.
        """
        ...
