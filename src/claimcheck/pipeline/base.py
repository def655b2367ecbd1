"""Pipeline protocol for end-to-end fact checking."""

from typing import Protocol

from claimcheck.data import FactCheckResult


class FactChecker(Protocol):
    """Interface for end-to-end fact-check pipelines."""

    async def run(self, query: str) -> FactCheckResult:
        """Retrieve evidence for a claim and produce its verdict.

        Args:
            query: The claim to check.

        Returns:
            The assembled fact-check result.
        """
        ...
