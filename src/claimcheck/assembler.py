"""Assemble a fact-check result from retrieved articles."""

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from claimcheck.analyzer.base import VerdictAnalyzer
from claimcheck.analyzer.keyword import KeywordVerdictAnalyzer
from claimcheck.confidence import compute_confidence
from claimcheck.credibility import CredibilityResolver
from claimcheck.data import Article, EvidenceItem, FactCheckResult

logger = logging.getLogger(__name__)

INSUFFICIENT_SOURCES_SUMMARY = (
    "Insufficient reliable sources found to verify this claim. More research may be needed."
)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class ResultAssembler:
    """Run verdict analysis, credibility scoring and confidence aggregation in order.

    Flow:
    1. The analyzer picks a verdict and its supporting articles
    2. The first ``max_sources`` supporting articles become evidence items,
       each scored by the credibility resolver and flagged as supporting
    3. Confidence is aggregated over those evidence items
    4. A prose summary names the verdict and the evidence sources

    Args:
        analyzer: Verdict analyzer (defaults to keyword analysis).
        resolver: Credibility resolver (defaults to the built-in table).
        max_sources: Maximum evidence items kept in the result.
        clock: Returns the assembly timestamp.
    """

    def __init__(
        self,
        analyzer: VerdictAnalyzer | None = None,
        resolver: CredibilityResolver | None = None,
        *,
        max_sources: int = 5,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._analyzer = analyzer or KeywordVerdictAnalyzer()
        self._resolver = resolver or CredibilityResolver()
        self._max_sources = max_sources
        self._clock = clock

    def assemble(self, query: str, articles: Sequence[Article]) -> FactCheckResult:
        """Build the complete fact-check result for ``query``.

        Args:
            query: The claim being checked.
            articles: Articles retrieved for the claim.

        Returns:
            The fully populated result.

        Raises:
            TypeError: If ``articles`` is not a list or tuple of Article.
        """
        _validate_articles(articles)

        outcome = self._analyzer.analyze(articles, query)
        sources = tuple(
            EvidenceItem(
                source_name=article.site or "",
                source_url=article.url or "",
                credibility_score=self._resolver.resolve(article.site),
                supports_verdict=True,
            )
            for article in outcome.supporting_articles[: self._max_sources]
        )
        confidence = compute_confidence(sources)

        if sources:
            names = ", ".join(s.source_name for s in sources)
            summary = (
                f"Based on analysis of {len(outcome.supporting_articles)} relevant sources, "
                f"the claim appears to be {outcome.verdict.label}. "
                f"Key sources include {names}."
            )
        else:
            summary = INSUFFICIENT_SOURCES_SUMMARY

        logger.debug(
            "Assembled verdict %s from %d of %d articles",
            outcome.verdict,
            len(sources),
            len(articles),
        )

        return FactCheckResult(
            verdict=outcome.verdict,
            confidence=confidence,
            summary=summary,
            sources=sources,
            last_updated=self._clock(),
        )


def _validate_articles(articles: Sequence[Article]) -> None:
    """Reject anything but a list or tuple of Article."""
    if not isinstance(articles, (list, tuple)):
        msg = f"articles must be a list or tuple, got {type(articles).__name__}"
        raise TypeError(msg)
    for i, article in enumerate(articles):
        if not isinstance(article, Article):
            msg = f"articles[{i}] must be an Article, got {type(article).__name__}"
            raise TypeError(msg)
