"""Keyword-signal verdict analysis."""

import logging
from collections.abc import Sequence

from claimcheck.data import Article, Verdict, VerdictOutcome

logger = logging.getLogger(__name__)

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "confirmed",
    "verified",
    "true",
    "accurate",
    "correct",
    "proven",
)
NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "false",
    "debunked",
    "fake",
    "misinformation",
    "hoax",
    "incorrect",
    "untrue",
)


class KeywordVerdictAnalyzer:
    """Classify a claim by counting affirming and refuting keywords in articles.

    Each article's title and body are lowercased and searched for every
    keyword as a plain substring. Keyword hits (not articles) are tallied
    globally; an article with a non-zero net score becomes evidence. The
    verdict leans TRUE or FALSE only when one tally exceeds the other by
    ``dominance_ratio``.

    The claim text is not used for scoring: only the articles' own wording
    counts, regardless of how relevant they are to the claim.

    Args:
        positive_keywords: Substrings that affirm a claim.
        negative_keywords: Substrings that refute a claim.
        dominance_ratio: Factor by which one tally must exceed the other.
        fallback_evidence: Articles returned as evidence when none matched.
    """

    def __init__(
        self,
        *,
        positive_keywords: Sequence[str] = POSITIVE_KEYWORDS,
        negative_keywords: Sequence[str] = NEGATIVE_KEYWORDS,
        dominance_ratio: float = 1.5,
        fallback_evidence: int = 3,
    ) -> None:
        self._positive = tuple(k.lower() for k in positive_keywords)
        self._negative = tuple(k.lower() for k in negative_keywords)
        self._ratio = dominance_ratio
        self._fallback = fallback_evidence

    def analyze(self, articles: Sequence[Article], query: str) -> VerdictOutcome:
        """Decide a verdict from keyword tallies across ``articles``.

        Args:
            articles: Retrieved articles, in provider order.
            query: The claim being checked (unused in scoring).

        Returns:
            The verdict and supporting articles. With no keyword hits at all
            the first ``fallback_evidence`` articles are returned instead.
        """
        if not articles:
            return VerdictOutcome(verdict=Verdict.INSUFFICIENT_DATA)

        positive_total = 0
        negative_total = 0
        supporting: list[Article] = []

        for article in articles:
            text = f"{article.title or ''} {article.body or ''}".lower()
            positive_hits = sum(1 for keyword in self._positive if keyword in text)
            negative_hits = sum(1 for keyword in self._negative if keyword in text)
            positive_total += positive_hits
            negative_total += negative_hits
            if positive_hits - negative_hits != 0:
                supporting.append(article)

        logger.debug(
            "Keyword tallies for %d articles: positive=%d negative=%d",
            len(articles),
            positive_total,
            negative_total,
        )

        if positive_total > negative_total * self._ratio:
            verdict = Verdict.TRUE
        elif negative_total > positive_total * self._ratio:
            verdict = Verdict.FALSE
        elif positive_total > 0 or negative_total > 0:
            verdict = Verdict.PARTIALLY_TRUE
        else:
            return VerdictOutcome(
                verdict=Verdict.INSUFFICIENT_DATA,
                supporting_articles=tuple(articles[: self._fallback]),
            )

        return VerdictOutcome(verdict=verdict, supporting_articles=tuple(supporting))
