"""Core data models for ClaimCheck."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class Verdict(StrEnum):
    """Truthfulness classification assigned to a claim."""

    TRUE = "TRUE"
    FALSE = "FALSE"
    PARTIALLY_TRUE = "PARTIALLY_TRUE"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"

    @property
    def label(self) -> str:
        """Human-readable form, e.g. ``"partially true"``."""
        return self.value.lower().replace("_", " ")


class ConfidenceLevel(StrEnum):
    """Qualitative band for a 0-100 confidence percentage."""

    VERY_HIGH = "Very High"
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"
    VERY_LOW = "Very Low"


def confidence_level(confidence: int) -> ConfidenceLevel:
    """Map a confidence percentage to its qualitative band."""
    if confidence >= 90:
        return ConfidenceLevel.VERY_HIGH
    if confidence >= 80:
        return ConfidenceLevel.HIGH
    if confidence >= 60:
        return ConfidenceLevel.MODERATE
    if confidence >= 40:
        return ConfidenceLevel.LOW
    return ConfidenceLevel.VERY_LOW


@dataclass(frozen=True)
class Article:
    """A news article retrieved for a claim."""

    title: str = ""
    url: str = ""
    site: str = ""
    body: str = ""
    published_at: str | None = None


@dataclass(frozen=True)
class EvidenceItem:
    """An article selected as evidence, annotated with its source credibility."""

    source_name: str
    source_url: str
    credibility_score: int
    supports_verdict: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.source_name,
            "url": self.source_url,
            "credibilityScore": self.credibility_score,
            "supportsVerdict": self.supports_verdict,
        }


@dataclass(frozen=True)
class VerdictOutcome:
    """Verdict plus the articles that carried signal for it."""

    verdict: Verdict
    supporting_articles: tuple[Article, ...] = ()


@dataclass(frozen=True)
class FactCheckResult:
    """Final fact-check output for a single claim.

    ``confidence`` is always derived from ``sources``; an empty ``sources``
    tuple means a confidence of 0.
    """

    verdict: Verdict
    confidence: int
    summary: str
    sources: tuple[EvidenceItem, ...]
    last_updated: datetime

    @property
    def confidence_level(self) -> ConfidenceLevel:
        return confidence_level(self.confidence)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the flat JSON-compatible response record."""
        return {
            "verdict": self.verdict.value,
            "confidence": self.confidence,
            "summary": self.summary,
            "sources": [s.to_dict() for s in self.sources],
            "lastUpdated": self.last_updated.isoformat(),
        }
