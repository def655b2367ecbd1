"""Data models for ClaimCheck."""

from claimcheck.data.models import (
    Article,
    ConfidenceLevel,
    EvidenceItem,
    FactCheckResult,
    Verdict,
    VerdictOutcome,
    confidence_level,
)

__all__ = [
    "Article",
    "ConfidenceLevel",
    "EvidenceItem",
    "FactCheckResult",
    "Verdict",
    "VerdictOutcome",
    "confidence_level",
]
