from claimcheck.analyzer.base import VerdictAnalyzer
from claimcheck.analyzer.keyword import (
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
    KeywordVerdictAnalyzer,
)

__all__ = [
    "KeywordVerdictAnalyzer",
    "NEGATIVE_KEYWORDS",
    "POSITIVE_KEYWORDS",
    "VerdictAnalyzer",
]
