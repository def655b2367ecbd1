"""ClaimCheck: keyword-and-credibility fact checking of claims against news coverage."""

from claimcheck.analyzer.base import VerdictAnalyzer
from claimcheck.analyzer.keyword import KeywordVerdictAnalyzer
from claimcheck.assembler import ResultAssembler
from claimcheck.confidence import compute_confidence
from claimcheck.config import ClaimCheckConfig, create_from_config, load_config
from claimcheck.credibility import (
    CREDIBILITY_TABLE,
    DEFAULT_CREDIBILITY,
    CredibilityResolver,
    resolve_credibility,
)
from claimcheck.data import (
    Article,
    ConfidenceLevel,
    EvidenceItem,
    FactCheckResult,
    Verdict,
    VerdictOutcome,
    confidence_level,
)
from claimcheck.exceptions import ClaimCheckError, RetrievalError
from claimcheck.pipeline.base import FactChecker
from claimcheck.pipeline.fact_check import FactCheckPipeline
from claimcheck.run_logger import RunLogger
from claimcheck.search.base import ArticleRetriever
from claimcheck.search.gnews import GNewsRetriever
from claimcheck.search.static import StaticRetriever
from claimcheck.search.webz import WebzRetriever
from claimcheck.url import extract_domain

__all__ = [
    # Models
    "Article",
    "ConfidenceLevel",
    "EvidenceItem",
    "FactCheckResult",
    "Verdict",
    "VerdictOutcome",
    # Credibility
    "CREDIBILITY_TABLE",
    "DEFAULT_CREDIBILITY",
    "CredibilityResolver",
    "resolve_credibility",
    # Functions
    "compute_confidence",
    "confidence_level",
    "extract_domain",
    # Protocols
    "ArticleRetriever",
    "FactChecker",
    "VerdictAnalyzer",
    # Analyzers
    "KeywordVerdictAnalyzer",
    # Assembly
    "ResultAssembler",
    # Retrievers
    "GNewsRetriever",
    "StaticRetriever",
    "WebzRetriever",
    # Pipelines
    "FactCheckPipeline",
    # Errors
    "ClaimCheckError",
    "RetrievalError",
    # Logging
    "RunLogger",
    # Config
    "ClaimCheckConfig",
    "create_from_config",
    "load_config",
]
