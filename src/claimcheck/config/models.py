"""Pydantic configuration models for ClaimCheck components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from claimcheck.analyzer.keyword import NEGATIVE_KEYWORDS, POSITIVE_KEYWORDS
from claimcheck.credibility import CREDIBILITY_TABLE, DEFAULT_CREDIBILITY

# ============================================================
# Retriever Configs
# ============================================================


class WebzRetrieverConfig(BaseModel):
    """Configuration for WebzRetriever."""

    type: Literal["webz"] = "webz"
    max_results: int = Field(default=10, ge=1)
    sort: str = "published"
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


class GNewsRetrieverConfig(BaseModel):
    """Configuration for GNewsRetriever."""

    type: Literal["gnews"] = "gnews"
    lang: str = "en"
    max_results: int = Field(default=10, ge=1, le=100)
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True}


class StaticRetrieverConfig(BaseModel):
    """Configuration for StaticRetriever backed by a JSON file of posts."""

    type: Literal["static"] = "static"
    path: str
    max_results: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


RetrieverConfig = Annotated[
    WebzRetrieverConfig | GNewsRetrieverConfig | StaticRetrieverConfig,
    Field(discriminator="type"),
]


# ============================================================
# Analyzer Configs
# ============================================================

# An empty keyword would match every article.
Keyword = Annotated[str, Field(min_length=1)]


class KeywordAnalyzerConfig(BaseModel):
    """Configuration for KeywordVerdictAnalyzer."""

    type: Literal["keyword"] = "keyword"
    positive_keywords: list[Keyword] = Field(default_factory=lambda: list(POSITIVE_KEYWORDS))
    negative_keywords: list[Keyword] = Field(default_factory=lambda: list(NEGATIVE_KEYWORDS))
    dominance_ratio: float = Field(default=1.5, ge=1.0)
    fallback_evidence: int = Field(default=3, ge=0)

    model_config = {"frozen": True}


# ============================================================
# Credibility & Assembly Configs
# ============================================================


class CredibilityEntry(BaseModel):
    """A single (domain substring, score) credibility rule."""

    pattern: str = Field(min_length=1)
    score: int = Field(ge=0, le=10)

    model_config = {"frozen": True}


def _default_table() -> list[CredibilityEntry]:
    return [CredibilityEntry(pattern=p, score=s) for p, s in CREDIBILITY_TABLE]


class CredibilityConfig(BaseModel):
    """Ordered credibility table; the first matching pattern wins."""

    default_score: int = Field(default=DEFAULT_CREDIBILITY, ge=0, le=10)
    table: list[CredibilityEntry] = Field(default_factory=_default_table)

    model_config = {"frozen": True}


class AssemblerConfig(BaseModel):
    """Configuration for ResultAssembler."""

    max_sources: int = Field(default=5, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for intermediate pipeline logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class ClaimCheckConfig(BaseModel):
    """Root configuration for ClaimCheck."""

    retriever: RetrieverConfig = Field(default_factory=WebzRetrieverConfig)
    analyzer: KeywordAnalyzerConfig = Field(default_factory=KeywordAnalyzerConfig)
    credibility: CredibilityConfig = Field(default_factory=CredibilityConfig)
    assembler: AssemblerConfig = Field(default_factory=AssemblerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
