"""Factory functions to create components from configuration."""

from pathlib import Path

from claimcheck.analyzer.keyword import KeywordVerdictAnalyzer
from claimcheck.assembler import ResultAssembler
from claimcheck.config.models import (
    ClaimCheckConfig,
    CredibilityConfig,
    GNewsRetrieverConfig,
    KeywordAnalyzerConfig,
    RetrieverConfig,
    StaticRetrieverConfig,
    WebzRetrieverConfig,
)
from claimcheck.credibility import CredibilityResolver
from claimcheck.pipeline.fact_check import FactCheckPipeline
from claimcheck.run_logger import RunLogger
from claimcheck.search.base import ArticleRetriever
from claimcheck.search.gnews import GNewsRetriever
from claimcheck.search.static import StaticRetriever
from claimcheck.search.webz import WebzRetriever


def create_retriever(config: RetrieverConfig) -> ArticleRetriever:
    """Create an article retriever from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, WebzRetrieverConfig):
        return WebzRetriever(sort=config.sort, timeout=config.timeout)
    if isinstance(config, GNewsRetrieverConfig):
        return GNewsRetriever(lang=config.lang, timeout=config.timeout)
    if isinstance(config, StaticRetrieverConfig):
        return StaticRetriever.from_file(config.path)
    msg = f"Unknown retriever config type: {type(config)}"
    raise ValueError(msg)


def create_analyzer(config: KeywordAnalyzerConfig) -> KeywordVerdictAnalyzer:
    """Create a verdict analyzer from config."""
    if isinstance(config, KeywordAnalyzerConfig):
        return KeywordVerdictAnalyzer(
            positive_keywords=config.positive_keywords,
            negative_keywords=config.negative_keywords,
            dominance_ratio=config.dominance_ratio,
            fallback_evidence=config.fallback_evidence,
        )
    msg = f"Unknown analyzer config type: {type(config)}"
    raise ValueError(msg)


def create_resolver(config: CredibilityConfig) -> CredibilityResolver:
    """Create a credibility resolver, preserving the table's declared order."""
    return CredibilityResolver(
        [(entry.pattern, entry.score) for entry in config.table],
        default_score=config.default_score,
    )


def create_assembler(config: ClaimCheckConfig) -> ResultAssembler:
    """Create a result assembler from root config."""
    return ResultAssembler(
        analyzer=create_analyzer(config.analyzer),
        resolver=create_resolver(config.credibility),
        max_sources=config.assembler.max_sources,
    )


def create_pipeline(
    config: ClaimCheckConfig,
    *,
    retriever: ArticleRetriever | None = None,
    run_logger: RunLogger | None = None,
) -> FactCheckPipeline:
    """Create a fact-check pipeline from root config.

    Args:
        config: Root configuration.
        retriever: Use this retriever instead of the configured one.
        run_logger: Optional RunLogger for intermediate result logging.
    """
    return FactCheckPipeline(
        retriever=retriever or create_retriever(config.retriever),
        assembler=create_assembler(config),
        max_results=config.retriever.max_results,
        run_logger=run_logger,
    )


def create_from_config(
    config: ClaimCheckConfig,
    *,
    retriever: ArticleRetriever | None = None,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[FactCheckPipeline, RunLogger | None]:
    """Create a complete pipeline from root config.

    Args:
        config: Root configuration.
        retriever: Use this retriever instead of the configured one.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (pipeline, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    pipeline = create_pipeline(config, retriever=retriever, run_logger=run_logger)
    return (pipeline, run_logger)
