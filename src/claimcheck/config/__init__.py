"""Configuration module for ClaimCheck."""

from claimcheck.config.factory import create_from_config
from claimcheck.config.loader import get_default_config_path, load_config
from claimcheck.config.models import (
    AssemblerConfig,
    ClaimCheckConfig,
    CredibilityConfig,
    CredibilityEntry,
    GNewsRetrieverConfig,
    KeywordAnalyzerConfig,
    LoggingConfig,
    RetrieverConfig,
    StaticRetrieverConfig,
    WebzRetrieverConfig,
)

__all__ = [
    "AssemblerConfig",
    "ClaimCheckConfig",
    "CredibilityConfig",
    "CredibilityEntry",
    "GNewsRetrieverConfig",
    "KeywordAnalyzerConfig",
    "LoggingConfig",
    "RetrieverConfig",
    "StaticRetrieverConfig",
    "WebzRetrieverConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
