"""Pipeline module for end-to-end fact checking."""

from claimcheck.pipeline.base import FactChecker
from claimcheck.pipeline.fact_check import FactCheckPipeline

__all__ = [
    "FactCheckPipeline",
    "FactChecker",
]
