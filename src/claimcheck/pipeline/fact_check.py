"""Retrieve-then-assemble fact-check pipeline."""

import logging
import time

from claimcheck.assembler import ResultAssembler
from claimcheck.data import FactCheckResult
from claimcheck.run_logger import RunLogger
from claimcheck.search.base import ArticleRetriever

logger = logging.getLogger(__name__)


class FactCheckPipeline:
    """Pipeline that fetches articles for a claim and assembles a verdict.

    Flow:
    1. The claim text is validated and stripped
    2. The retriever fetches candidate articles (all blocking I/O happens here)
    3. The assembler computes verdict, evidence, confidence and summary

    Retrieval errors propagate unchanged; no partial result is returned.

    Args:
        retriever: Article retriever.
        assembler: Result assembler.
        max_results: Max articles requested from the retriever.
        run_logger: Optional RunLogger for intermediate result logging.
    """

    def __init__(
        self,
        retriever: ArticleRetriever,
        assembler: ResultAssembler,
        *,
        max_results: int = 10,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._retriever = retriever
        self._assembler = assembler
        self._max_results = max_results
        self._run_logger = run_logger

    async def run(self, query: str) -> FactCheckResult:
        """Execute the fact-check pipeline.

        Args:
            query: The claim to check.

        Returns:
            The assembled fact-check result.

        Raises:
            ValueError: If the claim is blank.
            RetrievalError: If the article provider fails.
        """
        claim = query.strip()
        if not claim:
            raise ValueError("Claim text must not be empty")

        if self._run_logger:
            self._run_logger.start_run("fact_check", claim)

        try:
            t0 = time.monotonic()
            articles = await self._retriever.retrieve(claim, max_results=self._max_results)
            retrieval_duration = time.monotonic() - t0

            if self._run_logger:
                self._run_logger.log_stage(
                    stage="retrieval",
                    component=type(self._retriever).__name__,
                    input_data={"query": claim, "max_results": self._max_results},
                    output_data=articles,
                    duration_seconds=retrieval_duration,
                )

            t0 = time.monotonic()
            result = self._assembler.assemble(claim, articles)
            assembly_duration = time.monotonic() - t0
        except Exception:
            if self._run_logger:
                self._run_logger.finish_run(None)
            raise

        if self._run_logger:
            self._run_logger.log_stage(
                stage="assembly",
                component=type(self._assembler).__name__,
                input_data={"article_count": len(articles)},
                output_data=result,
                duration_seconds=assembly_duration,
            )
            self._run_logger.finish_run(result)

        logger.info(
            f"Verdict {result.verdict} with {result.confidence}% confidence "
            f"from {len(result.sources)} sources"
        )
        return result
