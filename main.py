#!/usr/bin/env python
"""CLI for the ClaimCheck fact-checking pipeline."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from claimcheck.config import create_from_config, get_default_config_path, load_config
from claimcheck.data import FactCheckResult
from claimcheck.exceptions import ClaimCheckError
from claimcheck.search.static import StaticRetriever

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str
    config: Path
    articles: Path | None = None
    json_output: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("query")
    @classmethod
    def query_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please enter a claim to fact-check")
        return v.strip()

    @field_validator("config", "articles")
    @classmethod
    def path_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"File not found: {v}")
        return v


def print_result(result: FactCheckResult) -> None:
    """Write a human-readable rendering of the result to stdout."""
    print(f"\nVerdict: {result.verdict.label.upper()}")
    print(f"Confidence: {result.confidence}% ({result.confidence_level})")
    print(f"\n{result.summary}\n")
    if result.sources:
        print("Sources:")
        for i, source in enumerate(result.sources, 1):
            print(f"{i}. {source.source_name} (credibility {source.credibility_score}/10)")
            if source.source_url:
                print(f"   {source.source_url}")
    print(f"\nLast updated: {result.last_updated.isoformat()}")


async def run(args: CLIArgs) -> FactCheckResult:
    """Execute the pipeline with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    retriever = StaticRetriever.from_file(args.articles) if args.articles else None
    pipeline, run_logger = create_from_config(
        config,
        retriever=retriever,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Checking claim: {args.query}")
    logger.info(f"Config: {args.config}")

    result = await pipeline.run(args.query)

    if args.json_output:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_result(result)

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")
    return result


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Fact-check a claim against recent news coverage.")
    parser.add_argument(
        "query",
        help="Claim to fact-check",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--articles",
        "-a",
        type=Path,
        default=None,
        help="JSON file of pre-fetched posts to analyze instead of querying a provider",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as a JSON record",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Enable intermediate pipeline logging to JSON file",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            config=config_path,
            articles=ns.articles,
            json_output=ns.json,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (ClaimCheckError, ValueError) as e:
        logger.error(f"Failed to fact-check claim: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
