"""Reporting helpers for search runs."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from perfect_hash.hashing.families import SequentialHashFamily
from perfect_hash.search.finder import SearchResult
from perfect_hash.search.probability import SuccessEstimate
from perfect_hash.search.randomized import RandomSearchResult


class SearchReporter:
    """Formats search results for terminal output."""

    def report(
        self,
        label: str,
        input_count: int,
        result: SearchResult | RandomSearchResult,
        family: SequentialHashFamily,
        estimate: Optional[SuccessEstimate] = None,
    ) -> None:
        logger.info("\n{}", "=" * 60)
        logger.info("PERFECT HASH SEARCH: {}", label)
        logger.info("{}", "=" * 60)
        logger.info("Inputs: {}", input_count)
        if result.table_size_bits is not None:
            logger.info("Table size: {}", 1 << result.table_size_bits)
        logger.info("Attempts: {}", result.attempts)
        if isinstance(result, SearchResult):
            logger.info("Outcome: {} ({:.3f}s)", result.outcome.value, result.elapsed_s)
        else:
            logger.info("Restarts: {}", result.restarts)
        if estimate is not None:
            logger.info(
                "Estimate: trial={:.4%}, over {} trials={:.2%}",
                estimate.trial_probability,
                estimate.search_space_size,
                estimate.search_probability,
            )
        if result.success:
            logger.info("\nFormula:\n{}", family.render())
        else:
            logger.info("No perfect hash: {}", result.error)
