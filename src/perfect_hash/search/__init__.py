"""Coefficient search: the exhaustive finder, randomized restarts and odds."""

from perfect_hash.search.finder import HashFinder, SearchOutcome, SearchResult
from perfect_hash.search.probability import (
    SuccessEstimate,
    estimate_search,
    estimate_success_probability,
)
from perfect_hash.search.randomized import (
    ParallelRandomizedSearch,
    RandomizedSearch,
    RandomSearchConfig,
    RandomSearchResult,
    randomize_coefficient,
)

__all__ = [
    "HashFinder",
    "SearchOutcome",
    "SearchResult",
    "SuccessEstimate",
    "estimate_search",
    "estimate_success_probability",
    "ParallelRandomizedSearch",
    "RandomizedSearch",
    "RandomSearchConfig",
    "RandomSearchResult",
    "randomize_coefficient",
]
