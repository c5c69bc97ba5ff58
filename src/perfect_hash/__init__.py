"""Find perfect hash functions for fixed string sets by coefficient search."""

from perfect_hash.config import CoefficientConfig, SearchConfig, SearchConfigLoader, load_words
from perfect_hash.errors import (
    CollisionError,
    InvalidConfigurationError,
    PerfectHashError,
    SearchSpaceExhaustedError,
    UnsupportedOperationError,
)
from perfect_hash.hashing import Coefficient, HashFamily, Operation, SequentialHashFamily
from perfect_hash.reporting import SearchReporter
from perfect_hash.search import (
    HashFinder,
    ParallelRandomizedSearch,
    RandomizedSearch,
    RandomSearchConfig,
    RandomSearchResult,
    SearchOutcome,
    SearchResult,
    SuccessEstimate,
    estimate_search,
    estimate_success_probability,
    randomize_coefficient,
)
from perfect_hash.table import PerfectHashTable

__all__ = [
    "CoefficientConfig",
    "SearchConfig",
    "SearchConfigLoader",
    "load_words",
    "CollisionError",
    "InvalidConfigurationError",
    "PerfectHashError",
    "SearchSpaceExhaustedError",
    "UnsupportedOperationError",
    "Coefficient",
    "HashFamily",
    "Operation",
    "SequentialHashFamily",
    "SearchReporter",
    "HashFinder",
    "ParallelRandomizedSearch",
    "RandomizedSearch",
    "RandomSearchConfig",
    "RandomSearchResult",
    "SearchOutcome",
    "SearchResult",
    "SuccessEstimate",
    "estimate_search",
    "estimate_success_probability",
    "randomize_coefficient",
    "PerfectHashTable",
]
