"""Birthday-style estimate of the odds that a search finds a perfect hash.

One random hash trial is modelled as throwing ``n`` distinguishable balls into
``m = 2**bits`` bins uniformly and independently. The chance that no two balls
share a bin is the falling-factorial product ``prod(1 - i/m for i < n)``.
Real coefficient-driven hashes are not perfectly uniform, so treat the result
as a go/no-go signal rather than a guarantee.
"""

import dataclasses
import math

from loguru import logger

from perfect_hash.errors import InvalidConfigurationError
from perfect_hash.search.finder import MAX_TABLE_SIZE_BITS, valid_table_size_bits


@dataclasses.dataclass(slots=True)
class SuccessEstimate:
    table_size_bits: int
    input_count: int
    trial_probability: float
    search_space_size: int
    search_probability: float
    expected_attempts: float
    overfull: bool

    @property
    def table_size(self) -> int:
        return 1 << self.table_size_bits


def _validate(table_size_bits: int, input_count: int, search_space_size: int) -> None:
    if not valid_table_size_bits(table_size_bits):
        raise InvalidConfigurationError(
            f"table size bits must be in (0, {MAX_TABLE_SIZE_BITS}], got {table_size_bits}"
        )
    if input_count < 0:
        raise InvalidConfigurationError(f"input count must be non-negative, got {input_count}")
    if search_space_size <= 0:
        raise InvalidConfigurationError(
            f"search space size must be positive, got {search_space_size}"
        )


def estimate_success_probability(
    table_size_bits: int, input_count: int, search_space_size: int = 1
) -> float:
    """Probability that a single uniform trial places every input without collision.

    ``search_space_size`` is validated but does not enter the product; use
    :func:`estimate_search` to weigh the trial probability against the number
    of trials available.
    """

    _validate(table_size_bits, input_count, search_space_size)
    table_size = 1 << table_size_bits
    if input_count > table_size:
        logger.warning(
            "{} inputs cannot fit a table of {} slots; success probability is zero",
            input_count,
            table_size,
        )
        return 0.0

    probability = 1.0
    for i in range(input_count):
        probability *= 1.0 - i / table_size
    return probability


def estimate_search(
    table_size_bits: int, input_count: int, search_space_size: int
) -> SuccessEstimate:
    """Estimate the trial probability and the odds over ``search_space_size`` trials."""

    p = estimate_success_probability(table_size_bits, input_count, search_space_size)
    if p >= 1.0:
        search_probability = 1.0
    elif p <= 0.0:
        search_probability = 0.0
    else:
        # 1 - (1 - p)**n without losing precision for tiny p.
        search_probability = -math.expm1(search_space_size * math.log1p(-p))

    expected = math.inf if p == 0.0 else min(1.0 / p, float(search_space_size))
    return SuccessEstimate(
        table_size_bits=table_size_bits,
        input_count=input_count,
        trial_probability=p,
        search_space_size=search_space_size,
        search_probability=search_probability,
        expected_attempts=expected,
        overfull=input_count > (1 << table_size_bits),
    )
