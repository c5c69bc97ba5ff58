"""Exhaustive coefficient search for collision-free hash configurations.

``HashFinder.search`` evaluates a hash family over every input, checks the
masked results against a scratch table, and steps the family's odometer on the
first collision. The family's coefficients are mutated in place: when the
search succeeds their current values are the perfect hash that was found.
"""

import dataclasses
import time
from enum import Enum
from typing import List, Optional, Sequence, Union

from loguru import logger

from perfect_hash.errors import InvalidConfigurationError, SearchSpaceExhaustedError
from perfect_hash.hashing.families import HashFamily

MAX_TABLE_SIZE_BITS = 32


class SearchOutcome(str, Enum):
    """Terminal states of a single ``HashFinder.search`` call."""

    FOUND = "found"
    INVALID_TABLE_SIZE = "invalid_table_size"
    EMPTY_INPUT = "empty_input"
    SPACE_EXHAUSTED = "space_exhausted"


@dataclasses.dataclass(slots=True)
class SearchResult:
    attempts: int
    outcome: SearchOutcome
    table_size_bits: int
    elapsed_s: float = 0.0
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    @property
    def table_size(self) -> int:
        return 1 << self.table_size_bits

    def raise_for_outcome(self) -> None:
        """Raise the exception matching a failed outcome; no-op on success."""

        if self.outcome is SearchOutcome.FOUND:
            return
        if self.outcome is SearchOutcome.SPACE_EXHAUSTED:
            raise SearchSpaceExhaustedError(self.attempts, self.error)
        raise InvalidConfigurationError(self.error or self.outcome.value)


def valid_table_size_bits(bits: int) -> bool:
    return 0 < bits <= MAX_TABLE_SIZE_BITS


class HashFinder:
    """Searches a hash family's coefficient space for a perfect hash.

    The scratch table is reused across calls and only ever grows. An instance
    must not be shared by concurrent ``search`` calls; give each worker its
    own finder.
    """

    def __init__(self) -> None:
        self._table = bytearray()
        self._blank = b""

    @property
    def capacity(self) -> int:
        return len(self._table)

    def search(
        self,
        family: HashFamily,
        table_size_bits: int,
        inputs: Sequence[Union[str, bytes]],
    ) -> SearchResult:
        if not valid_table_size_bits(table_size_bits):
            return SearchResult(
                attempts=0,
                outcome=SearchOutcome.INVALID_TABLE_SIZE,
                table_size_bits=table_size_bits,
                error=(
                    f"table size bits must be in (0, {MAX_TABLE_SIZE_BITS}], "
                    f"got {table_size_bits}"
                ),
            )
        if not inputs:
            return SearchResult(
                attempts=0,
                outcome=SearchOutcome.EMPTY_INPUT,
                table_size_bits=table_size_bits,
                error="zero inputs",
            )

        size = 1 << table_size_bits
        mask = size - 1
        keys = _encode(inputs)
        table = self._reserve(size)
        blank = self._blank[:size]
        evaluate = family.evaluate

        logger.debug(
            "Searching perfect hash for {} inputs, table size {}", len(keys), size
        )
        start = time.perf_counter()
        attempts = 0
        while True:
            attempts += 1
            table[:size] = blank
            placed = True
            for key in keys:
                slot = evaluate(key) & mask
                if table[slot]:
                    placed = False
                    break
                table[slot] = 1
            if placed:
                elapsed = time.perf_counter() - start
                logger.debug("Perfect hash found after {} attempts ({:.3f}s)", attempts, elapsed)
                return SearchResult(
                    attempts=attempts,
                    outcome=SearchOutcome.FOUND,
                    table_size_bits=table_size_bits,
                    elapsed_s=elapsed,
                )
            if family.advance():
                break

        elapsed = time.perf_counter() - start
        logger.debug("Search space exhausted after {} attempts ({:.3f}s)", attempts, elapsed)
        return SearchResult(
            attempts=attempts,
            outcome=SearchOutcome.SPACE_EXHAUSTED,
            table_size_bits=table_size_bits,
            elapsed_s=elapsed,
            error=f"no coefficients found after {attempts} attempts",
        )

    def _reserve(self, size: int) -> bytearray:
        if len(self._table) < size:
            self._table.extend(bytes(size - len(self._table)))
            self._blank = bytes(size)
        return self._table


def _encode(inputs: Sequence[Union[str, bytes]]) -> List[bytes]:
    return [key.encode("utf-8") if isinstance(key, str) else bytes(key) for key in inputs]
