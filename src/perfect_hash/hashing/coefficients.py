"""Tunable coefficients that each contribute one term to a hash.

A coefficient reads one byte of the key, weights it by ``value`` and folds the
product into the running hash with its combining :class:`Operation`. During a
search the ``value`` is walked from ``start_value`` towards ``max_value``,
either one step at a time or by doubling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from perfect_hash.errors import InvalidConfigurationError, UnsupportedOperationError

# Hash arithmetic wraps like an unsigned 64-bit machine word.
WORD_MASK = (1 << 64) - 1


class Operation(str, Enum):
    """How a coefficient's term is combined into the running hash."""

    ADD = "add"
    XOR = "xor"
    MUL = "mul"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operation.ADD: "+",
    Operation.XOR: "^",
    Operation.MUL: "*",
}


@dataclass
class Coefficient:
    """A single searchable term: byte index, weight, range and operation."""

    index: int = 0  # Negative values index from the end of the key.
    value: int = 0
    start_value: int = 0
    max_value: int = 0  # Zero means "use the family default".
    power_of_two: bool = False
    operation: Optional[Operation] = None

    def __post_init__(self) -> None:
        if self.operation is not None and not isinstance(self.operation, Operation):
            self.operation = Operation(self.operation)

    @property
    def initial_value(self) -> int:
        return self.start_value if self.start_value else 1

    @property
    def exhausted(self) -> bool:
        return self.value >= self.max_value

    def reset(self) -> None:
        self.value = self.initial_value
        if self.operation is None:
            self.operation = Operation.ADD

    def configure(self, default_max: int) -> None:
        self.reset()
        if self.max_value <= 0:
            if default_max <= 0:
                raise InvalidConfigurationError(
                    "default max coefficient must be set and positive for unset ranges"
                )
            self.max_value = default_max

    def advance(self) -> None:
        if self.value <= 0:
            # Unconfigured coefficients would otherwise double 0 forever.
            self.value = self.initial_value
        elif self.power_of_two:
            self.value *= 2
        else:
            self.value += 1

    def apply(self, h: int, key: bytes) -> int:
        idx = self.index
        term = 0
        if -len(key) <= idx < len(key):
            term = key[idx] * self.value

        op = self.operation
        if op is Operation.ADD:
            h += term
        elif op is Operation.XOR:
            h ^= term
        elif op is Operation.MUL:
            h *= term
        else:
            raise UnsupportedOperationError(
                f"coefficient at index {idx} has unsupported operation {op!r}"
            )
        return h & WORD_MASK

    def range_size(self, inclusive: bool = False) -> int:
        """Number of distinct values visited between two resets.

        Byte coefficients roll over once ``value >= max_value``; the length
        coefficient is only exhausted past ``max_value``, so it is counted
        with ``inclusive=True``. A coefficient whose start already sits past
        its maximum is still visited once.
        """

        value = self.initial_value
        limit = self.max_value + 1 if inclusive else self.max_value
        if value >= limit:
            return 1
        if not self.power_of_two:
            return limit - value
        count = 0
        while value < limit:
            count += 1
            value *= 2
        return count
