"""Hash families: concrete hash functions the search engine can walk."""

import copy
import math
from dataclasses import dataclass, field
from typing import List, Protocol, Union

from perfect_hash.errors import InvalidConfigurationError
from perfect_hash.hashing.coefficients import WORD_MASK, Coefficient

Key = Union[str, bytes]


class HashFamily(Protocol):
    """Anything the search engine can evaluate and step to its next candidate."""

    def evaluate(self, key: bytes) -> int:
        """Return the unmasked hash of ``key`` under the current coefficients."""

    def advance(self) -> bool:
        """Move to the next candidate; return ``True`` once the space is exhausted."""


def _as_bytes(key: Key) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return key


@dataclass
class SequentialHashFamily:
    """Length term followed by byte coefficients applied in insertion order.

    ``h = len(key) * length.value`` seeds the hash and each coefficient then
    folds its term into ``h``. The coefficients together with ``length`` form
    a mixed-radix counter: ``coefficients[0]`` is the least significant digit
    and ``length`` the most significant one. ``length`` is never reset, so
    running past its maximum ends the enumeration.
    """

    length: Coefficient = field(default_factory=Coefficient)
    coefficients: List[Coefficient] = field(default_factory=list)

    def configure(self, default_max: int) -> None:
        unset = [c for c in self._all() if c.max_value <= 0]
        if unset and default_max <= 0:
            # Fail before touching any coefficient.
            raise InvalidConfigurationError(
                f"{len(unset)} coefficient(s) have no max value and no positive default was given"
            )
        for coef in self._all():
            coef.configure(default_max)

    def evaluate(self, key: Key) -> int:
        data = _as_bytes(key)
        h = (len(data) * self.length.value) & WORD_MASK
        for coef in self.coefficients:
            h = coef.apply(h, data)
        return h

    def index(self, key: Key, mask: int) -> int:
        return self.evaluate(key) & mask

    def advance(self) -> bool:
        carry = True
        for coef in self.coefficients:
            if not carry:
                break
            coef.advance()
            carry = coef.exhausted
            if carry:
                coef.reset()
        if carry:
            self.length.advance()
        return self.length.value > self.length.max_value

    @property
    def search_space_size(self) -> int:
        return self.length.range_size(inclusive=True) * math.prod(
            c.range_size() for c in self.coefficients
        )

    def copy(self) -> "SequentialHashFamily":
        return copy.deepcopy(self)

    def assign(self, other: "SequentialHashFamily") -> None:
        """Take over the coefficient state of ``other`` in place."""

        self.length = copy.deepcopy(other.length)
        self.coefficients[:] = copy.deepcopy(other.coefficients)

    def render(self) -> str:
        lines = [f"h = len(s) * {self.length.value}"]
        for coef in self.coefficients:
            if coef.index < 0:
                position = f"len(s){coef.index}"
            else:
                position = str(coef.index)
            op = coef.operation.symbol if coef.operation is not None else "?"
            lines.append(f"h {op}= s[{position}] * {coef.value}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def _all(self) -> List[Coefficient]:
        return [*self.coefficients, self.length]
