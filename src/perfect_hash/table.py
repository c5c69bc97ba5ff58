"""Static lookup tables backed by a found perfect hash."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from perfect_hash.errors import CollisionError, InvalidConfigurationError
from perfect_hash.hashing.families import SequentialHashFamily
from perfect_hash.search.finder import MAX_TABLE_SIZE_BITS, valid_table_size_bits


class PerfectHashTable:
    """Maps each key of a fixed set to its position with a single probe."""

    def __init__(
        self,
        family: SequentialHashFamily,
        table_size_bits: int,
        keys: Sequence[str],
        slots: List[Optional[int]],
    ) -> None:
        self.family = family
        self.table_size_bits = table_size_bits
        self.mask = (1 << table_size_bits) - 1
        self._keys = list(keys)
        self._slots = slots

    @classmethod
    def build(
        cls, family: SequentialHashFamily, table_size_bits: int, keys: Sequence[str]
    ) -> "PerfectHashTable":
        if not valid_table_size_bits(table_size_bits):
            raise InvalidConfigurationError(
                f"table size bits must be in (0, {MAX_TABLE_SIZE_BITS}], got {table_size_bits}"
            )
        mask = (1 << table_size_bits) - 1
        slots: List[Optional[int]] = [None] * (1 << table_size_bits)
        for position, key in enumerate(keys):
            slot = family.index(key, mask)
            existing = slots[slot]
            if existing is not None:
                raise CollisionError(keys[existing], key, slot)
            slots[slot] = position
        return cls(family, table_size_bits, keys, slots)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    @property
    def slots(self) -> List[Optional[int]]:
        return list(self._slots)

    @property
    def load_factor(self) -> float:
        return len(self._keys) / len(self._slots)

    def lookup(self, key: str) -> Optional[int]:
        """Return the position of ``key`` in the original key sequence, if present."""

        position = self._slots[self.family.index(key, self.mask)]
        if position is None or self._keys[position] != key:
            return None
        return position

    def verify(self, keys: Optional[Iterable[str]] = None) -> None:
        """Check every key still resolves to itself under the current coefficients."""

        seen = {}
        for key in self._keys if keys is None else keys:
            slot = self.family.index(key, self.mask)
            if slot in seen:
                raise CollisionError(seen[slot], key, slot)
            seen[slot] = key
            if self.lookup(key) is None:
                raise KeyError(key)
