"""Exception taxonomy shared by the hashing and search layers."""

from typing import Optional


class PerfectHashError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfigurationError(PerfectHashError, ValueError):
    """A table size, input set or coefficient range cannot be used."""


class UnsupportedOperationError(PerfectHashError, RuntimeError):
    """A coefficient reached evaluation without a known combining operation."""


class SearchSpaceExhaustedError(PerfectHashError):
    """Every reachable coefficient combination produced a collision."""

    def __init__(self, attempts: int, message: Optional[str] = None) -> None:
        self.attempts = attempts
        super().__init__(message or f"no coefficients found after {attempts} attempts")


class CollisionError(PerfectHashError):
    """Two keys were placed in the same table slot."""

    def __init__(self, existing: str, key: str, slot: int) -> None:
        self.existing = existing
        self.key = key
        self.slot = slot
        super().__init__(f"collision: {existing!r} and {key!r} both hash to slot {slot}")
