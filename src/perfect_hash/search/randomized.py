"""Randomized restarts around the exhaustive finder.

Large coefficient spaces are too big to walk end to end. Instead each restart
picks a small random neighbourhood and a random operation for every byte
coefficient and lets :class:`HashFinder` exhaust just that neighbourhood.
Restarts are independent, so they can also be fanned out to worker processes.
"""

from __future__ import annotations

import concurrent.futures
import dataclasses
import math
import random
from typing import Callable, List, Optional, Sequence, Tuple, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from perfect_hash.hashing.coefficients import Coefficient, Operation
from perfect_hash.hashing.families import SequentialHashFamily
from perfect_hash.search.finder import (
    MAX_TABLE_SIZE_BITS,
    HashFinder,
    SearchOutcome,
    valid_table_size_bits,
)

_OPERATIONS = tuple(Operation)


class RandomSearchConfig(BaseModel):
    """Knobs for randomized restarts."""

    model_config = ConfigDict(validate_assignment=True)

    retries: int = Field(default=1000, gt=0)
    neighborhood: int = Field(default=10, gt=0)
    max_coefficient: int = Field(default=64, gt=0)
    table_size_bits: Sequence[int] = Field(default_factory=lambda: (10, 11))
    seed: int = Field(default=1)

    @field_validator("table_size_bits")
    @classmethod
    def _check_table_size_bits(cls, value: Sequence[int]) -> Sequence[int]:
        if not value:
            raise ValueError("table_size_bits needs at least one entry")
        for bits in value:
            if not valid_table_size_bits(bits):
                raise ValueError(f"table size bits must be in (0, {MAX_TABLE_SIZE_BITS}]")
        return tuple(value)


@dataclasses.dataclass(slots=True)
class RandomSearchResult:
    attempts: int
    restarts: int
    success: bool
    table_size_bits: Optional[int] = None
    aborted: bool = False
    error: Optional[str] = None


def randomize_coefficient(
    coef: Coefficient, rng: random.Random, neighborhood: int, max_coefficient: int
) -> None:
    """Point ``coef`` at a random window of ``neighborhood`` values.

    The byte index is kept; choosing good indexes is up to the caller.
    """

    start = rng.randrange(max_coefficient)
    coef.start_value = start
    coef.max_value = min(start + neighborhood, max_coefficient)
    coef.power_of_two = False
    coef.operation = rng.choice(_OPERATIONS)
    coef.reset()


class RandomizedSearch:
    """Repeat exhaustive searches over random coefficient neighbourhoods."""

    def __init__(
        self, config: Optional[RandomSearchConfig] = None, finder: Optional[HashFinder] = None
    ) -> None:
        self.config = config or RandomSearchConfig()
        self._finder = finder or HashFinder()

    def __call__(
        self, family: SequentialHashFamily, inputs: Sequence[Union[str, bytes]]
    ) -> RandomSearchResult:
        cfg = self.config
        attempts = 0
        restarts = 0
        for bits in cfg.table_size_bits:
            logger.info(
                "Randomized search over {} inputs, table size {}, {} restarts",
                len(inputs),
                1 << bits,
                cfg.retries,
            )
            rng = random.Random(cfg.seed)
            for _ in range(cfg.retries):
                for coef in family.coefficients:
                    randomize_coefficient(coef, rng, cfg.neighborhood, cfg.max_coefficient)
                family.length.reset()
                restarts += 1

                result = self._finder.search(family, bits, inputs)
                attempts += result.attempts
                if result.success:
                    logger.info(
                        "Perfect hash found after {} attempts ({} restarts)", attempts, restarts
                    )
                    return RandomSearchResult(
                        attempts=attempts,
                        restarts=restarts,
                        success=True,
                        table_size_bits=bits,
                    )
                if result.outcome is not SearchOutcome.SPACE_EXHAUSTED:
                    logger.error("Randomized search aborted: {}", result.error)
                    return RandomSearchResult(
                        attempts=attempts,
                        restarts=restarts,
                        success=False,
                        table_size_bits=bits,
                        aborted=True,
                        error=result.error,
                    )

        message = f"no perfect hash found after {attempts} attempts"
        logger.warning("Randomized search gave up: {}", message)
        return RandomSearchResult(
            attempts=attempts, restarts=restarts, success=False, error=message
        )


ExecutorFactory = Callable[[int], concurrent.futures.Executor]


def _run_chunk(
    family: SequentialHashFamily,
    inputs: Sequence[Union[str, bytes]],
    config: RandomSearchConfig,
) -> Tuple[RandomSearchResult, SequentialHashFamily]:
    result = RandomizedSearch(config)(family, inputs)
    return result, family


class ParallelRandomizedSearch:
    """Race independent randomized restarts across an executor.

    The retry budget of each table size is split into chunks of
    ``chunk_retries`` restarts, each with its own seed, family copy and
    finder. The first chunk to succeed wins; chunks not yet started are
    cancelled and the winning coefficients are copied into the caller's
    family.
    """

    def __init__(
        self,
        config: Optional[RandomSearchConfig] = None,
        workers: int = 4,
        chunk_retries: int = 50,
        executor_factory: ExecutorFactory = concurrent.futures.ProcessPoolExecutor,
    ) -> None:
        if workers <= 0 or chunk_retries <= 0:
            raise ValueError("workers and chunk_retries must be positive")
        self.config = config or RandomSearchConfig()
        self.workers = workers
        self.chunk_retries = chunk_retries
        self._executor_factory = executor_factory

    def _chunk_configs(self, bits: int) -> List[RandomSearchConfig]:
        cfg = self.config
        chunks = math.ceil(cfg.retries / self.chunk_retries)
        configs = []
        for k in range(chunks):
            retries = min(self.chunk_retries, cfg.retries - k * self.chunk_retries)
            configs.append(
                cfg.model_copy(
                    update={
                        "retries": retries,
                        "table_size_bits": (bits,),
                        "seed": cfg.seed + k,
                    }
                )
            )
        return configs

    def __call__(
        self, family: SequentialHashFamily, inputs: Sequence[Union[str, bytes]]
    ) -> RandomSearchResult:
        attempts = 0
        restarts = 0
        for bits in self.config.table_size_bits:
            configs = self._chunk_configs(bits)
            logger.info(
                "Parallel randomized search: {} chunks on {} workers, table size {}",
                len(configs),
                self.workers,
                1 << bits,
            )
            with self._executor_factory(self.workers) as executor:
                futures = [
                    executor.submit(_run_chunk, family.copy(), list(inputs), chunk)
                    for chunk in configs
                ]
                winner: Optional[SequentialHashFamily] = None
                failure: Optional[str] = None
                for future in concurrent.futures.as_completed(futures):
                    result, searched = future.result()
                    attempts += result.attempts
                    restarts += result.restarts
                    if result.success:
                        winner = searched
                    elif result.aborted:
                        failure = result.error
                    else:
                        continue
                    for pending in futures:
                        pending.cancel()
                    break

            if winner is not None:
                family.assign(winner)
                logger.info("Perfect hash found after {} attempts ({} restarts)", attempts, restarts)
                return RandomSearchResult(
                    attempts=attempts, restarts=restarts, success=True, table_size_bits=bits
                )
            if failure is not None:
                logger.error("Parallel randomized search aborted: {}", failure)
                return RandomSearchResult(
                    attempts=attempts,
                    restarts=restarts,
                    success=False,
                    table_size_bits=bits,
                    aborted=True,
                    error=failure,
                )

        message = f"no perfect hash found after {attempts} attempts"
        logger.warning("Parallel randomized search gave up: {}", message)
        return RandomSearchResult(
            attempts=attempts, restarts=restarts, success=False, error=message
        )
