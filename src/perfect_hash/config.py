"""YAML-backed configuration for hash family searches."""

from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from perfect_hash.hashing.coefficients import Coefficient, Operation
from perfect_hash.hashing.families import SequentialHashFamily
from perfect_hash.search.finder import MAX_TABLE_SIZE_BITS, valid_table_size_bits
from perfect_hash.search.randomized import RandomSearchConfig


class CoefficientConfig(BaseModel):
    """Declarative form of a :class:`Coefficient`."""

    model_config = ConfigDict(validate_assignment=True)

    index: int = Field(default=0)
    start: int = Field(default=0, ge=0)
    max: Optional[int] = Field(default=None, gt=0)
    power_of_two: bool = Field(default=False)
    operation: Optional[Operation] = Field(default=None)

    def build(self) -> Coefficient:
        return Coefficient(
            index=self.index,
            start_value=self.start,
            max_value=self.max or 0,
            power_of_two=self.power_of_two,
            operation=self.operation,
        )


class SearchConfig(BaseModel):
    """Everything needed to run a search: table size, family shape, defaults."""

    model_config = ConfigDict(validate_assignment=True)

    table_size_bits: int = Field(default=10)
    default_max: int = Field(default=16, gt=0)
    length: CoefficientConfig = Field(default_factory=CoefficientConfig)
    coefficients: List[CoefficientConfig] = Field(default_factory=list)
    randomized: Optional[RandomSearchConfig] = Field(default=None)

    @field_validator("table_size_bits")
    @classmethod
    def _check_table_size_bits(cls, value: int) -> int:
        if not valid_table_size_bits(value):
            raise ValueError(f"table_size_bits must be in (0, {MAX_TABLE_SIZE_BITS}]")
        return value

    def build_family(self) -> SequentialHashFamily:
        family = SequentialHashFamily(
            length=self.length.build(),
            coefficients=[c.build() for c in self.coefficients],
        )
        family.configure(self.default_max)
        return family


class SearchConfigLoader:
    """Loads :class:`SearchConfig` objects from YAML files."""

    def load(self, path: Path) -> SearchConfig:
        return SearchConfig.model_validate(self._read_yaml(path))

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        return data or {}


def load_words(path: Path) -> List[str]:
    """Read a newline-separated key list, skipping blanks and ``#`` comments."""

    with path.open("r", encoding="utf-8") as handle:
        words = [line.strip() for line in handle]
    return [w for w in words if w and not w.startswith("#")]
