from pathlib import Path
from typing import List

import pytest

from perfect_hash import Coefficient, Operation, SequentialHashFamily

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"

GO_KEYWORDS = [
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
]  # fmt: skip


def build_go_family() -> SequentialHashFamily:
    family = SequentialHashFamily(
        length=Coefficient(index=0, power_of_two=True, operation=Operation.ADD),
        coefficients=[
            Coefficient(index=0, power_of_two=True, operation=Operation.XOR),
            Coefficient(index=1, power_of_two=True, operation=Operation.XOR),
        ],
    )
    family.configure(16)
    return family


@pytest.fixture
def go_keywords() -> List[str]:
    return list(GO_KEYWORDS)


@pytest.fixture
def go_family() -> SequentialHashFamily:
    return build_go_family()
