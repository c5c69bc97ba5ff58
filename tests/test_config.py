from pathlib import Path

import pytest
from pydantic import ValidationError

from perfect_hash import (
    HashFinder,
    Operation,
    SearchConfig,
    SearchConfigLoader,
    load_words,
)

from conftest import CONFIG_DIR, GO_KEYWORDS


def test_load_go_keywords_config_and_search():
    config = SearchConfigLoader().load(CONFIG_DIR / "go_keywords.yaml")
    words = load_words(CONFIG_DIR / "go_keywords.txt")
    family = config.build_family()

    assert words == GO_KEYWORDS
    assert config.table_size_bits == 6
    assert family.length.max_value == 16
    assert [c.operation for c in family.coefficients] == [Operation.XOR, Operation.XOR]
    assert all(c.power_of_two for c in family.coefficients)

    result = HashFinder().search(family, config.table_size_bits, words)
    assert result.attempts == 61
    assert family.render() == "h = len(s) * 8\nh ^= s[0] * 1\nh ^= s[1] * 8\n"


def test_load_randomized_config():
    config = SearchConfigLoader().load(CONFIG_DIR / "randomized_keywords.yaml")
    family = config.build_family()

    assert config.randomized is not None
    assert tuple(config.randomized.table_size_bits) == (10, 11)
    assert [c.index for c in family.coefficients] == [0, 1, -2, -1]
    assert all(c.max_value == 64 for c in family.coefficients)


def test_empty_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    config = SearchConfigLoader().load(path)

    assert config.table_size_bits == 10
    assert config.default_max == 16
    assert config.build_family().search_space_size == 16


@pytest.mark.parametrize(
    "text",
    [
        "table_size_bits: 0\n",
        "table_size_bits: 40\n",
        "default_max: 0\n",
        "coefficients:\n  - index: 0\n    operation: rotate\n",
        "coefficients:\n  - index: 0\n    max: -3\n",
    ],
)
def test_invalid_configs_are_rejected(tmp_path: Path, text: str):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValidationError):
        SearchConfigLoader().load(path)


def test_load_words_skips_blanks_and_comments(tmp_path: Path):
    path = tmp_path / "words.txt"
    path.write_text("# header\nalpha\n\n  beta  \n#gamma\n", encoding="utf-8")
    assert load_words(path) == ["alpha", "beta"]


def test_search_config_validates_assignment():
    config = SearchConfig()
    with pytest.raises(ValidationError):
        config.table_size_bits = 33
