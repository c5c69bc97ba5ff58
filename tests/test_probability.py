import math

import pytest
from loguru import logger

from perfect_hash import InvalidConfigurationError, estimate_search, estimate_success_probability


@pytest.mark.parametrize("count", [0, 1])
def test_trivial_inputs_always_succeed(count: int):
    assert estimate_success_probability(1, count) == 1.0
    assert estimate_search(1, count, 10).search_probability == 1.0


def test_two_inputs_in_two_slots():
    assert estimate_success_probability(1, 2) == pytest.approx(0.5)


def test_overfull_table_reports_zero_and_warns():
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        assert estimate_success_probability(2, 5) == 0.0
    finally:
        logger.remove(handler_id)
    assert any("cannot fit" in str(m) for m in messages)

    estimate = estimate_search(2, 5, 100)
    assert estimate.overfull
    assert estimate.search_probability == 0.0
    assert math.isinf(estimate.expected_attempts)


def test_probability_non_increasing_in_input_count():
    values = [estimate_success_probability(6, n) for n in range(0, 70)]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert values[65] == 0.0


def test_go_keyword_odds():
    single = estimate_success_probability(6, 25, 1024)
    assert single == pytest.approx(0.0043585, rel=1e-3)

    estimate = estimate_search(6, 25, 1024)
    assert estimate.trial_probability == single
    assert estimate.search_probability == pytest.approx(0.9886, abs=5e-5)
    assert estimate.expected_attempts == pytest.approx(229.44, rel=1e-3)
    assert estimate.table_size == 64
    assert not estimate.overfull


def test_expected_attempts_capped_by_search_space():
    assert estimate_search(6, 25, 80).expected_attempts == 80


@pytest.mark.parametrize(
    "bits, count, space",
    [(0, 3, 1), (33, 3, 1), (-2, 3, 1), (6, -1, 1), (6, 3, 0)],
)
def test_invalid_arguments_raise(bits: int, count: int, space: int):
    with pytest.raises(InvalidConfigurationError):
        estimate_success_probability(bits, count, space)
    with pytest.raises(ValueError):
        estimate_search(bits, count, space)
