"""Tests for `tspgraph.config` focusing on behavior and correctness."""

from math import factorial

import pytest

from tspgraph.config import SEARCH_CONFIG, SearchConfig


def test_defaults() -> None:
    config = SearchConfig()
    assert config.root_index == 0
    assert config.keep_tours is True
    assert config.max_vertices is None
    assert SEARCH_CONFIG == config


@pytest.mark.parametrize("n", [2, 3, 4, 7])
def test_estimate_tours_matches_factorial(n: int) -> None:
    assert SearchConfig().estimate_tours(n) == factorial(n - 1)


@pytest.mark.parametrize("n", [-1, 0, 1])
def test_estimate_tours_small_graphs(n: int) -> None:
    assert SearchConfig().estimate_tours(n) == 0


def test_estimate_tours_monotonic() -> None:
    config = SearchConfig()
    values = [config.estimate_tours(n) for n in range(1, 10)]
    assert values == sorted(values)


def test_check_size_without_limit_accepts_anything() -> None:
    SearchConfig().check_size(1_000)


def test_check_size_with_limit() -> None:
    config = SearchConfig(max_vertices=5)
    config.check_size(5)
    with pytest.raises(ValueError, match="6 vertices"):
        config.check_size(6)
