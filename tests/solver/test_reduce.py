"""Tests for partial count reduction."""

import functools
import random

import pytest

from uppercase_counter.errors import ConfigurationError, IncompleteReductionError
from uppercase_counter.scan import PartialCount
from uppercase_counter.solver.reduce import combine, reduce_partials


def test_reduce_sums_partials() -> None:
    partials = [PartialCount(0, 1), PartialCount(1, 2)]
    assert reduce_partials(partials, 2) == 3


def test_reduce_is_order_and_grouping_independent() -> None:
    rng = random.Random(7)
    counts = [rng.randrange(0, 1000) for _ in range(50)]
    partials = [PartialCount(i, c) for i, c in enumerate(counts)]
    expected = sum(counts)

    for _ in range(5):
        rng.shuffle(partials)
        assert reduce_partials(partials, 50) == expected

    # Pairwise tree reduction gives the same total.
    level = counts[:]
    while len(level) > 1:
        level = [
            combine(level[i], level[i + 1]) if i + 1 < len(level) else level[i]
            for i in range(0, len(level), 2)
        ]
    assert level == [expected]
    assert functools.reduce(combine, reversed(counts), 0) == expected


def test_reduce_all_zero() -> None:
    assert reduce_partials([PartialCount(i, 0) for i in range(4)], 4) == 0


def test_missing_partial_is_an_error() -> None:
    with pytest.raises(IncompleteReductionError, match=r"\[1\]"):
        reduce_partials([PartialCount(0, 5), PartialCount(2, 1)], 3)


def test_duplicate_partial_is_an_error() -> None:
    with pytest.raises(IncompleteReductionError, match="Duplicate"):
        reduce_partials([PartialCount(0, 5), PartialCount(0, 5)], 2)


def test_unknown_worker_is_an_error() -> None:
    with pytest.raises(IncompleteReductionError, match="unknown worker"):
        reduce_partials([PartialCount(0, 1), PartialCount(5, 1)], 2)


def test_rejects_zero_workers() -> None:
    with pytest.raises(ConfigurationError):
        reduce_partials([], 0)


def test_partial_count_rejects_negative() -> None:
    with pytest.raises(ValueError):
        PartialCount(0, -1)
