"""Reduction of per-worker partial counts into a total."""

import functools
from collections.abc import Iterable

from uppercase_counter.errors import ConfigurationError, IncompleteReductionError
from uppercase_counter.scan.types import PartialCount

type TotalCount = int


def combine(left: int, right: int) -> int:
    """Binary reduction operator; commutative and associative."""
    return left + right


def reduce_partials(partials: Iterable[PartialCount], worker_count: int) -> TotalCount:
    """
    Sum the partial counts of all workers.

    Exactly one partial per worker id in [0, worker_count) must be present.
    A missing contribution is an error, never an implicit zero.
    """
    if worker_count < 1:
        raise ConfigurationError(f"worker_count must be >= 1, got {worker_count}")

    counts: dict[int, int] = {}
    for partial in partials:
        if not 0 <= partial.worker_id < worker_count:
            raise IncompleteReductionError(
                f"Partial from unknown worker {partial.worker_id} "
                f"(expected ids 0..{worker_count - 1})"
            )
        if partial.worker_id in counts:
            raise IncompleteReductionError(
                f"Duplicate partial from worker {partial.worker_id}"
            )
        counts[partial.worker_id] = partial.count

    missing = sorted(set(range(worker_count)) - counts.keys())
    if missing:
        raise IncompleteReductionError(f"Missing partial counts from workers {missing}")

    return functools.reduce(combine, counts.values(), 0)
