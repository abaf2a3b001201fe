"""Coordinated counting: executor policy, reduction, and the run harness."""

from uppercase_counter.solver.reduce import combine, reduce_partials
from uppercase_counter.solver.solve import (
    CountReport,
    CountRun,
    RunState,
    count_uppercase,
    main_count,
)

__all__ = [
    "CountReport",
    "CountRun",
    "RunState",
    "combine",
    "count_uppercase",
    "main_count",
    "reduce_partials",
]
