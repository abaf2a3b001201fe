import functools
import logging
import os
import time
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from uppercase_counter.errors import ConfigurationError
from uppercase_counter.partition import FileSpan, WorkerRange, partition
from uppercase_counter.scan import FileByteSource, PartialCount, scan_file_range
from uppercase_counter.solver.execution import (
    UC_EXECUTOR_ENV,
    ExecutorClass,
    default_worker_count,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from uppercase_counter.solver.reduce import reduce_partials

logger = logging.getLogger(__name__)

# Longest input path accepted; longer paths are rejected, never truncated.
MAX_PATH_LENGTH = 4096


class RunState(Enum):
    INIT = "init"
    RANGES_COMPUTED = "ranges_computed"
    SCANS_IN_FLIGHT = "scans_in_flight"
    PARTIALS_COLLECTED = "partials_collected"
    REPORTED = "reported"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CountReport:
    """Final result of a run, emitted once by the coordinator."""

    total_count: int
    elapsed_seconds: float
    worker_count: int
    executor: str


def validate_input_path(input_path: str) -> str:
    """Reject empty, NUL-containing, or overlong paths."""
    if not input_path:
        raise ConfigurationError("Input path must not be empty")
    if "\x00" in input_path:
        raise ConfigurationError("Input path must not contain NUL characters")
    if len(input_path) > MAX_PATH_LENGTH:
        raise ConfigurationError(
            f"Input path is {len(input_path)} characters long, "
            f"maximum is {MAX_PATH_LENGTH}"
        )
    return input_path


class CountRun:
    """
    One coordinated count over a file.

    Walks INIT -> RANGES_COMPUTED -> SCANS_IN_FLIGHT -> PARTIALS_COLLECTED
    -> REPORTED. Any error moves the run to FAILED and is re-raised; a failed
    run never yields a total. A run object can only be executed once.
    """

    def __init__(self, input_path: str, workers: int | None = None):
        self.input_path = input_path
        self.workers = workers
        self.state = RunState.INIT
        self.ranges: list[WorkerRange] = []
        self.partials: list[PartialCount] = []

    def run(self) -> CountReport:
        if self.state is not RunState.INIT:
            raise ConfigurationError(f"Run already executed (state={self.state.value})")

        try:
            return self._run()
        except Exception:
            self._advance(RunState.FAILED)
            raise

    def _advance(self, state: RunState) -> None:
        logger.debug("Run state: %s -> %s", self.state.value, state.value)
        self.state = state

    def _run(self) -> CountReport:
        total_start = time.perf_counter()
        input_path = validate_input_path(self.input_path)
        worker_count = default_worker_count() if self.workers is None else self.workers
        if worker_count < 1:
            raise ConfigurationError(f"workers must be >= 1, got {worker_count}")

        input_file = Path(input_path)
        input_path = str(input_file.resolve())

        # Select executor based on policy.
        executor_class = get_executor_class()
        executor_name = describe_executor(executor_class)

        with FileByteSource(input_path) as source:
            span = FileSpan(source.total_length())

        gil_status = "enabled" if is_gil_enabled() else "disabled"
        executor_override = os.environ.get(UC_EXECUTOR_ENV, "")
        override_info = f", UC_EXECUTOR={executor_override}" if executor_override else ""
        logger.info(
            "Starting: file=%s, bytes=%d, workers=%d, executor=%s, GIL=%s%s",
            input_file.name,
            span.total_length,
            worker_count,
            executor_name,
            gil_status,
            override_info,
        )

        self.ranges = partition(span.total_length, worker_count)
        for assigned in self.ranges:
            logger.debug(
                "Worker %d: bytes [%d, %d) (%d bytes)",
                assigned.worker_id,
                assigned.start,
                assigned.end,
                assigned.length,
            )
        self._advance(RunState.RANGES_COMPUTED)

        scan_start = time.perf_counter()
        self._advance(RunState.SCANS_IN_FLIGHT)
        self.partials = self._dispatch(
            executor_class, input_path, span.total_length, worker_count
        )
        self._advance(RunState.PARTIALS_COLLECTED)
        scan_time = time.perf_counter() - scan_start
        logger.info("Scan done: %d workers in %.2fs", worker_count, scan_time)

        total_count = reduce_partials(self.partials, worker_count)
        elapsed = time.perf_counter() - total_start
        report = CountReport(total_count, elapsed, worker_count, executor_name)
        self._advance(RunState.REPORTED)
        logger.info("Result: %d uppercase letters (total %.2fs)", total_count, elapsed)
        return report

    def _dispatch(
        self,
        executor_class: ExecutorClass,
        input_path: str,
        total_length: int,
        worker_count: int,
    ) -> list[PartialCount]:
        """Run one scan per worker id and join them all before returning."""
        task = functools.partial(scan_file_range, input_path, total_length, worker_count)
        worker_ids = range(worker_count)

        if executor_class is None:
            return self._collect(task(worker_id) for worker_id in worker_ids)

        with executor_class(max_workers=min(worker_count, default_worker_count())) as executor:
            try:
                return self._collect(executor.map(task, worker_ids))
            except Exception:
                # First failure aborts the run: drop scans that have not started.
                executor.shutdown(cancel_futures=True)
                raise

    @staticmethod
    def _collect(results: Iterable[PartialCount]) -> list[PartialCount]:
        partials = []
        for partial in results:
            logger.debug("Worker %d: partial count %d", partial.worker_id, partial.count)
            partials.append(partial)
        return partials


def count_uppercase(input_path: str, workers: int | None = None) -> CountReport:
    """
    Count uppercase ASCII letters in a file using a fixed set of workers.

    The file is split into one contiguous byte range per worker, each worker
    counts its range independently, and the partial counts are summed once
    every worker has finished.
    """
    return CountRun(input_path, workers).run()


def main_count(input_path: str, workers: int | None = None) -> None:
    """Main entry point that prints the report to stdout."""
    report = count_uppercase(input_path, workers=workers)
    print(f"Total count: {report.total_count}")
    print(f"Total execution time: {report.elapsed_seconds:f} seconds")
