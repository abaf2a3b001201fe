"""Split a byte span into contiguous, balanced per-worker ranges."""

from uppercase_counter.errors import ConfigurationError
from uppercase_counter.partition.types import WorkerRange


def _validate(total_length: int, worker_count: int) -> None:
    if worker_count < 1:
        raise ConfigurationError(f"worker_count must be >= 1, got {worker_count}")
    if total_length < 0:
        raise ConfigurationError(f"total_length must be >= 0, got {total_length}")


def worker_range(total_length: int, worker_count: int, worker_id: int) -> WorkerRange:
    """
    Compute the byte range of a single worker.

    The first ``total_length % worker_count`` workers receive one extra byte,
    so range sizes never differ by more than one. The result depends only on
    the three arguments.
    """
    _validate(total_length, worker_count)
    if not 0 <= worker_id < worker_count:
        raise ConfigurationError(
            f"worker_id must be in [0, {worker_count}), got {worker_id}"
        )

    base, remainder = divmod(total_length, worker_count)
    start = worker_id * base + min(worker_id, remainder)
    end = start + base + (1 if worker_id < remainder else 0)
    return WorkerRange(worker_id, start, end)


def partition(total_length: int, worker_count: int) -> list[WorkerRange]:
    """
    Partition [0, total_length) into one range per worker, ordered by worker id.

    The ranges tile the span exactly: no gaps and no overlaps.
    """
    _validate(total_length, worker_count)
    return [worker_range(total_length, worker_count, i) for i in range(worker_count)]
