"""Byte-range partitioning across workers."""

from uppercase_counter.partition.partition import partition, worker_range
from uppercase_counter.partition.types import FileSpan, WorkerRange

__all__ = ["FileSpan", "WorkerRange", "partition", "worker_range"]
