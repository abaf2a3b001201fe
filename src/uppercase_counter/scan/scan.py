"""Count uppercase ASCII letters in one worker's byte range."""

from uppercase_counter.errors import ReadError
from uppercase_counter.partition import WorkerRange, worker_range
from uppercase_counter.scan.source import ByteSource, FileByteSource
from uppercase_counter.scan.types import PartialCount

UPPERCASE_BYTES = bytes(range(ord("A"), ord("Z") + 1))


def count_uppercase_bytes(data: bytes) -> int:
    """Return the number of bytes in ``data`` that are ASCII ``A``..``Z``."""
    # Deleting the uppercase bytes leaves everything else.
    return len(data) - len(data.translate(None, UPPERCASE_BYTES))


def scan(source: ByteSource, assigned: WorkerRange) -> PartialCount:
    """
    Scan a worker's range and count its uppercase letters.

    Performs exactly one read of ``assigned.length`` bytes at
    ``assigned.start``. A short read raises ReadError rather than
    undercounting.
    """
    if assigned.length == 0:
        return PartialCount(assigned.worker_id, 0)

    data = source.read_range(assigned.start, assigned.length)
    if len(data) != assigned.length:
        raise ReadError(
            f"Worker {assigned.worker_id}: expected {assigned.length} bytes at "
            f"offset {assigned.start}, got {len(data)}"
        )

    return PartialCount(assigned.worker_id, count_uppercase_bytes(data))


def scan_file_range(
    input_path: str,
    total_length: int,
    worker_count: int,
    worker_id: int,
) -> PartialCount:
    """
    Worker entry point: derive this worker's range, open the file, and scan it.

    Module-level so it can be pickled into a process pool.
    """
    assigned = worker_range(total_length, worker_count, worker_id)
    with FileByteSource(input_path) as source:
        return scan(source, assigned)
