"""Value types describing the input span and per-worker byte ranges."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileSpan:
    """Byte length of the input file, read once per run."""

    total_length: int

    def __post_init__(self) -> None:
        if self.total_length < 0:
            raise ValueError(f"total_length must be >= 0, got {self.total_length}")


@dataclass(frozen=True, slots=True)
class WorkerRange:
    """Half-open byte interval [start, end) assigned to one worker."""

    worker_id: int
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.worker_id < 0:
            raise ValueError(f"worker_id must be >= 0, got {self.worker_id}")
        if not 0 <= self.start <= self.end:
            raise ValueError(f"Invalid range: start={self.start}, end={self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start
