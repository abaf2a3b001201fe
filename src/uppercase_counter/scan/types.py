"""Result type produced by a worker scan."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PartialCount:
    """Uppercase count of one worker's range."""

    worker_id: int
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
