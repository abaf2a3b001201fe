"""Read-only, byte-addressable access to the input file."""

import os
from typing import BinaryIO, Protocol, Self

from uppercase_counter.errors import FileOpenError, ReadError


class ByteSource(Protocol):
    """Anything the scanner can read a bounded byte range from."""

    def total_length(self) -> int: ...

    def read_range(self, start: int, length: int) -> bytes: ...


class FileByteSource:
    """Byte source backed by a read-only binary file handle."""

    def __init__(self, path: str):
        self._path = path
        try:
            self._handle: BinaryIO = open(path, "rb")  # noqa: SIM115
        except OSError as exc:
            raise FileOpenError(f"Error opening the file: {path} ({exc.strerror})") from exc
        except ValueError as exc:
            # open() rejects paths with embedded NUL characters this way.
            raise FileOpenError(f"Error opening the file: {path!r} ({exc})") from exc

    @property
    def path(self) -> str:
        return self._path

    def total_length(self) -> int:
        try:
            return os.fstat(self._handle.fileno()).st_size
        except OSError as exc:
            raise FileOpenError(f"Cannot stat file: {self._path} ({exc.strerror})") from exc

    def read_range(self, start: int, length: int) -> bytes:
        """Read up to ``length`` bytes at ``start`` with one bounded read."""
        try:
            self._handle.seek(start)
            return self._handle.read(length)
        except OSError as exc:
            raise ReadError(
                f"Read of {length} bytes at offset {start} failed in {self._path}: {exc}"
            ) from exc

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
