"""Local scanning of a worker's byte range."""

from uppercase_counter.scan.scan import count_uppercase_bytes, scan, scan_file_range
from uppercase_counter.scan.source import ByteSource, FileByteSource
from uppercase_counter.scan.types import PartialCount

__all__ = [
    "ByteSource",
    "FileByteSource",
    "PartialCount",
    "count_uppercase_bytes",
    "scan",
    "scan_file_range",
]
