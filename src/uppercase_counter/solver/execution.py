"""How worker scans are scheduled: serially, on threads, or on processes."""

import os
import sys
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

type ExecutorClass = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

# Environment variable that forces a scheduling mode for worker scans.
UC_EXECUTOR_ENV = "UC_EXECUTOR"


def is_gil_enabled() -> bool:
    """Report whether this interpreter runs with the GIL."""
    try:
        return sys._is_gil_enabled()
    except AttributeError:
        return True


def get_executor_class() -> ExecutorClass:
    """
    Pick the executor the coordinator dispatches worker scans on.

    UC_EXECUTOR=threads|processes|serial wins when set. Otherwise scans go to
    processes while the GIL is on, since counting bytes is CPU bound, and to
    threads on free-threaded builds. ``None`` means serial: each worker's scan
    runs in the coordinator's own thread, in worker-id order.
    """
    mode = os.environ.get(UC_EXECUTOR_ENV, "").lower()

    if mode == "threads":
        return ThreadPoolExecutor
    if mode == "processes":
        return ProcessPoolExecutor
    if mode == "serial":
        return None

    return ProcessPoolExecutor if is_gil_enabled() else ThreadPoolExecutor


def describe_executor(executor_class: ExecutorClass) -> str:
    """Name reported in logs and in CountReport.executor."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"


def default_worker_count() -> int:
    return os.cpu_count() or 1
