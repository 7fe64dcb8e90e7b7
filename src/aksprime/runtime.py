"""Job bookkeeping, cooperative cancellation and the local worker pool."""

from __future__ import annotations

import multiprocessing
import threading
import time
from typing import Any, Callable, Optional, Sequence, Tuple

from .config import get_config


_JOB_LOCK = threading.Lock()
_ACTIVE_JOBS = 0
_CANCEL_EVENT = threading.Event()

_POLL_INTERVAL_S = 0.1


class JobStateError(RuntimeError):
    pass


class JobCancelled(RuntimeError):
    pass


class DeadlineExceeded(JobCancelled):
    pass


class Deadline:
    """Wall-clock budget for a single job. ``None`` never expires."""

    def __init__(self, seconds: Optional[float] = None):
        self.seconds = seconds
        self.expires_at = time.time() + seconds if seconds is not None else None

    def expired(self) -> bool:
        return self.expires_at is not None and time.time() >= self.expires_at

    def check(self) -> None:
        if self.expired():
            raise DeadlineExceeded(f"deadline of {self.seconds}s exceeded")


def cancel_job() -> None:
    with _JOB_LOCK:
        if _ACTIVE_JOBS == 0:
            raise JobStateError("No active job to cancel")
        _CANCEL_EVENT.set()


def cancel_requested() -> bool:
    return _CANCEL_EVENT.is_set()


def raise_if_cancelled() -> None:
    if _CANCEL_EVENT.is_set():
        raise JobCancelled("Job was cancelled")


def reset_cancel() -> None:
    _CANCEL_EVENT.clear()


def run(fn: Callable[..., Any], *args, **kwargs) -> Tuple[Any, Optional[float]]:
    """Run ``fn`` as a cancellable job.

    Returns ``(result, elapsed_s)``; elapsed_s is None unless time_job is
    configured. Several jobs may run at once, and cancel_job() stops all of
    them.
    """
    global _ACTIVE_JOBS
    cfg = get_config()

    with _JOB_LOCK:
        if _ACTIVE_JOBS == 0:
            _CANCEL_EVENT.clear()
        _ACTIVE_JOBS += 1

    start = time.time() if cfg is not None and cfg.time_job else None
    try:
        result = fn(*args, **kwargs)
    finally:
        with _JOB_LOCK:
            _ACTIVE_JOBS -= 1
            if _ACTIVE_JOBS == 0:
                _CANCEL_EVENT.clear()
    if start is not None:
        return result, time.time() - start
    return result, None


def partition_ranges(n: int, parts: int, start: int = 0) -> list[Tuple[int, int]]:
    """Split [start, start + n) into ``parts`` contiguous half-open ranges."""
    base = n // parts
    remainder = n % parts
    ranges: list[Tuple[int, int]] = []
    for i in range(parts):
        size = base + (1 if i < remainder else 0)
        end = start + size
        ranges.append((start, end))
        start = end
    return ranges


def parallel_all(
    fn: Callable[[Any], bool],
    tasks: Sequence[Any],
    workers: int,
    deadline: Optional[Deadline] = None,
) -> bool:
    """Logical AND of ``fn(task)`` over tasks, evaluated in a process pool.

    ``fn`` must be a picklable module-level function. The pool is terminated
    as soon as one task returns False, so in-flight work is abandoned.
    Cancellation and the deadline are polled while waiting on results.
    """
    if not tasks:
        return True

    pool = multiprocessing.Pool(processes=min(workers, len(tasks)))
    try:
        results = pool.imap_unordered(fn, tasks)
        for _ in range(len(tasks)):
            while True:
                try:
                    ok = results.next(timeout=_POLL_INTERVAL_S)
                    break
                except multiprocessing.TimeoutError:
                    raise_if_cancelled()
                    if deadline is not None:
                        deadline.check()
            if not ok:
                return False
        return True
    finally:
        pool.terminate()
        pool.join()
