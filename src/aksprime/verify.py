"""Witness checks for the congruence (X + a)^n == X^n + a in Z_n[X]/(X^r - 1)."""

from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from .config import effective_config
from .exponentiation import power
from .primitives import totient
from .ring import binomial
from .runtime import Deadline, parallel_all, partition_ranges, raise_if_cancelled


def witness_limit(n: int, r: int) -> int:
    return math.floor(math.sqrt(totient(r)) * math.log2(n)) + 1


def _expected(a: int, n: int, r: int) -> np.ndarray:
    expected = np.zeros(r, dtype=object)
    expected[n % r] = 1
    expected[0] = a % n
    return expected


def is_congruent(a: int, n: int, r: int) -> bool:
    """Check one witness: position 0 holds a mod n, position n mod r holds 1, the rest 0."""
    result = power(binomial(a, r, n), n, r, n)
    return bool(np.array_equal(result, _expected(a, n, r)))


def _check_range(task: Tuple[int, int, int, int]) -> bool:
    n, r, start, stop = task
    return all(is_congruent(a, n, r) for a in range(start, stop))


def _check_sequential(n: int, r: int, limit: int, every: int, deadline: Optional[Deadline]) -> bool:
    for i, a in enumerate(range(1, limit + 1)):
        if i % every == 0:
            raise_if_cancelled()
            if deadline is not None:
                deadline.check()
        if not is_congruent(a, n, r):
            return False
    return True


def all_witnesses_satisfy(
    n: int,
    r: int,
    limit: int,
    *,
    workers: Optional[int] = None,
    deadline: Optional[Deadline] = None,
) -> bool:
    """True iff every witness a in 1..limit satisfies the congruence.

    With one worker the loop short-circuits on the first failing witness and
    checks for cancellation between witnesses. With more, 1..limit is split
    into contiguous ranges checked in a process pool.
    """
    cfg = effective_config()
    if workers is None:
        workers = cfg.workers
    workers = max(1, min(workers, limit))

    if workers == 1:
        return _check_sequential(n, r, limit, cfg.cancel_check_every, deadline)

    tasks = [(n, r, start, stop) for start, stop in partition_ranges(limit, workers, start=1)]
    return parallel_all(_check_range, tasks, workers, deadline=deadline)
