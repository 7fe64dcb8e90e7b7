"""Deterministic AKS primality decision."""

from __future__ import annotations

import dataclasses
import enum
import numbers
from dataclasses import dataclass
from typing import Optional

from .config import get_config
from .primitives import gcd, is_exponential_form
from .runtime import Deadline, run
from .search import NOT_FOUND, find_modulus
from .verify import all_witnesses_satisfy, witness_limit


class InvalidInput(ValueError):
    pass


class Stage(enum.Enum):
    TWO = "two"
    PERFECT_POWER = "perfect_power"
    SMALL_FACTOR = "small_factor"
    COPRIMALITY = "coprimality"
    SMALL_N = "small_n"
    CONGRUENCE = "congruence"


@dataclass(frozen=True)
class AKSResult:
    n: int
    is_prime: bool
    stage: Stage
    r: Optional[int] = None
    witness_limit: Optional[int] = None
    elapsed_s: Optional[float] = None


def _validate(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidInput(f"n must be an integer, got {type(n).__name__}")
    n = int(n)
    if n < 2:
        raise InvalidInput(f"n must be >= 2, got {n}")
    return n


def _progress(message: str) -> None:
    cfg = get_config()
    if cfg is not None and cfg.progress_to_terminal:
        print(f"[aksprime] {message}")


def _decide(n: int, workers: Optional[int], deadline: Deadline) -> AKSResult:
    if n == 2:
        return AKSResult(n, True, Stage.TWO)

    if is_exponential_form(n):
        return AKSResult(n, False, Stage.PERFECT_POWER)

    r = find_modulus(n)
    if r is NOT_FOUND:
        return AKSResult(n, False, Stage.SMALL_FACTOR)
    _progress(f"n={n}: modulus r={r}")

    for k in range(2, min(r, n - 1) + 1):
        if gcd(n, k) != 1:
            return AKSResult(n, False, Stage.COPRIMALITY, r=r)

    if n <= r:
        return AKSResult(n, True, Stage.SMALL_N, r=r)

    limit = witness_limit(n, r)
    _progress(f"n={n}: checking witnesses 1..{limit}")
    ok = all_witnesses_satisfy(n, r, limit, workers=workers, deadline=deadline)
    return AKSResult(n, ok, Stage.CONGRUENCE, r=r, witness_limit=limit)


def certify(n: int, *, workers: Optional[int] = None) -> AKSResult:
    """Decide primality of n and report which step settled it.

    Raises InvalidInput for anything that is not an integer >= 2, and
    JobCancelled / DeadlineExceeded if the job is stopped while witnesses
    are being checked.
    """
    n = _validate(n)
    cfg = get_config()
    deadline = Deadline(cfg.deadline_s if cfg is not None else None)

    result, elapsed = run(_decide, n, workers, deadline)
    if elapsed is not None:
        result = dataclasses.replace(result, elapsed_s=elapsed)
    _progress(f"n={n}: {'prime' if result.is_prime else 'composite'} ({result.stage.value})")
    return result


def is_prime(n: int) -> bool:
    return certify(n).is_prime
