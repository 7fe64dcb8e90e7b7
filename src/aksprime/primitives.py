"""Number-theoretic primitives the AKS decision procedure consumes."""

from __future__ import annotations

import math
from typing import List

from sympy import factorint, perfect_power


def gcd(a: int, b: int) -> int:
    return math.gcd(a, b)


def is_exponential_form(n: int) -> bool:
    """True iff n == a**b for integers a > 1, b > 1."""
    if n < 4:
        return False
    return perfect_power(n) is not False


def prime_factors(r: int) -> List[int]:
    """Prime factors of r with multiplicity, in ascending order."""
    if r < 1:
        raise ValueError("r must be positive")
    factors: List[int] = []
    for p, e in sorted(factorint(r).items()):
        factors.extend([p] * e)
    return factors


def totient(r: int) -> int:
    # r * prod(1 - 1/p) over the distinct primes, kept in exact integers
    result = r
    for p in set(prime_factors(r)):
        result = result // p * (p - 1)
    return result
