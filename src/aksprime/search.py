"""Search for the ring modulus r used by the congruence test."""

from __future__ import annotations

from typing import Optional

from .primitives import gcd
from .runtime import raise_if_cancelled


# find_modulus() result when a scanned r shares a factor with n
NOT_FOUND = None


def order_upper_bound(n: int) -> int:
    """ceil(log2 n) ** 2, exact for arbitrarily large n >= 2."""
    bits = (n - 1).bit_length()
    return bits * bits


def multiplicative_order(n: int, r: int) -> Optional[int]:
    """Smallest k with n**k == 1 (mod r), or None once k passes r."""
    step = n % r
    x = step
    k = 1
    while x != 1:
        if k > r:
            return None
        x = x * step % r
        k += 1
    return k


def find_modulus(n: int) -> Optional[int]:
    """Smallest r whose order of n exceeds ceil(log2 n)**2.

    Scans r = 2, 3, ... and returns NOT_FOUND as soon as some r < n has a
    nontrivial gcd with n. If no r up to the bound qualifies, the first r
    past the bound is returned.
    """
    upper = order_upper_bound(n)
    r = 2
    while r <= upper:
        raise_if_cancelled()
        if r < n and gcd(n, r) != 1:
            return NOT_FOUND
        # an undefined order just moves the scan on
        order = multiplicative_order(n, r)
        if order is not None and order > upper:
            return r
        r += 1
    return r
