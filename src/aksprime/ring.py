"""Arithmetic in the quotient ring Z_n[X]/(X^r - 1).

Elements are fixed-length numpy arrays of ``dtype=object`` holding Python
ints: position i is the coefficient of X^i, and the length is always r.
Exponents combine by addition mod r, which is how X^r == 1 is enforced.
Object dtype keeps coefficients arbitrary precision; when every partial sum
of a product is known to fit in 64 bits the convolution runs on int64
instead.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

import numpy as np


RingElement = np.ndarray
Coefficients = Union[np.ndarray, Sequence[int], Iterable[int]]

_INT64_LIMIT = 2 ** 63


def _check_moduli(r: int, n: int) -> None:
    if r < 1:
        raise ValueError("ring modulus r must be positive")
    if n < 1:
        raise ValueError("coefficient modulus n must be positive")


def normalize(p: Coefficients, r: int) -> RingElement:
    """Pad ``p`` with zeros to length r. Longer inputs are rejected."""
    coeffs = [int(c) for c in p]
    if len(coeffs) > r:
        raise ValueError(f"element has {len(coeffs)} coefficients, ring only has {r}")
    element = np.zeros(r, dtype=object)
    element[: len(coeffs)] = coeffs
    return element


def identity(r: int) -> RingElement:
    element = np.zeros(r, dtype=object)
    element[0] = 1
    return element


def monomial(k: int, r: int) -> RingElement:
    """X^k, with k reduced mod r."""
    element = np.zeros(r, dtype=object)
    element[k % r] = 1
    return element


def binomial(a: int, r: int, n: int) -> RingElement:
    """The element a + X."""
    _check_moduli(r, n)
    element = np.zeros(r, dtype=object)
    element[0] = a % n
    element[1 % r] = (element[1 % r] + 1) % n
    return element


def ring_equal(p: Coefficients, q: Coefficients, r: int, n: int) -> bool:
    return bool(np.array_equal(normalize(p, r) % n, normalize(q, r) % n))


def _fits_int64(r: int, n: int) -> bool:
    # each output coefficient is a sum of exactly r products below n**2
    return r * (n - 1) ** 2 < _INT64_LIMIT


def multiply(p: Coefficients, q: Coefficients, r: int, n: int) -> RingElement:
    """Product of p and q in Z_n[X]/(X^r - 1).

    Full cyclic convolution: p[i] * q[j] accumulates into position
    (i + j) mod r, then every coefficient is reduced mod n.
    """
    _check_moduli(r, n)
    a = normalize(p, r) % n
    b = normalize(q, r) % n

    if _fits_int64(r, n):
        full = np.convolve(a.astype(np.int64), b.astype(np.int64))
        folded = full[:r].copy()
        folded[: r - 1] += full[r:]
        return (folded % n).astype(object)

    result = np.zeros(r, dtype=object)
    for i in np.flatnonzero(a):
        result += a[i] * np.roll(b, int(i))
    return result % n
