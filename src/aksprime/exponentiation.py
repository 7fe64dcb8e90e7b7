"""Square-and-multiply exponentiation inside Z_n[X]/(X^r - 1)."""

from __future__ import annotations

import operator

from .ring import Coefficients, RingElement, _check_moduli, multiply, normalize


def power(base: Coefficients, exponent: int, r: int, n: int) -> RingElement:
    """Compute base**exponent in the ring.

    Scans the exponent's bits from the most significant one down, squaring
    at every bit and multiplying by the base on set bits. The exponent is a
    Python int, so there is no width limit; the number of ring
    multiplications is at most 2 * exponent.bit_length().
    """
    _check_moduli(r, n)
    exponent = operator.index(exponent)
    if exponent < 1:
        raise ValueError("exponent must be >= 1")

    element = normalize(base, r) % n
    result = element
    for shift in range(exponent.bit_length() - 2, -1, -1):
        result = multiply(result, result, r, n)
        if (exponent >> shift) & 1:
            result = multiply(result, element, r, n)
    return result
