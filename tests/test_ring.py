"""Unit tests for Z_n[X]/(X^r - 1) arithmetic."""

import numpy as np
import pytest

from aksprime.ring import binomial, identity, monomial, multiply, normalize, ring_equal


def test_normalize_pads_with_zeros():
    element = normalize([3, 4], 5)
    assert len(element) == 5
    np.testing.assert_array_equal(element, [3, 4, 0, 0, 0])


def test_normalize_rejects_too_long():
    with pytest.raises(ValueError):
        normalize([1, 2, 3, 4], 3)


def test_trimmed_element_equals_padded():
    assert ring_equal([5, 6], [5, 6, 0, 0], 4, 7)
    assert ring_equal([12], [5, 0, 0], 3, 7)
    assert not ring_equal([5, 6], [5, 6, 1], 3, 7)


def test_multiply_small():
    # (1 + 2X)(3 + X) = 3 + 7X + 2X^2
    result = multiply([1, 2], [3, 1], 5, 11)
    np.testing.assert_array_equal(result, [3, 7, 2, 0, 0])


def test_multiply_reduces_coefficients():
    result = multiply([4, 4], [4], 3, 5)
    np.testing.assert_array_equal(result, [1, 1, 0])


def test_multiply_wraps_exponents():
    r, n = 4, 7
    x_last = monomial(r - 1, r)
    x = monomial(1, r)
    np.testing.assert_array_equal(multiply(x_last, x, r, n), identity(r))


def test_multiply_identity():
    r, n = 6, 13
    p = [20, 3, 0, 15, 1, 9]
    np.testing.assert_array_equal(multiply(p, identity(r), r, n), np.array(p) % n)


def test_multiply_commutative_and_associative():
    r, n = 7, 101
    p = [5, 0, 3, 99, 1]
    q = [17, 42, 0, 0, 0, 8, 2]
    s = [1, 1, 1]
    assert ring_equal(multiply(p, q, r, n), multiply(q, p, r, n), r, n)
    left = multiply(multiply(p, q, r, n), s, r, n)
    right = multiply(p, multiply(q, s, r, n), r, n)
    assert ring_equal(left, right, r, n)


def test_multiply_big_coefficients():
    n = 2 ** 127 - 1
    r = 5
    p = [n - 1, 1]
    # (-1 + X)^2 = 1 - 2X + X^2
    result = multiply(p, p, r, n)
    assert list(result) == [1, n - 2, 1, 0, 0]


def test_multiply_paths_agree():
    # the same product computed with and without the int64 fast path
    r = 9
    small_n = 1009
    big_n = 2 ** 61 - 1
    p = [3, 1, 4, 1, 5, 9, 2, 6, 5]
    q = [2, 7, 1, 8, 2, 8, 1, 8, 2]
    small = multiply(p, q, r, small_n)
    big = multiply(p, q, r, big_n)
    np.testing.assert_array_equal(small, np.array([int(c) % small_n for c in big], dtype=object))


def test_multiply_does_not_mutate_inputs():
    p = np.array([1, 2, 3], dtype=object)
    q = np.array([4, 5, 6], dtype=object)
    multiply(p, q, 3, 7)
    np.testing.assert_array_equal(p, [1, 2, 3])
    np.testing.assert_array_equal(q, [4, 5, 6])


def test_binomial():
    np.testing.assert_array_equal(binomial(12, 4, 5), [2, 1, 0, 0])


def test_rejects_bad_moduli():
    with pytest.raises(ValueError):
        multiply([1], [1], 0, 5)
    with pytest.raises(ValueError):
        multiply([1], [1], 3, 0)
