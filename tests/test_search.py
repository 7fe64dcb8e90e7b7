"""Unit tests for the modulus search."""

from aksprime.search import NOT_FOUND, find_modulus, multiplicative_order, order_upper_bound


def test_order_upper_bound():
    assert order_upper_bound(2) == 1
    assert order_upper_bound(3) == 4
    assert order_upper_bound(4) == 4
    assert order_upper_bound(5) == 9
    assert order_upper_bound(1024) == 100
    assert order_upper_bound(1025) == 121
    assert order_upper_bound(2 ** 200 + 1) == 201 * 201


def test_multiplicative_order():
    assert multiplicative_order(2, 7) == 3
    assert multiplicative_order(3, 7) == 6
    assert multiplicative_order(10, 3) == 1
    assert multiplicative_order(97, 5) == 4


def test_multiplicative_order_undefined():
    assert multiplicative_order(6, 4) is None
    assert multiplicative_order(9, 3) is None


def test_find_modulus_prime():
    assert find_modulus(3) == 5
    assert find_modulus(97) == 50
    assert find_modulus(8191) == 170


def test_find_modulus_small_factor():
    assert find_modulus(100) is NOT_FOUND
    assert find_modulus(91) is NOT_FOUND
    assert find_modulus(6) is NOT_FOUND


def test_find_modulus_factor_beyond_bound():
    # both factors lie past the bound, so every scanned r is coprime
    n = 1009 * 1013
    assert find_modulus(n) == order_upper_bound(n) + 1
