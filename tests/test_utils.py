"""Tests for the coefficient-sequence helpers."""

import operator

from stark_algebra.utils import trim_trailing, zip_combine


def test_trim_trailing_drops_high_order_zeros():
    assert trim_trailing([1, 2, 0, 0], 0) == [1, 2]


def test_trim_trailing_keeps_low_order_zeros():
    assert trim_trailing([0, 0, 3, 0], 0) == [0, 0, 3]


def test_trim_trailing_keeps_interior_zeros():
    assert trim_trailing([1, 0, 0, 2], 0) == [1, 0, 0, 2]


def test_trim_trailing_all_zero():
    assert trim_trailing([0, 0, 0], 0) == []


def test_trim_trailing_empty():
    assert trim_trailing([], 0) == []


def test_trim_trailing_returns_new_list():
    original = (1, 0)
    trimmed = trim_trailing(original, 0)
    assert trimmed == [1]
    assert original == (1, 0)


def test_trim_trailing_field_elements(field):
    zero = field.zero()
    coeffs = [zero, field.one(), zero, field.new_element(field.modulus)]
    assert trim_trailing(coeffs, zero) == [zero, field.one()]


def test_zip_combine_equal_lengths():
    assert zip_combine([1, 2], [10, 20], operator.add, 0) == [11, 22]


def test_zip_combine_longer_lhs():
    assert zip_combine([1, 2, 3], [10], operator.sub, 0) == [-9, 2, 3]


def test_zip_combine_longer_rhs_fills_on_the_left():
    assert zip_combine([1], [10, 20, 30], operator.sub, 0) == [-9, -20, -30]


def test_zip_combine_uses_fill_value():
    assert zip_combine([1], [1, 1], operator.mul, 5) == [1, 5]
    assert zip_combine([2, 2], [3], operator.mul, 7) == [6, 14]


def test_zip_combine_empty():
    assert zip_combine([], [], operator.add, 0) == []
    assert zip_combine([], [4], operator.add, 0) == [4]
