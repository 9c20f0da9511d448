"""ExactFraction: normalization, arithmetic laws and error handling."""
from math import gcd

import pytest

from models.errors import InvalidDenominatorError, DivisionByZeroError, LineAnalysisError
from models.fraction import ExactFraction, as_fraction, ZERO, ONE

SAMPLES = [
    ExactFraction(1, 2),
    ExactFraction(-3, 4),
    ExactFraction(5, 1),
    ExactFraction(0, 7),
    ExactFraction(7, -9),
    ExactFraction(-12, -18),
]


def test_normalization_invariant():
    for n in range(-12, 13):
        for d in range(-12, 13):
            if d == 0:
                continue
            f = ExactFraction(n, d)
            assert f.denominator > 0
            if f.numerator == 0:
                assert f.denominator == 1
            else:
                assert gcd(abs(f.numerator), f.denominator) == 1
            # value is preserved
            assert f.numerator * d == n * f.denominator


def test_sign_moves_to_numerator():
    f = ExactFraction(4, -6)
    assert (f.numerator, f.denominator) == (-2, 3)
    assert ExactFraction(-4, -6) == ExactFraction(2, 3)


def test_zero_is_canonical():
    assert (ExactFraction(0, -5).numerator, ExactFraction(0, -5).denominator) == (0, 1)
    assert ExactFraction(0, 13) == ZERO


@pytest.mark.parametrize("n", [-3, 0, 1, 42])
def test_zero_denominator_rejected(n):
    with pytest.raises(InvalidDenominatorError):
        ExactFraction(n, 0)


def test_error_hierarchy():
    assert issubclass(InvalidDenominatorError, ValueError)
    assert issubclass(DivisionByZeroError, ZeroDivisionError)
    assert issubclass(InvalidDenominatorError, LineAnalysisError)
    assert issubclass(DivisionByZeroError, LineAnalysisError)


def test_non_integer_terms_rejected():
    with pytest.raises(TypeError):
        ExactFraction(1.5, 2)
    with pytest.raises(TypeError):
        as_fraction("1/2")


def test_basic_arithmetic():
    half = ExactFraction(1, 2)
    third = ExactFraction(1, 3)
    assert half.add(third) == ExactFraction(5, 6)
    assert half.subtract(third) == ExactFraction(1, 6)
    assert half.multiply(third) == ExactFraction(1, 6)
    assert half.divide(third) == ExactFraction(3, 2)
    assert ExactFraction(2, 3).multiply(ExactFraction(3, 2)) == ONE


def test_commutativity():
    for f1 in SAMPLES:
        for f2 in SAMPLES:
            assert f1.add(f2) == f2.add(f1)
            assert f1.multiply(f2) == f2.multiply(f1)


def test_identities():
    for f in SAMPLES:
        assert f.add(ExactFraction(0, 1)) == f
        assert f.multiply(ExactFraction(1, 1)) == f


def test_add_subtract_round_trip():
    for f1 in SAMPLES:
        for f2 in SAMPLES:
            assert f1.add(f2).subtract(f2) == f1


@pytest.mark.parametrize("d", [1, -4, 7])
def test_divide_by_zero(d):
    for f in SAMPLES:
        with pytest.raises(DivisionByZeroError):
            f.divide(ExactFraction(0, d))


def test_operators_accept_ints():
    half = ExactFraction(1, 2)
    assert half + 1 == ExactFraction(3, 2)
    assert 1 + half == ExactFraction(3, 2)
    assert 1 - half == half
    assert half * 4 == 2
    assert 1 / half == ExactFraction(2)
    assert -half == ExactFraction(-1, 2)
    with pytest.raises(DivisionByZeroError):
        half / 0


def test_ordering():
    assert ExactFraction(1, 3) < ExactFraction(1, 2)
    assert ExactFraction(-1, 2) <= ExactFraction(-2, 4)
    assert ExactFraction(7, 2) > 3
    assert ExactFraction(3) >= 3


def test_equality_and_hash():
    assert ExactFraction(2, 4) == ExactFraction(1, 2)
    assert hash(ExactFraction(2, 4)) == hash(ExactFraction(1, 2))
    assert ExactFraction(1, 2) != ExactFraction(1, 3)
    assert ExactFraction(1, 2) != 0.5
    assert len({ExactFraction(1, 2), ExactFraction(-2, -4), ExactFraction(3, 6)}) == 1


def test_whole_values_hash_like_ints():
    assert ExactFraction(3) == 3
    assert hash(ExactFraction(3)) == hash(3)
    assert hash(ExactFraction(-6, -2)) == hash(3)
    assert hash(ZERO) == hash(0)
    assert {ExactFraction(3): "three"}[3] == "three"
    assert {3: "three"}[ExactFraction(6, 2)] == "three"
    assert len({ExactFraction(3), 3, ExactFraction(9, 3)}) == 1


def test_equals_accepts_ints():
    assert ExactFraction(4, 2).equals(2)
    assert not ExactFraction(1, 2).equals(0)
    assert ZERO.equals(0)


def test_display_string():
    assert ExactFraction(3).to_display_string() == "3/1"
    assert str(ExactFraction(4, -6)) == "-2/3"
    assert str(ZERO) == "0/1"
    assert repr(ExactFraction(1, 2)) == "ExactFraction(1, 2)"


def test_immutable():
    f = ExactFraction(1, 2)
    with pytest.raises(AttributeError):
        f.numerator = 5
    with pytest.raises(AttributeError):
        f._denominator = 3
    g = f.add(ONE)
    assert f == ExactFraction(1, 2)
    assert g == ExactFraction(3, 2)


def test_large_products_are_exact():
    big = ExactFraction(2 ** 40, 3).multiply(ExactFraction(2 ** 40, 5))
    assert big.numerator == 2 ** 80
    assert big.denominator == 15
