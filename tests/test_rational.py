"""Tests for exact rationals."""

import random

import pytest

from sharesolver.arith import integer
from sharesolver.arith.rational import ONE, ZERO, Rational


def _normalised(r: Rational) -> bool:
    return r.denominator > 0 and integer.gcd(abs(r.numerator), r.denominator) == 1


def test_lowest_terms():
    r = Rational(6, 8)
    assert (r.numerator, r.denominator) == (3, 4)


def test_sign_moves_to_numerator():
    r = Rational(3, -6)
    assert (r.numerator, r.denominator) == (-1, 2)
    r = Rational(-3, -6)
    assert (r.numerator, r.denominator) == (1, 2)


def test_zero_is_canonical():
    assert (Rational(0, -17).numerator, Rational(0, -17).denominator) == (0, 1)
    assert Rational(0, 5) == ZERO


def test_zero_denominator():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        Rational(1.5, 2)
    with pytest.raises(TypeError):
        Rational(True, 2)


def test_arithmetic():
    a = Rational(1, 2)
    b = Rational(1, 3)
    assert a + b == Rational(5, 6)
    assert a - b == Rational(1, 6)
    assert a * b == Rational(1, 6)
    assert a / b == Rational(3, 2)
    assert -a == Rational(-1, 2)


def test_mixed_with_int():
    a = Rational(1, 2)
    assert a + 1 == Rational(3, 2)
    assert 1 + a == Rational(3, 2)
    assert 1 - a == Rational(1, 2)
    assert 3 * a == Rational(3, 2)
    assert 1 / a == 2
    assert a * 2 == 1


def test_reciprocal():
    assert Rational(-2, 5).reciprocal() == Rational(-5, 2)
    with pytest.raises(ZeroDivisionError):
        ZERO.reciprocal()
    with pytest.raises(ZeroDivisionError):
        ONE / ZERO


def test_is_integer_and_to_int():
    assert Rational(10, 5).is_integer()
    assert Rational(10, 5).to_int() == 2
    assert not Rational(10, 4).is_integer()
    with pytest.raises(ValueError):
        Rational(10, 4).to_int()


def test_ordering():
    assert Rational(1, 3) < Rational(1, 2)
    assert Rational(-1, 2) < 0
    assert Rational(7, 7) >= 1
    assert Rational(5, 2) > 2
    assert Rational(2, 4) <= Rational(1, 2)


def test_hash_matches_int():
    assert hash(Rational(4, 2)) == hash(2)
    assert len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}) == 1


def test_immutable():
    r = Rational(1, 2)
    with pytest.raises(AttributeError):
        r._num = 5


def test_str():
    assert str(Rational(3)) == "3"
    assert str(Rational(-3, 4)) == "-3/4"


def test_normalised_after_every_operation():
    rng = random.Random(1234)
    for _ in range(200):
        a = Rational(rng.randint(-10**30, 10**30), rng.randint(1, 10**20))
        b = Rational(rng.randint(-10**30, 10**30) or 1, rng.randint(1, 10**20))
        for r in (a + b, a - b, a * b, a / b, -a, b.reciprocal()):
            assert _normalised(r)


def test_truncate_toward_zero():
    assert Rational(7, 2).truncate() == 3
    assert Rational(-7, 2).truncate() == -3
    assert int(Rational(-1, 2)) == 0
    assert int(Rational(10, 5)) == 2
