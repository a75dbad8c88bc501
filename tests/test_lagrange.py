"""Tests for exact Lagrange interpolation."""

import random

import pytest

from sharesolver.arith.rational import Rational
from sharesolver.errors import InterpolationError, NonIntegerSecretError
from sharesolver.interpolation import lagrange
from sharesolver.polynomial import eval_poly, sample_points
from sharesolver.shares.share_set import Share


def _shares(points):
    return [Share(x=x, y=y) for x, y in points]


def test_basis_at_zero():
    xs = [1, 2, 3]
    assert lagrange.basis_at(xs, 0, 0) == 3
    assert lagrange.basis_at(xs, 1, 0) == -3
    assert lagrange.basis_at(xs, 2, 0) == 1


def test_basis_sums_to_one():
    xs = [2, 5, 7, 11]
    total = sum((lagrange.basis_at(xs, i, 0) for i in range(len(xs))), Rational(0))
    assert total == 1


def test_evaluate_first_k():
    shares = _shares([(1, 4), (2, 7), (3, 12), (6, 39)])
    assert lagrange.evaluate(shares, 3) == 3


def test_evaluate_line():
    assert lagrange.evaluate(_shares([(1, 5), (2, 9)]), 2) == 1


def test_evaluate_mixed_base_line():
    assert lagrange.evaluate(_shares([(1, 255), (2, 256), (3, 257)]), 2) == 254


def test_k_equals_one():
    assert lagrange.evaluate(_shares([(4, 17), (9, 3)]), 1) == 17


def test_negative_secret():
    coeffs = [-5, 10]
    shares = _shares(sample_points(coeffs, [1, 2]))
    assert lagrange.evaluate(shares, 2) == -5


def test_insufficient_shares():
    with pytest.raises(InterpolationError) as exc_info:
        lagrange.evaluate(_shares([(1, 1), (2, 2)]), 3)
    assert exc_info.value.kind == "insufficient-shares"


def test_duplicate_x():
    with pytest.raises(InterpolationError) as exc_info:
        lagrange.evaluate(_shares([(1, 1), (1, 2)]), 2)
    assert exc_info.value.kind == "duplicate-x"


def test_non_integer_secret():
    # (1, 0) and (3, 1) lie on y = x/2 - 1/2.
    with pytest.raises(NonIntegerSecretError) as exc_info:
        lagrange.evaluate(_shares([(1, 0), (3, 1)]), 2)
    err = exc_info.value
    assert err.kind == "non-integer-secret"
    assert err.value == Rational(-1, 2)
    assert "-1/2" in err.message
    assert "integer part 0" in err.message


def test_interpolate_at_other_x():
    coeffs = [3, 1, 2]
    points = sample_points(coeffs, [1, 2, 3])
    for x in range(-5, 10):
        assert lagrange.interpolate_at(points, x) == eval_poly(coeffs, x)


def test_interpolate_needs_points():
    with pytest.raises(InterpolationError):
        lagrange.interpolate_at([], 0)


def test_exact_for_random_polynomials():
    rng = random.Random(7)
    for _ in range(50):
        k = rng.randint(1, 8)
        coeffs = [rng.randint(0, 10**60) for _ in range(k)]
        xs = sorted(rng.sample(range(1, 200), k))
        shares = _shares(sample_points(coeffs, xs))
        assert lagrange.evaluate(shares, k) == coeffs[0]


def test_permutation_invariance():
    rng = random.Random(99)
    coeffs = [rng.randint(0, 10**80) for _ in range(6)]
    points = sample_points(coeffs, [1, 3, 4, 8, 10, 15])
    expected = lagrange.interpolate_at(points, 0)
    for _ in range(20):
        shuffled = points[:]
        rng.shuffle(shuffled)
        assert lagrange.interpolate_at(shuffled, 0) == expected
        assert lagrange.evaluate(_shares(shuffled), len(shuffled)) == coeffs[0]


def test_prefix_stability():
    rng = random.Random(5)
    coeffs = [rng.randint(0, 10**50) for _ in range(4)]
    xs = list(range(1, 11))
    points = sample_points(coeffs, xs)
    prefix = lagrange.evaluate(_shares(points), 4)
    for _ in range(20):
        subset = sorted(rng.sample(points, 4))
        assert lagrange.evaluate(_shares(subset), 4) == prefix == coeffs[0]


def test_large_values_exact():
    coeffs = [7**300, 3**250, 11**200]
    points = sample_points(coeffs, [1, 2, 3])
    assert len(str(points[0][1])) >= 200
    assert lagrange.evaluate(_shares(points), 3) == 7**300


def test_check_consistency():
    coeffs = [3, 1, 2]
    points = sample_points(coeffs, [1, 2, 3, 4, 5])
    shares = _shares(points)
    assert lagrange.check_consistency(shares, 3) == []
    tampered = shares[:4] + [Share(x=5, y=points[4][1] + 1)]
    assert lagrange.check_consistency(tampered, 3) == [5]
