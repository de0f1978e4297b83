"""Tests for interpkit.polynomial.poly."""

from __future__ import annotations

from fractions import Fraction

import numpy as np
import numpy.polynomial.polynomial as npp
import pytest
from numpy.testing import assert_allclose

from interpkit.polynomial import Polynomial, PolynomialLike, sum_polynomials


def test_polynomial_ascending_is_default():
    """Tests that coefficients are stored constant term first."""
    p = Polynomial([1.0, 2.0, 3.0])

    assert p.coefficients.tolist() == [1.0, 2.0, 3.0]
    assert p.degree == 2
    assert len(p) == 3


def test_polynomial_descending_order_is_reversed():
    """Tests that a descending list gives the same polynomial reversed."""
    p = Polynomial([3.0, 2.0, 1.0], order="descending")

    assert p.coefficients.tolist() == [1.0, 2.0, 3.0]
    assert p == Polynomial([1.0, 2.0, 3.0])


def test_polynomial_rejects_unknown_order():
    """Tests that only ascending and descending orders are accepted."""
    with pytest.raises(ValueError, match="order"):
        Polynomial([1.0], order="little-endian")


def test_polynomial_rejects_2d_coefficients():
    """Tests that coefficients must be 1D."""
    with pytest.raises(ValueError, match="1D"):
        Polynomial([[1.0, 2.0]])


def test_empty_polynomial_is_zero():
    """Tests that an empty coefficient list is the zero polynomial."""
    p = Polynomial([])

    assert p.coefficients.tolist() == [0.0]
    assert p(5.0) == 0.0


def test_integer_coefficients_are_promoted():
    """Tests that integer coefficients are stored as floats."""
    assert Polynomial([1, 2]).coefficients.dtype == np.float64


def test_coefficients_are_a_copy():
    """Tests that mutating the returned coefficients leaves the polynomial intact."""
    p = Polynomial([1.0, 2.0])
    c = p.coefficients
    c[0] = 100.0

    assert p.coefficients.tolist() == [1.0, 2.0]


@pytest.mark.parametrize("x", [0.0, -1.25, 3.5, np.linspace(-2.0, 2.0, 7)])
def test_evaluate_matches_numpy(x):
    """Tests that Horner evaluation agrees with numpy's polyval."""
    coeffs = [0.5, -1.0, 2.0, 0.25]
    p = Polynomial(coeffs)

    assert_allclose(p.evaluate(x), npp.polyval(x, coeffs), rtol=1e-14, atol=1e-14)
    assert_allclose(p(x), npp.polyval(x, coeffs), rtol=1e-14, atol=1e-14)


def test_constant_polynomial_broadcasts_over_array():
    """Tests that a constant evaluated on an array returns an array of that shape."""
    p = Polynomial([4.0])
    x = np.zeros((2, 3))

    assert p(x).shape == (2, 3)
    assert np.all(p(x) == 4.0)
    value, slope = p.evaluate_with_derivative(x)
    assert value.shape == slope.shape == (2, 3)
    assert np.all(slope == 0.0)


@pytest.mark.parametrize("x", [0.0, 0.7, -2.0, np.array([-1.0, 0.5, 3.0])])
def test_evaluate_with_derivative_matches_derivative(x):
    """Tests that the single-pass derivative agrees with the derivative polynomial."""
    p = Polynomial([1.0, -3.0, 0.0, 2.0, 0.5])

    value, slope = p.evaluate_with_derivative(x)

    assert_allclose(value, p(x), rtol=1e-14)
    assert_allclose(slope, p.derivative()(x), rtol=1e-14)


def test_derivative_coefficients():
    """Tests the derivative of 1 + 2x + 3x^2 and of a constant."""
    assert Polynomial([1.0, 2.0, 3.0]).derivative().coefficients.tolist() == [2.0, 6.0]
    assert Polynomial([7.0]).derivative().coefficients.tolist() == [0.0]


def test_scale_add_sub_neg():
    """Tests scalar scaling and addition of polynomials of different lengths."""
    p = Polynomial([1.0, 2.0])
    q = Polynomial([0.5, 0.0, 3.0])

    assert p.scale(2.0).coefficients.tolist() == [2.0, 4.0]
    assert (p + q).coefficients.tolist() == [1.5, 2.0, 3.0]
    assert (q - p).coefficients.tolist() == [-0.5, -2.0, 3.0]
    assert (-p).coefficients.tolist() == [-1.0, -2.0]


def test_multiplication():
    """Tests polynomial and scalar multiplication."""
    p = Polynomial([1.0, 1.0])
    q = Polynomial([-1.0, 1.0])

    assert (p * q).coefficients.tolist() == [-1.0, 0.0, 1.0]
    assert (p * 3.0).coefficients.tolist() == [3.0, 3.0]
    assert (3.0 * p).coefficients.tolist() == [3.0, 3.0]


@pytest.mark.parametrize("root", [0.0, 1.0, -2.5, 4.0])
def test_contract_satisfies_division_identity(root):
    """Tests that p(x) == (x - root) q(x) + r for the returned q and r."""
    p = Polynomial([2.0, -1.0, 0.0, 3.0])
    quotient, remainder = p.contract(root)
    x = np.linspace(-3.0, 3.0, 9)

    assert quotient.degree == p.degree - 1
    assert_allclose((x - root) * quotient(x) + remainder, p(x), rtol=1e-12, atol=1e-12)
    assert_allclose(remainder, p(root), rtol=1e-12, atol=1e-12)


def test_contract_by_a_root_leaves_no_remainder():
    """Tests that x^2 - 3x + 2 contracted by 2 gives x - 1 exactly."""
    quotient, remainder = Polynomial([2.0, -3.0, 1.0]).contract(2.0)

    assert quotient.coefficients.tolist() == [-1.0, 1.0]
    assert remainder == 0.0


def test_contract_constant():
    """Tests that contracting a constant gives a zero quotient and the constant back."""
    quotient, remainder = Polynomial([5.0]).contract(1.0)

    assert quotient.coefficients.tolist() == [0.0]
    assert remainder == 5.0


def test_trim():
    """Tests that trailing small coefficients are dropped but one is always kept."""
    assert Polynomial([1.0, 0.0, 0.0]).trim().coefficients.tolist() == [1.0]
    assert Polynomial([0.0, 0.0]).trim().coefficients.tolist() == [0.0]
    assert Polynomial([1.0, 2.0, 1e-15]).trim(1e-12).coefficients.tolist() == [1.0, 2.0]
    assert Polynomial([1.0, 2.0, 1e-15]).trim().degree == 2


def test_equality_ignores_trailing_zeros():
    """Tests that equality compares the trimmed coefficients."""
    assert Polynomial([1.0, 2.0, 0.0]) == Polynomial([1.0, 2.0])
    assert Polynomial([1.0, 2.0]) != Polynomial([1.0, 2.5])
    assert Polynomial([1.0]) != [1.0]


def test_polynomial_is_unhashable():
    """Tests that polynomials cannot be used as dict keys."""
    with pytest.raises(TypeError):
        hash(Polynomial([1.0]))


def test_sum_polynomials():
    """Tests summation of several polynomials and of none."""
    total = sum_polynomials([Polynomial([1.0]), Polynomial([0.0, 2.0]), Polynomial([0.0, 0.0, 3.0])])

    assert total.coefficients.tolist() == [1.0, 2.0, 3.0]
    assert sum_polynomials([]).coefficients.tolist() == [0.0]


def test_fraction_coefficients_stay_exact():
    """Tests that arithmetic on Fraction coefficients is exact."""
    p = Polynomial([Fraction(1, 3), Fraction(0), Fraction(1, 2)])

    assert p(Fraction(2)) == Fraction(7, 3)
    quotient, remainder = p.contract(Fraction(1, 2))
    assert list(quotient.coefficients) == [Fraction(1, 4), Fraction(1, 2)]
    assert remainder == Fraction(11, 24)


def test_polynomial_satisfies_protocol():
    """Tests that the dense polynomial provides the operations the fitters use."""
    assert isinstance(Polynomial([1.0, 2.0]), PolynomialLike)


def test_contract_keeps_object_dtype_with_integer_entries():
    """Tests that an exact polynomial with an int leading term contracts to an exact quotient."""
    p = Polynomial(np.array([Fraction(-1, 3), 1], dtype=object))

    quotient, remainder = p.contract(Fraction(1, 3))

    assert quotient.coefficients.dtype == object
    assert remainder == 0
    assert isinstance(quotient.scale(Fraction(2, 7)).coefficients[0], Fraction)


def test_contract_float_polynomial_by_complex_root():
    """Tests that a complex root gives a complex quotient instead of truncating it."""
    p = Polynomial([1.0, 0.0, 1.0])  # (x - 1j)(x + 1j)

    quotient, remainder = p.contract(1j)

    assert_allclose(quotient.coefficients, [1j, 1.0], atol=1e-15)
    assert_allclose(remainder, 0.0, atol=1e-15)
