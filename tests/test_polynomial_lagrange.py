"""Tests for interpkit.polynomial.lagrange."""

from __future__ import annotations

from fractions import Fraction

import numpy as np
import pytest
from numpy.testing import assert_allclose

from interpkit.polynomial import lagrange, lagrange_basis, lagrange_weights


def test_lagrange_node_polynomial():
    """Tests that the node polynomial of 0, 1, 2 is x^3 - 3x^2 + 2x."""
    assert lagrange([0.0, 1.0, 2.0]).coefficients.tolist() == [0.0, 2.0, -3.0, 1.0]


def test_lagrange_without_nodes_is_one():
    """Tests that the empty product is the constant one."""
    assert lagrange([]).coefficients.tolist() == [1.0]


def test_lagrange_vanishes_at_its_nodes():
    """Tests that every node is a root of the node polynomial."""
    xs = np.array([-1.3, 0.2, 0.9, 2.4])
    assert_allclose(lagrange(xs)(xs), 0.0, atol=1e-12)


def test_lagrange_weights_are_inverse_node_derivatives():
    """Tests that w_i == 1 / L'(x_i)."""
    xs = np.array([-1.0, 0.5, 2.0, 3.0])
    node_poly = lagrange(xs)
    _, slopes = node_poly.evaluate_with_derivative(xs)

    assert_allclose(lagrange_weights(xs), 1.0 / slopes, rtol=1e-12)


def test_lagrange_weights_exact():
    """Tests the weights of 0, 1, 2 in exact arithmetic."""
    xs = [Fraction(0), Fraction(1), Fraction(2)]
    assert list(lagrange_weights(xs)) == [Fraction(1, 2), Fraction(-1), Fraction(1, 2)]


def test_lagrange_basis_is_cardinal():
    """Tests that l_i(x_j) is one for i == j and zero otherwise."""
    xs = np.array([-2.0, -0.5, 1.0, 1.5, 4.0])
    basis = lagrange_basis(xs)

    values = np.array([l(xs) for l in basis])
    assert_allclose(values, np.eye(xs.size), atol=1e-12)


def test_lagrange_basis_sums_to_one():
    """Tests that the basis polynomials form a partition of unity."""
    xs = np.array([0.1, 0.7, 1.2, 3.0])
    total = sum(l.coefficients for l in lagrange_basis(xs))

    assert_allclose(total, [1.0, 0.0, 0.0, 0.0], atol=1e-12)


@pytest.mark.parametrize("fn", [lagrange_weights, lagrange_basis])
def test_repeated_nodes_raise(fn):
    """Tests that coinciding nodes are reported as division by zero."""
    with pytest.raises(ZeroDivisionError):
        fn([1.0, 1.0])
