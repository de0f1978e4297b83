"""Polynomial arithmetic used by the fitting routines."""

from interpkit.polynomial.base import PolynomialLike
from interpkit.polynomial.lagrange import lagrange, lagrange_basis, lagrange_weights
from interpkit.polynomial.poly import Polynomial, sum_polynomials

__all__ = [
    "Polynomial",
    "PolynomialLike",
    "lagrange",
    "lagrange_basis",
    "lagrange_weights",
    "sum_polynomials",
]
