"""Polynomial fitting with barycentric Lagrange polynomials."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from interpkit.logger import interpkit_logger
from interpkit.polynomial.base import PolynomialLike
from interpkit.polynomial.lagrange import lagrange
from interpkit.polynomial.poly import Polynomial, sum_polynomials
from interpkit.utils.validate import check_distinct_nodes, validate_samples

__all__ = ["lagrange_poly_fit"]


def lagrange_poly_fit(
    samples: Iterable[tuple[Any, Any]],
    *,
    check_nodes: bool = True,
) -> Polynomial:
    """Fits the interpolating polynomial using barycentric Lagrange polynomials.

    With the node polynomial ``L(x) = prod_i (x - x_i)`` and
    ``phi_i = L'(x_i)``, the interpolant is
    ``sum_i (y_i / phi_i) * L(x) / (x - x_i)``. Each quotient comes from
    contracting ``L`` by one of its roots, so the whole fit is O(n^2).

    Note that computing the coefficients of a fitting polynomial is an
    inherently ill-conditioned problem. In most cases it is both faster and
    more accurate to use :func:`interpkit.neville.poly_interp` than to
    evaluate a fitted polynomial.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs with distinct ``x``.
        check_nodes: Check up front that the x-coordinates are distinct.

    Returns:
        Polynomial with ``n`` coefficients, constant term first.

    Raises:
        ValueError: If ``samples`` is empty or malformed.
        ZeroDivisionError: If two samples share an x-coordinate.
    """
    xs, ys = validate_samples(samples)
    if check_nodes:
        check_distinct_nodes(xs)
    interpkit_logger.debug("Barycentric Lagrange fit over %d samples.", xs.shape[0])

    node_poly: PolynomialLike = lagrange(xs)
    phis = [node_poly.evaluate_with_derivative(x)[1] for x in xs]
    return sum_polynomials(
        node_poly.contract(x)[0].scale(y / phi)
        for x, y, phi in zip(xs, ys, phis)
    )
