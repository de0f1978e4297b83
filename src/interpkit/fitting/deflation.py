"""Polynomial fitting by repeated interpolation at zero and deflation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from interpkit.logger import interpkit_logger
from interpkit.neville.tableau import neville_rows
from interpkit.polynomial.poly import Polynomial
from interpkit.utils.validate import (
    check_distinct_nodes,
    check_nonzero_nodes,
    validate_samples,
)

__all__ = ["iterative_poly_fit"]


def iterative_poly_fit(
    samples: Iterable[tuple[Any, Any]],
    *,
    check_nodes: bool = True,
) -> Polynomial:
    """Fits the interpolating polynomial one coefficient at a time.

    The value of the interpolant at 0 is the constant coefficient. It is
    subtracted from every remaining ``y`` and the result divided by the
    matching ``x``, which leaves samples of the polynomial with that
    coefficient factored out. The leading sample is dropped at each step,
    so it is never used as a divisor.

    Slower than :func:`interpkit.fitting.lagrange_poly_fit` (O(n^3)) but
    stable under a different set of conditions.

    Note that computing the coefficients of a fitting polynomial is an
    inherently ill-conditioned problem. In most cases it is both faster and
    more accurate to use :func:`interpkit.neville.poly_interp` than to
    evaluate a fitted polynomial.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs with distinct ``x``.
            Only the first sample may have ``x == 0``.
        check_nodes: Check the nodes up front.

    Returns:
        Polynomial with ``n`` coefficients, constant term first.

    Raises:
        ValueError: If ``samples`` is empty or malformed.
        ZeroDivisionError: If two samples share an x-coordinate or a sample
            other than the first has ``x == 0``.
    """
    xs, ys = validate_samples(samples)
    if check_nodes:
        check_distinct_nodes(xs)
        check_nonzero_nodes(xs, start=1)
    interpkit_logger.debug("Iterative fit over %d samples.", xs.shape[0])

    coeffs = []
    while xs.shape[0]:
        for row in neville_rows(xs, ys, 0):
            pass
        c0 = row[0]
        coeffs.append(c0)
        xs, ys = xs[1:], (ys[1:] - c0) / xs[1:]
    return Polynomial(coeffs)
