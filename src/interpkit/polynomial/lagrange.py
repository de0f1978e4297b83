"""Node polynomial, barycentric weights and Lagrange basis polynomials.

For nodes ``x_0, ..., x_{n-1}`` the node polynomial is
``L(x) = (x - x_0) (x - x_1) ... (x - x_{n-1})``. Its derivative at a node
gives the barycentric weight ``w_i = 1 / L'(x_i)``, and dividing ``L`` by
``(x - x_i)`` and scaling by ``w_i`` gives the Lagrange basis polynomial
``l_i`` with ``l_i(x_j) = 1 if i == j else 0``.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from interpkit.polynomial.poly import Polynomial
from interpkit.utils.validate import as_field_array, check_distinct_nodes

__all__ = ["lagrange", "lagrange_weights", "lagrange_basis"]


def lagrange(xs: ArrayLike) -> Polynomial:
    """Builds the monic node polynomial with roots ``xs``.

    Args:
        xs: 1D array-like of nodes (repeats are allowed here).

    Returns:
        The polynomial ``prod_i (x - xs[i])`` of degree ``len(xs)``.
    """
    xs = as_field_array(xs, "xs")
    coeffs = np.ones(1, dtype=xs.dtype)
    for root in xs:
        shifted = np.zeros(coeffs.size + 1, dtype=coeffs.dtype)
        shifted[1:] = coeffs
        shifted[:-1] -= root * coeffs
        coeffs = shifted
    return Polynomial(coeffs)


def lagrange_weights(xs: ArrayLike) -> NDArray[Any]:
    """Computes barycentric weights ``w_i = 1 / prod_{j != i} (x_i - x_j)``.

    Args:
        xs: 1D array-like of pairwise distinct nodes.

    Returns:
        1D array of weights, one per node.

    Raises:
        ZeroDivisionError: If two nodes coincide.
    """
    xs = as_field_array(xs, "xs")
    check_distinct_nodes(xs)
    diffs = xs[:, np.newaxis] - xs[np.newaxis, :]
    np.fill_diagonal(diffs, 1)
    return 1 / np.prod(diffs, axis=1)


def lagrange_basis(xs: ArrayLike) -> list[Polynomial]:
    """Builds the Lagrange basis polynomials for the nodes ``xs``.

    Args:
        xs: 1D array-like of pairwise distinct nodes.

    Returns:
        List of ``len(xs)`` polynomials of degree ``len(xs) - 1``.

    Raises:
        ZeroDivisionError: If two nodes coincide.
    """
    xs = as_field_array(xs, "xs")
    weights = lagrange_weights(xs)
    node_poly = lagrange(xs)
    return [node_poly.contract(x)[0].scale(w) for x, w in zip(xs, weights)]
