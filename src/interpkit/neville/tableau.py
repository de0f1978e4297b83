"""Neville's algorithm for evaluating an interpolating polynomial.

Row ``k`` of the tableau holds the values at ``x`` of the interpolants of
degree ``k`` through the consecutive samples ``i .. i + k``, for every
starting column ``i``. Row 0 is the raw ``y`` values and the single entry of
the last row is the value at ``x`` of the polynomial through all samples.

Examples:
    >>> from interpkit.neville import neville, poly_interp
    >>> samples = [(0.0, 1.0), (1.0, 2.0), (2.0, 5.0)]  # y = x**2 + 1
    >>> float(poly_interp(samples, 3.0))
    10.0
    >>> [row.tolist() for row in neville(samples, 3.0)]
    [[1.0, 2.0, 5.0], [4.0, 8.0], [10.0]]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from interpkit.logger import interpkit_logger
from interpkit.utils.validate import check_distinct_nodes, validate_samples

__all__ = ["neville", "neville_rows", "poly_interp"]


def _as_column(values: NDArray[Any], x: Any) -> NDArray[Any]:
    """Reshapes 1D ``values`` so that it broadcasts against ``x``."""
    return values.reshape(values.shape + (1,) * np.ndim(x))


def _as_points(x: Any) -> Any:
    """Converts list or tuple evaluation points into an array."""
    return np.asarray(x) if isinstance(x, (list, tuple)) else x


def neville_rows(
    xs: NDArray[Any],
    ys: NDArray[Any],
    x: Any,
) -> Iterator[NDArray[Any]]:
    """Yields the rows of the Neville tableau one at a time.

    No validation is done; callers are expected to have checked ``xs`` and
    ``ys`` (see :func:`interpkit.utils.validate.validate_samples`). Only the
    row being built and the previous one are alive unless the caller keeps
    them.

    Args:
        xs: 1D array of pairwise distinct x-coordinates.
        ys: 1D array of y-coordinates, same length as ``xs``.
        x: Evaluation point, scalar or array.

    Yields:
        Row ``k`` as an array of shape ``(n - k, *np.shape(x))``.
    """
    x = _as_points(x)
    n = xs.shape[0]
    nodes = _as_column(xs, x)
    row = np.array(np.broadcast_to(_as_column(ys, x), (n,) + np.shape(x)))
    yield row

    for k in range(1, n):
        # Column i combines samples i .. i+k: x_j drops the leading node,
        # x_i the trailing one.
        x_j = nodes[:-k]
        x_i = nodes[k:]
        row = ((x - x_j) * row[1:] + (x_i - x) * row[:-1]) / (x_i - x_j)
        yield row


def neville(
    samples: Iterable[tuple[Any, Any]],
    x: Any,
    *,
    check_nodes: bool = True,
) -> list[NDArray[Any]]:
    """Computes the full tableau of Neville's algorithm.

    Each successive row holds interpolants one degree higher than the
    previous one. Entry ``i`` of a row uses the samples starting at position
    ``i`` of the input, so the order of ``samples`` fixes the layout of the
    table but not the value in its last row.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs with distinct ``x``.
        x: Evaluation point, scalar or array.
        check_nodes: Check up front that the x-coordinates are distinct.

    Returns:
        List of ``n`` rows; row ``k`` has ``n - k`` entries, each of the
        shape of ``x``.

    Raises:
        ValueError: If ``samples`` is empty or malformed.
        ZeroDivisionError: If two samples share an x-coordinate.
    """
    xs, ys = validate_samples(samples)
    if check_nodes:
        check_distinct_nodes(xs)
    interpkit_logger.debug("Building Neville tableau over %d samples.", xs.shape[0])
    return list(neville_rows(xs, ys, x))


def poly_interp(
    samples: Iterable[tuple[Any, Any]],
    x: Any,
    *,
    check_nodes: bool = True,
) -> Any:
    """Evaluates the polynomial through ``samples`` at ``x``.

    The degree of the interpolating polynomial is at most one less than the
    number of samples. Only the current row of the tableau is kept.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs with distinct ``x``.
        x: Evaluation point, scalar or array.
        check_nodes: Check up front that the x-coordinates are distinct.

    Returns:
        The interpolated value, with the shape of ``x``.

    Raises:
        ValueError: If ``samples`` is empty or malformed.
        ZeroDivisionError: If two samples share an x-coordinate.
    """
    xs, ys = validate_samples(samples)
    if check_nodes:
        check_distinct_nodes(xs)

    row = None
    for row in neville_rows(xs, ys, x):
        pass
    return row[0]
