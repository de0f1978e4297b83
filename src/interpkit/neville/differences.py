"""Neville's algorithm in difference form.

Instead of the interpolants themselves, each cell ``(k, i)`` of this tableau
stores the pair of corrections ``(c, d)`` that lead to the interpolant
``P[k, i]`` from the two interpolants of the previous row it is built from:

    P[k, i] = P[k-1, i]     + c[k, i]
    P[k, i] = P[k-1, i + 1] + d[k, i]

Row 0 is ``(y, y)``. In exact arithmetic both sums agree; under rounding they
differ slightly, and some paths through the table give more accurate values
than others. This form follows Numerical Recipes, Ch. 3, Sec. 2.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from interpkit.logger import interpkit_logger
from interpkit.neville.tableau import _as_column, _as_points
from interpkit.utils.validate import check_distinct_nodes, validate_samples

__all__ = [
    "neville_diffs",
    "neville_diff_rows",
    "follow_path",
    "nearest_path",
    "poly_interp_diffs",
]


def neville_diff_rows(
    xs: NDArray[Any],
    ys: NDArray[Any],
    x: Any,
) -> Iterator[NDArray[Any]]:
    """Yields the rows of the difference tableau one at a time.

    Args:
        xs: 1D array of pairwise distinct x-coordinates (not checked).
        ys: 1D array of y-coordinates, same length as ``xs``.
        x: Evaluation point, scalar or array.

    Yields:
        Row ``k`` as an array of shape ``(n - k, 2, *np.shape(x))``;
        ``row[:, 0]`` holds ``c`` and ``row[:, 1]`` holds ``d``.
    """
    x = _as_points(x)
    n = xs.shape[0]
    nodes = _as_column(xs, x)
    base = np.broadcast_to(_as_column(ys, x), (n,) + np.shape(x))
    row = np.stack([base, base], axis=1)
    yield row

    for k in range(1, n):
        x_j = nodes[:-k]
        x_i = nodes[k:]
        delta = row[1:, 0] - row[:-1, 1]
        denom = x_j - x_i
        c = (x_j - x) * delta / denom
        d = (x_i - x) * delta / denom
        row = np.stack([c, d], axis=1)
        yield row


def neville_diffs(
    samples: Iterable[tuple[Any, Any]],
    x: Any,
    *,
    check_nodes: bool = True,
) -> list[NDArray[Any]]:
    """Computes the difference tableau of Neville's algorithm.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs with distinct ``x``.
        x: Evaluation point, scalar or array.
        check_nodes: Check up front that the x-coordinates are distinct.

    Returns:
        List of ``n`` rows; row ``k`` has shape ``(n - k, 2, *np.shape(x))``
        with the ``c`` corrections in column 0 and ``d`` in column 1.

    Raises:
        ValueError: If ``samples`` is empty or malformed.
        ZeroDivisionError: If two samples share an x-coordinate.
    """
    xs, ys = validate_samples(samples)
    if check_nodes:
        check_distinct_nodes(xs)
    interpkit_logger.debug(
        "Building Neville difference tableau over %d samples.", xs.shape[0]
    )
    return list(neville_diff_rows(xs, ys, x))


def follow_path(
    table: Sequence[NDArray[Any]],
    start: int,
    moves: Iterable[str],
) -> tuple[Any, NDArray[Any]]:
    """Sums the corrections along a path through a difference tableau.

    The path starts at ``y[start]`` in row 0 and descends one row per move:

    * ``"c"`` keeps the column and adds the ``c`` of the cell below.
    * ``"d"`` moves one column to the left and adds the ``d`` of that cell.

    A complete path has ``len(table) - 1`` moves, ``start`` of which are
    ``"d"``, and ends in the single cell of the last row.

    Args:
        table: Difference tableau from :func:`neville_diffs`.
        start: Column of the starting sample in row 0.
        moves: Sequence of ``"c"``/``"d"`` moves.

    Returns:
        Tuple ``(value, corrections)``: the interpolated value and the array
        of corrections added at each level, in order.

    Raises:
        ValueError: If the path leaves the table or does not reach its last row.
    """
    n = len(table)
    if not 0 <= start < n:
        raise ValueError(f"start must be in [0, {n - 1}]; got {start}.")
    moves = list(moves)
    if len(moves) != n - 1:
        raise ValueError(f"a path through {n} rows needs {n - 1} moves; got {len(moves)}.")

    col = start
    value = table[0][start, 0]
    corrections = []
    for k, move in enumerate(moves, start=1):
        if move == "c":
            if col > n - 1 - k:
                raise ValueError(f"move {k} ('c') leaves row {k} at column {col}.")
            step = table[k][col, 0]
        elif move == "d":
            col -= 1
            if col < 0:
                raise ValueError(f"move {k} ('d') leaves row {k} at column {col}.")
            step = table[k][col, 1]
        else:
            raise ValueError(f"moves must be 'c' or 'd'; got {move!r}.")
        value = value + step
        corrections.append(step)
    return value, np.asarray(corrections)


def nearest_path(
    samples: Iterable[tuple[Any, Any]],
    x: Any,
) -> tuple[int, list[str]]:
    """Chooses the path that starts at the sample nearest to ``x``.

    At each level the path takes ``"c"`` while it is in the upper half of
    the remaining row and ``"d"`` otherwise, so it stays centred on ``x``.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs.
        x: Scalar evaluation point.

    Returns:
        Tuple ``(start, moves)`` for :func:`follow_path`.

    Raises:
        ValueError: If ``x`` is not a scalar.
    """
    if np.ndim(x) != 0:
        raise ValueError("nearest_path needs a scalar evaluation point.")
    xs, _ = validate_samples(samples)
    n = xs.shape[0]
    start = int(np.argmin(np.abs(xs - x)))

    col = start
    moves = []
    for k in range(1, n):
        if 2 * col < n - k:
            moves.append("c")
        else:
            moves.append("d")
            col -= 1
    return start, moves


def poly_interp_diffs(
    samples: Iterable[tuple[Any, Any]],
    x: Any,
    *,
    check_nodes: bool = True,
) -> tuple[Any, NDArray[Any]]:
    """Evaluates the interpolant along the nearest path of the difference tableau.

    The last correction is the size of the final step and is a common
    indication of how far the value is from converged. It is returned as is,
    not turned into an error bound.

    Args:
        samples: Ordered sequence of ``(x, y)`` pairs with distinct ``x``.
        x: Scalar evaluation point.
        check_nodes: Check up front that the x-coordinates are distinct.

    Returns:
        Tuple ``(value, corrections)``, see :func:`follow_path`.
    """
    samples = list(samples)
    table = neville_diffs(samples, x, check_nodes=check_nodes)
    start, moves = nearest_path(samples, x)
    return follow_path(table, start, moves)
