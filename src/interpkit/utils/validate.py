"""Validation utilities for sample sets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from interpkit.logger import interpkit_logger

__all__ = [
    "as_field_array",
    "validate_samples",
    "validate_xy",
    "check_distinct_nodes",
    "check_nonzero_nodes",
]


def as_field_array(values: ArrayLike, name: str = "values") -> NDArray[Any]:
    """Converts ``values`` into a 1D array over a field type.

    Integer and boolean input is promoted to ``float64``. Float and complex
    input keeps its dtype. Anything else (e.g. :class:`fractions.Fraction`)
    ends up in an ``object`` array so the arithmetic stays in that field.

    Args:
        values: 1D array-like of numbers.
        name: Name used in error messages.

    Returns:
        A 1D NumPy array.

    Raises:
        ValueError: If ``values`` is not one-dimensional or holds strings or bytes.
    """
    arr = np.asarray(values)
    if arr.dtype.kind in "USV":
        raise ValueError(f"{name} must be numeric; got dtype {arr.dtype}.")
    if arr.dtype.kind in "biu":
        arr = arr.astype(np.float64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D; got ndim={arr.ndim}.")
    return arr


def _warn_non_finite(arr: NDArray[Any], name: str) -> None:
    """Logs a warning if a float or complex array holds inf or nan."""
    if arr.dtype.kind in "fc" and not np.all(np.isfinite(arr)):
        interpkit_logger.warning(
            "%s contains non-finite values; interpolants will not be finite.", name
        )


def validate_xy(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[Any], NDArray[Any]]:
    """Validates separate ``x`` and ``y`` sequences of sample coordinates.

    Requirements:
      - ``x`` and ``y`` are 1D and have the same, non-zero length.

    Distinctness of ``x`` is not checked here, see :func:`check_distinct_nodes`.

    Args:
        x: 1D array-like of x values.
        y: 1D array-like of y values with ``len(y) == len(x)``.

    Returns:
        Tuple of (x_array, y_array) as NumPy arrays.

    Raises:
        ValueError: If input arrays do not meet the required conditions.
    """
    xs = as_field_array(x, "x")
    ys = as_field_array(y, "y")

    if xs.shape[0] != ys.shape[0]:
        raise ValueError(
            f"x and y must have the same length; got {xs.shape[0]} and {ys.shape[0]}."
        )
    if xs.shape[0] == 0:
        raise ValueError("at least one sample point is required.")

    _warn_non_finite(xs, "x")
    _warn_non_finite(ys, "y")
    return xs, ys


def validate_samples(
    samples: Iterable[tuple[Any, Any]] | NDArray[Any],
) -> tuple[NDArray[Any], NDArray[Any]]:
    """Splits a sequence of ``(x, y)`` pairs into validated ``x`` and ``y`` arrays.

    ``samples`` may be any iterable of pairs or a NumPy array of shape
    ``(n, 2)``. The order of the samples is preserved.

    Args:
        samples: The sample points.

    Returns:
        Tuple of (x_array, y_array) as NumPy arrays.

    Raises:
        ValueError: If ``samples`` is empty or an element is not a pair.
    """
    if isinstance(samples, np.ndarray):
        if samples.ndim != 2 or samples.shape[1] != 2:
            raise ValueError(
                f"sample array must have shape (n, 2); got {samples.shape}."
            )
        return validate_xy(samples[:, 0], samples[:, 1])

    xs = []
    ys = []
    for k, pair in enumerate(samples):
        try:
            x, y = pair
        except (TypeError, ValueError):
            raise ValueError(f"sample {k} is not an (x, y) pair: {pair!r}.") from None
        xs.append(x)
        ys.append(y)
    return validate_xy(xs, ys)


def check_distinct_nodes(xs: NDArray[Any]) -> None:
    """Checks that the x-coordinates are pairwise distinct.

    Every interpolation formula in this package divides by ``x_i - x_j``, so
    a repeated x-coordinate is reported as a division by zero before any
    arithmetic is done.

    Args:
        xs: 1D array of x-coordinates.

    Raises:
        ZeroDivisionError: If two x-coordinates are equal.
    """
    same = np.asarray(xs[:, np.newaxis] == xs[np.newaxis, :], dtype=bool)
    same = np.triu(same, k=1)
    if same.any():
        i, j = np.argwhere(same)[0]
        raise ZeroDivisionError(
            "x-coordinates must be pairwise distinct; "
            f"samples {i} and {j} share x={xs[i]!r}."
        )


def check_nonzero_nodes(xs: NDArray[Any], start: int = 0) -> None:
    """Checks that no x-coordinate from position ``start`` on is zero.

    Args:
        xs: 1D array of x-coordinates.
        start: First position that is used as a divisor.

    Raises:
        ZeroDivisionError: If one of the checked x-coordinates is zero.
    """
    zero = np.flatnonzero(np.asarray(xs[start:] == 0, dtype=bool))
    if zero.size:
        raise ZeroDivisionError(
            f"x-coordinate of sample {start + zero[0]} is zero and would be "
            "used as a divisor."
        )
