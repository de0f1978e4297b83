"""Dense univariate polynomials over an arbitrary numeric field.

Coefficients are stored in ascending order, i.e. ``coefficients[k]`` is the
coefficient of ``x**k``. A descending list (the ``numpy.polyval`` order) is
accepted on construction with ``order="descending"``.

Examples:
    >>> from interpkit.polynomial import Polynomial
    >>> p = Polynomial([1.0, 0.0, 1.0])  # 1 + x**2
    >>> float(p(3.0))
    10.0
    >>> q, r = p.contract(1.0)
    >>> q.coefficients.tolist(), float(r)
    ([1.0, 1.0], 2.0)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = ["Polynomial", "sum_polynomials"]

_ORDERS = ("ascending", "descending")


def _pad(coeffs: NDArray[Any], size: int) -> NDArray[Any]:
    """Appends zero coefficients up to ``size`` entries."""
    if coeffs.size >= size:
        return coeffs
    return np.concatenate([coeffs, np.zeros(size - coeffs.size, dtype=coeffs.dtype)])


class Polynomial:
    """Immutable dense polynomial with ascending coefficients.

    Attributes:
        coefficients: Copy of the coefficient array, constant term first.
        degree: Formal degree, ``len(coefficients) - 1``. Trailing zero
            coefficients are kept, see :meth:`trim`.
    """

    def __init__(self, coefficients: ArrayLike, order: str = "ascending"):
        """Initializes the polynomial.

        Args:
            coefficients: 1D sequence of coefficients. Integer input is
                promoted to ``float64``; Python numbers such as
                :class:`fractions.Fraction` are kept exactly in an
                ``object`` array. An empty sequence is the zero polynomial.
            order: ``"ascending"`` (constant term first) or
                ``"descending"`` (leading term first).

        Raises:
            ValueError: If ``order`` is unknown or the coefficients are not 1D.
        """
        if order not in _ORDERS:
            raise ValueError(f"order must be one of {_ORDERS}; got {order!r}.")

        coeffs = np.array(coefficients)
        if coeffs.ndim != 1:
            raise ValueError(f"coefficients must be 1D; got ndim={coeffs.ndim}.")
        if coeffs.dtype.kind in "biu" or coeffs.size == 0:
            coeffs = coeffs.astype(np.float64)
        if coeffs.size == 0:
            coeffs = np.zeros(1)
        if order == "descending":
            coeffs = coeffs[::-1].copy()

        coeffs.setflags(write=False)
        self._coeffs = coeffs

    @property
    def coefficients(self) -> NDArray[Any]:
        return self._coeffs.copy()

    @property
    def degree(self) -> int:
        return self._coeffs.size - 1

    def __len__(self) -> int:
        return self._coeffs.size

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        a = self.trim()._coeffs
        b = other.trim()._coeffs
        return a.size == b.size and bool(np.all(a == b))

    __hash__ = None

    def evaluate(self, x: Any) -> Any:
        """Evaluates the polynomial at ``x`` with Horner's rule.

        Args:
            x: Scalar or array of evaluation points.

        Returns:
            ``p(x)`` with the shape of ``x``.
        """
        if isinstance(x, (list, tuple)):
            x = np.asarray(x)
        p = self._coeffs[-1]
        for a in self._coeffs[-2::-1]:
            p = p * x + a
        if np.ndim(x) > 0 and np.ndim(p) == 0:
            p = np.full(np.shape(x), p)
        return p

    __call__ = evaluate

    def evaluate_with_derivative(self, x: Any) -> tuple[Any, Any]:
        """Evaluates ``p(x)`` and ``p'(x)`` in a single Horner pass.

        Args:
            x: Scalar or array of evaluation points.

        Returns:
            Tuple ``(p(x), p'(x))``.
        """
        if isinstance(x, (list, tuple)):
            x = np.asarray(x)
        p = self._coeffs[-1]
        dp = 0 * p
        for a in self._coeffs[-2::-1]:
            dp = dp * x + p
            p = p * x + a
        if np.ndim(x) > 0 and np.ndim(p) == 0:
            p, dp = np.full(np.shape(x), p), np.full(np.shape(x), dp)
        return p, dp

    def derivative(self) -> Polynomial:
        """Returns the first derivative as a new polynomial."""
        if self._coeffs.size == 1:
            return Polynomial(np.array([0 * self._coeffs[0]], dtype=self._coeffs.dtype))
        powers = np.arange(1, self._coeffs.size)
        return Polynomial(self._coeffs[1:] * powers)

    def scale(self, s: Any) -> Polynomial:
        """Returns the polynomial multiplied by the scalar ``s``."""
        return Polynomial(self._coeffs * s)

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(self._coeffs.size, other._coeffs.size)
        return Polynomial(_pad(self._coeffs, size) + _pad(other._coeffs, size))

    def __neg__(self) -> Polynomial:
        return self.scale(-1)

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return self.scale(other)
        a, b = self._coeffs, other._coeffs
        out = np.zeros(a.size + b.size - 1, dtype=np.result_type(a, b))
        for i, ai in enumerate(a):
            out[i:i + b.size] += ai * b
        return Polynomial(out)

    def __rmul__(self, other: Any) -> Polynomial:
        return self.scale(other)

    def contract(self, root: Any) -> tuple[Polynomial, Any]:
        """Divides out the linear factor ``(x - root)`` by synthetic division.

        Args:
            root: The root to factor out.

        Returns:
            Tuple ``(quotient, remainder)`` with
            ``p(x) == (x - root) * quotient(x) + remainder``. The remainder
            equals ``p(root)``; it is zero when ``root`` is a root of ``p``.
        """
        a = self._coeffs
        if a.size == 1:
            return Polynomial(np.array([0 * a[0]], dtype=a.dtype)), a[0]

        b = a[-1]
        descending = [b]
        for a_k in a[-2:0:-1]:
            b = a_k + root * b
            descending.append(b)
        remainder = a[0] + root * b
        exact = object if a.dtype.kind == "O" else None
        return Polynomial(np.array(descending, dtype=exact), order="descending"), remainder

    def trim(self, tol: float = 0.0) -> Polynomial:
        """Drops trailing coefficients whose magnitude is at most ``tol``.

        At least the constant coefficient is always kept.
        """
        keep = np.flatnonzero(np.asarray(np.abs(self._coeffs) > tol, dtype=bool))
        size = keep[-1] + 1 if keep.size else 1
        return Polynomial(self._coeffs[:size])


def sum_polynomials(polys: Iterable[Polynomial]) -> Polynomial:
    """Adds up polynomials.

    Args:
        polys: Iterable of polynomials.

    Returns:
        Their sum; the zero polynomial if ``polys`` is empty.
    """
    total = None
    for p in polys:
        total = p if total is None else total + p
    return Polynomial([]) if total is None else total
