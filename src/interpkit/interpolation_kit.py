"""Provides the InterpolationKit API.

This class is a lightweight front end over InterpKit's tableau and fitting
engines. You provide the samples once; they are validated up front and can
then be evaluated at any point, inspected through the Neville tableaux, or
turned into explicit coefficients with the fitting method of your choice.

Adding methods
--------------
New fitting methods can be registered without modifying this class by
calling ``register_method`` (see example below).

Examples:
    Basic usage:

        >>> from interpkit.interpolation_kit import InterpolationKit
        >>> kit = InterpolationKit(x=[0.0, 1.0, 2.0], y=[1.0, 2.0, 5.0])
        >>> float(kit.interpolate(3.0))
        10.0
        >>> kit.fit(method="iterative").coefficients.tolist()
        [1.0, 0.0, 1.0]

    Registering a new method:

        >>> from interpkit.interpolation_kit import register_method
        >>> from interpkit.some_new_method import chebyshev_poly_fit
        >>> register_method(
        ...     name="chebyshev",
        ...     fn=chebyshev_poly_fit,
        ...     aliases=("cheb",),
        ... )  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive; aliases like
      ``"barycentric"`` or ``"deflation"`` are supported when registered.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping, Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

from interpkit.fitting.barycentric import lagrange_poly_fit
from interpkit.fitting.config import FitConfig
from interpkit.fitting.deflation import iterative_poly_fit
from interpkit.logger import interpkit_logger
from interpkit.neville.differences import follow_path, nearest_path, neville_diff_rows
from interpkit.neville.tableau import neville_rows
from interpkit.polynomial.poly import Polynomial
from interpkit.utils.concurrency import normalize_workers, parallel_execute
from interpkit.utils.validate import check_distinct_nodes, validate_samples, validate_xy


class FitMethod(Protocol):
    """Protocol each fitting method must satisfy.

    A fitting method takes the ordered ``(x, y)`` samples and returns the
    polynomial through them, with coefficients in ascending order.
    """
    def __call__(
        self,
        samples: Iterable[tuple[Any, Any]],
        *,
        check_nodes: bool = True,
    ) -> Polynomial:
        """Fit the polynomial through ``samples``."""
        ...


# These are the built-in methods available in the package by default.
_METHOD_SPECS: list[tuple[str, FitMethod, list[str]]] = [
    ("lagrange", lagrange_poly_fit, ["barycentric", "lagrange-fit", "lpf"]),
    ("iterative", iterative_poly_fit, ["deflation", "iterative-fit", "ipf"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, FitMethod], tuple[str, ...]]:
    """Construct and cache lookup tables for fitting methods.

    The cache is cleared by ``register_method``.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to fitting functions and
        ``canonical_names`` lists the sorted canonical method names.
    """
    method_map: dict[str, FitMethod] = {}
    canonical: set[str] = set()
    for name, fn, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = fn
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = fn
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    fn: FitMethod,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new fitting method.

    Adds a fitting function that can be referenced by name in
    :meth:`InterpolationKit.fit` and :class:`FitConfig`. The internal cache
    is automatically cleared and rebuilt on the next lookup.

    Args:
        name: Canonical public name of the method (e.g., "vandermonde").
        fn: Callable implementing the FitMethod protocol.
        aliases: Additional accepted spellings.
    """
    _METHOD_SPECS.append((name, fn, list(aliases)))
    _method_maps.cache_clear()


def _resolve(method: str) -> FitMethod:
    """Resolve a user-provided method name or alias to a fitting function.

    Args:
        method: User-provided method name or alias.

    Returns:
        Corresponding fitting function.
    """
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown fitting method '{method}'. Choose one of {{{opts}}}.") from None


def available_methods() -> list[str]:
    """List canonical fitting method names exposed by this API.

    Returns:
        List of method names.
    """
    _, canon = _method_maps()
    return list(canon)


class InterpolationKit:
    """Unified interface for polynomial interpolation and fitting.

    Example:
        >>> from interpkit.interpolation_kit import InterpolationKit
        >>> kit = InterpolationKit.from_samples([(0.0, 1.0), (1.0, 2.0), (2.0, 5.0)])
        >>> kit.fit().coefficients.tolist()  # uses the default "lagrange" method
        [1.0, 0.0, 1.0]

    Attributes:
        x: Validated x-coordinates of the samples.
        y: Validated y-coordinates of the samples.
        config: The :class:`FitConfig` in use.
    """

    def __init__(self, x: ArrayLike, y: ArrayLike, *, config: FitConfig | None = None):
        """Initializes the kit with the coordinates of the samples.

        Args:
            x: 1D array-like of x-coordinates.
            y: 1D array-like of y-coordinates, same length as ``x``.
            config: Fitting configuration; defaults to ``FitConfig()``.

        Raises:
            ValueError: If ``x`` and ``y`` are empty, not 1D or of different lengths.
            ZeroDivisionError: If ``config.check_nodes`` is set and two
                x-coordinates coincide.
        """
        self.x, self.y = validate_xy(x, y)
        self.config = config if config is not None else FitConfig()
        if self.config.check_nodes:
            check_distinct_nodes(self.x)

    @classmethod
    def from_samples(
        cls,
        samples: Iterable[tuple[Any, Any]],
        *,
        config: FitConfig | None = None,
    ) -> InterpolationKit:
        """Builds a kit from an ordered sequence of ``(x, y)`` pairs."""
        xs, ys = validate_samples(samples)
        return cls(xs, ys, config=config)

    @property
    def samples(self) -> list[tuple[Any, Any]]:
        return list(zip(self.x, self.y))

    def __len__(self) -> int:
        return self.x.shape[0]

    def _interpolate(self, x0: Any) -> Any:
        row = None
        for row in neville_rows(self.x, self.y, x0):
            pass
        return row[0]

    def interpolate(self, x0: Any, *, n_workers: int = 1) -> Any:
        """Evaluates the interpolating polynomial at ``x0``.

        Args:
            x0: Scalar or array of evaluation points.
            n_workers: Number of threads used to split an array of
                evaluation points. Values below 1 are treated as 1.

        Returns:
            The interpolated value(s), with the shape of ``x0``.
        """
        workers = normalize_workers(n_workers)
        if workers == 1 or np.ndim(x0) == 0:
            return self._interpolate(x0)

        points = np.asarray(x0)
        chunks = [c for c in np.array_split(points.ravel(), workers) if c.size]
        if len(chunks) <= 1:
            return self._interpolate(points)
        interpkit_logger.debug(
            "Interpolating %d points in %d chunks.", points.size, len(chunks)
        )
        parts = parallel_execute(
            self._interpolate, [(c,) for c in chunks], n_workers=workers
        )
        return np.concatenate(parts).reshape(points.shape)

    def tableau(self, x0: Any) -> list[NDArray[Any]]:
        """Returns the Neville tableau at ``x0``, see :func:`interpkit.neville.neville`."""
        return list(neville_rows(self.x, self.y, x0))

    def difference_tableau(self, x0: Any) -> list[NDArray[Any]]:
        """Returns the difference tableau at ``x0``, see :func:`interpkit.neville.neville_diffs`."""
        return list(neville_diff_rows(self.x, self.y, x0))

    def interpolate_with_corrections(self, x0: Any) -> tuple[Any, NDArray[Any]]:
        """Evaluates at a scalar ``x0`` along the nearest path of the difference tableau.

        Returns:
            Tuple ``(value, corrections)``, see :func:`interpkit.neville.follow_path`.
        """
        start, moves = nearest_path(self.samples, x0)
        return follow_path(self.difference_tableau(x0), start, moves)

    def fit(self, *, method: str | None = None) -> Polynomial:
        """Computes the coefficients of the interpolating polynomial.

        Args:
            method: Method name or alias (e.g., "lagrange", "iterative").
                Defaults to ``config.method``.

        Returns:
            The fitted polynomial, constant term first.

        Raises:
            ValueError: If `method` is not recognized.
        """
        chosen = method or self.config.method
        fit_fn = _resolve(chosen)
        poly = fit_fn(self.samples, check_nodes=self.config.check_nodes)
        if self.config.trim:
            poly = poly.trim(self.config.trim_tol)
        return poly
