"""Provides all interpkit methods."""

from importlib.metadata import PackageNotFoundError, version

from interpkit.fitting import FitConfig, iterative_poly_fit, lagrange_poly_fit
from interpkit.interpolation_kit import (
    InterpolationKit,
    available_methods,
    register_method,
)
from interpkit.neville import (
    follow_path,
    nearest_path,
    neville,
    neville_diffs,
    poly_interp,
    poly_interp_diffs,
)
from interpkit.polynomial import (
    Polynomial,
    lagrange,
    lagrange_basis,
    lagrange_weights,
    sum_polynomials,
)

try:
    __version__ = version("interpkit")
except PackageNotFoundError:
    pass

__all__ = [
    "FitConfig",
    "InterpolationKit",
    "Polynomial",
    "available_methods",
    "follow_path",
    "iterative_poly_fit",
    "lagrange",
    "lagrange_basis",
    "lagrange_poly_fit",
    "lagrange_weights",
    "nearest_path",
    "neville",
    "neville_diffs",
    "poly_interp",
    "poly_interp_diffs",
    "register_method",
    "sum_polynomials",
]
