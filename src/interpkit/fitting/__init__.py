"""Recovery of the coefficients of an interpolating polynomial."""

from interpkit.fitting.barycentric import lagrange_poly_fit
from interpkit.fitting.config import FitConfig
from interpkit.fitting.deflation import iterative_poly_fit

__all__ = ["FitConfig", "iterative_poly_fit", "lagrange_poly_fit"]
