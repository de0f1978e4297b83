"""Tableau constructions of Neville's algorithm."""

from interpkit.neville.differences import (
    follow_path,
    nearest_path,
    neville_diff_rows,
    neville_diffs,
    poly_interp_diffs,
)
from interpkit.neville.tableau import neville, neville_rows, poly_interp

__all__ = [
    "follow_path",
    "nearest_path",
    "neville",
    "neville_diff_rows",
    "neville_diffs",
    "neville_rows",
    "poly_interp",
    "poly_interp_diffs",
]
