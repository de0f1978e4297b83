"""Utility functions for InterpKit package."""

from .validate import (
    check_distinct_nodes,
    check_nonzero_nodes,
    validate_samples,
    validate_xy,
)

__all__ = [
    "check_distinct_nodes",
    "check_nonzero_nodes",
    "validate_samples",
    "validate_xy",
]
