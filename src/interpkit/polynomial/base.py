"""Structural interface of the polynomials consumed by the fitters."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PolynomialLike(Protocol):
    """Protocol each polynomial representation must satisfy.

    The fitting routines only rely on these operations, so any dense or
    sparse representation (ascending or descending storage) can be used in
    place of :class:`interpkit.polynomial.Polynomial`. It serves only as a
    structural type check and carries no runtime behavior.
    """
    def evaluate(self, x: Any) -> Any:
        """Evaluate the polynomial at ``x``."""
        ...
    def evaluate_with_derivative(self, x: Any) -> tuple[Any, Any]:
        """Evaluate the polynomial and its first derivative at ``x``."""
        ...
    def scale(self, s: Any) -> PolynomialLike:
        """Multiply the polynomial by the scalar ``s``."""
        ...
    def __add__(self, other: PolynomialLike) -> PolynomialLike:
        """Add two polynomials."""
        ...
    def contract(self, root: Any) -> tuple[PolynomialLike, Any]:
        """Divide out ``(x - root)``, returning quotient and remainder."""
        ...
