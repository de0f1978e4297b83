"""Configuration for polynomial fitting.

This config controls which fitting method :class:`InterpolationKit` uses,
whether the nodes are checked before any arithmetic is done, and whether
trailing near-zero coefficients are dropped from the result.
"""

from __future__ import annotations


class FitConfig:
    """Configuration for polynomial fitting.

    This config controls which fitting method :class:`InterpolationKit` uses,
    whether the nodes are checked before any arithmetic is done, and whether
    trailing near-zero coefficients are dropped from the result.
    """

    def __init__(
        self,
        method: str = "lagrange",
        trim: bool = False,
        trim_tol: float = 0.0,
        check_nodes: bool = True,
    ):
        """Initialize configuration.

        Args:
            method:
                Name (or alias) of the fitting method used by
                :meth:`InterpolationKit.fit` when no method is passed.
                ``"lagrange"`` uses barycentric Lagrange contraction,
                ``"iterative"`` uses repeated Neville evaluation at zero
                followed by deflation.

            trim:
                If ``True``, trailing coefficients with magnitude at most
                ``trim_tol`` are dropped from the fitted polynomial. By
                default the fit keeps all ``n`` coefficients.

            trim_tol:
                Magnitude below which a trailing coefficient counts as zero
                when ``trim`` is enabled. Must be non-negative.

            check_nodes:
                If ``True``, repeated x-coordinates (and, for the iterative
                method, zero x-coordinates used as divisors) are reported as
                ``ZeroDivisionError`` before the fit starts. If ``False`` the
                arithmetic fails on its own: exact types raise, NumPy floats
                produce ``inf``/``nan`` with a ``RuntimeWarning``.

        Raises:
            ValueError: If ``trim_tol`` is negative.
        """
        if trim_tol < 0:
            raise ValueError(f"trim_tol must be >= 0; got {trim_tol}.")

        self.method = method
        self.trim = bool(trim)
        self.trim_tol = float(trim_tol)
        self.check_nodes = bool(check_nodes)
