"""Concurrency helpers for batch evaluation."""

from __future__ import annotations

import contextvars
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence, Tuple

__all__ = [
    "parallel_execute",
    "normalize_workers",
]


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in ``arg_tuples``.

    With ``n_workers > 1`` the calls are spread over a thread pool; each task
    runs in a copy of the caller's context. Results keep the input order.
    """
    if n_workers > 1 and len(arg_tuples) > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]


def normalize_workers(
    n_workers: Any
) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).

    Raises:
        None: Invalid inputs are coerced to 1.
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n
