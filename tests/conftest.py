"""Pytest configuration file with shared sample sets."""

import numpy as np
import pytest


def _cubic(x):
    return 2.0 - x + 0.5 * x**3


@pytest.fixture
def cubic():
    """Reference cubic 2 - x + x**3 / 2 used to generate samples."""
    return _cubic


@pytest.fixture
def parabola_samples():
    """Samples of y = x**2 + 1 at x = 0, 1, 2."""
    return [(0.0, 1.0), (1.0, 2.0), (2.0, 5.0)]


@pytest.fixture
def cubic_samples(cubic):
    """Five unevenly spaced samples of the reference cubic, none at x = 0."""
    xs = np.array([-1.5, -0.5, 0.25, 1.0, 2.0])
    return list(zip(xs, cubic(xs)))


@pytest.fixture
def random_samples():
    """Eight samples of a smooth function at random, distinct, nonzero x."""
    rng = np.random.default_rng(1234)
    xs = rng.uniform(0.1, 2.0, size=8) * rng.choice([-1.0, 1.0], size=8)
    return list(zip(xs, np.sin(xs) + xs**2))
