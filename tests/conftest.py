"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible test data."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line():
    """Noiseless y = 2x + 1."""
    x = np.arange(10, dtype=np.float64)
    return x, 2.0 * x + 1.0


@pytest.fixture
def noisy_line(rng):
    """y = 2x + 1 with N(0, 0.5²) noise, x uniform on [0, 10]."""
    n = 30
    x = np.sort(rng.uniform(0.0, 10.0, n))
    y = 2.0 * x + 1.0 + rng.normal(0.0, 0.5, n)
    return x, y


@pytest.fixture
def exact_quadratic():
    """y = (x + 1)² = x² + 2x + 1 on x = 0..4."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    return x, (x + 1.0) ** 2
