"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyfinlinalg.core.random import seed, random_correlation_matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def correlation_5x5():
    """Full-rank 5x5 correlation matrix from a seeded Mersenne Twister."""
    return random_correlation_matrix(5, seed(3141))


@pytest.fixture
def exponential_correlation():
    """Term-structure style correlation exp(-0.1 |i - j|), 8 x 8."""
    t = np.arange(8, dtype=np.float64)
    return np.exp(-0.1 * np.abs(t[:, None] - t[None, :]))


@pytest.fixture
def well_conditioned_matrix(rng):
    """Random 6x6 matrix shifted to be comfortably nonsingular."""
    return rng.standard_normal((6, 6)) + 6.0 * np.eye(6)
