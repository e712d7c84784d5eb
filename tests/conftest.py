"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """5x5 symmetric positive-definite matrix."""
    X = rng.standard_normal((5, 5))
    return X @ X.T + 5.0 * np.eye(5)


@pytest.fixture
def dominant_matrix(rng):
    """4x4 strictly diagonally dominant matrix (no zero pivots without pivoting)."""
    X = rng.standard_normal((4, 4))
    return X + np.diag(np.sum(np.abs(X), axis=1) + 1.0)
