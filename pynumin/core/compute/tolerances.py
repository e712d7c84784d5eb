"""
Tolerance tiers and iteration limits for the numerical kernels.

Defines precision expectations per floating dtype:
- FLOAT64: double precision kernels and tests
- FLOAT32: relaxed for single-precision arithmetic
- FLOAT16: comparisons of half-precision arrays only; kernels work in float32

Used by the Jacobi eigen/SVD kernels, the symmetry check in eigen(),
Array.allclose() and the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision',
)

FLOAT32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='float32',
    description='Single precision',
)

FLOAT16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='float16',
    description='Half precision',
)

# Upper bound on cyclic Jacobi sweeps (eigen and SVD). Quadratic convergence
# means well-scaled problems finish in well under 20.
JACOBI_MAX_SWEEPS = 100

# Laplace expansion is O(n!); above this size determinant() warns.
LAPLACE_WARN_SIZE = 10


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier for a given element dtype."""
    resolved = np.dtype(dtype)
    if resolved == np.float16:
        return FLOAT16
    if resolved == np.float32:
        return FLOAT32
    return FLOAT64
