"""
Shared compute infrastructure for PyNumin.

IMPORTANT: This module works on plain numpy arrays. Validation and
wrapping into Array happen in pynumin.linalg.

Submodules:
    tolerances: Tolerance tiers and iteration limits
    precision: Machine epsilon and closeness checks
    linalg: Linear algebra kernels (basic, LU, QR, Cholesky, eigen, SVD)
"""

from pynumin.core.compute.tolerances import (
    ToleranceTier,
    FLOAT16,
    FLOAT32,
    FLOAT64,
    JACOBI_MAX_SWEEPS,
    LAPLACE_WARN_SIZE,
    select_tolerance,
)
from pynumin.core.compute.precision import machine_epsilon, is_close

__all__ = [
    # Tolerances
    "ToleranceTier",
    "FLOAT16",
    "FLOAT32",
    "FLOAT64",
    "JACOBI_MAX_SWEEPS",
    "LAPLACE_WARN_SIZE",
    "select_tolerance",
    # Precision
    "machine_epsilon",
    "is_close",
]
