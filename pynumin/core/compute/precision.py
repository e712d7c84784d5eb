"""
Numerical precision utilities.

Provides machine epsilon and closeness checks used across the kernels.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Integer dtypes report the float64 epsilon, since every kernel that
    needs one promotes integers to float64.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        dtype = np.dtype(np.float64)
    return float(np.finfo(dtype).eps)


def is_close(
    a: float | NDArray[Any],
    b: float | NDArray[Any],
    rtol: float,
    atol: float
) -> bool:
    """
    Check if all values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        True if every pair of values is close
    """
    return bool(np.all(np.abs(np.subtract(a, b)) <= atol + rtol * np.abs(b)))
