"""
LU decomposition (Doolittle, no pivoting).

Computes A = LU with L unit lower triangular and U upper triangular.
Without row exchanges the factorization exists only when every leading
principal minor except possibly the last is non-zero; a zero pivot that
would be divided by is reported as SingularMatrixError.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumin.core.exceptions import SingularMatrixError


def lu_doolittle(
    a: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Doolittle LU factorization.

    For each row i:
        U[i, j] = A[i, j] - sum_{k<i} L[i, k] U[k, j]          (j >= i)
        L[i, i] = 1
        L[j, i] = (A[j, i] - sum_{k<i} L[j, k] U[k, i]) / U[i, i]   (j > i)

    Args:
        a: (n, n) floating matrix (not modified)
        matrix_name: Name used in error messages

    Returns:
        (L, U)

    Raises:
        SingularMatrixError: If U[i, i] == 0 for some i < n - 1
    """
    n = a.shape[0]
    L = np.zeros_like(a)
    U = np.zeros_like(a)

    for i in range(n):
        U[i, i:] = a[i, i:] - L[i, :i] @ U[:i, i:]
        L[i, i] = 1

        if i == n - 1:
            break
        if U[i, i] == 0:
            raise SingularMatrixError(
                f"{matrix_name}: zero pivot U[{i}, {i}]; LU without pivoting does not exist",
                matrix_name=matrix_name,
                pivot_index=i,
            )
        L[i + 1:, i] = (a[i + 1:, i] - L[i + 1:, :i] @ U[:i, i]) / U[i, i]

    return L, U
