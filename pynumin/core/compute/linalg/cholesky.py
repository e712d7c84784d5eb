"""
Cholesky decomposition A = L L^T.

Row-by-row recurrence for symmetric positive-definite A. Only the lower
triangle of A is read; symmetry is not checked.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumin.core.exceptions import NotPositiveDefiniteError
from pynumin.core.protocols import SqrtFunction


def cholesky_lower(
    a: NDArray[np.floating[Any]],
    sqrt: SqrtFunction,
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Lower Cholesky factor.

    For i >= j:
        L[i, i] = sqrt(A[i, i] - sum_{k<i} L[i, k]^2)
        L[i, j] = (A[i, j] - sum_{k<j} L[i, k] L[j, k]) / L[j, j]   (i > j)

    Args:
        a: (n, n) floating matrix (not modified)
        sqrt: Square root function
        matrix_name: Name used in error messages

    Returns:
        L, lower triangular

    Raises:
        NotPositiveDefiniteError: If a diagonal radicand is not > 0
    """
    n = a.shape[0]
    L = np.zeros_like(a)

    for i in range(n):
        for j in range(i + 1):
            partial = np.dot(L[i, :j], L[j, :j])
            if i == j:
                radicand = a[i, i] - partial
                if not radicand > 0:
                    raise NotPositiveDefiniteError(
                        f"{matrix_name}: not positive definite; radicand at row {i} is {radicand}",
                        matrix_name=matrix_name,
                        pivot_index=i,
                        radicand=float(radicand),
                    )
                L[i, i] = sqrt(radicand)
            else:
                L[i, j] = (a[i, j] - partial) / L[j, j]

    return L
