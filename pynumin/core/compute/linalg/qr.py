"""
QR decomposition by classical Gram-Schmidt.

Computes A = QR for square A, Q orthogonal and R upper triangular.
Projection coefficients are taken against the ORIGINAL columns of A
(classical, not modified, Gram-Schmidt), so orthogonality of Q degrades
for nearly collinear columns.

The square root is supplied by the caller.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumin.core.exceptions import SingularMatrixError
from pynumin.core.protocols import SqrtFunction


def qr_gram_schmidt(
    a: NDArray[np.floating[Any]],
    sqrt: SqrtFunction,
    matrix_name: str = 'A',
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Classical Gram-Schmidt QR.

    ``residual`` starts as a copy of A. For column i its Euclidean norm
    (via ``sqrt``) becomes R[i, i] and the normalized column becomes
    Q[:, i]; every later column j then loses its projection
    R[i, j] = <Q[:, i], A[:, j]> onto Q[:, i].

    Args:
        a: (n, n) floating matrix (not modified)
        sqrt: Square root function
        matrix_name: Name used in error messages

    Returns:
        (Q, R)

    Raises:
        SingularMatrixError: If a residual column has zero norm
            (columns are linearly dependent)
    """
    n = a.shape[0]
    Q = np.zeros_like(a)
    R = np.zeros_like(a)
    residual = a.copy()

    for i in range(n):
        q = residual[:, i]
        norm = sqrt(np.dot(q, q))
        if norm == 0:
            raise SingularMatrixError(
                f"{matrix_name}: column {i} is linearly dependent on the previous columns",
                matrix_name=matrix_name,
                pivot_index=i,
            )
        R[i, i] = norm
        Q[:, i] = q / norm

        for j in range(i + 1, n):
            R[i, j] = np.dot(Q[:, i], a[:, j])
            residual[:, j] -= R[i, j] * Q[:, i]

    return Q, R
