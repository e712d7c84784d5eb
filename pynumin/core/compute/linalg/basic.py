"""
Basic dense linear algebra kernels.

Matrix product, dot product, cofactor determinant, Gauss-Jordan
inverse and trace on 2D (or 1D) numpy arrays. Inputs are already
validated by pynumin.linalg; kernels only compute.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumin.core.exceptions import SingularMatrixError


def matmul_accumulate(a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix product by accumulating k rank-1 updates.

    C starts at the element type's zero and receives a[:, k] * b[k, :]
    for each k, which is the classic i/j/k triple loop with the i and j
    loops done by numpy. O(m·n·p).

    Args:
        a: (m, n) matrix
        b: (n, p) matrix

    Returns:
        (m, p) product in the promoted dtype of a and b
    """
    dtype = np.result_type(a.dtype, b.dtype)
    m, n = a.shape
    p = b.shape[1]
    result = np.zeros((m, p), dtype=dtype)
    for k in range(n):
        result += np.multiply.outer(a[:, k], b[k, :]).astype(dtype, copy=False)
    return result


def dot(a: NDArray[Any], b: NDArray[Any]) -> Any:
    """Sum of elementwise products of two equal-length vectors."""
    dtype = np.result_type(a.dtype, b.dtype)
    return dtype.type(0) + np.sum(np.multiply(a, b, dtype=dtype), dtype=dtype)


def laplace_determinant(a: NDArray[Any]) -> Any:
    """
    Determinant by cofactor (Laplace) expansion along row 0.

    No pivoting and no reuse of minors: the cost is O(n!). Exact for
    integer dtypes as long as intermediate products fit the dtype.

    Args:
        a: (n, n) matrix

    Returns:
        Determinant as a scalar of a's dtype
    """
    n = a.shape[0]
    if n == 1:
        return a[0, 0]
    if n == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]

    det = a.dtype.type(0)
    below = a[1:]
    for p in range(n):
        minor = np.delete(below, p, axis=1)
        term = a[0, p] * laplace_determinant(minor)
        det = det + term if p % 2 == 0 else det - term
    return det


def gauss_jordan_inverse(work: NDArray[np.floating[Any]], matrix_name: str = 'A') -> NDArray[np.floating[Any]]:
    """
    Inverse by Gauss-Jordan elimination without pivoting.

    ``work`` is reduced to the identity IN PLACE; pass a copy to keep
    the original. Each step i normalizes row i by the pivot work[i, i]
    and eliminates column i from every other row, applying the same row
    operations to a matrix that starts as the identity.

    Args:
        work: (n, n) floating matrix, overwritten
        matrix_name: Name used in error messages

    Returns:
        (n, n) inverse

    Raises:
        SingularMatrixError: If a pivot is exactly zero
    """
    n = work.shape[0]
    result = np.eye(n, dtype=work.dtype)

    for i in range(n):
        pivot = work[i, i]
        if pivot == 0:
            raise SingularMatrixError(
                f"{matrix_name}: zero pivot at elimination step {i}; "
                f"matrix is singular and cannot be inverted",
                matrix_name=matrix_name,
                pivot_index=i,
            )
        work[i, :] /= pivot
        result[i, :] /= pivot

        for k in range(n):
            if k == i:
                continue
            factor = work[k, i]
            work[k, :] -= factor * work[i, :]
            result[k, :] -= factor * result[i, :]

    return result


def trace(a: NDArray[Any]) -> Any:
    """Sum of the main diagonal."""
    return a.dtype.type(0) + np.sum(np.diagonal(a), dtype=a.dtype)
