"""
Linear algebra entry points.

Each function validates its Array operands, runs the matching kernel
from pynumin.core.compute.linalg on the strided logical view, and wraps
the output in new Arrays. Operands are never modified, except by
inverse(..., overwrite_a=True).

Integer operands are promoted to float64, and float16 operands to float32,
by inverse() and by every factorization; matmul, dot_product, determinant
and trace stay in the element type.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from pynumin.core.array import Array
from pynumin.core.compute.linalg.basic import (
    dot,
    gauss_jordan_inverse,
    laplace_determinant,
    matmul_accumulate,
    trace as diagonal_sum,
)
from pynumin.core.compute.linalg.cholesky import cholesky_lower
from pynumin.core.compute.linalg.eigen import jacobi_eigh
from pynumin.core.compute.linalg.lu import lu_doolittle
from pynumin.core.compute.linalg.qr import qr_gram_schmidt
from pynumin.core.compute.linalg.svd import jacobi_svd
from pynumin.core.compute.precision import is_close
from pynumin.core.compute.tolerances import (
    JACOBI_MAX_SWEEPS,
    LAPLACE_WARN_SIZE,
    select_tolerance,
)
from pynumin.core.exceptions import ArgumentError
from pynumin.core.numeric import working_dtype
from pynumin.core.protocols import SqrtFunction
from pynumin.core.validation import check_1d, check_2d, check_square
from pynumin.linalg.solution import EigenResult, LUResult, QRResult, SVDResult


def _working_copy(a: Array) -> np.ndarray:
    """Fresh floating ndarray of a's logical contents."""
    return a._view().astype(working_dtype(a.dtype))


def _check_max_sweeps(max_sweeps: int) -> None:
    if max_sweeps < 1:
        raise ArgumentError(f"max_sweeps: must be at least 1, got {max_sweeps}")


# --- Basic operations ---


def matmul(a: Array, b: Array) -> Array:
    """
    Matrix product a @ b.

    Raises:
        ArgumentError: If either operand is not 2D, or a.shape[1] != b.shape[0]
    """
    check_2d(a, 'a')
    check_2d(b, 'b')
    if a.shape[1] != b.shape[0]:
        raise ArgumentError(
            f"Incompatible shapes for matrix multiplication: a={a.shape}, b={b.shape}"
        )
    return Array._from_ndarray(matmul_accumulate(a._view(), b._view()))


def transpose_2d(a: Array) -> Array:
    """
    Transpose of a 2D array as a new array.

    Raises:
        ArgumentError: If a is not 2D
    """
    check_2d(a, 'a')
    return Array._from_ndarray(a._view().T)


def dot_product(a: Array, b: Array) -> Any:
    """
    Sum of elementwise products of two vectors.

    Raises:
        ArgumentError: If either operand is not 1D or lengths differ
    """
    check_1d(a, 'a')
    check_1d(b, 'b')
    if a.shape != b.shape:
        raise ArgumentError(
            f"Vectors must have the same length: a={a.shape[0]}, b={b.shape[0]}"
        )
    return dot(a._view(), b._view())


def determinant(a: Array) -> Any:
    """
    Determinant by Laplace expansion along the first row.

    The expansion is O(n!); a RuntimeWarning is issued for matrices
    larger than LAPLACE_WARN_SIZE.

    Raises:
        ArgumentError: If a is not a square 2D matrix
    """
    check_square(a, 'a')
    n = a.shape[0]
    if n > LAPLACE_WARN_SIZE:
        warnings.warn(
            f"determinant: Laplace expansion of a {n}x{n} matrix takes O(n!) operations",
            RuntimeWarning,
            stacklevel=2,
        )
    return laplace_determinant(a._view())


def inverse(a: Array, *, overwrite_a: bool = False) -> Array:
    """
    Inverse by Gauss-Jordan elimination (no pivoting).

    Args:
        a: Square matrix
        overwrite_a: If True, eliminate directly in a's buffer, leaving a
            reduced to the identity. Requires a floating dtype.

    Returns:
        New array holding the inverse

    Raises:
        ArgumentError: If a is not square, or overwrite_a is set on an
            integer array
        SingularMatrixError: If a zero pivot is met at some step
    """
    check_square(a, 'a')
    if overwrite_a:
        if a.kind.exact:
            raise ArgumentError(
                f"a: overwrite_a requires a floating dtype, got {a.dtype.name}"
            )
        work = a._view(writeable=True)
    else:
        work = _working_copy(a)
    return Array._from_ndarray(gauss_jordan_inverse(work, matrix_name='a'))


def trace(a: Array) -> Any:
    """
    Sum of the main diagonal.

    Raises:
        ArgumentError: If a is not a square 2D matrix
    """
    check_square(a, 'a')
    return diagonal_sum(a._view())


# --- Factorizations ---


def lu_decomposition(a: Array) -> LUResult:
    """
    Doolittle LU decomposition without pivoting: a = L U.

    Raises:
        ArgumentError: If a is not square
        SingularMatrixError: If a zero pivot must be divided by
    """
    check_square(a, 'a')
    L, U = lu_doolittle(_working_copy(a), matrix_name='a')
    return LUResult(L=Array._from_ndarray(L), U=Array._from_ndarray(U))


def qr_decomposition(a: Array, sqrt: SqrtFunction = np.sqrt) -> QRResult:
    """
    QR decomposition by classical Gram-Schmidt: a = Q R.

    Args:
        a: Square matrix
        sqrt: Square root used for column norms

    Raises:
        ArgumentError: If a is not square
        SingularMatrixError: If the columns are linearly dependent
    """
    check_square(a, 'a')
    Q, R = qr_gram_schmidt(_working_copy(a), sqrt, matrix_name='a')
    return QRResult(Q=Array._from_ndarray(Q), R=Array._from_ndarray(R))


def cholesky_decomposition(a: Array, sqrt: SqrtFunction = np.sqrt) -> Array:
    """
    Lower Cholesky factor L with a = L L^T.

    Args:
        a: Symmetric positive-definite matrix (only the lower triangle is read)
        sqrt: Square root used for the diagonal

    Raises:
        ArgumentError: If a is not square
        NotPositiveDefiniteError: If a diagonal radicand is not positive
    """
    check_square(a, 'a')
    return Array._from_ndarray(cholesky_lower(_working_copy(a), sqrt, matrix_name='a'))


def eigen(
    a: Array,
    *,
    tol: float | None = None,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
) -> EigenResult:
    """
    Eigenvalues and eigenvectors of a symmetric matrix (cyclic Jacobi).

    Args:
        a: Symmetric square matrix
        tol: Relative off-diagonal tolerance; defaults to the rtol of the
            dtype's tolerance tier
        max_sweeps: Maximum number of Jacobi sweeps

    Returns:
        EigenResult with ascending values and column eigenvectors

    Raises:
        ArgumentError: If a is not square or not symmetric
        ConvergenceError: If max_sweeps is exhausted
    """
    check_square(a, 'a')
    _check_max_sweeps(max_sweeps)
    work = _working_copy(a)
    tier = select_tolerance(work.dtype)
    if not is_close(work, work.T, rtol=tier.rtol, atol=tier.atol):
        raise ArgumentError(
            "a: eigen() requires a symmetric matrix; "
            "general matrices may have complex eigenvalues"
        )
    values, vectors, sweeps = jacobi_eigh(
        work,
        tol=tier.rtol if tol is None else tol,
        max_sweeps=max_sweeps,
    )
    return EigenResult(
        values=Array._from_ndarray(values),
        vectors=Array._from_ndarray(vectors),
        sweeps=sweeps,
    )


def svd(
    a: Array,
    *,
    tol: float | None = None,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
) -> SVDResult:
    """
    Thin singular value decomposition by one-sided Jacobi.

    Args:
        a: Any 2D matrix (m x n)
        tol: Column orthogonality tolerance; defaults to the rtol of the
            dtype's tolerance tier
        max_sweeps: Maximum number of Jacobi sweeps

    Returns:
        SVDResult with U (m x k), S (k,) descending, V (n x k), k = min(m, n)

    Raises:
        ArgumentError: If a is not 2D
        ConvergenceError: If max_sweeps is exhausted
    """
    check_2d(a, 'a')
    _check_max_sweeps(max_sweeps)
    work = _working_copy(a)
    tier = select_tolerance(work.dtype)
    U, S, V, sweeps = jacobi_svd(
        work,
        tol=tier.rtol if tol is None else tol,
        max_sweeps=max_sweeps,
    )
    return SVDResult(
        U=Array._from_ndarray(U),
        S=Array._from_ndarray(S),
        V=Array._from_ndarray(V),
        sweeps=sweeps,
    )
