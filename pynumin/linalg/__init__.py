"""
Linear algebra module.

Public API:
    matmul(a, b)                 - Matrix product
    transpose_2d(a)              - Transpose of a 2D array
    dot_product(a, b)            - Vector dot product
    determinant(a)               - Laplace-expansion determinant
    inverse(a)                   - Gauss-Jordan inverse
    trace(a)                     - Sum of the diagonal
    lu_decomposition(a)          - Doolittle LU (no pivoting)
    qr_decomposition(a, sqrt)    - Classical Gram-Schmidt QR
    cholesky_decomposition(a, sqrt) - Cholesky factor
    eigen(a)                     - Symmetric eigendecomposition (Jacobi)
    svd(a)                       - Thin SVD (one-sided Jacobi)
"""

from pynumin.linalg.solution import EigenResult, LUResult, QRResult, SVDResult
from pynumin.linalg.solvers import (
    matmul,
    transpose_2d,
    dot_product,
    determinant,
    inverse,
    trace,
    lu_decomposition,
    qr_decomposition,
    cholesky_decomposition,
    eigen,
    svd,
)

__all__ = [
    "matmul",
    "transpose_2d",
    "dot_product",
    "determinant",
    "inverse",
    "trace",
    "lu_decomposition",
    "qr_decomposition",
    "cholesky_decomposition",
    "eigen",
    "svd",
    "LUResult",
    "QRResult",
    "EigenResult",
    "SVDResult",
]
