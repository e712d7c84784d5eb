"""
Linear algebra kernels for PyNumin.

All functions follow these conventions:
    - Inputs are numpy arrays already validated by pynumin.linalg
    - Inputs are never modified, except by gauss_jordan_inverse, which
      reduces its argument in place
    - Failures raise immediately with the matrix name and pivot index

Submodules:
    basic: matmul, dot, Laplace determinant, Gauss-Jordan inverse, trace
    lu: Doolittle LU
    qr: Classical Gram-Schmidt QR
    cholesky: Cholesky factor
    eigen: Cyclic Jacobi symmetric eigendecomposition
    svd: One-sided Jacobi SVD
"""

from pynumin.core.compute.linalg.basic import (
    matmul_accumulate,
    dot,
    laplace_determinant,
    gauss_jordan_inverse,
    trace,
)
from pynumin.core.compute.linalg.lu import lu_doolittle
from pynumin.core.compute.linalg.qr import qr_gram_schmidt
from pynumin.core.compute.linalg.cholesky import cholesky_lower
from pynumin.core.compute.linalg.eigen import jacobi_eigh
from pynumin.core.compute.linalg.svd import jacobi_svd

__all__ = [
    # Basic
    "matmul_accumulate",
    "dot",
    "laplace_determinant",
    "gauss_jordan_inverse",
    "trace",
    # Factorizations
    "lu_doolittle",
    "qr_gram_schmidt",
    "cholesky_lower",
    "jacobi_eigh",
    "jacobi_svd",
]
