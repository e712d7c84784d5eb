"""
Factorization result types.

Frozen containers for the outputs of the decompositions. Each unpacks
like a tuple of its factors, so both ``res.L`` and ``L, U = res`` work.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pynumin.core.array import Array


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        L: Unit lower triangular factor (n x n)
        U: Upper triangular factor (n x n)
    """
    L: 'Array'
    U: 'Array'

    def __iter__(self) -> Iterator['Array']:
        return iter((self.L, self.U))


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x n)
        R: Upper triangular matrix (n x n)
    """
    Q: 'Array'
    R: 'Array'

    def __iter__(self) -> Iterator['Array']:
        return iter((self.Q, self.R))


@dataclass(frozen=True)
class EigenResult:
    """
    Result of symmetric eigendecomposition.

    Attributes:
        values: Eigenvalues in ascending order (n,)
        vectors: Orthonormal eigenvectors as columns (n x n)
        sweeps: Number of Jacobi sweeps performed
    """
    values: 'Array'
    vectors: 'Array'
    sweeps: int = 0

    def __iter__(self) -> Iterator['Array']:
        return iter((self.values, self.vectors))


@dataclass(frozen=True)
class SVDResult:
    """
    Result of thin singular value decomposition, A = U diag(S) V^T.

    Attributes:
        U: Left singular vectors (m x k), k = min(m, n)
        S: Singular values in descending order (k,)
        V: Right singular vectors (n x k)
        sweeps: Number of Jacobi sweeps performed
    """
    U: 'Array'
    S: 'Array'
    V: 'Array'
    sweeps: int = 0

    def __iter__(self) -> Iterator['Array']:
        return iter((self.U, self.S, self.V))
