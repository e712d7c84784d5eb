"""
Symmetric eigendecomposition by the cyclic Jacobi method.

Repeated plane rotations J(p, q) annihilate the off-diagonal entries of
a symmetric matrix; the product of all rotations converges to the
eigenvector matrix and the diagonal to the eigenvalues. Each sweep visits
every (p, q) pair with p < q once. Convergence is quadratic once the
off-diagonal mass is small.

References:
    Golub, G. H., & Van Loan, C. F. (2013). Matrix Computations (4th ed.),
    Section 8.5: Jacobi Methods.
"""

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumin.core.exceptions import ConvergenceError


def off_diagonal_norm(a: NDArray[np.floating[Any]]) -> float:
    """Frobenius norm of the off-diagonal part."""
    off = a - np.diag(np.diagonal(a))
    return math.sqrt(float(np.sum(off * off)))


def jacobi_rotation(app: float, aqq: float, apq: float) -> tuple[float, float]:
    """
    Cosine and sine of the rotation that zeroes entry (p, q).

    Solves t^2 + 2 theta t - 1 = 0 for the smaller root
    t = sign(theta) / (|theta| + sqrt(theta^2 + 1)),
    theta = (aqq - app) / (2 apq).
    """
    theta = (aqq - app) / (2.0 * apq)
    sign = 1.0 if theta >= 0 else -1.0
    t = sign / (abs(theta) + math.hypot(theta, 1.0))
    c = 1.0 / math.hypot(t, 1.0)
    return c, t * c


def rotate_columns(m: NDArray[np.floating[Any]], p: int, q: int, c: float, s: float) -> None:
    """In place: (m_p, m_q) <- (c m_p - s m_q, s m_p + c m_q) on columns."""
    mp = m[:, p].copy()
    mq = m[:, q].copy()
    m[:, p] = c * mp - s * mq
    m[:, q] = s * mp + c * mq


def _rotate_rows(m: NDArray[np.floating[Any]], p: int, q: int, c: float, s: float) -> None:
    mp = m[p, :].copy()
    mq = m[q, :].copy()
    m[p, :] = c * mp - s * mq
    m[q, :] = s * mp + c * mq


def jacobi_eigh(
    a: NDArray[np.floating[Any]],
    tol: float,
    max_sweeps: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], int]:
    """
    Eigenvalues and eigenvectors of a symmetric matrix.

    Args:
        a: (n, n) symmetric floating matrix (not modified)
        tol: Stop when off-diagonal norm <= tol * Frobenius norm of a
        max_sweeps: Maximum number of cyclic sweeps

    Returns:
        (values, vectors, sweeps): values ascending, vectors as columns
        so that a @ vectors[:, k] = values[k] * vectors[:, k]

    Raises:
        ConvergenceError: If the tolerance is not met within max_sweeps
    """
    work = a.copy()
    n = work.shape[0]
    vectors = np.eye(n, dtype=work.dtype)
    threshold = tol * math.sqrt(float(np.sum(work * work)))

    sweeps = 0
    off = off_diagonal_norm(work)
    while off > threshold:
        if sweeps >= max_sweeps:
            raise ConvergenceError(
                f"Jacobi eigenvalue iteration did not converge in {max_sweeps} sweeps "
                f"(off-diagonal norm {off:.3e}, threshold {threshold:.3e})",
                iterations=sweeps,
                final_change=off,
                reason='max_sweeps',
                threshold=threshold,
            )
        for p in range(n - 1):
            for q in range(p + 1, n):
                apq = float(work[p, q])
                if apq == 0.0:
                    continue
                c, s = jacobi_rotation(float(work[p, p]), float(work[q, q]), apq)
                rotate_columns(work, p, q, c, s)
                _rotate_rows(work, p, q, c, s)
                rotate_columns(vectors, p, q, c, s)
        sweeps += 1
        off = off_diagonal_norm(work)

    values = np.diagonal(work).copy()
    order = np.argsort(values, kind='stable')
    return values[order], vectors[:, order], sweeps
