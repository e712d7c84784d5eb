"""
Singular value decomposition by one-sided (Hestenes) Jacobi.

Column pairs of a working copy W of A are rotated until all columns are
mutually orthogonal; the same rotations accumulate into V. Then
A V = W, the singular values are the column norms of W, and U is W with
normalized columns. Works directly on A without forming A^T A.

References:
    Demmel, J., & Veselić, K. (1992). Jacobi's method is more accurate
    than QR. SIAM J. Matrix Anal. Appl., 13(4), 1204-1245.
"""

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pynumin.core.compute.linalg.eigen import jacobi_rotation, rotate_columns
from pynumin.core.compute.precision import machine_epsilon
from pynumin.core.exceptions import ConvergenceError


def _complete_basis(u: NDArray[np.floating[Any]], missing: list[int]) -> None:
    """
    Fill columns ``missing`` of u (zeroed) with unit vectors orthogonal to
    every other column. Picks the standard basis vector with the largest
    residual after projection, projecting twice for stability.
    """
    m = u.shape[0]
    for k in missing:
        u[:, k] = 0.0
        best, best_norm = None, -1.0
        for e in range(m):
            candidate = np.zeros(m, dtype=u.dtype)
            candidate[e] = 1.0
            for _ in range(2):
                candidate -= u @ (u.T @ candidate)
            norm = math.sqrt(float(candidate @ candidate))
            if norm > best_norm:
                best, best_norm = candidate, norm
        u[:, k] = best / best_norm


def jacobi_svd(
    a: NDArray[np.floating[Any]],
    tol: float,
    max_sweeps: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]], int]:
    """
    Thin SVD A = U diag(S) V^T.

    Args:
        a: (m, n) floating matrix (not modified)
        tol: Columns p, q count as orthogonal when
            |<w_p, w_q>| <= tol * ||w_p|| ||w_q||
        max_sweeps: Maximum number of cyclic sweeps

    Returns:
        (U, S, V, sweeps) with k = min(m, n): U (m, k) and V (n, k) with
        orthonormal columns, S (k,) descending and non-negative

    Raises:
        ConvergenceError: If columns are still not orthogonal after
            max_sweeps
    """
    m, n = a.shape
    if m < n:
        v, s, u, sweeps = jacobi_svd(a.T, tol, max_sweeps)
        return u, s, v, sweeps

    work = a.copy()
    v = np.eye(n, dtype=work.dtype)
    # Columns at or below this norm are rounding noise of a dependent column
    negligible = max(m, n) * machine_epsilon(work.dtype) * math.sqrt(float(np.sum(work * work)))

    sweeps = 0
    while True:
        rotated = False
        worst = 0.0
        for p in range(n - 1):
            for q in range(p + 1, n):
                alpha = float(work[:, p] @ work[:, p])
                beta = float(work[:, q] @ work[:, q])
                gamma = float(work[:, p] @ work[:, q])
                if gamma == 0.0 or min(alpha, beta) <= negligible * negligible:
                    continue
                measure = abs(gamma) / math.sqrt(alpha * beta)
                worst = max(worst, measure)
                if measure <= tol:
                    continue
                c, s = jacobi_rotation(alpha, beta, gamma)
                rotate_columns(work, p, q, c, s)
                rotate_columns(v, p, q, c, s)
                rotated = True
        sweeps += 1
        if not rotated:
            break
        if sweeps >= max_sweeps:
            raise ConvergenceError(
                f"One-sided Jacobi SVD did not converge in {max_sweeps} sweeps "
                f"(largest column cosine {worst:.3e}, threshold {tol:.3e})",
                iterations=sweeps,
                final_change=worst,
                reason='max_sweeps',
                threshold=tol,
            )

    singular = np.sqrt(np.sum(work * work, axis=0))
    order = np.argsort(-singular, kind='stable')
    singular = singular[order]
    work = work[:, order]
    v = v[:, order]

    # Columns with numerically zero singular value carry no direction
    u = np.zeros_like(work)
    missing = []
    for k in range(n):
        if singular[k] > negligible:
            u[:, k] = work[:, k] / singular[k]
        else:
            missing.append(k)
    if missing:
        _complete_basis(u, missing)

    return u, singular, v, sweeps
