"""
Numeric kinds: per-dtype capabilities of array elements.

A NumericKind describes one supported element dtype: its zero and one,
whether arithmetic on it is exact (integers), and how it divides. The
array and the kernels never hardcode 0, 1 or '/' for elements; they ask
the kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pynumin.core.exceptions import ArgumentError


@dataclass(frozen=True)
class NumericKind:
    """
    Capabilities of one element dtype.

    Attributes:
        dtype: The numpy dtype described
        zero: Additive identity as a dtype scalar
        one: Multiplicative identity as a dtype scalar
        exact: True for integer dtypes (no rounding, truncating division)
    """
    dtype: np.dtype
    zero: Any
    one: Any
    exact: bool

    @property
    def name(self) -> str:
        return self.dtype.name

    def divide(self, a: NDArray[Any], b: NDArray[Any]) -> NDArray[Any]:
        """
        Elementwise a / b in this kind's arithmetic.

        Integer kinds truncate toward zero; floating kinds use true division.
        Callers are responsible for rejecting zero divisors first.
        """
        if not self.exact:
            return np.true_divide(a, b).astype(self.dtype, copy=False)
        quotient = np.floor_divide(a, b)
        # floor_divide rounds toward -inf; move inexact negative quotients up
        adjust = (np.remainder(a, b) != 0) & ((np.asarray(a) < 0) != (np.asarray(b) < 0))
        return (quotient + adjust).astype(self.dtype, copy=False)


@lru_cache(maxsize=None)
def _kind_for(dtype: np.dtype) -> NumericKind:
    if np.issubdtype(dtype, np.bool_) or not (
        np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)
    ):
        raise ArgumentError(
            f"dtype: unsupported element type {dtype}, "
            f"expected an integer or floating dtype"
        )
    return NumericKind(
        dtype=dtype,
        zero=dtype.type(0),
        one=dtype.type(1),
        exact=bool(np.issubdtype(dtype, np.integer)),
    )


def resolve_kind(dtype: DTypeLike) -> NumericKind:
    """
    Look up the NumericKind for a dtype.

    Raises:
        ArgumentError: If the dtype is not an integer or floating type
            (bool, complex, object and string dtypes lack ordering or
            arithmetic)
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ArgumentError(f"dtype: cannot interpret {dtype!r} as a dtype: {e}") from e
    return _kind_for(resolved)


def working_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Floating dtype used by kernels that need true division.

    float32 and wider floating dtypes are kept; float16 is promoted to
    float32 and integer dtypes to float64.
    """
    resolved = np.dtype(dtype)
    if resolved == np.float16:
        return np.dtype(np.float32)
    if np.issubdtype(resolved, np.floating):
        return resolved
    return np.dtype(np.float64)
