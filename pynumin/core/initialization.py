"""
Array factories: zeros, ones, identity, random, full and array().

Thin convenience constructors on top of Array. Each validates its shape
with the same rules as the Array constructor.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from pynumin.core.array import Array
from pynumin.core.exceptions import ArgumentError, ShapeError
from pynumin.core.numeric import resolve_kind
from pynumin.core.protocols import Scalar
from pynumin.core.validation import check_shape, checked_size


def zeros(shape: Sequence[int] | int, dtype: DTypeLike = np.float64) -> Array:
    """Array filled with the element type's zero."""
    return Array(shape, dtype=dtype)


def ones(shape: Sequence[int] | int, dtype: DTypeLike = np.float64) -> Array:
    """Array filled with the element type's one."""
    return full(shape, resolve_kind(dtype).one, dtype=dtype)


def full(
    shape: Sequence[int] | int,
    value: Scalar,
    dtype: DTypeLike | None = None,
) -> Array:
    """
    Array filled with ``value``.

    Without ``dtype`` the element type is inferred from ``value``
    (Python int -> int64, float -> float64).

    Raises:
        ShapeError: If shape is invalid
        ArgumentError: If value lacks arithmetic or ordering
    """
    dims = check_shape(shape)
    if not isinstance(value, Scalar):
        raise ArgumentError(
            f"value: expected a number supporting + - * / and <, got {type(value).__name__}"
        )
    kind = resolve_kind(np.asarray(value).dtype if dtype is None else dtype)
    result = Array(dims, dtype=kind.dtype)
    result.data.fill(value)
    return result


def identity(size: int, dtype: DTypeLike = np.float64) -> Array:
    """
    Square matrix with ones on the diagonal.

    Raises:
        ShapeError: If size is not positive
    """
    if size <= 0:
        raise ShapeError(f"size: must be positive, got {size}")
    result = Array((size, size), dtype=dtype)
    for i in range(size):
        result[i, i] = result.kind.one
    return result


def random(
    shape: Sequence[int] | int,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
) -> Array:
    """
    float64 array of uniform samples in [0, 1).

    Args:
        shape: Array shape
        seed: Seed for a fresh numpy Generator (ignored if rng is given)
        rng: Generator to draw from
    """
    dims = check_shape(shape)
    generator = rng if rng is not None else np.random.default_rng(seed)
    values = generator.random(checked_size(dims))
    return Array._from_ndarray(values.reshape(dims))


def array(values: ArrayLike, dtype: DTypeLike | None = None) -> Array:
    """Copy nested sequences or an ndarray into a new Array."""
    return Array.from_numpy(values, dtype=dtype)
