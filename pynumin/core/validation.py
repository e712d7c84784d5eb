"""
Input validation utilities for PyNumin.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from pynumin.core.exceptions import (
    ArgumentError,
    BoundsError,
    ShapeError,
    ShapeOverflowError,
)

if TYPE_CHECKING:
    from pynumin.core.array import Array


# Largest element count addressable by a numpy index
MAX_ELEMENTS: int = int(np.iinfo(np.intp).max)


def _as_int(value: Any, name: str, error: type[Exception]) -> int:
    """Convert an integer-like (int, numpy integer) to int, rejecting bools and floats."""
    if isinstance(value, (bool, np.bool_)):
        raise error(f"{name}: expected an integer, got bool {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise error(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from None


def check_shape(shape: Any, name: str = 'shape') -> tuple[int, ...]:
    """
    Validate a shape and return it as a tuple of ints.

    Args:
        shape: Sequence of dimension sizes (a bare int is a 1D shape)
        name: Parameter name for error messages

    Returns:
        The shape as a tuple of positive ints

    Raises:
        ShapeError: If shape is None, empty, or has a non-positive dimension
    """
    if shape is None:
        raise ShapeError(f"{name}: cannot be None")
    if isinstance(shape, (int, np.integer)) and not isinstance(shape, bool):
        shape = (shape,)
    if not isinstance(shape, (Sequence, np.ndarray)) or isinstance(shape, str):
        raise ShapeError(
            f"{name}: expected a sequence of integers, got {type(shape).__name__}"
        )
    if len(shape) == 0:
        raise ShapeError(f"{name}: must be a non-empty sequence")

    dims = tuple(_as_int(d, f"{name}[{i}]", ShapeError) for i, d in enumerate(shape))
    for i, d in enumerate(dims):
        if d <= 0:
            raise ShapeError(
                f"{name}: dimension at index {i} is {d}, but it must be a positive integer"
            )
    return dims


def checked_size(shape: tuple[int, ...], name: str = 'shape') -> int:
    """
    Product of a shape with overflow checking.

    Args:
        shape: Validated shape
        name: Parameter name for error messages

    Returns:
        Total element count

    Raises:
        ShapeOverflowError: If the count exceeds the native index range
    """
    total = 1
    for d in shape:
        total *= d
        if total > MAX_ELEMENTS:
            raise ShapeOverflowError(
                f"{name}: total number of elements for shape {shape} exceeds "
                f"the native integer limit {MAX_ELEMENTS}",
                shape=shape,
                limit=MAX_ELEMENTS,
            )
    return total


def check_strides(strides: Any, ndim: int, name: str = 'strides') -> tuple[int, ...]:
    """
    Validate explicit strides against the array rank.

    Raises:
        ShapeError: If the stride count differs from the number of dimensions
        ArgumentError: If a stride is not an integer
    """
    if isinstance(strides, (str, bytes)) or not isinstance(strides, (Sequence, np.ndarray)):
        raise ArgumentError(
            f"{name}: expected a sequence of integers, got {type(strides).__name__}"
        )
    if len(strides) != ndim:
        raise ShapeError(
            f"{name}: length {len(strides)} must match shape length {ndim}"
        )
    return tuple(_as_int(s, f"{name}[{i}]", ArgumentError) for i, s in enumerate(strides))


def check_order(order: Any, name: str = 'order') -> str:
    """
    Validate a layout token.

    Returns:
        'C' (row-major) or 'F' (column-major)

    Raises:
        ArgumentError: For any other token
    """
    if order in ('C', 'c'):
        return 'C'
    if order in ('F', 'f'):
        return 'F'
    raise ArgumentError(
        f"{name}: must be 'C' for row-major or 'F' for column-major, got {order!r}"
    )


def check_integer(value: Any, name: str) -> int:
    """
    Validate a single integer argument (index, bound).

    Raises:
        ArgumentError: If value is not an integer (bools and floats included)
    """
    return _as_int(value, name, ArgumentError)


def check_offset(offset: Any, name: str = 'offset') -> int:
    """
    Validate a buffer offset.

    Raises:
        ArgumentError: If offset is not a non-negative integer
    """
    value = _as_int(offset, name, ArgumentError)
    if value < 0:
        raise ArgumentError(f"{name}: must be non-negative, got {value}")
    return value


def check_indices(
    indices: tuple[Any, ...],
    shape: tuple[int, ...],
    name: str = 'indices'
) -> tuple[int, ...]:
    """
    Validate a full multi-index against a shape.

    Raises:
        ArgumentError: If the index count differs from the rank or an
            index is not an integer
        BoundsError: If an index lies outside [0, shape[d])
    """
    if len(indices) != len(shape):
        raise ArgumentError(
            f"{name}: expected {len(shape)} indices but received {len(indices)}"
        )
    result = []
    for axis, (raw, size) in enumerate(zip(indices, shape)):
        index = _as_int(raw, f"{name}[{axis}]", ArgumentError)
        if index < 0 or index >= size:
            raise BoundsError(
                f"{name}: index {index} out of bounds for dimension {axis} with size {size}",
                index=index,
                axis=axis,
                size=size,
            )
        result.append(index)
    return tuple(result)


def check_ndim(array: 'Array', ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        ArgumentError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ArgumentError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: 'Array', name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        ArgumentError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: 'Array', name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ArgumentError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_square(array: 'Array', name: str) -> None:
    """
    Verify array is a 2-dimensional square matrix.

    Raises:
        ArgumentError: If array is not 2D or not square
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise ArgumentError(
            f"{name}: expected a square matrix, got shape {array.shape}"
        )


def check_same_shape(a: 'Array', b: 'Array', names: tuple[str, str]) -> None:
    """
    Verify two arrays have identical shapes.

    Raises:
        ShapeError: If the shapes differ
    """
    if a.shape != b.shape:
        raise ShapeError(
            f"Shapes must match: {names[0]}={a.shape}, {names[1]}={b.shape}"
        )
