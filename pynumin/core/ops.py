"""
Whole-array helpers: function application and simple reductions.

These are the array "extensions": apply a scalar function, square,
sum, mean, min, max, affine normalization, Euclidean norm of a vector
and column extraction. All of them read through the strided logical
view and return new arrays or scalars.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from pynumin.core.array import Array
from pynumin.core.exceptions import BoundsError, DivisionByZeroError
from pynumin.core.numeric import working_dtype
from pynumin.core.protocols import Scalar, SqrtFunction
from pynumin.core.validation import check_1d, check_2d, check_integer


def apply_function(array: Array, func: Callable[[Any], Any]) -> Array:
    """
    Apply ``func`` to every element, keeping the element dtype.

    Args:
        array: Source array
        func: Scalar function T -> T

    Returns:
        New array of the same shape and dtype
    """
    values = np.fromiter(
        (func(v) for v in array),
        dtype=array.dtype,
        count=array.size,
    )
    return Array._from_ndarray(values.reshape(array.shape))


def square(array: Array) -> Array:
    """Elementwise x * x."""
    return array * array


def sum_elements(array: Array) -> Any:
    """Sum of all elements, accumulated from the element type's zero."""
    return array.kind.zero + np.sum(array._view(), dtype=array.dtype)


def mean(array: Array) -> float:
    """Arithmetic mean of all elements as a float."""
    return float(np.sum(array._view(), dtype=np.float64)) / array.size


def max_element(array: Array) -> Any:
    return np.max(array._view())


def min_element(array: Array) -> Any:
    return np.min(array._view())


def normalize(array: Array, low: Scalar, high: Scalar) -> Array:
    """
    Affine rescale so the minimum maps to ``low`` and the maximum to ``high``.

    Integer arrays are rescaled in float64.

    Raises:
        DivisionByZeroError: If every element is equal (zero range)
    """
    values = array._view().astype(working_dtype(array.dtype))
    smallest = values.min()
    spread = values.max() - smallest
    if spread == 0:
        raise DivisionByZeroError(
            f"normalize: all {array.size} elements equal {smallest}; range is zero"
        )
    return Array._from_ndarray((values - smallest) / spread * (high - low) + low)


def norm(array: Array, sqrt: SqrtFunction = np.sqrt) -> Any:
    """
    Euclidean norm of a 1D array.

    Raises:
        ArgumentError: If the array is not 1D
    """
    check_1d(array, 'array')
    values = array._view()
    return sqrt(np.dot(values, values))


def column(array: Array, index: int) -> Array:
    """
    Copy of one column of a 2D array as a 1D array.

    Raises:
        ArgumentError: If the array is not 2D or index is not an integer
        BoundsError: If index is outside [0, n_columns)
    """
    check_2d(array, 'array')
    index = check_integer(index, 'index')
    n_cols = array.shape[1]
    if index < 0 or index >= n_cols:
        raise BoundsError(
            f"index: column {index} out of bounds for {n_cols} columns",
            index=index,
            axis=1,
            size=n_cols,
        )
    return Array._from_ndarray(array._view()[:, index])
