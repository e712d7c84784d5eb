"""
PyNumin: strided n-dimensional arrays and dense linear algebra.

A numpy-backed array container with explicit shape, strides and offset,
elementwise arithmetic, and a small linear algebra toolkit written as
readable reference algorithms.

Submodules:
    core: Array container, factories, validation, exceptions, kernels
    linalg: Matrix product, determinant, inverse and factorizations
"""

__version__ = "0.1.0"

from pynumin.core.array import Array
from pynumin.core.initialization import array, full, identity, ones, random, zeros
from pynumin.core.exceptions import (
    PyNuminError,
    ValidationError,
    ShapeError,
    ArgumentError,
    BoundsError,
    ShapeOverflowError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    DivisionByZeroError,
    ConvergenceError,
)
from pynumin import linalg

__all__ = [
    "__version__",
    # Container and factories
    "Array",
    "array",
    "zeros",
    "ones",
    "identity",
    "random",
    "full",
    # Exceptions
    "PyNuminError",
    "ValidationError",
    "ShapeError",
    "ArgumentError",
    "BoundsError",
    "ShapeOverflowError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "DivisionByZeroError",
    "ConvergenceError",
    # Submodules
    "linalg",
]
