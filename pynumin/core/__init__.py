"""
Core infrastructure for PyNumin.

Key components:
    array: Array, the strided n-dimensional container
    initialization: zeros/ones/identity/random/full factories
    ops: Function application and reductions
    numeric: Per-dtype numeric capabilities
    protocols: Scalar and SqrtFunction structural interfaces
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, precision helpers and linear algebra kernels
"""

from pynumin.core.array import Array
from pynumin.core.numeric import NumericKind, resolve_kind
from pynumin.core.protocols import Scalar, SqrtFunction
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

__all__ = [
    # Container
    "Array",
    # Numeric capabilities
    "NumericKind",
    "resolve_kind",
    # Protocols
    "Scalar",
    "SqrtFunction",
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
]
