"""
Exception hierarchy for PyNumin.

All exceptions inherit from PyNuminError to allow catching any
library-specific error. Where a builtin exception has the same meaning
(IndexError, ValueError, OverflowError, ZeroDivisionError) the PyNumin
exception also inherits from it, so generic Python handlers keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNuminError(Exception):
    """Base exception for all PyNumin errors."""
    pass


class ValidationError(PyNuminError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError, ValueError):
    """
    Array shape is invalid or inconsistent.

    Raised for empty or non-positive shapes, stride/shape length mismatch,
    buffers too small for the requested shape, and operands whose shapes
    differ where identical shapes are required.
    """
    pass


class ArgumentError(ValidationError, ValueError):
    """
    Argument is not valid for the requested operation.

    Raised for wrong dimensionality (e.g. matmul on a 3D array), wrong
    number of indices, invalid layout tokens, and invalid slice ranges.
    """
    pass


class BoundsError(ValidationError, IndexError):
    """
    Index outside the valid range [0, shape[d]) of a dimension.

    Attributes:
        index: The offending index value
        axis: Dimension the index was applied to
        size: Size of that dimension
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        axis: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.axis = axis
        self.size = size


class ShapeOverflowError(PyNuminError, OverflowError):
    """
    Element count does not fit the platform's native index integer.

    Attributes:
        shape: The shape whose product overflowed
        limit: Largest representable element count
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, ...] | None = None,
        limit: int | None = None
    ):
        super().__init__(message)
        self.shape = shape
        self.limit = limit


class NumericalError(PyNuminError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or a zero pivot was met during elimination.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step at which the zero pivot appeared
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised by the Cholesky factorization when a diagonal radicand is not
    strictly positive.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row at which the radicand became non-positive
        radicand: The offending value
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        radicand: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.radicand = radicand


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Zero divisor in an elementwise division.

    Attributes:
        position: Logical multi-index of the first zero divisor, if known
    """

    def __init__(self, message: str, position: tuple[int, ...] | None = None):
        super().__init__(message)
        self.position = position


class ConvergenceError(PyNuminError):
    """
    Iterative algorithm failed to converge.

    Raised when a Jacobi sweep loop (eigen, SVD) fails to meet its
    off-diagonal tolerance within the maximum number of sweeps.

    Attributes:
        iterations: Number of sweeps completed
        final_change: Final off-diagonal measure
        reason: Why convergence failed (e.g., 'max_sweeps')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
