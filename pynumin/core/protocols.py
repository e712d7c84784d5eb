"""
Core protocols for PyNumin.

These define the structural interfaces the array and its kernels rely on.
We use Protocol (structural typing) rather than ABC (nominal typing) so
numpy scalars, Python numbers and user types all qualify without
registration.
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Numeric capability every element type must provide.

    Arithmetic (+, -, *, /) and ordering comparisons. The additive and
    multiplicative identities are supplied per dtype by NumericKind,
    not by the scalar itself.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


class SqrtFunction(Protocol):
    """
    Square root supplied by the caller.

    QR, Cholesky and norm() take the root as a parameter because the
    element type has no intrinsic root operation. np.sqrt and math.sqrt
    both satisfy this protocol.
    """

    def __call__(self, value: Any, /) -> Any: ...
