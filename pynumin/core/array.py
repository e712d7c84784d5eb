"""
Array: strided multi-dimensional numeric container.

An Array is a flat 1-D numpy buffer plus shape, element strides and an
offset. Element (i0, ..., ik) lives at buffer position
offset + sum(i_d * strides[d]).

Every read goes through a strided logical view of the buffer, so
arithmetic, slicing, copying and the linear algebra kernels behave the
same on freshly allocated arrays and on arrays built over a shared
buffer with an offset or non-default strides.

Mutation happens only through __setitem__/set() and through
inverse(..., overwrite_a=True). Every other operation returns a new
array that owns its buffer.

Arrays constructed over an external numpy buffer alias it. Mutating
aliased storage from several threads is undefined; no locking is done.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.lib.stride_tricks import as_strided
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pynumin.core.compute.precision import is_close
from pynumin.core.compute.tolerances import select_tolerance
from pynumin.core.exceptions import ArgumentError, DivisionByZeroError, ShapeError
from pynumin.core.numeric import NumericKind, resolve_kind
from pynumin.core.protocols import Scalar, SqrtFunction
from pynumin.core.validation import (
    check_indices,
    check_integer,
    check_offset,
    check_order,
    check_same_shape,
    check_shape,
    check_strides,
    checked_size,
)

if TYPE_CHECKING:
    from pynumin.linalg.solution import EigenResult, LUResult, QRResult, SVDResult


def default_strides(shape: tuple[int, ...], order: str) -> tuple[int, ...]:
    """
    Element strides for a contiguous layout.

    'C' (row-major): last stride is 1, growing backward.
    'F' (column-major): first stride is 1, growing forward.
    """
    ndim = len(shape)
    strides = [1] * ndim
    if order == 'C':
        for d in range(ndim - 2, -1, -1):
            strides[d] = strides[d + 1] * shape[d + 1]
    else:
        for d in range(1, ndim):
            strides[d] = strides[d - 1] * shape[d - 1]
    return tuple(strides)


class Array:
    """
    Strided n-dimensional numeric array.

    Parameters
    ----------
    shape : sequence of int
        Positive dimension sizes. A bare int is a 1D shape.
    buffer : array-like, optional
        Flat element buffer. A 1-D numpy array whose dtype matches is
        used in place (aliased, caller-managed); anything else is
        converted, which copies. Without a buffer a zero-filled one of
        product(shape) elements is allocated.
    offset : int
        Start position of element (0, ..., 0) in the buffer.
    strides : sequence of int, optional
        Buffer step per unit increment of each dimension, in elements.
        Defaults to the layout given by ``order``.
    order : {'C', 'F'}
        Default layout: row-major ('C') or column-major ('F').
    dtype : dtype, optional
        Element type. Defaults to the buffer's dtype, or float64.

    Raises
    ------
    ShapeError
        Empty or non-positive shape, stride/shape length mismatch, buffer
        too small, or strides reaching outside the buffer.
    ShapeOverflowError
        product(shape) exceeds the native index range.
    ArgumentError
        Invalid layout token, negative offset, offset past the end of the
        buffer, non-flat buffer, or unsupported dtype.
    """

    __slots__ = ('_shape', '_strides', '_offset', '_data', '_kind', '_owns_data')

    # Arrays compare structurally; they are mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        shape: Sequence[int] | int,
        buffer: ArrayLike | None = None,
        offset: int = 0,
        strides: Sequence[int] | None = None,
        order: str = 'C',
        dtype: DTypeLike | None = None,
    ):
        dims = check_shape(shape)
        total = checked_size(dims)

        if strides is not None:
            element_strides = check_strides(strides, len(dims))
        else:
            element_strides = default_strides(dims, check_order(order))

        start = check_offset(offset)

        if buffer is not None:
            data = np.asarray(buffer, dtype=dtype)
            if data.ndim != 1:
                raise ArgumentError(
                    f"buffer: expected a flat 1D buffer, got {data.ndim}D with shape {data.shape}"
                )
            kind = resolve_kind(data.dtype)
            if start >= data.size:
                raise ArgumentError(
                    f"offset: {start} is greater than or equal to the buffer length {data.size}"
                )
            if data.size - start < total:
                raise ShapeError(
                    f"buffer: {data.size - start} elements available from offset {start}, "
                    f"shape {dims} needs {total}"
                )
            owns = data is not buffer
        else:
            kind = resolve_kind(np.float64 if dtype is None else dtype)
            data = np.zeros(total, dtype=kind.dtype)
            owns = True

        _check_extent(dims, element_strides, start, data.size)

        self._shape = dims
        self._strides = element_strides
        self._offset = start
        self._data = data
        self._kind = kind
        self._owns_data = owns

    # --- Construction helpers ---

    @classmethod
    def from_numpy(cls, values: ArrayLike, dtype: DTypeLike | None = None) -> Array:
        """
        Copy an n-dimensional array-like into a new row-major Array.

        Nested lists are accepted. The result never aliases ``values``.
        """
        converted = np.asarray(values, dtype=dtype)
        if converted.ndim == 0:
            raise ShapeError(
                "values: expected at least 1 dimension, got a scalar"
            )
        return cls._from_ndarray(converted)

    @classmethod
    def _from_ndarray(cls, values: NDArray[Any]) -> Array:
        """Build an owning row-major Array from a freshly computed ndarray."""
        flat = np.array(values, order='C', copy=True).reshape(-1)
        result = cls(values.shape, buffer=flat)
        result._owns_data = True
        return result

    def to_numpy(self) -> NDArray[Any]:
        """Return the logical contents as a new n-dimensional ndarray."""
        return np.array(self._view(), copy=True)

    def _view(self, writeable: bool = False) -> NDArray[Any]:
        """
        Strided numpy view of the logical elements.

        The view shares memory with the buffer. Read-only unless
        ``writeable`` is set.
        """
        step = self._data.strides[0]
        return as_strided(
            self._data[self._offset:],
            shape=self._shape,
            strides=tuple(s * step for s in self._strides),
            writeable=writeable,
        )

    # --- Properties ---

    @property
    def shape(self) -> tuple[int, ...]:
        """Dimension sizes."""
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        """Buffer step per dimension, in elements."""
        return self._strides

    @property
    def offset(self) -> int:
        """Position of element (0, ..., 0) in the buffer."""
        return self._offset

    @property
    def data(self) -> NDArray[Any]:
        """The flat buffer (not a copy)."""
        return self._data

    @property
    def dtype(self) -> np.dtype:
        return self._kind.dtype

    @property
    def kind(self) -> NumericKind:
        """Numeric capabilities of the element type."""
        return self._kind

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        """Total number of logical elements."""
        return checked_size(self._shape)

    @property
    def owns_data(self) -> bool:
        """False when the buffer aliases caller-supplied storage."""
        return self._owns_data

    @property
    def T(self) -> Array:
        """Transpose of a 2D array."""
        return self.transpose()

    # --- Indexing ---

    def _flat_index(self, indices: tuple[Any, ...]) -> int:
        checked = check_indices(indices, self._shape)
        return self._offset + sum(i * s for i, s in zip(checked, self._strides))

    def get(self, *indices: int) -> Any:
        """
        Element at a full multi-index.

        Raises:
            ArgumentError: If the number of indices differs from ndim
            BoundsError: If an index is outside [0, shape[d])
        """
        return self._data[self._flat_index(indices)]

    def set(self, *args: Any) -> None:
        """
        Write an element: ``a.set(i, j, value)``.

        Raises:
            ArgumentError: If the number of indices differs from ndim
            BoundsError: If an index is outside [0, shape[d])
        """
        if not args:
            raise ArgumentError("set: expected indices followed by a value")
        *indices, value = args
        self._data[self._flat_index(tuple(indices))] = value

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(key, tuple):
            key = (key,)
        if key and all(isinstance(k, slice) for k in key):
            start, end = self._slice_bounds(key)
            return self.slice(start, end)
        return self.get(*key)

    def __setitem__(self, key: Any, value: Scalar) -> None:
        if not isinstance(key, tuple):
            key = (key,)
        self.set(*key, value)

    # --- Slicing ---

    def _slice_bounds(self, key: tuple[slice, ...]) -> tuple[list[int], list[int]]:
        """Translate Python slices into start/end lists for slice()."""
        if len(key) != self.ndim:
            raise ArgumentError(
                f"slice: expected {self.ndim} slices but received {len(key)}"
            )
        start, end = [], []
        for axis, (s, size) in enumerate(zip(key, self._shape)):
            if s.step not in (None, 1):
                raise ArgumentError(
                    f"slice: only step 1 is supported, got step {s.step} for dimension {axis}"
                )
            start.append(0 if s.start is None else s.start)
            end.append(size if s.stop is None else s.stop)
        return start, end

    def slice(self, start_indices: Sequence[int], end_indices: Sequence[int]) -> Array:
        """
        Copy the half-open box [start, end) into a new array.

        Result shape is end[d] - start[d]; element t of the result equals
        element t + start of this array. The result never aliases this
        array's buffer.

        Raises:
            ArgumentError: If either sequence length differs from ndim, or
                any dimension violates 0 <= start < end <= shape
        """
        if len(start_indices) != self.ndim or len(end_indices) != self.ndim:
            raise ArgumentError(
                f"slice: start and end indices must both have {self.ndim} entries, "
                f"got {len(start_indices)} and {len(end_indices)}"
            )
        region = []
        for axis, (lo, hi, size) in enumerate(zip(start_indices, end_indices, self._shape)):
            lo = check_integer(lo, f"start_indices[{axis}]")
            hi = check_integer(hi, f"end_indices[{axis}]")
            if lo < 0 or hi > size or lo >= hi:
                raise ArgumentError(
                    f"slice: invalid range [{lo}, {hi}) for dimension {axis} with size {size}"
                )
            region.append(slice(lo, hi))
        return Array._from_ndarray(self._view()[tuple(region)])

    # --- Elementwise arithmetic ---

    def _operands(self, other: Array, symbol: str) -> tuple[NDArray[Any], NDArray[Any], NumericKind]:
        check_same_shape(self, other, (f"left of {symbol!r}", f"right of {symbol!r}"))
        kind = resolve_kind(np.result_type(self.dtype, other.dtype))
        return self._view(), other._view(), kind

    def __add__(self, other: Any) -> Array:
        if not isinstance(other, Array):
            return NotImplemented
        a, b, kind = self._operands(other, '+')
        return Array._from_ndarray(np.add(a, b, dtype=kind.dtype))

    def __sub__(self, other: Any) -> Array:
        if not isinstance(other, Array):
            return NotImplemented
        a, b, kind = self._operands(other, '-')
        return Array._from_ndarray(np.subtract(a, b, dtype=kind.dtype))

    def __mul__(self, other: Any) -> Array:
        if not isinstance(other, Array):
            return NotImplemented
        a, b, kind = self._operands(other, '*')
        return Array._from_ndarray(np.multiply(a, b, dtype=kind.dtype))

    def __truediv__(self, other: Any) -> Array:
        if not isinstance(other, Array):
            return NotImplemented
        a, b, kind = self._operands(other, '/')
        zeros = b == 0
        if np.any(zeros):
            position = tuple(int(i) for i in np.argwhere(zeros)[0])
            raise DivisionByZeroError(
                f"Division by zero: divisor is zero at position {position}",
                position=position,
            )
        return Array._from_ndarray(kind.divide(a.astype(kind.dtype), b.astype(kind.dtype)))

    def __matmul__(self, other: Any) -> Array:
        if not isinstance(other, Array):
            return NotImplemented
        return self.matmul(other)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self._shape == other._shape and bool(np.array_equal(self._view(), other._view()))

    def allclose(
        self,
        other: Array,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        True if shapes match and all elements agree within tolerance.

        Default tolerances come from the tier for this array's dtype.
        """
        if self._shape != other.shape:
            return False
        tier = select_tolerance(self.dtype)
        return is_close(
            self._view(),
            other._view(),
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        )

    # --- Reshape / transpose / copy ---

    def reshape(self, new_shape: Sequence[int] | int) -> Array:
        """
        New row-major array with the same elements in logical order.

        Raises:
            ShapeError: If new_shape is empty or has a non-positive dimension
            ArgumentError: If the element count would change
        """
        dims = check_shape(new_shape, 'new_shape')
        total = checked_size(dims, 'new_shape')
        if total != self.size:
            raise ArgumentError(
                f"new_shape: {dims} holds {total} elements, array holds {self.size}; "
                f"the total number of elements must remain unchanged"
            )
        return Array._from_ndarray(self._view().reshape(dims))

    def transpose(self) -> Array:
        """Transpose of a 2D array (new array)."""
        from pynumin.linalg.solvers import transpose_2d
        return transpose_2d(self)

    def copy(self) -> Array:
        """Deep, row-major duplicate."""
        return Array._from_ndarray(self._view())

    # --- Linear algebra ---

    def matmul(self, other: Array) -> Array:
        from pynumin.linalg.solvers import matmul
        return matmul(self, other)

    def dot_product(self, other: Array) -> Any:
        from pynumin.linalg.solvers import dot_product
        return dot_product(self, other)

    def determinant(self) -> Any:
        from pynumin.linalg.solvers import determinant
        return determinant(self)

    def inverse(self, *, overwrite_a: bool = False) -> Array:
        from pynumin.linalg.solvers import inverse
        return inverse(self, overwrite_a=overwrite_a)

    def trace(self) -> Any:
        from pynumin.linalg.solvers import trace
        return trace(self)

    def lu_decomposition(self) -> 'LUResult':
        from pynumin.linalg.solvers import lu_decomposition
        return lu_decomposition(self)

    def qr_decomposition(self, sqrt: 'SqrtFunction' = np.sqrt) -> 'QRResult':
        from pynumin.linalg.solvers import qr_decomposition
        return qr_decomposition(self, sqrt=sqrt)

    def cholesky_decomposition(self, sqrt: 'SqrtFunction' = np.sqrt) -> Array:
        from pynumin.linalg.solvers import cholesky_decomposition
        return cholesky_decomposition(self, sqrt=sqrt)

    def eigen(self, **kwargs: Any) -> 'EigenResult':
        from pynumin.linalg.solvers import eigen
        return eigen(self, **kwargs)

    def svd(self, **kwargs: Any) -> 'SVDResult':
        from pynumin.linalg.solvers import svd
        return svd(self, **kwargs)

    # --- Extensions ---

    def apply(self, func: Callable[[Any], Any]) -> Array:
        from pynumin.core.ops import apply_function
        return apply_function(self, func)

    def square(self) -> Array:
        from pynumin.core.ops import square
        return square(self)

    def sum(self) -> Any:
        from pynumin.core.ops import sum_elements
        return sum_elements(self)

    def mean(self) -> float:
        from pynumin.core.ops import mean
        return mean(self)

    def max(self) -> Any:
        from pynumin.core.ops import max_element
        return max_element(self)

    def min(self) -> Any:
        from pynumin.core.ops import min_element
        return min_element(self)

    def normalize(self, low: Scalar, high: Scalar) -> Array:
        from pynumin.core.ops import normalize
        return normalize(self, low, high)

    def norm(self, sqrt: 'SqrtFunction' = np.sqrt) -> Any:
        from pynumin.core.ops import norm
        return norm(self, sqrt=sqrt)

    def column(self, index: int) -> Array:
        from pynumin.core.ops import column
        return column(self, index)

    # --- Iteration / conversion ---

    def __iter__(self) -> Iterator[Any]:
        """Elements in logical row-major order."""
        return iter(self._view().ravel())

    def __len__(self) -> int:
        return self.size

    def tolist(self) -> list[Any]:
        """Nested Python lists of the logical contents."""
        return self._view().tolist()

    def __repr__(self) -> str:
        body = np.array2string(self._view(), separator=', ', prefix='Array(')
        return f"Array({body}, dtype={self.dtype.name})"


def _check_extent(
    shape: tuple[int, ...],
    strides: tuple[int, ...],
    offset: int,
    length: int,
) -> None:
    """Every reachable buffer position must lie in [0, length)."""
    low = offset + sum(s * (n - 1) for s, n in zip(strides, shape) if s < 0)
    high = offset + sum(s * (n - 1) for s, n in zip(strides, shape) if s > 0)
    if low < 0 or high >= length:
        raise ShapeError(
            f"strides: {strides} with offset {offset} address buffer positions "
            f"[{low}, {high}], outside a buffer of length {length}"
        )
