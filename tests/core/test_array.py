"""
Tests for the Array container.

Covers construction (default, buffer-backed, custom strides), layout
strides, element access, slicing, reshape/transpose/copy, equality,
iteration and conversion.
"""

import numpy as np
import pytest

from pynumin import Array
from pynumin.core.array import default_strides
from pynumin.core.exceptions import (
    ArgumentError,
    BoundsError,
    ShapeError,
    ShapeOverflowError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_is_zero_filled_float64(self):
        a = Array((2, 3))
        assert a.shape == (2, 3)
        assert a.ndim == 2
        assert a.size == 6
        assert a.dtype == np.float64
        assert a.offset == 0
        assert a.owns_data
        assert a.data.size == 6
        assert all(v == 0 for v in a)

    @pytest.mark.parametrize("shape", [(1,), (7,), (2, 3), (2, 3, 4), (1, 1, 5, 2)])
    def test_buffer_length_is_product_of_shape(self, shape):
        assert Array(shape).data.size == int(np.prod(shape))

    def test_bare_int_shape(self):
        a = Array(4)
        assert a.shape == (4,)
        assert a.strides == (1,)

    def test_integer_dtype(self):
        a = Array((3,), dtype=np.int32)
        assert a.dtype == np.int32
        assert a.kind.exact
        assert a.get(0) == 0

    @pytest.mark.parametrize("shape", [(), (0,), (2, 0), (-1, 3), None])
    def test_invalid_shape(self, shape):
        with pytest.raises(ShapeError):
            Array(shape)

    def test_overflowing_shape(self):
        with pytest.raises(ShapeOverflowError) as exc_info:
            Array((2 ** 40, 2 ** 40))
        assert isinstance(exc_info.value, OverflowError)
        assert exc_info.value.shape == (2 ** 40, 2 ** 40)

    def test_invalid_order(self):
        with pytest.raises(ArgumentError):
            Array((2, 2), order='X')

    @pytest.mark.parametrize("dtype", [bool, np.complex128, object])
    def test_unsupported_dtype(self, dtype):
        with pytest.raises(ArgumentError):
            Array((2,), dtype=dtype)


class TestStrides:

    def test_row_major(self):
        assert Array((2, 3, 4)).strides == (12, 4, 1)

    def test_column_major(self):
        assert Array((2, 3, 4), order='F').strides == (1, 2, 6)

    def test_lowercase_tokens(self):
        assert Array((2, 3), order='c').strides == (3, 1)
        assert Array((2, 3), order='f').strides == (1, 2)

    @pytest.mark.parametrize("shape", [(5,), (3, 7), (2, 3, 4, 5)])
    def test_row_major_recurrence(self, shape):
        strides = default_strides(shape, 'C')
        assert strides[-1] == 1
        for d in range(len(shape) - 1):
            assert strides[d] == strides[d + 1] * shape[d + 1]

    @pytest.mark.parametrize("shape", [(5,), (3, 7), (2, 3, 4, 5)])
    def test_column_major_recurrence(self, shape):
        strides = default_strides(shape, 'F')
        assert strides[0] == 1
        for d in range(1, len(shape)):
            assert strides[d] == strides[d - 1] * shape[d - 1]

    def test_explicit_strides(self):
        buf = np.arange(6.0)
        a = Array((2, 3), buffer=buf, strides=(1, 2))
        assert a.strides == (1, 2)
        assert a.tolist() == [[0.0, 2.0, 4.0], [1.0, 3.0, 5.0]]

    def test_stride_length_mismatch(self):
        with pytest.raises(ShapeError):
            Array((2, 3), strides=(1,))

    def test_strides_outside_buffer(self):
        with pytest.raises(ShapeError, match="outside a buffer"):
            Array((2, 3), buffer=np.arange(6.0), strides=(4, 1))

    def test_negative_strides_within_buffer(self):
        buf = np.arange(4.0)
        a = Array((4,), buffer=buf, offset=3, strides=(-1,))
        assert a.tolist() == [3.0, 2.0, 1.0, 0.0]

    def test_negative_strides_before_buffer_start(self):
        with pytest.raises(ShapeError):
            Array((4,), buffer=np.arange(4.0), offset=1, strides=(-1,))


class TestBuffer:

    def test_aliases_numpy_buffer(self):
        buf = np.arange(10.0)
        a = Array((2, 3), buffer=buf, offset=2)
        assert not a.owns_data
        assert a.data is buf
        assert a.get(0, 0) == 2.0
        assert a.get(1, 2) == 7.0

        a.set(0, 0, 99.0)
        assert buf[2] == 99.0

        buf[7] = -1.0
        assert a.get(1, 2) == -1.0

    def test_dtype_follows_buffer(self):
        a = Array((3,), buffer=np.array([1, 2, 3], dtype=np.int32))
        assert a.dtype == np.int32

    def test_list_buffer_is_copied(self):
        values = [1.0, 2.0, 3.0]
        a = Array((3,), buffer=values)
        assert a.owns_data
        a.set(0, 10.0)
        assert values[0] == 1.0

    def test_converted_buffer_is_owned(self):
        buf = np.array([1, 2, 3], dtype=np.int32)
        a = Array((3,), buffer=buf, dtype=np.float64)
        assert a.owns_data
        assert a.dtype == np.float64
        a.set(0, 9.5)
        assert buf[0] == 1

    def test_column_major_buffer(self):
        a = Array((2, 2), buffer=np.array([1.0, 3.0, 2.0, 4.0]), order='F')
        assert a.get(0, 1) == 2.0
        assert a.get(1, 0) == 3.0

    def test_buffer_too_small(self):
        with pytest.raises(ShapeError, match="needs 6"):
            Array((2, 3), buffer=np.zeros(5))

    def test_buffer_too_small_after_offset(self):
        with pytest.raises(ShapeError):
            Array((2, 3), buffer=np.zeros(7), offset=2)

    def test_offset_past_end(self):
        with pytest.raises(ArgumentError):
            Array((1,), buffer=np.zeros(3), offset=3)

    def test_negative_offset(self):
        with pytest.raises(ArgumentError):
            Array((1,), buffer=np.zeros(3), offset=-1)

    def test_non_flat_buffer(self):
        with pytest.raises(ArgumentError, match="flat"):
            Array((2, 2), buffer=np.zeros((2, 2)))


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_set_then_get(self):
        a = Array((3, 4))
        a.set(2, 1, 5.5)
        assert a.get(2, 1) == 5.5
        assert a[2, 1] == 5.5

    def test_setitem_then_getitem(self):
        a = Array((2, 2, 2), dtype=np.int64)
        a[1, 0, 1] = 7
        assert a[1, 0, 1] == 7
        assert a.get(1, 0, 1) == 7

    def test_set_only_touches_one_element(self):
        a = Array((2, 2))
        a[0, 1] = 3.0
        assert a.tolist() == [[0.0, 3.0], [0.0, 0.0]]

    def test_1d_getitem(self):
        a = Array((3,), buffer=np.array([4.0, 5.0, 6.0]))
        assert a[2] == 6.0

    def test_out_of_bounds(self):
        a = Array((2, 3))
        with pytest.raises(BoundsError) as exc_info:
            a.get(2, 0)
        assert exc_info.value.index == 2
        assert exc_info.value.axis == 0
        assert exc_info.value.size == 2
        assert isinstance(exc_info.value, IndexError)

    def test_negative_index_rejected(self):
        with pytest.raises(BoundsError):
            Array((3,))[-1]

    def test_wrong_index_count(self):
        a = Array((2, 3))
        with pytest.raises(ArgumentError, match="expected 2 indices but received 1"):
            a.get(1)
        with pytest.raises(ArgumentError):
            a[0, 0, 0] = 1.0

    def test_set_without_arguments(self):
        with pytest.raises(ArgumentError):
            Array((2,)).set()


# ═══════════════════════════════════════════════════════════════════════
# Slicing
# ═══════════════════════════════════════════════════════════════════════


class TestSlice:

    @pytest.fixture
    def grid(self):
        return Array.from_numpy(np.arange(12.0).reshape(3, 4))

    def test_box(self, grid):
        part = grid.slice([1, 1], [3, 3])
        assert part.shape == (2, 2)
        assert part.tolist() == [[5.0, 6.0], [9.0, 10.0]]

    def test_element_correspondence(self, grid):
        start = (1, 2)
        part = grid.slice(start, (3, 4))
        for i in range(part.shape[0]):
            for j in range(part.shape[1]):
                assert part.get(i, j) == grid.get(i + start[0], j + start[1])

    def test_python_slice_syntax(self, grid):
        assert grid[1:3, 1:3] == grid.slice([1, 1], [3, 3])
        assert grid[:, 2:].tolist() == [[2.0, 3.0], [6.0, 7.0], [10.0, 11.0]]

    def test_result_is_independent(self, grid):
        part = grid.slice([0, 0], [2, 2])
        part[0, 0] = 100.0
        assert grid[0, 0] == 0.0
        assert part.owns_data

    def test_slice_of_strided_array(self):
        a = Array((2, 2), buffer=np.array([1.0, 3.0, 2.0, 4.0]), order='F')
        assert a.slice([0, 1], [2, 2]).tolist() == [[2.0], [4.0]]

    @pytest.mark.parametrize("start,end", [
        ([0, 0], [4, 2]),   # end past shape
        ([1, 1], [1, 3]),   # empty range
        ([2, 0], [1, 2]),   # start after end
        ([-1, 0], [2, 2]),  # negative start
    ])
    def test_invalid_range(self, grid, start, end):
        with pytest.raises(ArgumentError, match="invalid range"):
            grid.slice(start, end)

    def test_wrong_length(self, grid):
        with pytest.raises(ArgumentError):
            grid.slice([0], [1])

    def test_non_integer_bounds(self, grid):
        with pytest.raises(ArgumentError, match=r"start_indices\[0\]"):
            grid.slice([0.5, 0], [2, 2])
        with pytest.raises(ArgumentError, match=r"end_indices\[1\]"):
            grid.slice([0, 0], [2, 2.0])
        with pytest.raises(ArgumentError):
            grid[0.5:2, :]

    def test_step_rejected(self, grid):
        with pytest.raises(ArgumentError, match="step"):
            grid[::2, :]

    def test_slice_count_mismatch(self, grid):
        with pytest.raises(ArgumentError):
            grid[0:1]


# ═══════════════════════════════════════════════════════════════════════
# Reshape / transpose / copy
# ═══════════════════════════════════════════════════════════════════════


class TestReshape:

    def test_preserves_logical_order(self):
        a = Array.from_numpy(np.arange(6.0).reshape(2, 3))
        b = a.reshape((3, 2))
        assert b.shape == (3, 2)
        assert list(b) == list(a)

    def test_from_column_major(self):
        a = Array((2, 2), buffer=np.array([1.0, 3.0, 2.0, 4.0]), order='F')
        assert a.reshape((4,)).tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_count_mismatch(self):
        with pytest.raises(ArgumentError, match="must remain unchanged"):
            Array((2, 3)).reshape((4, 2))

    def test_invalid_shape(self):
        with pytest.raises(ShapeError):
            Array((2, 3)).reshape((6, 0))


class TestTranspose:

    def test_values(self):
        a = Array.from_numpy([[1, 2, 3], [4, 5, 6]])
        t = a.transpose()
        assert t.shape == (3, 2)
        assert t.tolist() == [[1, 4], [2, 5], [3, 6]]
        assert a.T == t

    def test_twice_is_identity(self, rng):
        a = Array.from_numpy(rng.standard_normal((3, 5)))
        assert a.transpose().transpose() == a

    def test_requires_2d(self):
        with pytest.raises(ArgumentError):
            Array((3,)).transpose()


class TestCopy:

    def test_deep(self):
        buf = np.arange(4.0)
        a = Array((2, 2), buffer=buf)
        c = a.copy()
        assert c == a
        assert c.owns_data
        c[0, 0] = 50.0
        assert buf[0] == 0.0

    def test_normalizes_layout(self):
        a = Array((2, 2), buffer=np.arange(5.0), offset=1, order='F')
        c = a.copy()
        assert c.offset == 0
        assert c.strides == (2, 1)
        assert c == a


# ═══════════════════════════════════════════════════════════════════════
# Comparison, iteration and conversion
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal_across_layouts(self):
        c = Array.from_numpy([[1.0, 2.0], [3.0, 4.0]])
        f = Array((2, 2), buffer=np.array([1.0, 3.0, 2.0, 4.0]), order='F')
        assert c == f

    def test_different_values(self):
        assert Array.from_numpy([1.0, 2.0]) != Array.from_numpy([1.0, 3.0])

    def test_different_shapes(self):
        assert Array.from_numpy([1.0, 2.0, 3.0, 4.0]) != Array.from_numpy([[1.0, 2.0], [3.0, 4.0]])

    def test_non_array(self):
        assert Array.from_numpy([1.0]) != [1.0]

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Array((2,)))

    def test_allclose(self):
        a = Array.from_numpy([1.0, 2.0])
        b = Array.from_numpy([1.0 + 1e-13, 2.0])
        assert a.allclose(b)
        assert not a.allclose(Array.from_numpy([1.1, 2.0]))
        assert a.allclose(Array.from_numpy([1.1, 2.0]), atol=0.2)
        assert not a.allclose(Array.from_numpy([[1.0, 2.0]]))

    def test_allclose_half_precision(self):
        half = Array.from_numpy(np.array([1.0, 2.0], dtype=np.float16))
        assert half.allclose(Array.from_numpy([1.001, 2.0]))
        assert not half.allclose(Array.from_numpy([1.1, 2.0]))


class TestConversion:

    def test_iteration_is_logical_row_major(self):
        a = Array((2, 2), buffer=np.array([1.0, 3.0, 2.0, 4.0]), order='F')
        assert list(a) == [1.0, 2.0, 3.0, 4.0]
        assert len(a) == 4

    def test_from_numpy_copies(self):
        values = np.ones((2, 2))
        a = Array.from_numpy(values)
        values[0, 0] = 5.0
        assert a[0, 0] == 1.0

    def test_from_numpy_scalar(self):
        with pytest.raises(ShapeError):
            Array.from_numpy(3.0)

    def test_to_numpy(self):
        a = Array((2, 2), buffer=np.array([1.0, 3.0, 2.0, 4.0]), order='F')
        np.testing.assert_array_equal(a.to_numpy(), [[1.0, 2.0], [3.0, 4.0]])
        a.to_numpy()[0, 0] = 9.0
        assert a[0, 0] == 1.0

    def test_tolist(self):
        assert Array.from_numpy([[1, 2], [3, 4]]).tolist() == [[1, 2], [3, 4]]

    def test_repr(self):
        text = repr(Array.from_numpy([1.0, 2.0]))
        assert text.startswith("Array([1., 2.]")
        assert text.endswith("dtype=float64)")
