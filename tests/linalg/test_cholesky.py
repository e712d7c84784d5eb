"""Tests for Cholesky decomposition."""

import math

import numpy as np
import pytest
from scipy import linalg as sla

from pynumin import Array, linalg
from pynumin.core.exceptions import ArgumentError, NotPositiveDefiniteError


class TestCholeskyDecomposition:

    def test_known_values(self):
        L = Array.from_numpy([[4.0, 2.0], [2.0, 3.0]]).cholesky_decomposition()
        np.testing.assert_allclose(L.to_numpy(), [[2.0, 0.0], [1.0, math.sqrt(2.0)]])

    def test_matches_scipy(self, spd_matrix):
        L = linalg.cholesky_decomposition(Array.from_numpy(spd_matrix))
        np.testing.assert_allclose(L.to_numpy(), sla.cholesky(spd_matrix, lower=True), rtol=1e-10, atol=1e-12)

    def test_reconstruction(self, spd_matrix):
        L = linalg.cholesky_decomposition(Array.from_numpy(spd_matrix))
        np.testing.assert_allclose((L @ L.T).to_numpy(), spd_matrix, rtol=1e-10)

    def test_only_lower_triangle_read(self):
        a = Array.from_numpy([[4.0, 999.0], [2.0, 3.0]])
        L = a.cholesky_decomposition()
        np.testing.assert_allclose(L.to_numpy(), [[2.0, 0.0], [1.0, math.sqrt(2.0)]])

    def test_integer_input_promoted(self):
        L = Array.from_numpy([[9, 3], [3, 5]]).cholesky_decomposition()
        assert L.dtype == np.float64
        np.testing.assert_allclose(L.to_numpy(), [[3.0, 0.0], [1.0, 2.0]])

    def test_custom_sqrt(self):
        L = Array.from_numpy([[4.0, 2.0], [2.0, 3.0]]).cholesky_decomposition(sqrt=math.sqrt)
        assert L.get(0, 0) == 2.0

    def test_indefinite(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            Array.from_numpy([[1.0, 2.0], [2.0, 1.0]]).cholesky_decomposition()
        assert exc_info.value.pivot_index == 1
        assert exc_info.value.radicand == pytest.approx(-3.0)

    def test_negative_diagonal(self):
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            Array.from_numpy([[-1.0, 0.0], [0.0, 1.0]]).cholesky_decomposition()
        assert exc_info.value.pivot_index == 0

    def test_zero_diagonal(self):
        with pytest.raises(NotPositiveDefiniteError):
            Array.from_numpy([[0.0, 0.0], [0.0, 1.0]]).cholesky_decomposition()

    def test_requires_square(self):
        with pytest.raises(ArgumentError):
            Array((2, 3)).cholesky_decomposition()
