"""
Tests for Tensor: slice insertion/extraction and slice-wise arithmetic.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pylams.core.exceptions import (
    IndexOutOfRangeError,
    ShapeMismatchError,
    ValidationError,
)
from pylams.linalg import Matrix, Tensor


@pytest.fixture
def ones_3x3():
    m = Matrix.new(3, 3)
    m.fill(1.0)
    return m


@pytest.fixture
def tensor_with_ones(ones_3x3):
    """Rank-3 tensor of 3x3 slices with slice 0 all ones."""
    t = Tensor.new(3, 3, 3)
    t.insert(ones_3x3, 0)
    return t


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_new(self):
        t = Tensor.new(rows=2, cols=4, rank=3)
        assert t.rank == 3
        assert t.rows == 2
        assert t.cols == 4
        assert t.shape == (3, 2, 4)
        assert_array_equal(t.to_array(), np.zeros((3, 2, 4)))

    def test_new_rejects_negative_rank(self):
        with pytest.raises(ValidationError, match="rank"):
            Tensor.new(2, 2, -1)

    def test_from_array(self, rng):
        data = rng.standard_normal((2, 3, 4))
        t = Tensor.from_array(data)
        assert t.shape == (2, 3, 4)
        assert_array_equal(t.to_array(), data)

    def test_from_array_rejects_2d(self):
        with pytest.raises(ValidationError):
            Tensor.from_array(np.zeros((2, 2)))

    def test_copy_is_independent(self, tensor_with_ones):
        copy = tensor_with_ones.copy()
        assert copy == tensor_with_ones
        copy[0, 0, 0] = -5.0
        assert tensor_with_ones[0, 0, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Slices
# ═══════════════════════════════════════════════════════════════════════


class TestSlices:

    def test_insert_copies_values(self, tensor_with_ones):
        assert_array_equal(tensor_with_ones.to_array()[0], np.ones((3, 3)))
        assert_array_equal(tensor_with_ones.to_array()[1:], np.zeros((2, 3, 3)))

    def test_insert_does_not_alias_source(self, ones_3x3):
        t = Tensor.new(3, 3, 1)
        t.insert(ones_3x3, 0)
        ones_3x3.fill(7.0)
        assert t[0, 1, 1] == 1.0

    def test_insert_index_out_of_range(self, ones_3x3):
        t = Tensor.new(3, 3, 3)
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            t.insert(ones_3x3, 3)
        assert exc_info.value.bound == 3
        assert_array_equal(t.to_array(), np.zeros((3, 3, 3)))

    def test_insert_negative_index(self, ones_3x3):
        with pytest.raises(IndexOutOfRangeError):
            Tensor.new(3, 3, 3).insert(ones_3x3, -1)

    def test_insert_shape_mismatch(self):
        t = Tensor.new(3, 3, 2)
        with pytest.raises(ShapeMismatchError):
            t.insert(Matrix.new(3, 2), 0)
        assert_array_equal(t.to_array(), np.zeros((2, 3, 3)))

    def test_insert_rejects_non_matrix(self):
        with pytest.raises(ValidationError, match="expected Matrix"):
            Tensor.new(2, 2, 1).insert(np.ones((2, 2)), 0)

    def test_slice_round_trip(self, rng):
        m = Matrix.from_rows(rng.standard_normal((2, 5)))
        t = Tensor.new(2, 5, 4)
        t.insert(m, 2)
        assert t.slice(2) == m

    def test_slice_is_independent(self, tensor_with_ones):
        s = tensor_with_ones.slice(0)
        s.fill(0.0)
        assert tensor_with_ones[0, 2, 2] == 1.0

    def test_element_offsets(self):
        t = Tensor.from_array(np.arange(24.0).reshape(2, 3, 4))
        assert t[1, 2, 3] == 23.0
        assert t[1, 0, 0] == 12.0


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_to_copy_doubles(self, tensor_with_ones):
        result = tensor_with_ones.add(tensor_with_ones.copy())
        assert_array_equal(result.to_array()[0], np.full((3, 3), 2.0))

    def test_sub_from_copy_is_zero(self, tensor_with_ones):
        result = tensor_with_ones.sub(tensor_with_ones.copy())
        assert_array_equal(result.to_array(), np.zeros((3, 3, 3)))

    def test_result_shape_not_permuted(self):
        """rows, cols and rank all differ; the result keeps each in place."""
        t = Tensor.new(rows=2, cols=3, rank=4)
        result = t.add(t.copy())
        assert result.rows == 2
        assert result.cols == 3
        assert result.rank == 4

    def test_operators(self, tensor_with_ones):
        other = tensor_with_ones.copy()
        assert (tensor_with_ones + other) == tensor_with_ones.add(other)
        assert (tensor_with_ones - other) == tensor_with_ones.sub(other)

    def test_rank_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            Tensor.new(3, 3, 3).add(Tensor.new(3, 3, 2))
        assert exc_info.value.left_shape == (3, 3, 3)
        assert exc_info.value.right_shape == (2, 3, 3)

    def test_slice_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            Tensor.new(2, 3, 2).sub(Tensor.new(3, 2, 2))

    def test_repr(self):
        assert repr(Tensor.new(2, 3, 4)) == "Tensor(rank=4, rows=2, cols=3)"


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElements:

    def test_setitem_addresses_slice(self):
        t = Tensor.new(2, 2, 2)
        t[1, 0, 1] = 6.0
        assert t.slice(1)[0, 1] == 6.0
        assert t.slice(0)[0, 1] == 0.0

    def test_setitem_rejects_non_numeric(self):
        t = Tensor.new(2, 2, 2)
        with pytest.raises(ValidationError, match="real number"):
            t[0, 0, 0] = "7"
        assert t[0, 0, 0] == 0.0

    def test_numpy_operand_does_not_bypass_tensor(self):
        t = Tensor.new(2, 2, 2)
        with pytest.raises(TypeError):
            np.float64(1.0) + t
