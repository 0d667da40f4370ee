"""
Tests for the pylams exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLamsError)
    - Diagnostic attributes on ShapeMismatchError, IndexOutOfRangeError,
      DegenerateInputError, AllocationError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylams.core.exceptions import (
    AllocationError,
    DegenerateInputError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    PyLamsError,
    ReleasedContainerError,
    ShapeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLamsError."""

    def test_validation_error_is_pylams_error(self):
        with pytest.raises(PyLamsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_shape_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise ShapeMismatchError("2x3 vs 3x2")

    def test_index_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("index 5 >= 3")

    def test_degenerate_input_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateInputError("zero norm")

    def test_released_container_is_pylams_error(self):
        with pytest.raises(PyLamsError):
            raise ReleasedContainerError("used after free")

    def test_released_container_is_not_validation_error(self):
        assert not isinstance(ReleasedContainerError("x"), ValidationError)

    def test_allocation_error_is_memory_error(self):
        """Callers catching MemoryError still see allocation failures."""
        with pytest.raises(MemoryError):
            raise AllocationError("out of memory")

    def test_allocation_error_is_pylams_error(self):
        with pytest.raises(PyLamsError):
            raise AllocationError("out of memory")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestShapeMismatchError:
    """ShapeMismatchError records the operation and both operand shapes."""

    def test_all_attributes(self):
        err = ShapeMismatchError(
            "add: shapes differ",
            operation="add",
            left_shape=(2, 3),
            right_shape=(3, 2),
        )
        assert str(err) == "add: shapes differ"
        assert err.operation == "add"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (3, 2)

    def test_defaults_are_none(self):
        err = ShapeMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("index 3 out of range", index=3, bound=3)
        assert err.index == 3
        assert err.bound == 3

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("bad index")
        assert err.index is None
        assert err.bound is None


class TestDegenerateInputError:

    def test_operation_attribute(self):
        err = DegenerateInputError("zero norm", operation="normalize")
        assert err.operation == "normalize"
        assert "zero norm" in str(err)


class TestAllocationError:

    def test_requested_attribute(self):
        err = AllocationError("cannot allocate", requested=10**20)
        assert err.requested == 10**20

    def test_catchable_with_attributes(self):
        with pytest.raises(AllocationError) as exc_info:
            raise AllocationError("cannot allocate", requested=7)
        assert exc_info.value.requested == 7
