"""
Input validation utilities for pylams.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylams.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)
from pylams.core.precision import DTYPE


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The returned array never aliases the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return np.array(result, dtype=DTYPE, copy=True)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_3d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 3-dimensional."""
    check_ndim(array, 3, name)


def _unwrap_scalar(value: Any) -> Any:
    """Return the element of a 0-d numpy array; other values unchanged."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value.item()
    return value


def check_integer(value: Any, name: str, minimum: int | None = None) -> int:
    """
    Verify value is an integer, optionally bounded below.

    Python and numpy integers (including 0-d integer arrays) are
    accepted; bools and floats are not, even when the float is integral.

    Args:
        value: Value to check
        name: Parameter name for error messages
        minimum: Smallest allowed value, or None for no bound

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is below minimum
    """
    value = _unwrap_scalar(value)
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    if minimum is not None and value < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {value}")
    return value


def check_dimension(value: Any, name: str) -> int:
    """
    Verify value is a usable container dimension (non-negative integer).

    Args:
        value: Requested size, row count, column count or rank
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    return check_integer(value, name, minimum=0)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected rather than wrapped.

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    index = check_integer(index, name)
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range for bound {bound}",
            index=index,
            bound=bound,
        )
    return index


def check_real(value: Any, name: str, finite: bool = True) -> float:
    """
    Verify value is a real scalar, finite unless finite=False.

    Python and numpy numbers and 0-d real arrays are accepted.

    Args:
        value: Value to check
        name: Parameter name for error messages
        finite: Whether NaN and +/-inf are rejected

    Returns:
        The value as a plain float

    Raises:
        ValidationError: If value is not a real number, or is not finite
            when finite=True
    """
    value = _unwrap_scalar(value)
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    value = float(value)
    if finite and not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value


def check_positive(value: Any, name: str) -> float:
    """
    Verify value is a finite real scalar strictly greater than zero.

    Raises:
        ValidationError: If value is not a positive real number
    """
    value = check_real(value, name)
    if value <= 0:
        raise ValidationError(f"{name}: must be > 0, got {value}")
    return value


def check_probability(value: Any, name: str, allow_zero: bool = True) -> float:
    """
    Verify value is a probability in [0, 1] (or (0, 1] when allow_zero=False).

    Args:
        value: Probability to check
        name: Parameter name for error messages
        allow_zero: Whether 0 is an admissible value

    Raises:
        ValidationError: If value lies outside the admissible interval
    """
    value = check_real(value, name)
    if value > 1 or value < 0 or (value == 0 and not allow_zero):
        interval = "[0, 1]" if allow_zero else "(0, 1]"
        raise ValidationError(f"{name}: must lie in {interval}, got {value}")
    return value
