"""
Vector: fixed-length owned float64 buffer.

Every arithmetic operation validates its operands, allocates a fresh
Vector and returns it. Inputs are never modified.
"""

from __future__ import annotations

import math
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylams.core.exceptions import DegenerateInputError, ShapeMismatchError
from pylams.core.validation import (
    check_1d,
    check_array,
    check_dimension,
    check_index,
    check_real,
)
from pylams.linalg._buffer import DenseBuffer, allocate


class Vector(DenseBuffer):
    """
    One-dimensional real vector of fixed size.

    Construction:
        Vector.new(3)                   # zero-filled
        Vector.from_array([1, 2, 3])
        Vector.from_array(data, size=2) # first two values of data
    """

    _dim_names = ("size",)

    def __init__(self, size: int):
        size = check_dimension(size, "size")
        self._size = size
        self._buffer = allocate(size, "Vector.new")

    @classmethod
    def new(cls, size: int) -> Vector:
        """Allocate a zero-filled vector of `size` elements."""
        return cls(size)

    @classmethod
    def from_array(cls, data: ArrayLike, size: int | None = None) -> Vector:
        """
        Build a vector by copying `size` values from `data`.

        Parameters
        ----------
        data : array-like
            1D sequence of real numbers. Never aliased.
        size : int, optional
            Number of leading values to copy. Defaults to len(data).

        Raises
        ------
        ShapeMismatchError
            If size exceeds the number of available values.
        """
        values = check_array(data, "data")
        check_1d(values, "data")
        if size is None:
            size = values.shape[0]
        size = check_dimension(size, "size")
        if size > values.shape[0]:
            raise ShapeMismatchError(
                f"from_array: requested {size} values but data holds {values.shape[0]}",
                operation="from_array",
                left_shape=(size,),
                right_shape=values.shape,
            )
        buffer = allocate(size, "Vector.from_array")
        buffer[:] = values[:size]
        return cls._wrap(buffer, size=size)

    def _like(self, buffer: NDArray[np.floating[Any]]) -> Vector:
        return Vector._wrap(buffer, size=buffer.shape[0])

    @property
    def size(self) -> int:
        """Number of elements."""
        return self._size

    @property
    def shape(self) -> tuple[int]:
        return (self._size,)

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Return a new flat copy of the values. The caller owns it."""
        return self._data().copy()

    def copy(self) -> Vector:
        return self._like(self._data().copy())

    # --- Arithmetic ---

    def add(self, other: Vector) -> Vector:
        """Element-wise sum. Sizes must match."""
        return self._elementwise(other, np.add, "add")

    def sub(self, other: Vector) -> Vector:
        """Element-wise difference. Sizes must match."""
        return self._elementwise(other, np.subtract, "sub")

    def scale(self, c: float) -> Vector:
        """Every element multiplied by `c`."""
        c = check_real(c, "c")
        data = self._data()
        out = allocate(data.size, "scale")
        np.multiply(data, c, out=out)
        return self._like(out)

    def dot(self, other: Vector) -> float:
        """
        Sum of element-wise products.

        Raises ShapeMismatchError on a size mismatch rather than returning
        a sentinel, so a zero result always means a zero dot product.
        """
        self._require_same_shape(other, "dot")
        return float(np.dot(self._data(), other._data()))

    def norm(self) -> float:
        """
        Euclidean norm.

        Elements are scaled by the largest magnitude before squaring, so
        the norm neither overflows for entries near 1e200 nor vanishes
        for entries near 1e-170.
        """
        data = self._data()
        if data.size == 0:
            return 0.0
        largest = float(np.max(np.abs(data)))
        if largest == 0.0 or not math.isfinite(largest):
            return largest
        scaled = data / largest
        return largest * math.sqrt(float(np.dot(scaled, scaled)))

    def normalize(self) -> Vector:
        """
        Unit vector in the direction of this vector.

        Raises
        ------
        DegenerateInputError
            If the norm is zero or not finite.
        """
        norm = self.norm()
        if norm == 0.0 or not math.isfinite(norm):
            raise DegenerateInputError(
                f"normalize: vector norm is {norm}, cannot normalize",
                operation="normalize",
            )
        data = self._data()
        out = allocate(data.size, "normalize")
        np.divide(data, norm, out=out)
        return self._like(out)

    def cross(self, other: Vector) -> Vector:
        """
        3-D cross product.

        r[i] = a[(i+1) % 3] * b[(i+2) % 3] - a[(i+2) % 3] * b[(i+1) % 3]

        Raises
        ------
        ShapeMismatchError
            If the sizes differ.
        DegenerateInputError
            If the vectors are not 3-dimensional.
        """
        self._require_same_shape(other, "cross")
        if self._size != 3:
            raise DegenerateInputError(
                f"cross: defined only for 3-element vectors, got size {self._size}",
                operation="cross",
            )
        a = self._data()
        b = other._data()
        out = allocate(3, "cross")
        out[:] = np.roll(a, -1) * np.roll(b, -2) - np.roll(a, -2) * np.roll(b, -1)
        return self._like(out)

    # --- Python protocol ---

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> float:
        return float(self._data()[check_index(index, self._size, "index")])

    def __setitem__(self, index: int, value: float) -> None:
        data = self._data()
        index = check_index(index, self._size, "index")
        data[index] = check_real(value, "value", finite=False)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data().tolist())

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, c: object) -> Vector:
        if isinstance(c, DenseBuffer):
            return NotImplemented
        return self.scale(c)

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)
