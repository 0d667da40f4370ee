"""
Matrix: fixed-shape owned float64 buffer, row-major.

Element (i, j) lives at offset i * cols + j of a single contiguous
buffer. Arithmetic works on a (rows, cols) view of that buffer and
writes into a freshly allocated result buffer.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylams.core.exceptions import ShapeMismatchError, ValidationError
from pylams.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_index,
    check_real,
)
from pylams.linalg._buffer import DenseBuffer, allocate
from pylams.linalg.vector import Vector


class Matrix(DenseBuffer):
    """
    Two-dimensional real matrix of fixed shape.

    Construction:
        Matrix.new(2, 3)                        # zero-filled
        Matrix.from_array(2, 3, [1, 2, 3, 4, 5, 6])
        Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        Matrix.identity(3)
    """

    _dim_names = ("rows", "cols")

    def __init__(self, rows: int, cols: int):
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        self._rows = rows
        self._cols = cols
        self._buffer = allocate(rows * cols, "Matrix.new")

    @classmethod
    def new(cls, rows: int, cols: int) -> Matrix:
        """Allocate a zero-filled rows x cols matrix."""
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n matrix with 1 on the diagonal and 0 elsewhere."""
        result = cls(n, n)
        np.fill_diagonal(result._view(), 1.0)
        return result

    @classmethod
    def from_array(cls, rows: int, cols: int, data: ArrayLike) -> Matrix:
        """
        Build a rows x cols matrix from row-major flat data.

        Raises
        ------
        ShapeMismatchError
            If data does not hold exactly rows * cols values.
        """
        result = cls(rows, cols)
        result.set(data)
        return result

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build a matrix from a nested sequence or 2D array (copied)."""
        values = check_array(rows, "rows")
        check_2d(values, "rows")
        n_rows, n_cols = values.shape
        buffer = allocate(n_rows * n_cols, "Matrix.from_rows")
        buffer[:] = values.ravel()
        return cls._wrap(buffer, rows=n_rows, cols=n_cols)

    def _like(self, buffer: NDArray[np.floating[Any]]) -> Matrix:
        return Matrix._wrap(buffer, rows=self._rows, cols=self._cols)

    def _view(self) -> NDArray[np.floating[Any]]:
        """(rows, cols) view sharing this matrix's buffer."""
        return self._data().reshape(self._rows, self._cols)

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    # --- Copies out ---

    def copy(self) -> Matrix:
        return self._like(self._data().copy())

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Return a new (rows, cols) copy of the values."""
        return self._view().copy()

    def row(self, i: int) -> Vector:
        """Row i as an independent Vector."""
        i = check_index(i, self._rows, "i")
        start = i * self._cols
        return Vector.from_array(self._data()[start:start + self._cols])

    def col(self, j: int) -> Vector:
        """Column j as an independent Vector."""
        j = check_index(j, self._cols, "j")
        return Vector.from_array(self._data()[j::self._cols])

    # --- Mutators ---

    def fill(self, value: float) -> None:
        """Set every element to `value`. NaN and inf are stored as given."""
        self._data().fill(check_real(value, "value", finite=False))

    def set(self, data: ArrayLike, size: int | None = None) -> None:
        """
        Overwrite all elements from row-major flat data.

        data[k] goes to row k // cols, column k % cols.

        Parameters
        ----------
        data : array-like
            1D sequence of values.
        size : int, optional
            Number of values to take from data. Defaults to len(data).

        Raises
        ------
        ShapeMismatchError
            If size != rows * cols, or data holds fewer than size values.
            The matrix is left unmodified.
        """
        values = check_array(data, "data")
        check_1d(values, "data")
        if size is None:
            size = values.shape[0]
        size = check_dimension(size, "size")
        expected = self._rows * self._cols
        if size != expected or size > values.shape[0]:
            raise ShapeMismatchError(
                f"set: matrix {self._rows}x{self._cols} holds {expected} values, "
                f"got size {size} with {values.shape[0]} values available",
                operation="set",
                left_shape=self.shape,
                right_shape=(size,),
            )
        self._data()[:] = values[:size]

    # --- Arithmetic ---

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum. Rows and cols must both match."""
        return self._elementwise(other, np.add, "add")

    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference. Rows and cols must both match."""
        return self._elementwise(other, np.subtract, "sub")

    def scale(self, s: float) -> Matrix:
        """Every element multiplied by `s`."""
        s = check_real(s, "s")
        data = self._data()
        out = allocate(data.size, "scale")
        np.multiply(data, s, out=out)
        return self._like(out)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Requires self.cols == other.rows; the result is
        self.rows x other.cols.
        """
        self._require(other, "multiply")
        if self._cols != other._rows:
            raise ShapeMismatchError(
                f"multiply: inner dimensions differ ({self._rows}x{self._cols} "
                f"@ {other._rows}x{other._cols})",
                operation="multiply",
                left_shape=self.shape,
                right_shape=other.shape,
            )
        out = allocate(self._rows * other._cols, "multiply")
        np.matmul(
            self._view(), other._view(),
            out=out.reshape(self._rows, other._cols),
        )
        return Matrix._wrap(out, rows=self._rows, cols=other._cols)

    def multiply_vector(self, v: Vector) -> Matrix:
        """
        Matrix-vector product as a rows x 1 Matrix.

        Requires cols == v.size.
        """
        if not isinstance(v, Vector):
            raise ValidationError(
                f"multiply_vector: expected Vector, got {type(v).__name__}"
            )
        if self._cols != v.size:
            raise ShapeMismatchError(
                f"multiply_vector: matrix has {self._cols} columns, "
                f"vector has {v.size} elements",
                operation="multiply_vector",
                left_shape=self.shape,
                right_shape=v.shape,
            )
        out = allocate(self._rows, "multiply_vector")
        np.matmul(self._view(), v._data(), out=out)
        return Matrix._wrap(out, rows=self._rows, cols=1)

    def transpose(self) -> Matrix:
        """cols x rows matrix with result[j, i] = self[i, j]."""
        out = allocate(self._rows * self._cols, "transpose")
        out.reshape(self._cols, self._rows)[...] = self._view().T
        return Matrix._wrap(out, rows=self._cols, cols=self._rows)

    # --- Python protocol ---

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"Matrix index must be (row, col), got {key!r}")
        i = check_index(key[0], self._rows, "row")
        j = check_index(key[1], self._cols, "col")
        return i * self._cols + j

    def __getitem__(self, key: tuple[int, int]) -> float:
        return float(self._data()[self._offset(key)])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        data = self._data()
        data[self._offset(key)] = check_real(value, "value", finite=False)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, s: object) -> Matrix:
        if isinstance(s, DenseBuffer):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> Matrix:
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        if isinstance(other, Matrix):
            return self.multiply(other)
        return NotImplemented
