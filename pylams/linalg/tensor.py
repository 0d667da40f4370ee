"""
Tensor: an ordered stack of `rank` equally shaped matrix slices.

All slices share one contiguous buffer; element (s, i, j) lives at
offset s * rows * cols + i * cols + j. Matrices enter a tensor by
value through insert() and leave it by value through slice().
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylams.core.exceptions import ShapeMismatchError, ValidationError
from pylams.core.validation import (
    check_3d,
    check_array,
    check_dimension,
    check_index,
    check_real,
)
from pylams.linalg._buffer import DenseBuffer, allocate
from pylams.linalg.matrix import Matrix


class Tensor(DenseBuffer):
    """
    Rank-N stack of rows x cols slices.

    Construction:
        Tensor.new(rows=3, cols=3, rank=2)     # zero-filled
        Tensor.from_array(np.ones((2, 3, 3)))  # (rank, rows, cols)
    """

    _dim_names = ("rank", "rows", "cols")

    def __init__(self, rows: int, cols: int, rank: int):
        rows = check_dimension(rows, "rows")
        cols = check_dimension(cols, "cols")
        rank = check_dimension(rank, "rank")
        self._rows = rows
        self._cols = cols
        self._rank = rank
        self._buffer = allocate(rank * rows * cols, "Tensor.new")

    @classmethod
    def new(cls, rows: int, cols: int, rank: int) -> Tensor:
        """Allocate `rank` zero-filled slices of rows x cols."""
        return cls(rows, cols, rank)

    @classmethod
    def from_array(cls, data: ArrayLike) -> Tensor:
        """Build a tensor from a 3D array-like shaped (rank, rows, cols)."""
        values = check_array(data, "data")
        check_3d(values, "data")
        rank, rows, cols = values.shape
        buffer = allocate(values.size, "Tensor.from_array")
        buffer[:] = values.ravel()
        return cls._wrap(buffer, rows=rows, cols=cols, rank=rank)

    def _like(self, buffer: NDArray[np.floating[Any]]) -> Tensor:
        return Tensor._wrap(buffer, rows=self._rows, cols=self._cols, rank=self._rank)

    def _slab(self, index: int) -> NDArray[np.floating[Any]]:
        """(rows, cols) view of slice `index` inside the shared buffer."""
        stride = self._rows * self._cols
        start = index * stride
        return self._data()[start:start + stride].reshape(self._rows, self._cols)

    # --- Shape ---

    @property
    def rank(self) -> int:
        """Number of slices."""
        return self._rank

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self._rank, self._rows, self._cols)

    # --- Slices ---

    def insert(self, m: Matrix, index: int) -> None:
        """
        Copy the values of `m` into slice `index`.

        `m` keeps its own storage. On error the tensor is unmodified.

        Raises
        ------
        IndexOutOfRangeError
            If index is outside [0, rank).
        ShapeMismatchError
            If m is not rows x cols.
        """
        if not isinstance(m, Matrix):
            raise ValidationError(f"insert: expected Matrix, got {type(m).__name__}")
        index = check_index(index, self._rank, "index")
        if m.shape != (self._rows, self._cols):
            raise ShapeMismatchError(
                f"insert: matrix is {m.rows}x{m.cols}, "
                f"tensor slices are {self._rows}x{self._cols}",
                operation="insert",
                left_shape=self.shape,
                right_shape=m.shape,
            )
        self._slab(index)[...] = m._view()

    def slice(self, index: int) -> Matrix:
        """Slice `index` as an independent Matrix."""
        index = check_index(index, self._rank, "index")
        result = Matrix(self._rows, self._cols)
        result._view()[...] = self._slab(index)
        return result

    # --- Copies out ---

    def copy(self) -> Tensor:
        return self._like(self._data().copy())

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Return a new (rank, rows, cols) copy of the values."""
        return self._data().reshape(self._rank, self._rows, self._cols).copy()

    # --- Arithmetic ---

    def add(self, other: Tensor) -> Tensor:
        """Slice-wise sum. Rank and slice shape must match."""
        return self._elementwise(other, np.add, "add")

    def sub(self, other: Tensor) -> Tensor:
        """Slice-wise difference. Rank and slice shape must match."""
        return self._elementwise(other, np.subtract, "sub")

    # --- Python protocol ---

    def _offset(self, key: Any) -> int:
        if not isinstance(key, tuple) or len(key) != 3:
            raise ValidationError(
                f"Tensor index must be (slice, row, col), got {key!r}"
            )
        s = check_index(key[0], self._rank, "slice")
        i = check_index(key[1], self._rows, "row")
        j = check_index(key[2], self._cols, "col")
        return s * self._rows * self._cols + i * self._cols + j

    def __getitem__(self, key: tuple[int, int, int]) -> float:
        return float(self._data()[self._offset(key)])

    def __setitem__(self, key: tuple[int, int, int], value: float) -> None:
        data = self._data()
        data[self._offset(key)] = check_real(value, "value", finite=False)

    def __add__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Tensor:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.sub(other)
