"""
Owned contiguous storage shared by Vector, Matrix and Tensor.

Each container holds exactly one flat float64 buffer. Multi-dimensional
containers address it with stride arithmetic (row * cols + col, and
slice * rows * cols for tensors), so there is a single allocation to
obtain and a single allocation to release.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylams.core.exceptions import (
    AllocationError,
    ReleasedContainerError,
    ShapeMismatchError,
    ValidationError,
)
from pylams.core.precision import DTYPE, DEFAULT_RTOL, DEFAULT_ATOL


def allocate(count: int, operation: str) -> NDArray[np.floating[Any]]:
    """
    Obtain a zero-filled flat buffer of `count` float64 values.

    Args:
        count: Number of elements
        operation: Caller name for error messages

    Raises:
        AllocationError: If numpy cannot provide the storage
    """
    try:
        return np.zeros(count, dtype=DTYPE)
    except (MemoryError, ValueError) as e:
        raise AllocationError(
            f"{operation}: cannot allocate {count} float64 values: {e}",
            requested=count,
        ) from e


class DenseBuffer:
    """
    Base class for containers that own one contiguous float64 buffer.

    Subclasses define `shape` and construct instances through `_wrap`,
    which takes ownership of a buffer the caller just allocated.
    """

    _buffer: NDArray[np.floating[Any]] | None

    # numpy defers binary operators to the container (np.float64(2.0) * v)
    __array_ufunc__ = None

    @classmethod
    def _wrap(cls, buffer: NDArray[np.floating[Any]], **dims: int):
        obj = cls.__new__(cls)
        for key, value in dims.items():
            setattr(obj, f"_{key}", value)
        obj._buffer = buffer
        return obj

    @property
    def shape(self) -> tuple[int, ...]:
        raise NotImplementedError

    @property
    def released(self) -> bool:
        """Whether free() has released this container's storage."""
        return self._buffer is None

    def _data(self) -> NDArray[np.floating[Any]]:
        if self._buffer is None:
            raise ReleasedContainerError(
                f"{type(self).__name__} was used after free()"
            )
        return self._buffer

    def free(self) -> None:
        """
        Release the backing storage.

        Any later use of the container raises ReleasedContainerError.
        Freeing twice is a no-op.
        """
        self._buffer = None

    def _require(self, other: Any, operation: str) -> None:
        if not isinstance(other, type(self)):
            raise ValidationError(
                f"{operation}: expected {type(self).__name__}, "
                f"got {type(other).__name__}"
            )

    def _require_same_shape(self, other: DenseBuffer, operation: str) -> None:
        self._require(other, operation)
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"{operation}: shapes {self.shape} and {other.shape} differ",
                operation=operation,
                left_shape=self.shape,
                right_shape=other.shape,
            )

    def _elementwise(self, other: DenseBuffer, ufunc: np.ufunc, operation: str):
        self._require_same_shape(other, operation)
        left = self._data()
        right = other._data()
        out = allocate(left.size, operation)
        ufunc(left, right, out=out)
        return self._like(out)

    def _like(self, buffer: NDArray[np.floating[Any]]):
        """Wrap `buffer` in a new container with this container's shape."""
        raise NotImplementedError

    def allclose(
        self,
        other: DenseBuffer,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """Same shape and element-wise equal within tolerance."""
        self._require(other, "allclose")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data(), other._data(), rtol=rtol, atol=atol))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._data(), other._data()))

    __hash__ = None

    def __repr__(self) -> str:
        if self.released:
            return f"{type(self).__name__}(released)"
        dims = ", ".join(
            f"{name}={value}" for name, value in zip(self._dim_names, self.shape)
        )
        return f"{type(self).__name__}({dims})"

    _dim_names: tuple[str, ...] = ()


def free(container: DenseBuffer | None) -> None:
    """
    Release a container's storage. None is accepted as a no-op.
    """
    if container is None:
        return
    container.free()
