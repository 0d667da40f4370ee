"""
Dense numeric containers.

Each container owns one contiguous float64 buffer. Arithmetic returns a
freshly allocated container and raises ShapeMismatchError when operand
shapes are incompatible; nothing is modified on failure.

Public API:
    Vector  - 1D: add, sub, scale, dot, norm, normalize, cross
    Matrix  - 2D: add, sub, scale, multiply, multiply_vector,
              transpose, fill, set, identity
    Tensor  - stack of equally shaped matrix slices: insert, slice,
              add, sub
    free    - release a container's storage (None is a no-op)
"""

from pylams.linalg._buffer import free
from pylams.linalg.vector import Vector
from pylams.linalg.matrix import Matrix
from pylams.linalg.tensor import Tensor

__all__ = [
    "Vector",
    "Matrix",
    "Tensor",
    "free",
]
