"""
Exception hierarchy for pylams.

All exceptions inherit from PyLamsError to allow catching any
library-specific error. Container and distribution code raise the
most specific class that applies.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLamsError(Exception):
    """Base exception for all pylams errors."""
    pass


class ValidationError(PyLamsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input has the wrong number of dimensions or a
    length that does not match what the container expects.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested combination.

    Raised by container arithmetic (vector size mismatch, matrix row/col
    mismatch, inner-dimension mismatch in a product, tensor slice or rank
    mismatch). The operation allocates no result and leaves its inputs
    untouched.

    Attributes:
        operation: Name of the operation that rejected its operands
        left_shape: Shape of the left (or receiving) operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError):
    """
    Index falls outside a container's bounds.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound that was violated
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class ReleasedContainerError(PyLamsError):
    """
    Container was used after free() released its storage.
    """
    pass


class NumericalError(PyLamsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input is well-shaped but mathematically degenerate for the operation.

    Examples: normalizing a zero vector, a cross product of vectors
    that are not 3-dimensional.

    Attributes:
        operation: Name of the operation that rejected the input
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class AllocationError(PyLamsError, MemoryError):
    """
    Backing storage for a container could not be obtained.

    Nothing is left partially allocated when this is raised.

    Attributes:
        requested: Number of float64 elements that were requested
    """

    def __init__(self, message: str, requested: int | None = None):
        super().__init__(message)
        self.requested = requested
