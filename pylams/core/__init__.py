"""
Core infrastructure for pylams.

Shared abstractions used by both the linear-algebra containers and the
probability distributions.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtype and comparison tolerances
    result: Generic Result[P] envelope
    timing: Execution timing utilities
"""

from pylams.core.result import Result
from pylams.core.exceptions import (
    PyLamsError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    ReleasedContainerError,
    NumericalError,
    DegenerateInputError,
    AllocationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLamsError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "ReleasedContainerError",
    "NumericalError",
    "DegenerateInputError",
    "AllocationError",
]
