"""
pylams: dense linear-algebra containers and probability distributions.

Submodules:
    linalg: Vector, Matrix and Tensor containers with basic arithmetic
    stats: Closed-form summaries for nine common distributions
    core: Exceptions, validation and result types shared by both
"""

__version__ = "0.1.0"

from pylams import linalg
from pylams import stats

__all__ = [
    "__version__",
    "linalg",
    "stats",
]
