"""
Numerical precision constants.

Every container stores float64. Comparison helpers (allclose on
Vector, Matrix, Tensor) default to the tolerances defined here.
"""

import numpy as np


# Storage dtype for every container buffer
DTYPE = np.float64

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14
