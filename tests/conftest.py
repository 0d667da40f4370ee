"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylams.linalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a_2x3():
    """[[1, 2, 3], [4, 5, 6]]"""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def b_3x2():
    """[[1, 2], [3, 4], [5, 6]]"""
    return Matrix.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])


@pytest.fixture
def v123():
    return Vector.from_array([1.0, 2.0, 3.0])


@pytest.fixture
def v456():
    return Vector.from_array([4.0, 5.0, 6.0])
