"""
Tests for numerical thresholds.
"""

import numpy as np

from pyfinlinalg.core.compute.tolerances import (
    EPSILON_64,
    LU_SINGULARITY_THRESHOLD,
    pseudo_inverse_tolerance,
)


def test_lu_threshold_value():
    assert LU_SINGULARITY_THRESHOLD == 1e-11


def test_pseudo_inverse_tolerance_matches_numpy_convention():
    assert pseudo_inverse_tolerance((4, 7), 2.0) == 7 * 2.0 * np.finfo(np.float64).eps
    assert EPSILON_64 == np.finfo(np.float64).eps
