"""
Numerical thresholds.

Thresholds here decide algorithm behaviour: when an LU pivot counts as
zero, and when a singular value is dropped from a pseudo-inverse.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Absolute pivot magnitude below which an LU factorisation is singular.
# Same default as Apache commons-math's LUDecomposition.
LU_SINGULARITY_THRESHOLD: float = 1e-11


def pseudo_inverse_tolerance(shape: tuple[int, int], largest_singular_value: float) -> float:
    """
    Cut-off below which singular values are treated as zero.

    tol = max(n, m) * s_max * eps, the LAPACK / numpy.linalg.pinv convention.
    """
    return max(shape) * largest_singular_value * EPSILON_64
