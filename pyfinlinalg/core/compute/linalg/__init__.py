"""
Linear algebra kernels for pyfinlinalg.

All decompositions follow these conventions:
    - CPU functions use SciPy (LAPACK under the hood)
    - Each decomposition returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    decompositions: SVD, LU and symmetric eigen result types, LapackBackend
    backend: Backend selection from user-facing 'backend=' arguments
"""

from pyfinlinalg.core.compute.linalg.decompositions import (
    SVDResult,
    LUResult,
    EigenResult,
    LapackBackend,
)
from pyfinlinalg.core.compute.linalg.backend import (
    BackendChoice,
    get_decomposition_backend,
)

__all__ = [
    "SVDResult",
    "LUResult",
    "EigenResult",
    "LapackBackend",
    "BackendChoice",
    "get_decomposition_backend",
]
