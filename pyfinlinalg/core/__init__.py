"""
Core infrastructure for pyfinlinalg.

This module provides shared abstractions, utilities, and backend infrastructure
used by the domain subpackages (linear, factors).

Key components:
    protocols: DecompositionBackend, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    random: Deterministic uniform generator
    compute: Timing, tolerances, decomposition kernels
"""

from pyfinlinalg.core.protocols import DecompositionBackend, Backend
from pyfinlinalg.core.result import Result
from pyfinlinalg.core.exceptions import (
    FinLinalgError,
    ValidationError,
    DimensionMismatchError,
    InvalidArgumentError,
    NumericalFailureError,
    SingularMatrixError,
    SingularSystemError,
)

__all__ = [
    # Protocols
    "DecompositionBackend",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "FinLinalgError",
    "ValidationError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "NumericalFailureError",
    "SingularMatrixError",
    "SingularSystemError",
]
