"""
Exception hierarchy for pyfinlinalg.

All exceptions inherit from FinLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class FinLinalgError(Exception):
    """Base exception for all pyfinlinalg errors."""
    pass


class ValidationError(FinLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, before any
    decomposition is attempted.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Array shapes are incorrect or incompatible.

    Raised when a matrix is not 2D, a vector is not 1D, a matrix that must
    be square is not, or a matrix and right-hand side disagree in length.

    Attributes:
        expected_shape: Shape (or partial shape) that was required
        actual_shape: Shape that was received
    """

    def __init__(
        self,
        message: str,
        expected_shape: tuple | None = None,
        actual_shape: tuple | None = None
    ):
        super().__init__(message)
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape


class InvalidArgumentError(ValidationError):
    """
    A scalar argument is outside its admissible range.

    Attributes:
        argument: Name of the offending argument
        value: The value that was rejected
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: object = None
    ):
        super().__init__(message)
        self.argument = argument
        self.value = value


class NumericalFailureError(FinLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising during decomposition: non-convergence,
    non-finite input reaching the backend, singularity.

    Attributes:
        operation: Decomposition or operation that failed ('svd', 'lu', 'eigen', ...)
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class SingularMatrixError(NumericalFailureError):
    """
    Matrix is singular to working precision.

    Raised by invert() when an LU pivot falls below the singularity threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_pivot: Smallest absolute LU pivot, if computed
        threshold: Singularity threshold the pivot was compared against
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_pivot: float | None = None,
        threshold: float | None = None
    ):
        super().__init__(message, operation='lu')
        self.matrix_name = matrix_name
        self.min_pivot = min_pivot
        self.threshold = threshold


class SingularSystemError(NumericalFailureError):
    """
    A linear system could not be decomposed.

    Raised by the SVD-based solvers when the backend cannot produce a
    singular value decomposition (non-finite input, non-convergence).
    Rank deficiency alone is NOT an error for these solvers.

    Attributes:
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(self, message: str, matrix_name: str | None = None):
        super().__init__(message, operation='svd')
        self.matrix_name = matrix_name
