"""
pyfinlinalg: dense linear algebra for quantitative finance.

Linear solves, matrix inversion, principal component factor extraction and
rank reduction of correlation matrices, on top of an injectable
decomposition backend (LAPACK via SciPy by default).

Submodules:
    linear: solve, solve_least_squares, solve_symmetric, invert
    factors: extract_factors, reduce_rank
    core: exceptions, validation, protocols, random number generation
"""

__version__ = "0.1.0"

from pyfinlinalg import linear
from pyfinlinalg import factors
from pyfinlinalg.linear import (
    solve,
    solve_least_squares,
    solve_symmetric,
    invert,
    linear_system,
    inverse,
)
from pyfinlinalg.factors import (
    extract_factors,
    factor_matrix,
    reduce_rank,
    factor_reduction,
    factor_decomposition,
    rank_reduction,
    renormalize_rows,
)
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
    "__version__",
    "linear",
    "factors",
    "solve",
    "solve_least_squares",
    "solve_symmetric",
    "invert",
    "linear_system",
    "inverse",
    "extract_factors",
    "factor_matrix",
    "reduce_rank",
    "factor_reduction",
    "factor_decomposition",
    "rank_reduction",
    "renormalize_rows",
    "FinLinalgError",
    "ValidationError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "NumericalFailureError",
    "SingularMatrixError",
    "SingularSystemError",
]
