"""
Principal component factor models of correlation matrices.

Public API:
    extract_factors(C, k)       - n x k scaled dominant eigenvectors (PCA)
    factor_matrix(C, k)         - Alias of extract_factors()
    reduce_rank(C, k)           - n x k factors of the rank-reduced correlation
    factor_reduction(C, k)      - Alias of reduce_rank()
    factor_decomposition(C, k)  - Full FactorSolution
    rank_reduction(C, k)        - Full ReductionSolution
    renormalize_rows(F)         - Unit-norm rows, zero rows set to 1.0
"""

from pyfinlinalg.factors.design import FactorDesign
from pyfinlinalg.factors.solution import (
    FactorParams,
    FactorSolution,
    ReductionParams,
    ReductionSolution,
)
from pyfinlinalg.factors.solvers import (
    extract_factors,
    factor_matrix,
    reduce_rank,
    factor_reduction,
    factor_decomposition,
    rank_reduction,
    renormalize_rows,
)

__all__ = [
    "extract_factors",
    "factor_matrix",
    "reduce_rank",
    "factor_reduction",
    "factor_decomposition",
    "rank_reduction",
    "renormalize_rows",
    "FactorDesign",
    "FactorParams",
    "FactorSolution",
    "ReductionParams",
    "ReductionSolution",
]
