"""
Linear systems and matrix inversion.

Public API:
    solve(A, b)                - Minimum-norm least-squares solution (SVD)
    solve_least_squares(A, b)  - Same contract as solve()
    solve_symmetric(A, b)      - Same path as solve(), A must be square
    invert(A)                  - Inverse via LU
    linear_system(A, b)        - Full LinearSystemSolution
    inverse(A)                 - Full InverseSolution
"""

from pyfinlinalg.linear.design import LinearSystemDesign, InversionDesign
from pyfinlinalg.linear.solution import (
    LinearSystemParams,
    LinearSystemSolution,
    InverseParams,
    InverseSolution,
)
from pyfinlinalg.linear.solvers import (
    solve,
    solve_least_squares,
    solve_symmetric,
    invert,
    linear_system,
    inverse,
)

__all__ = [
    "solve",
    "solve_least_squares",
    "solve_symmetric",
    "invert",
    "linear_system",
    "inverse",
    "LinearSystemDesign",
    "InversionDesign",
    "LinearSystemParams",
    "LinearSystemSolution",
    "InverseParams",
    "InverseSolution",
]
