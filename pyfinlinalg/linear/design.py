"""
Designs for linear systems and matrix inversion.

Wrap and validate the inputs of the MatrixSolver operations. All shape
checks happen here, before any decomposition is attempted. Finiteness is
deliberately NOT checked: non-finite entries surface as decomposition
failures with the error type each operation documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfinlinalg.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_consistent_length,
    check_non_empty,
    check_square,
)


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Design for the linear system A x = b.

    A is n x m, b has length n, the solution x has length m. Immutable
    after construction; A and b are private copies of the user's input.

    Construction:
        LinearSystemDesign.from_arrays(A, b)
        LinearSystemDesign.from_arrays(A, b, require_square=True)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]

    @classmethod
    def from_arrays(
        cls,
        A: ArrayLike,
        b: ArrayLike,
        *,
        require_square: bool = False,
    ) -> LinearSystemDesign:
        """
        Build LinearSystemDesign from array-likes.

        Parameters
        ----------
        A : array-like
            Left-hand side matrix, shape (n, m).
        b : array-like
            Right-hand side vector, shape (n,).
        require_square : bool
            Reject non-square A (used by solve_symmetric).
        """
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')

        check_2d(A_arr, 'A')
        check_1d(b_arr, 'b')
        check_non_empty(A_arr, 'A')
        if require_square:
            check_square(A_arr, 'A')

        check_consistent_length(A_arr, b_arr, names=('A', 'b'))

        return cls(_A=A_arr, _b=b_arr)

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Left-hand side matrix (n x m)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side vector (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """Number of equations."""
        return self._A.shape[0]

    @property
    def m(self) -> int:
        """Number of unknowns."""
        return self._A.shape[1]

    def __repr__(self) -> str:
        return f"LinearSystemDesign(n={self.n}, m={self.m})"


@dataclass(frozen=True)
class InversionDesign:
    """
    Design for inverting a square matrix.

    Construction:
        InversionDesign.from_array(A)
    """
    _A: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, A: ArrayLike) -> InversionDesign:
        """Build InversionDesign from an array-like square matrix."""
        A_arr = check_array(A, 'A')
        check_2d(A_arr, 'A')
        check_non_empty(A_arr, 'A')
        check_square(A_arr, 'A')
        return cls(_A=A_arr)

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Matrix to invert (n x n)."""
        return self._A

    @property
    def n(self) -> int:
        """Matrix dimension."""
        return self._A.shape[0]

    def __repr__(self) -> str:
        return f"InversionDesign(n={self.n})"
