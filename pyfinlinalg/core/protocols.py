"""
Core protocols for pyfinlinalg.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so any
library meeting the mathematical contracts can be plugged in without
inheriting from our classes.

Design Principles:
    - Minimal contracts: prescribe only the decompositions the algorithms need
    - Backends are stateless and reentrant
    - Type-safe: use generics to preserve type information through pipelines
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray
    from pyfinlinalg.core.compute.linalg.decompositions import (
        SVDResult,
        LUResult,
        EigenResult,
    )
    from pyfinlinalg.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class DecompositionBackend(Protocol):
    """
    Capability interface {svd, lu, eigen} over dense float64 matrices.

    Implementations must not mutate their inputs and must not keep shared
    scratch state between calls. Failures to decompose (non-finite input,
    non-convergence) are reported as NumericalFailureError.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{library}', e.g. 'cpu_lapack'.
        """
        ...

    def svd(self, A: NDArray[np.floating]) -> SVDResult:
        """
        Thin singular value decomposition A = U diag(s) Vt.

        Singular values are returned in descending order.
        """
        ...

    def lu(self, A: NDArray[np.floating]) -> LUResult:
        """
        LU factorisation with partial pivoting of a square matrix.

        Must not raise for singular input; singularity is judged by the
        caller from the returned pivots.
        """
        ...

    def eigen(self, A: NDArray[np.floating]) -> EigenResult:
        """
        Full eigen-decomposition of a symmetric matrix.

        Eigenvector i is column i of the returned matrix. No ordering of
        the eigenpairs is assumed by callers.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends of a domain subpackage.

    Each backend takes a domain Design and produces a Result carrying the
    domain's parameter payload. Backends are stateless: the decomposition
    capability is fixed at construction time.

    Type Parameters:
        D: The Design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_svd', 'cpu_lu', 'cpu_eigen'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            NumericalFailureError: If a decomposition fails
            ValidationError: If design is invalid for this backend
        """
        ...
