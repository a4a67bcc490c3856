"""
Decomposition backend selection.

Resolves the user-facing ``backend=`` argument accepted by every solver
into a DecompositionBackend instance.
"""

from __future__ import annotations

from typing import Literal, Union

from pyfinlinalg.core.exceptions import ValidationError
from pyfinlinalg.core.protocols import DecompositionBackend
from pyfinlinalg.core.compute.linalg.decompositions import LapackBackend


BackendChoice = Union[Literal['auto', 'cpu'], DecompositionBackend]


def get_decomposition_backend(backend: BackendChoice) -> DecompositionBackend:
    """
    Select decomposition backend based on preference.

    Args:
        backend: 'auto' or 'cpu' for LAPACK via SciPy, or any object
            implementing DecompositionBackend

    Raises:
        ValidationError: If backend is an unknown string or an object
            missing one of svd/lu/eigen
    """
    if isinstance(backend, str):
        if backend in ('auto', 'cpu'):
            return LapackBackend()
        raise ValidationError(f"Unknown backend: {backend!r}")

    if isinstance(backend, DecompositionBackend):
        return backend

    raise ValidationError(
        f"backend: {type(backend).__name__} does not implement "
        f"name/svd/lu/eigen"
    )
