"""
Structural checks: every backend satisfies the protocol it is used through.
"""

from pyfinlinalg.core.protocols import Backend, DecompositionBackend
from pyfinlinalg.core.compute.linalg import LapackBackend
from pyfinlinalg.linear.backends import CPUSVDSolverBackend, CPULUInverseBackend
from pyfinlinalg.factors.backends import CPUEigenFactorBackend, CPURankReductionBackend


def test_lapack_is_decomposition_backend():
    assert isinstance(LapackBackend(), DecompositionBackend)


def test_domain_backends_satisfy_backend_protocol():
    decomposition = LapackBackend()
    backends = [
        CPUSVDSolverBackend(decomposition),
        CPULUInverseBackend(decomposition),
        CPUEigenFactorBackend(decomposition),
        CPURankReductionBackend(decomposition),
    ]
    for backend in backends:
        assert isinstance(backend, Backend)

    assert [b.name for b in backends] == [
        'cpu_svd', 'cpu_lu', 'cpu_eigen', 'cpu_factor_reduction',
    ]
