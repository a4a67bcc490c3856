"""
CPU backends for factor extraction and correlation rank reduction.
"""

from __future__ import annotations

from pyfinlinalg.core.result import Result
from pyfinlinalg.core.protocols import DecompositionBackend
from pyfinlinalg.core.compute.timing import Timer
from pyfinlinalg.factors.design import FactorDesign
from pyfinlinalg.factors.solution import FactorParams, ReductionParams
from pyfinlinalg.factors._extraction import (
    ExtractedFactors,
    extract_factors,
    renormalize_rows,
)


def _clamping_warning(extracted: ExtractedFactors, stage: str) -> list[str]:
    n_negative = int((extracted.raw_eigenvalues < 0.0).sum())
    if n_negative == 0:
        return []
    return [
        f"{stage}: {n_negative} retained eigenvalue(s) were negative "
        f"(min {extracted.raw_eigenvalues.min():.3e}) and were treated as zero"
    ]


class CPUEigenFactorBackend:
    """Principal component extraction from a full eigen-decomposition."""

    def __init__(self, decomposition: DecompositionBackend):
        self._decomposition = decomposition

    @property
    def name(self) -> str:
        return 'cpu_eigen'

    def solve(self, design: FactorDesign) -> Result[FactorParams]:
        timer = Timer()
        timer.start()

        with timer.section('extraction'):
            extracted = extract_factors(
                design.matrix, design.number_of_factors, self._decomposition
            )

        timer.stop()

        params = FactorParams(
            factor_matrix=extracted.factor_matrix,
            eigenvalues=extracted.eigenvalues,
            raw_eigenvalues=extracted.raw_eigenvalues,
            eigenvalue_indices=extracted.eigenvalue_indices,
            spectrum=extracted.spectrum,
        )

        return Result(
            params=params,
            info={
                'method': 'eigen',
                'decomposition_backend': self._decomposition.name,
                'number_of_factors': design.number_of_factors,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(_clamping_warning(extracted, 'extraction')),
        )


class CPURankReductionBackend:
    """
    Rank-k factor model of a correlation matrix with (near) unit diagonal.

    Pipeline:
        1. F  <- extract(C, k)
        2. F  <- F with every row scaled to unit norm (zero rows set to 1.0)
        3. C' <- F F'
        4. F  <- extract(C', k)

    The second extraction realigns the loadings with the principal
    directions of the renormalised model; the final row norms are close to,
    but not exactly, one.
    """

    def __init__(self, decomposition: DecompositionBackend):
        self._decomposition = decomposition

    @property
    def name(self) -> str:
        return 'cpu_factor_reduction'

    def solve(self, design: FactorDesign) -> Result[ReductionParams]:
        timer = Timer()
        timer.start()

        k = design.number_of_factors
        warnings_list: list[str] = []

        with timer.section('extraction'):
            initial = extract_factors(design.matrix, k, self._decomposition)
        warnings_list.extend(_clamping_warning(initial, 'extraction'))

        with timer.section('renormalization'):
            renormalized, degenerate_rows = renormalize_rows(initial.factor_matrix)
        if degenerate_rows:
            warnings_list.append(
                f"renormalization: rows {list(degenerate_rows)} have no loading on the "
                f"first {k} factor(s); their entries were set to 1.0 (row norm sqrt({k}))"
            )

        with timer.section('reextraction'):
            reduced_correlation = renormalized @ renormalized.T
            final = extract_factors(reduced_correlation, k, self._decomposition)
        warnings_list.extend(_clamping_warning(final, 'reextraction'))

        timer.stop()

        params = ReductionParams(
            factor_matrix=final.factor_matrix,
            eigenvalues=final.eigenvalues,
            initial_factor_matrix=initial.factor_matrix,
            renormalized_factor_matrix=renormalized,
            degenerate_rows=degenerate_rows,
        )

        return Result(
            params=params,
            info={
                'method': 'eigen_renormalize_eigen',
                'decomposition_backend': self._decomposition.name,
                'number_of_factors': k,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
