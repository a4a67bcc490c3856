"""
Shared compute infrastructure for pyfinlinalg.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical thresholds
    linalg: Decomposition kernels and backend selection
"""

from pyfinlinalg.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
