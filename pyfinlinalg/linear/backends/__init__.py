"""Backends for linear systems and matrix inversion."""

from pyfinlinalg.linear.backends.cpu import CPUSVDSolverBackend, CPULUInverseBackend

__all__ = ["CPUSVDSolverBackend", "CPULUInverseBackend"]
