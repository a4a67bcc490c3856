"""Backends for factor extraction and correlation rank reduction."""

from pyfinlinalg.factors.backends.cpu import CPUEigenFactorBackend, CPURankReductionBackend

__all__ = ["CPUEigenFactorBackend", "CPURankReductionBackend"]
