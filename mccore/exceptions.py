"""Exception types raised by mccore.

Contract violations signal programming or setup errors and are never
expected in a correctly driven simulation. Particle overlap is not an
error: it is reported through ``PairwiseResult.overlap``.
"""

from __future__ import annotations


class MCCoreError(Exception):
    """Base class for all mccore errors."""


class ContractViolationError(MCCoreError, RuntimeError):
    """An internal precondition was broken (bad partner range, store bounds)."""


class CapacityError(ContractViolationError):
    """A particle was inserted into a store that is already full."""


class CutoffTooLargeError(MCCoreError, ValueError):
    """The cutoff exceeds half the box length, so minimum image is invalid."""


class OverlapError(MCCoreError):
    """Thermodynamic quantities were requested for an overlapped configuration."""
