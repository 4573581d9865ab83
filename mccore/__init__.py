"""
mccore - Lennard-Jones energy core for Monte Carlo simulation.

Computes potential energy, virial and overlap status for identical
Lennard-Jones particles (cut, not shifted) in a cubic periodic box,
with the single-particle evaluations needed for trial moves, insertions
and deletions, plus analytic long-range corrections.

Quick Start:
    >>> import numpy as np
    >>> from mccore import LennardJonesCut, ParticleStore
    >>> store = ParticleStore.from_positions(np.random.rand(64, 3) - 0.5)
    >>> lj = LennardJonesCut(store, box=6.0, r_cut=2.5)
    >>> total = lj.energy()
    >>> trial = lj.energy_1(store.positions[0] + 0.01, 0)
"""

__version__ = "0.1.0"

from .exceptions import (
    CapacityError,
    ContractViolationError,
    CutoffTooLargeError,
    MCCoreError,
    OverlapError,
)
from .potentials import (
    JRange,
    LennardJonesCut,
    PairwiseResult,
    combine,
    energy_tail,
    evaluate_all,
    evaluate_one,
    pressure_cutoff_delta,
    pressure_tail,
)
from .system import CubicBox, ParticleStore
from .thermo import ThermoSummary, summarize

__all__ = [
    "ParticleStore",
    "CubicBox",
    "JRange",
    "PairwiseResult",
    "combine",
    "evaluate_one",
    "evaluate_all",
    "LennardJonesCut",
    "energy_tail",
    "pressure_tail",
    "pressure_cutoff_delta",
    "ThermoSummary",
    "summarize",
    "MCCoreError",
    "ContractViolationError",
    "CapacityError",
    "CutoffTooLargeError",
    "OverlapError",
]
