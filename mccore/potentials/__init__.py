"""Interaction potentials and long-range corrections."""

from .base import ZERO_RESULT, JRange, PairwiseResult, combine, combine_all
from .lj import (
    EPSILON,
    OVERLAP_THRESHOLD,
    SIGMA,
    LennardJonesCut,
    evaluate_all,
    evaluate_one,
)
from .tail import energy_tail, pressure_cutoff_delta, pressure_tail

__all__ = [
    "JRange",
    "PairwiseResult",
    "ZERO_RESULT",
    "combine",
    "combine_all",
    "LennardJonesCut",
    "evaluate_one",
    "evaluate_all",
    "SIGMA",
    "EPSILON",
    "OVERLAP_THRESHOLD",
    "energy_tail",
    "pressure_tail",
    "pressure_cutoff_delta",
]
