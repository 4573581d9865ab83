"""Composite interaction result and partner-range selection."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class JRange(Enum):
    """
    Partner index range for single-particle evaluation.

    ALL visits every other particle, LESS only j < i and GREATER only j > i.
    Summing GREATER contributions over all i counts each pair once.
    """

    LESS = -1
    ALL = 0
    GREATER = 1


@dataclass(frozen=True)
class PairwiseResult:
    """
    Potential energy, virial and overlap flag for a set of interactions.

    When ``overlap`` is True the configuration must be rejected and
    ``energy`` and ``virial`` carry no information (they are NaN).

    Attributes:
        energy: Accumulated potential energy in epsilon units.
        virial: Accumulated virial in epsilon units.
        overlap: True if any pair was closer than the overlap threshold.
    """

    energy: float = 0.0
    virial: float = 0.0
    overlap: bool = False

    @classmethod
    def overlapped(cls) -> PairwiseResult:
        """Return a result flagging overlap with undefined energy and virial."""
        return cls(energy=math.nan, virial=math.nan, overlap=True)


ZERO_RESULT = PairwiseResult()


def combine(a: PairwiseResult, b: PairwiseResult) -> PairwiseResult:
    """
    Combine two results: sum energy and virial, OR the overlap flags.

    Associative and commutative with identity ``ZERO_RESULT``.
    """
    if a.overlap or b.overlap:
        return PairwiseResult.overlapped()
    return PairwiseResult(
        energy=a.energy + b.energy,
        virial=a.virial + b.virial,
        overlap=False,
    )


def combine_all(results: Iterable[PairwiseResult]) -> PairwiseResult:
    """
    Reduce results with ``combine``, stopping at the first overlap.

    The iterable is consumed lazily, so generators are not advanced past
    an overlapped element.
    """
    total = ZERO_RESULT
    for result in results:
        if result.overlap:
            return PairwiseResult.overlapped()
        total = combine(total, result)
    return total
