"""Cut (not shifted) Lennard-Jones energy and virial for Monte Carlo."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from ..exceptions import ContractViolationError
from ..system.box import CubicBox
from ..system.store import ParticleStore
from .base import JRange, PairwiseResult, combine_all
from .tail import energy_tail, pressure_cutoff_delta, pressure_tail

# Reduced units: sigma is the unit of length, epsilon the unit of energy
SIGMA = 1.0
EPSILON = 1.0

# Pairs with (sigma/r)^2 above this count as overlapping
OVERLAP_THRESHOLD = 1.8


def _check_bounds(store: ParticleStore) -> None:
    if store.count > store.capacity:  # should never happen
        raise ContractViolationError(
            f"Array bounds error for positions: {store.count} > {store.capacity}"
        )


def _partner_bounds(i: int, count: int, j_range: JRange) -> tuple[int, int]:
    """Return the half-open partner index interval for ``j_range``."""
    if j_range is JRange.ALL:
        return 0, count
    elif j_range is JRange.LESS:
        return 0, min(i, count)
    elif j_range is JRange.GREATER:
        return i + 1, count
    raise ContractViolationError(f"j_range error: {j_range!r}")


def evaluate_one(
    store: ParticleStore,
    ri: ArrayLike,
    i: int,
    box: float,
    r_cut: float,
    j_range: JRange = JRange.ALL,
) -> PairwiseResult:
    """
    Compute the interaction of one particle with a range of partners.

    ``ri`` need not equal ``store.positions[i]``: trial positions are
    evaluated before a move is committed, and ``i == store.count`` is
    accepted for trial insertions. ``i`` only excludes self-interaction
    and bounds the partner range.

    Args:
        store: Particle positions in box-fraction units.
        ri: Coordinates of the particle of interest, box-fraction units.
        i: Index of the particle of interest.
        box: Box edge length in sigma units.
        r_cut: Cutoff distance in sigma units.
        j_range: Partner range selector.

    Returns:
        PairwiseResult for the selected pairs. If any pair is closer than
        the overlap threshold the result is overlapped and nothing else
        is accumulated.
    """
    _check_bounds(store)
    j1, j2 = _partner_bounds(i, store.count, j_range)

    # Recomputed on every call so a changing box is always honoured
    r_cut_box_sq = (r_cut / box) ** 2
    box_sq = box**2

    j = np.arange(j1, j2)
    j = j[j != i]
    if len(j) == 0:
        return PairwiseResult()

    rij = np.asarray(ri, dtype=np.float64) - store.positions[j]
    rij = rij - np.rint(rij)  # Periodic boundaries in box=1 units
    rij_sq = np.sum(rij**2, axis=1)

    rij_sq = rij_sq[rij_sq < r_cut_box_sq] * box_sq  # now in sigma=1 units
    if len(rij_sq) == 0:
        return PairwiseResult()

    with np.errstate(divide="ignore"):
        sr2 = 1.0 / rij_sq
    if np.any(sr2 > OVERLAP_THRESHOLD):
        return PairwiseResult.overlapped()

    sr6 = sr2**3
    sr12 = sr6**2
    pot = float(np.sum(sr12 - sr6))
    vir = float(np.sum(2.0 * sr12 - sr6))

    return PairwiseResult(energy=pot * 4.0, virial=vir * 24.0 / 3.0, overlap=False)


def evaluate_all(store: ParticleStore, box: float, r_cut: float) -> PairwiseResult:
    """
    Compute total potential energy and virial of the stored configuration.

    Each pair is counted once by evaluating particle i against partners
    j > i. Evaluation stops at the first particle that reports overlap.
    """
    _check_bounds(store)
    return combine_all(
        evaluate_one(store, store.positions[i], i, box, r_cut, JRange.GREATER)
        for i in range(store.count - 1)
    )


class LennardJonesCut:
    """
    Lennard-Jones potential, cut but not shifted, bound to a particle store.

    V(r) = 4 * epsilon * [(sigma/r)^12 - (sigma/r)^6]  for r < r_cut

    The cutoff is checked against the box once at construction (and again
    whenever the box changes) since minimum image requires r_cut/box <= 0.5.

    Attributes:
        store: Particle positions in box-fraction units.
        box: Cubic simulation box.
        r_cut: Cutoff distance in sigma units.
    """

    name = "Lennard-Jones potential (cut but not shifted)"

    def __init__(
        self, store: ParticleStore, box: CubicBox | float, r_cut: float
    ) -> None:
        """
        Initialize the potential.

        Args:
            store: Particle store to evaluate.
            box: Cubic box, or its edge length.
            r_cut: Cutoff distance.

        Raises:
            CutoffTooLargeError: If r_cut/box > 0.5.
        """
        self.store = store
        self.r_cut = float(r_cut)
        self.box = box if isinstance(box, CubicBox) else CubicBox(box)
        self.box.check_cutoff(self.r_cut)

    def set_box(self, box: CubicBox | float) -> None:
        """Replace the box, re-validating the cutoff."""
        box = box if isinstance(box, CubicBox) else CubicBox(box)
        box.check_cutoff(self.r_cut)
        self.box = box

    @property
    def density(self) -> float:
        """Return current number density."""
        return self.box.density(self.store.count)

    def energy_1(
        self, ri: ArrayLike, i: int, j_range: JRange = JRange.ALL
    ) -> PairwiseResult:
        """Interaction of a (possibly trial) particle with its partners."""
        return evaluate_one(self.store, ri, i, self.box.length, self.r_cut, j_range)

    def energy(self) -> PairwiseResult:
        """Total interaction of the stored configuration."""
        return evaluate_all(self.store, self.box.length, self.r_cut)

    def energy_tail(self) -> float:
        """Long-range energy correction per particle."""
        return energy_tail(self.density, self.r_cut)

    def pressure_tail(self) -> float:
        """Long-range pressure correction."""
        return pressure_tail(self.density, self.r_cut)

    def pressure_delta(self) -> float:
        """Pressure correction for the discontinuity at the cutoff."""
        return pressure_cutoff_delta(self.density, self.r_cut)

    def describe(self) -> list[tuple[str, float]]:
        """Return the model parameters as (label, value) pairs."""
        return [
            ("Diameter, sigma", SIGMA),
            ("Well depth, epsilon", EPSILON),
            ("Potential cutoff distance", self.r_cut),
        ]
