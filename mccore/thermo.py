"""Thermodynamic quantities from pairwise results and tail corrections."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .exceptions import OverlapError
from .potentials.base import PairwiseResult
from .potentials.tail import energy_tail, pressure_cutoff_delta, pressure_tail
from .system.box import CubicBox


@dataclass(frozen=True)
class ThermoSummary:
    """
    Energies and pressures for one configuration, in reduced units.

    The "cut" values describe the truncated potential actually simulated;
    the "full" values estimate the untruncated Lennard-Jones fluid using
    the long-range corrections.

    Attributes:
        density: Number density N/V.
        energy_cut: Potential energy per particle, cut potential.
        energy_full: Potential energy per particle with tail correction.
        pressure_cut: Pressure of the cut potential, including the
            impulsive contribution from the discontinuity at r_cut.
        pressure_full: Pressure with long-range tail correction.
    """

    density: float
    energy_cut: float
    energy_full: float
    pressure_cut: float
    pressure_full: float

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return asdict(self)


def summarize(
    result: PairwiseResult,
    count: int,
    box: CubicBox | float,
    r_cut: float,
    temperature: float,
) -> ThermoSummary:
    """
    Combine a whole-system result with tail corrections.

    Args:
        result: Output of ``evaluate_all`` for the configuration.
        count: Number of particles.
        box: Cubic box or its edge length.
        r_cut: Cutoff distance.
        temperature: Temperature, supplies the ideal-gas pressure term.

    Returns:
        ThermoSummary for the configuration.

    Raises:
        OverlapError: If ``result`` is overlapped.
        ValueError: If ``count`` is not positive.
    """
    if result.overlap:
        raise OverlapError("cannot summarize an overlapped configuration")
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    box = box if isinstance(box, CubicBox) else CubicBox(box)
    rho = box.density(count)
    energy = result.energy / count
    pressure = rho * temperature + result.virial / box.volume

    return ThermoSummary(
        density=rho,
        energy_cut=energy,
        energy_full=energy + energy_tail(rho, r_cut),
        pressure_cut=pressure + pressure_cutoff_delta(rho, r_cut),
        pressure_full=pressure + pressure_tail(rho, r_cut),
    )
