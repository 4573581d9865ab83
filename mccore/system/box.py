"""Cubic periodic simulation box."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import CutoffTooLargeError

# Largest r_cut/box for which the minimum image convention is valid
MAX_CUTOFF_FRACTION = 0.5


@dataclass(frozen=True)
class CubicBox:
    """
    Cubic simulation box with periodic boundaries in all three dimensions.

    Particle positions are stored in box-fraction units, so the box only
    contributes its edge length when distances are rescaled to sigma units.

    Attributes:
        length: Box edge length in sigma units.
    """

    length: float

    def __post_init__(self) -> None:
        """Validate and normalise the edge length."""
        length = float(self.length)
        if not np.isfinite(length) or length <= 0.0:
            raise ValueError(f"Box length must be positive, got {self.length}")
        object.__setattr__(self, "length", length)

    @property
    def volume(self) -> float:
        """Return box volume."""
        return self.length**3

    def density(self, count: int) -> float:
        """Return number density for ``count`` particles."""
        return count / self.volume

    def cutoff_fraction(self, r_cut: float) -> float:
        """Return the cutoff expressed in box-fraction units."""
        return r_cut / self.length

    def check_cutoff(self, r_cut: float) -> float:
        """
        Validate a cutoff against this box.

        Args:
            r_cut: Potential cutoff distance in sigma units.

        Returns:
            The cutoff in box-fraction units.

        Raises:
            ValueError: If r_cut is not positive.
            CutoffTooLargeError: If r_cut/box exceeds 0.5.
        """
        if r_cut <= 0.0:
            raise ValueError(f"Cutoff must be positive, got {r_cut}")
        r_cut_box = self.cutoff_fraction(r_cut)
        if r_cut_box > MAX_CUTOFF_FRACTION:
            raise CutoffTooLargeError(f"r_cut/box too large: {r_cut_box:.5f}")
        return r_cut_box

    def minimum_image(self, dr: ArrayLike) -> NDArray[np.floating]:
        """
        Apply the minimum image convention to box-fraction displacements.

        Args:
            dr: Displacement(s) in box-fraction units, shape (3,) or (N, 3).

        Returns:
            Shortest periodic image of each displacement, box-fraction units.
        """
        dr = np.asarray(dr, dtype=np.float64)
        return dr - np.rint(dr)

    def wrap(self, positions: ArrayLike) -> NDArray[np.floating]:
        """Wrap box-fraction positions into [-0.5, 0.5)."""
        positions = np.asarray(positions, dtype=np.float64)
        return positions - np.floor(positions + 0.5)

    def to_fractional(self, positions: ArrayLike) -> NDArray[np.floating]:
        """Convert sigma-unit positions to box-fraction units."""
        return np.asarray(positions, dtype=np.float64) / self.length

    def to_cartesian(self, positions: ArrayLike) -> NDArray[np.floating]:
        """Convert box-fraction positions to sigma units."""
        return np.asarray(positions, dtype=np.float64) * self.length
