"""Particle position storage for Monte Carlo moves."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..exceptions import CapacityError


@dataclass
class ParticleStore:
    """
    Fixed-capacity store of particle positions in box-fraction units.

    Only the first ``count`` rows of ``positions`` are particles; the rest
    is spare capacity for insertions. None of the mutating operations
    recompute energies, that is the caller's job.

    Attributes:
        positions: Position array, shape (capacity, 3).
        count: Number of live particles.
    """

    positions: NDArray[np.floating]
    count: int = 0

    def __post_init__(self) -> None:
        """Validate and convert arrays."""
        self.positions = np.asarray(self.positions, dtype=np.float64)
        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError(
                f"positions must have shape (capacity, 3), got {self.positions.shape}"
            )
        if not 0 <= self.count <= len(self.positions):
            raise ValueError(
                f"count {self.count} outside [0, {len(self.positions)}]"
            )

    @classmethod
    def allocate(cls, capacity: int) -> ParticleStore:
        """Create an empty store able to hold ``capacity`` particles."""
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        return cls(positions=np.zeros((capacity, 3), dtype=np.float64), count=0)

    @classmethod
    def from_positions(
        cls, positions: ArrayLike, capacity: int | None = None
    ) -> ParticleStore:
        """
        Create a store holding the given particles.

        Args:
            positions: Box-fraction positions, shape (N, 3).
            capacity: Total capacity. Defaults to N.

        Returns:
            New ParticleStore with count N.
        """
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        n = len(positions)
        if capacity is None:
            capacity = n
        if capacity < n:
            raise ValueError(f"capacity {capacity} smaller than {n} positions")
        store = cls.allocate(capacity)
        store.positions[:n] = positions
        store.count = n
        return store

    @property
    def capacity(self) -> int:
        """Return the number of allocated rows."""
        return len(self.positions)

    @property
    def active(self) -> NDArray[np.floating]:
        """Return a read-only view of the live particle positions."""
        view = self.positions[: self.count]
        view.flags.writeable = False
        return view

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.count:
            raise IndexError(f"particle index {i} outside [0, {self.count})")

    def move(self, i: int, position: ArrayLike) -> None:
        """Replace the position of particle ``i``."""
        self._check_index(i)
        self.positions[i] = position

    def insert(self, position: ArrayLike) -> None:
        """Append a particle at index ``count``."""
        if self.count >= self.capacity:
            raise CapacityError(
                f"cannot insert particle: store is full ({self.capacity})"
            )
        self.positions[self.count] = position
        self.count += 1

    def remove(self, i: int) -> None:
        """
        Remove particle ``i`` by overwriting it with the last particle.

        The former last particle takes index ``i``.
        """
        self._check_index(i)
        self.positions[i] = self.positions[self.count - 1]
        self.count -= 1

    def copy(self) -> ParticleStore:
        """Create a deep copy of this store."""
        return ParticleStore(positions=self.positions.copy(), count=self.count)
