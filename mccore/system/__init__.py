"""Particle storage and box management."""

from .box import MAX_CUTOFF_FRACTION, CubicBox
from .store import ParticleStore

__all__ = ["CubicBox", "ParticleStore", "MAX_CUTOFF_FRACTION"]
