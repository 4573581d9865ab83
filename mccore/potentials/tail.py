"""Long-range corrections for the truncated Lennard-Jones potential.

All corrections assume a uniform particle density beyond the cutoff and
are in reduced units (sigma = 1, epsilon = 1). Each function accepts
floats or NumPy arrays for ``density`` and ``r_cut``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _sr3(r_cut: ArrayLike) -> NDArray[np.floating] | float:
    r_cut = np.asarray(r_cut, dtype=np.float64)
    if np.any(r_cut <= 0.0):
        raise ValueError(f"Cutoff must be positive, got {r_cut}")
    return 1.0 / r_cut**3


def _as_result(value: NDArray[np.floating]) -> NDArray[np.floating] | float:
    return float(value) if np.ndim(value) == 0 else value


def energy_tail(density: ArrayLike, r_cut: ArrayLike) -> NDArray[np.floating] | float:
    """
    Long-range correction to the potential energy per particle.

    U_tail / N = pi * rho * [(8/9) * (sigma/rc)^9 - (8/3) * (sigma/rc)^3]

    Args:
        density: Number density N/V.
        r_cut: Cutoff distance.

    Returns:
        Energy correction per particle.
    """
    sr3 = _sr3(r_cut)
    density = np.asarray(density, dtype=np.float64)
    return _as_result(np.pi * ((8.0 / 9.0) * sr3**3 - (8.0 / 3.0) * sr3) * density)


def pressure_tail(density: ArrayLike, r_cut: ArrayLike) -> NDArray[np.floating] | float:
    """
    Long-range correction to the pressure.

    P_tail = pi * rho^2 * [(32/9) * (sigma/rc)^9 - (16/3) * (sigma/rc)^3]
    """
    sr3 = _sr3(r_cut)
    density = np.asarray(density, dtype=np.float64)
    return _as_result(
        np.pi * ((32.0 / 9.0) * sr3**3 - (16.0 / 3.0) * sr3) * density**2
    )


def pressure_cutoff_delta(
    density: ArrayLike, r_cut: ArrayLike
) -> NDArray[np.floating] | float:
    """
    Pressure correction for the discontinuity of the cut potential at rc.

    The cut potential jumps from V(rc) to zero, which adds an impulsive
    term to the virial that pair sums do not see:

    P_delta = pi * (8/3) * rho^2 * [(sigma/rc)^9 - (sigma/rc)^3]
    """
    sr3 = _sr3(r_cut)
    density = np.asarray(density, dtype=np.float64)
    return _as_result(np.pi * (8.0 / 3.0) * (sr3**3 - sr3) * density**2)
