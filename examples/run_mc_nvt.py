#!/usr/bin/env python
"""
Metropolis Monte Carlo for a Lennard-Jones fluid at constant N, V, T.

A minimal driver around mccore: it proposes single-particle moves,
evaluates old and new interaction energies with ``energy_1`` and
accepts or rejects. Overlapping trial positions are always rejected.

Usage:
    python examples/run_mc_nvt.py
"""

import numpy as np

from mccore import LennardJonesCut, ParticleStore, summarize
from mccore.reporters import BannerReporter, ResultReporter


def fcc_positions(n_cells: int) -> np.ndarray:
    """Face-centred cubic lattice in box-fraction units."""
    basis = np.array(
        [[0.25, 0.25, 0.25], [0.25, 0.75, 0.75], [0.75, 0.25, 0.75], [0.75, 0.75, 0.25]]
    )
    cells = np.array(
        [[x, y, z] for x in range(n_cells) for y in range(n_cells) for z in range(n_cells)]
    )
    positions = (cells[:, None, :] + basis[None, :, :]).reshape(-1, 3)
    return positions / n_cells - 0.5


def main(
    n_cells: int = 3,
    density: float = 0.75,
    temperature: float = 1.0,
    r_cut: float = 2.5,
    dr_max: float = 0.15,
    n_sweeps: int = 50,
    seed: int = 42,
):
    rng = np.random.default_rng(seed)
    store = ParticleStore.from_positions(fcc_positions(n_cells))
    box = (store.count / density) ** (1.0 / 3.0)
    potential = LennardJonesCut(store, box, r_cut)

    banner = BannerReporter()
    results = ResultReporter()
    banner.introduction(potential)

    total = potential.energy()
    if total.overlap:
        raise RuntimeError("Overlap in initial configuration")
    results.report("initial", total)

    energy = total.energy
    virial = total.virial
    n_accepted = 0

    for _ in range(n_sweeps):
        for _ in range(store.count):
            i = int(rng.integers(store.count))
            ri = store.positions[i] + rng.uniform(-1.0, 1.0, 3) * dr_max / box
            ri = potential.box.wrap(ri)

            old = potential.energy_1(store.positions[i], i)
            new = potential.energy_1(ri, i)
            if new.overlap:
                continue

            delta = (new.energy - old.energy) / temperature
            if delta <= 0.0 or rng.random() < np.exp(-delta):
                store.move(i, ri)
                energy += new.energy - old.energy
                virial += new.virial - old.virial
                n_accepted += 1

    final = potential.energy()
    results.report("final", final)
    print(f"Acceptance ratio: {n_accepted / (n_sweeps * store.count):.3f}")
    print(f"Incremental energy drift: {abs(final.energy - energy):.2e}")

    summary = summarize(final, store.count, potential.box, r_cut, temperature)
    for name, value in summary.to_dict().items():
        print(f"{name:<20}{value:12.5f}")

    banner.conclusion()


if __name__ == "__main__":
    main()
