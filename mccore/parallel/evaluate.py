"""Partitioned whole-system evaluation."""

from __future__ import annotations

import numpy as np

from ..potentials.base import JRange, PairwiseResult, combine_all
from ..potentials.lj import evaluate_one
from ..system.store import ParticleStore
from .backends.base import ParallelBackend
from .dispatcher import BackendType, get_backend


def partition_rows(count: int, n_chunks: int) -> list[tuple[int, int]]:
    """
    Split the outer pair-loop rows ``0 .. count-2`` into contiguous chunks.

    Returns:
        Half-open (start, stop) intervals; empty chunks are dropped.
    """
    if n_chunks < 1:
        raise ValueError(f"n_chunks must be >= 1, got {n_chunks}")
    n_rows = max(count - 1, 0)
    bounds = np.linspace(0, n_rows, min(n_chunks, max(n_rows, 1)) + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]


def _evaluate_rows(
    work: tuple[ParticleStore, int, int, float, float],
) -> PairwiseResult:
    store, start, stop, box, r_cut = work
    return combine_all(
        evaluate_one(store, store.positions[i], i, box, r_cut, JRange.GREATER)
        for i in range(start, stop)
    )


def evaluate_all_partitioned(
    store: ParticleStore,
    box: float,
    r_cut: float,
    backend: BackendType | ParallelBackend | None = None,
    n_chunks: int | None = None,
) -> PairwiseResult:
    """
    Compute total energy and virial by splitting the pair loop into chunks.

    Chunks are evaluated by ``backend`` and combined with ``combine``, so
    the result matches ``evaluate_all`` up to rounding. An overlap in any
    chunk cancels outstanding chunks and yields an overlapped result.

    Args:
        store: Particle positions in box-fraction units.
        box: Box edge length.
        r_cut: Cutoff distance.
        backend: Backend name or instance. Defaults to serial.
        n_chunks: Number of chunks. Defaults to the backend's worker count.

    Returns:
        PairwiseResult for the whole configuration.
    """
    backend = get_backend(backend)
    if n_chunks is None:
        n_chunks = backend.n_workers

    work = [
        (store, start, stop, box, r_cut)
        for start, stop in partition_rows(store.count, n_chunks)
    ]
    results = backend.map_until(_evaluate_rows, work, lambda r: r.overlap)
    return combine_all(results)
