"""Multiprocessing backend using Python's multiprocessing module."""

from __future__ import annotations

import multiprocessing as mp
from collections.abc import Callable
from concurrent.futures import FIRST_COMPLETED, ProcessPoolExecutor, wait
from typing import Any

from .base import ParallelBackend


class MultiprocessingBackend(ParallelBackend):
    """
    Multiprocessing backend for shared-memory parallelism.

    Uses a process pool; each work item is pickled to a worker. When a
    stop result arrives, pending items are cancelled. Items already
    running finish but their results are discarded.
    """

    def __init__(self, n_workers: int | None = None) -> None:
        """
        Initialize multiprocessing backend.

        Args:
            n_workers: Number of worker processes. Defaults to CPU count.
        """
        if n_workers is not None and n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {n_workers}")
        self._n_workers = n_workers or mp.cpu_count()

    @property
    def name(self) -> str:
        """Return backend name."""
        return "multiprocessing"

    @property
    def n_workers(self) -> int:
        """Return number of parallel workers."""
        return self._n_workers

    def map_until(
        self,
        func: Callable[[Any], Any],
        items: list[Any],
        stop: Callable[[Any], bool],
    ) -> list[Any]:
        if len(items) == 0:
            return []

        results = []
        executor = ProcessPoolExecutor(max_workers=self._n_workers)
        try:
            pending = {executor.submit(func, item) for item in items}
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    result = future.result()
                    results.append(result)
                    if stop(result):
                        return results
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

        return results
