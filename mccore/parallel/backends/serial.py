"""Serial (single-process) backend."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .base import ParallelBackend


class SerialBackend(ParallelBackend):
    """
    Serial backend for single-process execution.

    This is the default backend and provides the reference ordering:
    items are processed in sequence and later items are never touched
    once a stop result appears.
    """

    @property
    def name(self) -> str:
        """Return backend name."""
        return "serial"

    @property
    def n_workers(self) -> int:
        """Return number of parallel workers."""
        return 1

    def map_until(
        self,
        func: Callable[[Any], Any],
        items: list[Any],
        stop: Callable[[Any], bool],
    ) -> list[Any]:
        results = []
        for item in items:
            result = func(item)
            results.append(result)
            if stop(result):
                break
        return results
