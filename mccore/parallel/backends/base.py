"""Abstract base class for parallel backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class ParallelBackend(ABC):
    """
    Abstract base class for parallelization backends.

    Backends apply a function to a list of work items and support early
    termination: once any result satisfies a stop predicate, outstanding
    work is abandoned.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return backend name."""
        ...

    @property
    @abstractmethod
    def n_workers(self) -> int:
        """Return number of parallel workers."""
        ...

    @abstractmethod
    def map_until(
        self,
        func: Callable[[Any], Any],
        items: list[Any],
        stop: Callable[[Any], bool],
    ) -> list[Any]:
        """
        Apply ``func`` to items, stopping at the first result matching ``stop``.

        Args:
            func: Function to apply (must be picklable for process backends).
            items: Work items.
            stop: Predicate; a True result cancels remaining work.

        Returns:
            Results obtained so far. If a stop result was produced it is
            the last element. Ordering is only guaranteed by serial backends.
        """
        ...

    def parallel_map(self, func: Callable[[Any], Any], items: list[Any]) -> list[Any]:
        """Apply ``func`` to every item."""
        return self.map_until(func, items, lambda _: False)
