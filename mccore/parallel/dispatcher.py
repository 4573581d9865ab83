"""Backend dispatcher for selecting parallel backends."""

from __future__ import annotations

from typing import Literal

from .backends.base import ParallelBackend
from .backends.serial import SerialBackend

# Available backend types
BackendType = Literal["serial", "multiprocessing"]


def get_backend(
    backend: BackendType | ParallelBackend | None = None,
    **kwargs,
) -> ParallelBackend:
    """
    Get a parallel backend instance.

    Args:
        backend: Backend specification. Can be:
            - None: Serial backend
            - String: Create backend by name
            - ParallelBackend: Use provided instance directly
        **kwargs: Additional arguments for backend initialization.

    Returns:
        ParallelBackend instance.

    Examples:
        >>> backend = get_backend()  # Serial
        >>> backend = get_backend("multiprocessing", n_workers=4)
    """
    if isinstance(backend, ParallelBackend):
        return backend
    if backend is None:
        return SerialBackend()
    return create_backend(backend, **kwargs)


def create_backend(name: BackendType, **kwargs) -> ParallelBackend:
    """
    Create a parallel backend by name.

    Raises:
        ValueError: If backend name is unknown.
    """
    if name == "serial":
        return SerialBackend()

    elif name == "multiprocessing":
        from .backends.multiprocessing_backend import MultiprocessingBackend

        return MultiprocessingBackend(**kwargs)

    else:
        raise ValueError(f"Unknown backend: {name}. Available: serial, multiprocessing")
