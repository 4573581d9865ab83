"""Parallel evaluation of the outer pair loop."""

from .backends.base import ParallelBackend
from .backends.serial import SerialBackend
from .dispatcher import create_backend, get_backend
from .evaluate import evaluate_all_partitioned, partition_rows

__all__ = [
    "ParallelBackend",
    "SerialBackend",
    "create_backend",
    "get_backend",
    "evaluate_all_partitioned",
    "partition_rows",
]
