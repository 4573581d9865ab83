"""Tests for parallel infrastructure."""

import math

import numpy as np
import pytest

from mccore.parallel import (
    ParallelBackend,
    SerialBackend,
    create_backend,
    evaluate_all_partitioned,
    get_backend,
    partition_rows,
)
from mccore.parallel.backends.multiprocessing_backend import MultiprocessingBackend
from mccore.potentials.base import ZERO_RESULT
from mccore.potentials.lj import evaluate_all
from mccore.system.store import ParticleStore


def _square(x):
    return x * x


@pytest.fixture
def lattice():
    """64 particles on a jittered simple cubic lattice."""
    rng = np.random.default_rng(3)
    n_side, spacing = 4, 1.1
    box = n_side * spacing
    grid = np.arange(n_side) * spacing
    positions = np.array([[x, y, z] for x in grid for y in grid for z in grid])
    positions += rng.uniform(-0.05, 0.05, positions.shape)
    return ParticleStore.from_positions(positions / box - 0.5), box


class TestSerialBackend:
    """Tests for serial backend."""

    def test_serial_backend_properties(self):
        """Test serial backend basic properties."""
        backend = SerialBackend()

        assert backend.name == "serial"
        assert backend.n_workers == 1

    def test_parallel_map(self):
        """Test map preserves order."""
        backend = SerialBackend()
        assert backend.parallel_map(_square, [1, 2, 3]) == [1, 4, 9]

    def test_map_until_stops(self):
        """Test later items are never evaluated after a stop result."""
        backend = SerialBackend()
        seen = []

        def record(x):
            seen.append(x)
            return x

        results = backend.map_until(record, [1, 2, 3, 4], lambda r: r == 2)

        assert results == [1, 2]
        assert seen == [1, 2]


class TestMultiprocessingBackend:
    """Tests for multiprocessing backend."""

    def test_multiprocessing_properties(self):
        """Test multiprocessing backend properties."""
        backend = MultiprocessingBackend(n_workers=2)

        assert backend.name == "multiprocessing"
        assert backend.n_workers == 2

    def test_invalid_workers(self):
        """Test that zero workers is rejected."""
        with pytest.raises(ValueError):
            MultiprocessingBackend(n_workers=0)

    def test_empty(self):
        """Test map over no items."""
        backend = MultiprocessingBackend(n_workers=2)
        assert backend.map_until(_square, [], lambda r: False) == []

    def test_parallel_map(self):
        """Test map over items in worker processes."""
        backend = MultiprocessingBackend(n_workers=2)
        results = backend.parallel_map(_square, [1, 2, 3, 4, 5])
        assert sorted(results) == [1, 4, 9, 16, 25]


class TestDispatcher:
    """Tests for backend dispatcher."""

    def test_default_is_serial(self):
        """Test that no specification gives a serial backend."""
        assert get_backend().name == "serial"

    def test_instance_passthrough(self):
        """Test that instances are returned unchanged."""
        backend = SerialBackend()
        assert get_backend(backend) is backend

    def test_create_by_name(self):
        """Test backend creation by name."""
        backend = create_backend("multiprocessing", n_workers=3)
        assert isinstance(backend, ParallelBackend)
        assert backend.n_workers == 3

    def test_unknown_backend(self):
        """Test that unknown names raise."""
        with pytest.raises(ValueError):
            get_backend("ray")


class TestPartition:
    """Tests for row partitioning."""

    def test_covers_all_rows(self):
        """Test chunks are contiguous and cover 0 .. count-2."""
        chunks = partition_rows(10, 3)
        assert chunks[0][0] == 0
        assert chunks[-1][1] == 9
        for (_, stop), (start, _) in zip(chunks[:-1], chunks[1:]):
            assert stop == start

    def test_more_chunks_than_rows(self):
        """Test that empty chunks are dropped."""
        assert partition_rows(3, 8) == [(0, 1), (1, 2)]

    def test_no_rows(self):
        """Test stores with fewer than two particles."""
        assert partition_rows(0, 4) == []
        assert partition_rows(1, 4) == []

    def test_invalid_chunks(self):
        """Test that zero chunks is rejected."""
        with pytest.raises(ValueError):
            partition_rows(10, 0)


class TestPartitionedEvaluation:
    """Tests for chunked whole-system evaluation."""

    @pytest.mark.parametrize("n_chunks", [1, 2, 5, 100])
    def test_matches_serial(self, lattice, n_chunks):
        """Test chunked evaluation equals evaluate_all."""
        store, box = lattice
        reference = evaluate_all(store, box, 2.2)
        result = evaluate_all_partitioned(store, box, 2.2, n_chunks=n_chunks)
        assert not result.overlap
        assert np.isclose(result.energy, reference.energy)
        assert np.isclose(result.virial, reference.virial)

    def test_overlap_propagates(self, lattice):
        """Test an overlap in one chunk flags the whole result."""
        store, box = lattice
        store.move(50, store.positions[51] + [0.005, 0.0, 0.0])
        result = evaluate_all_partitioned(store, box, 2.2, n_chunks=4)
        assert result.overlap
        assert math.isnan(result.energy)

    def test_empty_store(self):
        """Test a store with no pairs."""
        store = ParticleStore.allocate(5)
        assert evaluate_all_partitioned(store, 5.0, 2.5, n_chunks=3) == ZERO_RESULT

    def test_multiprocessing(self, lattice):
        """Test evaluation in worker processes."""
        store, box = lattice
        reference = evaluate_all(store, box, 2.2)
        result = evaluate_all_partitioned(
            store, box, 2.2, backend=MultiprocessingBackend(n_workers=2)
        )
        assert np.isclose(result.energy, reference.energy)
        assert np.isclose(result.virial, reference.virial)

    def test_multiprocessing_overlap(self, lattice):
        """Test overlap detection with worker processes."""
        store, box = lattice
        store.move(0, store.positions[63] + [0.0, 0.005, 0.0])
        result = evaluate_all_partitioned(
            store, box, 2.2, backend="multiprocessing", n_chunks=4
        )
        assert result.overlap
