"""Tests for reporters."""

import io

from mccore.potentials.base import PairwiseResult
from mccore.potentials.lj import LennardJonesCut
from mccore.reporters import BannerReporter, ResultReporter
from mccore.system.store import ParticleStore


class TestBannerReporter:
    """Test banner output."""

    def test_introduction(self):
        """Test the potential description lines."""
        stream = io.StringIO()
        store = ParticleStore.allocate(4)
        BannerReporter(file=stream).introduction(LennardJonesCut(store, 6.0, 2.5))

        lines = stream.getvalue().splitlines()
        assert lines[0] == "Lennard-Jones potential (cut but not shifted)"
        assert lines[1].startswith("Diameter, sigma = ")
        assert lines[1].endswith("1.00000")
        assert lines[2].startswith("Well depth, epsilon = ")
        assert lines[3].endswith("2.50000")
        # Values are aligned
        assert len({len(line) for line in lines[1:]}) == 1

    def test_conclusion(self):
        """Test the closing line."""
        stream = io.StringIO()
        BannerReporter(file=stream).conclusion()
        assert stream.getvalue() == "Program ends\n"


class TestResultReporter:
    """Test result output."""

    def test_header_once(self):
        """Test the header is written before the first line only."""
        stream = io.StringIO()
        reporter = ResultReporter(file=stream)
        reporter.report("initial", PairwiseResult(energy=-1.5, virial=2.0))
        reporter.report("final", PairwiseResult(energy=-2.0, virial=1.0))

        lines = stream.getvalue().splitlines()
        assert lines[0] == "Label\tEnergy\tVirial"
        assert lines[1] == "initial\t-1.500000\t2.000000"
        assert len(lines) == 3

    def test_overlap(self):
        """Test overlapped results print no numbers."""
        stream = io.StringIO()
        ResultReporter(file=stream, separator=",").report(
            "trial", PairwiseResult.overlapped()
        )
        assert stream.getvalue().splitlines()[1] == "trial,overlap,overlap"
