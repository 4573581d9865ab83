"""Tests for thermodynamic summaries."""

import numpy as np
import pytest

from mccore.exceptions import OverlapError
from mccore.potentials.base import PairwiseResult
from mccore.potentials.tail import energy_tail, pressure_cutoff_delta, pressure_tail
from mccore.system.box import CubicBox
from mccore.thermo import ThermoSummary, summarize


class TestSummarize:
    """Test summarize."""

    def test_values(self):
        """Test energies and pressures against hand calculation."""
        result = PairwiseResult(energy=-200.0, virial=-50.0)
        summary = summarize(result, count=100, box=5.0, r_cut=2.5, temperature=1.5)

        rho = 100 / 125.0
        assert np.isclose(summary.density, rho)
        assert np.isclose(summary.energy_cut, -2.0)
        assert np.isclose(summary.energy_full, -2.0 + energy_tail(rho, 2.5))

        pressure = rho * 1.5 - 50.0 / 125.0
        assert np.isclose(
            summary.pressure_cut, pressure + pressure_cutoff_delta(rho, 2.5)
        )
        assert np.isclose(summary.pressure_full, pressure + pressure_tail(rho, 2.5))

    def test_accepts_box_object(self):
        """Test that a CubicBox and a length agree."""
        result = PairwiseResult(energy=-10.0, virial=3.0)
        a = summarize(result, 10, CubicBox(4.0), 1.5, 1.0)
        b = summarize(result, 10, 4.0, 1.5, 1.0)
        assert a == b

    def test_overlap_raises(self):
        """Test that overlapped results cannot be summarized."""
        with pytest.raises(OverlapError):
            summarize(PairwiseResult.overlapped(), 10, 5.0, 2.5, 1.0)

    def test_no_particles(self):
        """Test that count must be positive."""
        with pytest.raises(ValueError):
            summarize(PairwiseResult(), 0, 5.0, 2.5, 1.0)

    def test_to_dict(self):
        """Test dictionary conversion."""
        summary = ThermoSummary(0.5, -1.0, -1.2, 0.3, 0.1)
        data = summary.to_dict()
        assert data["density"] == 0.5
        assert set(data) == {
            "density",
            "energy_cut",
            "energy_full",
            "pressure_cut",
            "pressure_full",
        }
