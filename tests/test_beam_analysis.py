"""Tests for the simply supported UDL beam analysis."""

import pytest

from structiq.core.beam_analysis import BeamAnalyzer
from structiq.models.inputs import BeamLoadInput


@pytest.fixture(scope="module")
def reference_result():
    """Default beam: 5 m, 10 kN/m, E = 200 GPa, I = 4e-5 m⁴."""
    inputs = BeamLoadInput(
        length=5, distributed_load=10, elastic_modulus=200, moment_of_inertia=0.00004
    )
    return BeamAnalyzer().analyze(inputs)


class TestBeamMaxima:
    """Closed-form maxima."""

    def test_max_moment(self, reference_result):
        """wL²/8 = 10×25/8 = 31.25 kNm."""
        assert reference_result.max_moment == pytest.approx(31.25)

    def test_max_shear(self, reference_result):
        """wL/2 = 25 kN."""
        assert reference_result.max_shear == pytest.approx(25.0)

    def test_max_deflection(self, reference_result):
        """5wL⁴/(384·E·I·1e9) reported in mm."""
        expected = 5 * 10 * 5**4 / (384 * 200 * 0.00004 * 1e9) * 1000
        assert reference_result.max_deflection == pytest.approx(expected)


class TestBeamCurve:
    """Sampled shear, moment and deflection."""

    def test_sample_count(self, reference_result):
        """50 intervals give 51 samples from 0 to L."""
        curve = reference_result.curve
        assert len(curve) == 51
        assert curve[0].position == pytest.approx(0.0)
        assert curve[-1].position == pytest.approx(5.0)

    def test_shear_antisymmetric(self, reference_result):
        curve = reference_result.curve
        assert curve[0].shear == pytest.approx(25.0)
        assert curve[-1].shear == pytest.approx(-25.0)
        assert curve[25].shear == pytest.approx(0.0, abs=1e-9)

    def test_midspan_moment_and_deflection(self, reference_result):
        """Midspan values equal the maxima."""
        mid = reference_result.curve[25]
        assert mid.moment == pytest.approx(reference_result.max_moment)
        assert mid.deflection_mm == pytest.approx(reference_result.max_deflection)

    def test_supports_do_not_deflect(self, reference_result):
        assert reference_result.curve[0].deflection_mm == pytest.approx(0.0)
        assert reference_result.curve[-1].deflection_mm == pytest.approx(0.0, abs=1e-12)

    def test_negative_load_reverses_signs(self):
        """Upward load gives negative moment and deflection."""
        result = BeamAnalyzer().analyze(BeamLoadInput(
            length=4, distributed_load=-5, elastic_modulus=200, moment_of_inertia=0.0001
        ))
        assert result.max_moment == pytest.approx(-10.0)
        assert result.curve[20].deflection_mm < 0
