"""Tests for the deflection calculator across support and load cases."""

import itertools
import math

import pytest

from structiq.core.deflection import DeflectionCalculator, FORMULAS
from structiq.models.inputs import DeflectionInput, LoadType, SupportType

E = 25000  # MPa
I = 450_000_000  # mm⁴  # noqa: E741
EI = E * I
L = 5000  # mm


def run(support, load_type, span=5.0, load=10.0, position=None, limit=250):
    inputs = DeflectionInput(
        support_type=support,
        load_type=load_type,
        span=span,
        load_magnitude=load,
        point_load_position=position,
        elastic_modulus=E,
        moment_of_inertia=I,
        deflection_limit=limit,
    )
    return DeflectionCalculator().calculate(inputs)


class TestDispatchTable:

    def test_every_combination_has_a_formula(self):
        for support, load_type in itertools.product(SupportType, LoadType):
            assert (support, load_type) in FORMULAS

    def test_curve_has_21_points(self):
        for support, load_type in itertools.product(SupportType, LoadType):
            result = run(support, load_type)
            assert len(result.curve) == 21
            assert result.curve[-1].position == pytest.approx(5.0)


class TestSimplySupported:

    def test_uniform_reference_value(self):
        """5wL⁴/(384EI) = 7.234 mm, within L/250 = 20 mm."""
        result = run(SupportType.SIMPLY_SUPPORTED, LoadType.UNIFORM)
        expected = 5 * 10 * 5000**4 / (384 * 25000 * 450000000)
        assert result.max_deflection_mm == pytest.approx(expected, rel=1e-3)
        assert result.max_deflection_mm == pytest.approx(7.234, rel=1e-3)
        assert result.allowable_deflection_mm == pytest.approx(20.0)
        assert result.passes is True
        assert result.ratio == pytest.approx(expected / 20.0)

    def test_uniform_midspan_matches_max(self):
        result = run(SupportType.SIMPLY_SUPPORTED, LoadType.UNIFORM)
        assert result.curve[10].deflection_mm == pytest.approx(result.max_deflection_mm)

    def test_point_center(self):
        """PL³/(48EI) with P in N."""
        result = run(SupportType.SIMPLY_SUPPORTED, LoadType.POINT_CENTER)
        expected = 10_000 * L**3 / (48 * EI)
        assert result.max_deflection_mm == pytest.approx(expected)
        assert result.curve[10].deflection_mm == pytest.approx(expected)
        assert result.curve[3].deflection_mm == pytest.approx(result.curve[17].deflection_mm)

    def test_point_anywhere_uses_approximate_maximum(self):
        """Max follows P·a·b·√(ab)/(9√3·EI·L)."""
        result = run(SupportType.SIMPLY_SUPPORTED, LoadType.POINT_ANYWHERE, position=1.5)
        a, b = 1500.0, 3500.0
        expected = 10_000 * a * b * math.sqrt(a * b) / (9 * math.sqrt(3) * EI * L)
        assert result.max_deflection_mm == pytest.approx(expected)

    def test_point_anywhere_curve_is_exact_elastic_curve(self):
        """At midspan load the piecewise curve equals PL³/(48EI)."""
        result = run(SupportType.SIMPLY_SUPPORTED, LoadType.POINT_ANYWHERE, position=2.5)
        assert result.curve[10].deflection_mm == pytest.approx(10_000 * L**3 / (48 * EI))

    def test_triangular_is_half_udl(self):
        udl = run(SupportType.SIMPLY_SUPPORTED, LoadType.UNIFORM)
        tri = run(SupportType.SIMPLY_SUPPORTED, LoadType.VARYING_TRIANGULAR)
        assert tri.max_deflection_mm == pytest.approx(udl.max_deflection_mm / 2)
        assert tri.curve[7].deflection_mm == pytest.approx(udl.curve[7].deflection_mm / 2)


class TestCantilever:

    def test_uniform_tip(self):
        result = run(SupportType.CANTILEVER, LoadType.UNIFORM)
        expected = 10 * L**4 / (8 * EI)
        assert result.max_deflection_mm == pytest.approx(expected)
        assert result.curve[-1].deflection_mm == pytest.approx(expected)
        assert result.curve[0].deflection_mm == pytest.approx(0.0)

    def test_point_center_acts_at_free_end(self):
        result = run(SupportType.CANTILEVER, LoadType.POINT_CENTER)
        assert result.max_deflection_mm == pytest.approx(10_000 * L**3 / (3 * EI))

    def test_point_anywhere_constant_beyond_load(self):
        result = run(SupportType.CANTILEVER, LoadType.POINT_ANYWHERE, position=2.5)
        expected = 10_000 * 2500**3 / (3 * EI)
        assert result.max_deflection_mm == pytest.approx(expected)
        assert result.curve[10].deflection_mm == pytest.approx(expected)
        for point in result.curve[11:]:
            assert point.deflection_mm == pytest.approx(expected)

    def test_triangular_is_half_udl(self):
        result = run(SupportType.CANTILEVER, LoadType.VARYING_TRIANGULAR)
        assert result.max_deflection_mm == pytest.approx(0.5 * 10 * L**4 / (8 * EI))


class TestFixedEnds:

    def test_uniform(self):
        result = run(SupportType.FIXED_ENDS, LoadType.UNIFORM)
        assert result.max_deflection_mm == pytest.approx(10 * L**4 / (384 * EI))
        assert result.curve[0].deflection_mm == pytest.approx(0.0)
        assert result.curve[-1].deflection_mm == pytest.approx(0.0)

    def test_point_center_midspan(self):
        result = run(SupportType.FIXED_ENDS, LoadType.POINT_CENTER)
        expected = 10_000 * L**3 / (192 * EI)
        assert result.max_deflection_mm == pytest.approx(expected)
        assert result.curve[10].deflection_mm == pytest.approx(expected)

    def test_point_anywhere_parabolic(self):
        result = run(SupportType.FIXED_ENDS, LoadType.POINT_ANYWHERE, position=1.0)
        expected = 10_000 * L**3 / (192 * EI)
        assert result.max_deflection_mm == pytest.approx(expected)
        assert result.curve[10].deflection_mm == pytest.approx(expected)
        assert result.curve[5].deflection_mm == pytest.approx(expected * 4 * 0.25 * 0.75)

    def test_triangular_parabolic(self):
        result = run(SupportType.FIXED_ENDS, LoadType.VARYING_TRIANGULAR)
        assert result.max_deflection_mm == pytest.approx(0.5 * 10 * L**4 / (384 * EI))


class TestServiceability:

    @pytest.mark.parametrize("limit, denominator", [
        (250, 250), (360, 360), (480, 480), ("L/360", 360), ("L/480", 480),
        (300, 250), ("bogus", 250),
    ])
    def test_limit_resolution(self, limit, denominator):
        result = run(SupportType.SIMPLY_SUPPORTED, LoadType.UNIFORM, limit=limit)
        assert result.limit_denominator == denominator
        assert result.allowable_deflection_mm == pytest.approx(5000 / denominator)

    def test_failing_check(self):
        """A long cantilever exceeds L/250."""
        result = run(SupportType.CANTILEVER, LoadType.UNIFORM, span=8.0, load=20.0)
        assert result.passes is False
        assert result.ratio > 1


class TestMonotonicity:

    POWER_OF_SPAN_CASES = [
        (SupportType.SIMPLY_SUPPORTED, LoadType.UNIFORM),
        (SupportType.SIMPLY_SUPPORTED, LoadType.POINT_CENTER),
        (SupportType.SIMPLY_SUPPORTED, LoadType.VARYING_TRIANGULAR),
        (SupportType.CANTILEVER, LoadType.UNIFORM),
        (SupportType.CANTILEVER, LoadType.POINT_CENTER),
        (SupportType.CANTILEVER, LoadType.VARYING_TRIANGULAR),
        (SupportType.FIXED_ENDS, LoadType.UNIFORM),
        (SupportType.FIXED_ENDS, LoadType.POINT_CENTER),
        (SupportType.FIXED_ENDS, LoadType.POINT_ANYWHERE),
        (SupportType.FIXED_ENDS, LoadType.VARYING_TRIANGULAR),
    ]

    @pytest.mark.parametrize("support, load_type", POWER_OF_SPAN_CASES)
    def test_longer_span_deflects_more(self, support, load_type):
        values = [
            run(support, load_type, span=span, position=1.0).max_deflection_mm
            for span in (3.0, 4.0, 5.0, 6.0)
        ]
        assert all(later > earlier for earlier, later in zip(values, values[1:]))


class TestInputValidation:

    def test_position_beyond_span_rejected(self):
        with pytest.raises(ValueError):
            DeflectionInput(
                load_type=LoadType.POINT_ANYWHERE, span=5, load_magnitude=10,
                point_load_position=6, elastic_modulus=E, moment_of_inertia=I,
            )

    def test_position_defaults_to_midspan(self):
        inputs = DeflectionInput(span=6, load_magnitude=10, elastic_modulus=E, moment_of_inertia=I)
        assert inputs.load_position == pytest.approx(3.0)
