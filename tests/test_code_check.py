"""Tests for the design code checker."""

import pytest

from structiq.codes import get_design_code, ACI318, Eurocode2, IS456
from structiq.core.code_check import DesignCodeChecker
from structiq.models.inputs import CodeCheckInput, CodeStandard
from structiq.models.outputs import DesignStatus


def check(code, span=6.0, depth=450.0, width=230.0, load=20.0):
    return DesignCodeChecker().check(CodeCheckInput(
        span_m=span, depth_mm=depth, width_mm=width,
        distributed_load_knm=load, code_standard=code,
    ))


class TestProvisions:

    def test_registry(self):
        assert isinstance(get_design_code(CodeStandard.ACI), ACI318)
        assert isinstance(get_design_code("Eurocode"), Eurocode2)
        assert isinstance(get_design_code(CodeStandard.IS), IS456)

    @pytest.mark.parametrize("code, span_depth, width_depth, coeff", [
        (CodeStandard.ACI, 20, 0.3, 0.5),
        (CodeStandard.EUROCODE, 18, 0.3, 0.5),
        (CodeStandard.IS, 16, 0.5, 0.36),
    ])
    def test_limits(self, code, span_depth, width_depth, coeff):
        provisions = get_design_code(code)
        assert provisions.get_span_depth_limit() == span_depth
        assert provisions.get_min_width_depth_ratio() == width_depth
        assert provisions.get_moment_capacity_coefficient() == coeff

    def test_only_is_checks_minimum_reinforcement(self):
        assert get_design_code(CodeStandard.ACI).get_minimum_reinforcement_ratio() is None
        assert get_design_code(CodeStandard.EUROCODE).get_minimum_reinforcement_ratio() is None
        assert get_design_code(CodeStandard.IS).get_minimum_reinforcement_ratio() == 0.12


class TestACI:

    @pytest.fixture(scope="class")
    def result(self):
        return check(CodeStandard.ACI)

    def test_three_checks_pass(self, result):
        assert [c.name for c in result.checks] == [
            "Span-to-Depth Ratio", "Width-to-Depth Ratio", "Moment Capacity"
        ]
        assert result.overall_pass is True
        assert result.code_name == "ACI 318-19"

    def test_values(self, result):
        span_depth, width_depth, moment = result.checks
        assert span_depth.value == pytest.approx(6000 / 450)
        assert span_depth.limit_description == "≤ 20"
        assert span_depth.code_reference == "ACI 318-19 Table 9.3.1.1"
        assert width_depth.value == pytest.approx(230 / 450)
        assert width_depth.limit_description == "≥ 0.3"
        assert moment.value == pytest.approx(90.0)
        assert moment.limit_description == f"≤ {0.5 * 230 * 450**2 * 25 / 1e6:.2f} kN·m"
        assert moment.code_reference == "ACI 318-19 Section 22.3"


class TestEurocode:

    def test_span_depth_limit_tighter_than_aci(self):
        """L/D = 20 passes ACI but fails Eurocode (≤ 18)."""
        assert check(CodeStandard.ACI, span=9.0).overall_pass is True
        result = check(CodeStandard.EUROCODE, span=9.0)
        assert result.checks[0].passed is False
        assert result.checks[0].code_reference == "EN 1992-1-1:2004 7.4.1"
        assert result.overall_pass is False
        assert result.checks[0].status == DesignStatus.FAIL
        assert result.checks[1].status == DesignStatus.PASS


class TestIS456:

    @pytest.fixture(scope="class")
    def result(self):
        return check(CodeStandard.IS)

    def test_four_checks(self, result):
        assert len(result.checks) == 4
        assert result.checks[-1].name == "Minimum Reinforcement"
        assert result.checks[-1].code_reference == "IS 456:2000 26.5.2.1"
        assert result.overall_pass is True

    def test_reinforcement_percentage(self, result):
        ast = 90e6 / (0.87 * 500 * 0.9 * 450)
        assert result.checks[-1].value == pytest.approx(100 * ast / (230 * 450))

    def test_width_depth_minimum(self):
        """b/D = 0.44 passes ACI (0.3) but fails IS (0.5)."""
        assert check(CodeStandard.ACI, width=200.0).checks[1].passed is True
        result = check(CodeStandard.IS, width=200.0)
        assert result.checks[1].passed is False
        assert result.overall_pass is False

    def test_light_load_fails_minimum_reinforcement(self):
        result = check(CodeStandard.IS, load=1.0)
        assert result.checks[-1].passed is False
        assert result.overall_pass is False

    def test_moment_capacity_uses_036(self, result):
        allowable = 0.36 * 230 * 450**2 * 25 / 1e6
        assert result.checks[2].limit_description == f"≤ {allowable:.2f} kN·m"


class TestMomentCapacity:

    def test_overloaded_beam_fails(self):
        result = check(CodeStandard.ACI, load=200.0)
        assert result.checks[2].passed is False
        assert result.overall_pass is False
