"""Tests for stress unit conversion."""

import itertools
import math

import pytest

from structiq.core.units import (
    StressUnit, UnitValue, UNIT_FACTORS, convert, list_units, parse_unit
)
from structiq.errors import InvalidInputError


class TestConvert:

    def test_mpa_to_psi(self):
        assert convert(1, StressUnit.MPA, StressUnit.PSI) == pytest.approx(145.038)

    def test_psi_to_mpa(self):
        assert convert(1000, "psi", "MPa") == pytest.approx(1000 / 145.038)

    def test_ksi_to_kpa(self):
        assert convert(1, "ksi", "kpa") == pytest.approx(1000 / 0.145038)

    def test_kg_cm2_aliases(self):
        assert parse_unit("kgcm2") is StressUnit.KG_CM2
        assert parse_unit("kg/cm²") is StressUnit.KG_CM2
        assert convert(10.1972, "kg/cm2", "MPa") == pytest.approx(1.0)

    @pytest.mark.parametrize("a, b", list(itertools.permutations(StressUnit, 2)))
    def test_round_trip(self, a, b):
        x = 37.5
        assert convert(convert(x, a, b), b, a) == pytest.approx(x, rel=1e-12)

    def test_same_unit_is_identity(self):
        assert convert(12.5, "MPa", "MPa") == 12.5


class TestErrors:

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "abc", None])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidInputError) as exc_info:
            convert(value, "MPa", "psi")
        assert exc_info.value.field == "value"

    def test_unknown_unit(self):
        with pytest.raises(InvalidInputError):
            convert(1.0, "bar", "psi")


class TestUnitValue:

    def test_to(self):
        stress = UnitValue(magnitude=25.0, unit=StressUnit.MPA)
        converted = stress.to("psi")
        assert converted.unit is StressUnit.PSI
        assert converted.magnitude == pytest.approx(25 * 145.038)

    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            UnitValue(magnitude=math.nan, unit=StressUnit.MPA)


def test_list_units_covers_table():
    assert list_units() == list(UNIT_FACTORS)
    assert [u.value for u in list_units()] == ["MPa", "psi", "ksi", "kPa", "kg/cm²"]
