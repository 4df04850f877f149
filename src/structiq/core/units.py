"""
Stress unit conversion through MPa as the common base.
"""

import logging
import math
from enum import Enum
from types import MappingProxyType
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from structiq.errors import InvalidInputError

logger = logging.getLogger(__name__)


class StressUnit(str, Enum):
    """Supported stress units."""
    MPA = "MPa"
    PSI = "psi"
    KSI = "ksi"
    KPA = "kPa"
    KG_CM2 = "kg/cm²"


# Amount of each unit equal to 1 MPa
UNIT_FACTORS = MappingProxyType({
    StressUnit.MPA: 1.0,
    StressUnit.PSI: 145.038,
    StressUnit.KSI: 0.145038,
    StressUnit.KPA: 1000.0,
    StressUnit.KG_CM2: 10.1972,
})

# Short identifiers accepted in addition to the display names
_UNIT_ALIASES = MappingProxyType({
    "mpa": StressUnit.MPA,
    "n/mm2": StressUnit.MPA,
    "n/mm²": StressUnit.MPA,
    "psi": StressUnit.PSI,
    "ksi": StressUnit.KSI,
    "kpa": StressUnit.KPA,
    "kgcm2": StressUnit.KG_CM2,
    "kg/cm2": StressUnit.KG_CM2,
    "kg/cm²": StressUnit.KG_CM2,
})


class UnitValue(BaseModel):
    """A stress magnitude with its unit."""
    model_config = ConfigDict(frozen=True)

    magnitude: float = Field(..., allow_inf_nan=False)
    unit: StressUnit

    def to(self, unit: Union[StressUnit, str]) -> "UnitValue":
        target = parse_unit(unit)
        return UnitValue(magnitude=convert(self.magnitude, self.unit, target), unit=target)


def parse_unit(unit: Union[StressUnit, str]) -> StressUnit:
    """Resolve a unit from its enum member, display name or short id."""
    if isinstance(unit, StressUnit):
        return unit
    resolved = _UNIT_ALIASES.get(str(unit).strip().lower())
    if resolved is None:
        known = ", ".join(u.value for u in StressUnit)
        raise InvalidInputError(f"Unknown stress unit {unit!r}; expected one of {known}", field="unit")
    return resolved


def list_units() -> List[StressUnit]:
    """Units in display order."""
    return list(StressUnit)


def convert(
    value: float,
    from_unit: Union[StressUnit, str],
    to_unit: Union[StressUnit, str],
) -> float:
    """
    Convert a stress value between units.

    Args:
        value: Magnitude in from_unit
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Magnitude in to_unit

    Raises:
        InvalidInputError: if value is not a finite number or a unit is unknown
    """
    try:
        magnitude = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Please enter a valid number (got {value!r})", field="value") from None
    if not math.isfinite(magnitude):
        raise InvalidInputError(f"Please enter a valid number (got {value!r})", field="value")

    source = parse_unit(from_unit)
    target = parse_unit(to_unit)
    converted = magnitude / UNIT_FACTORS[source] * UNIT_FACTORS[target]
    logger.debug("Convert %g %s -> %g %s", magnitude, source.value, converted, target.value)
    return converted
