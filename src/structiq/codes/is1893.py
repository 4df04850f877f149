"""
IS 1893 (Part 1):2016 provisions for the equivalent static method.

Implements:
- Table 3: Zone factor Z
- Table 8: Importance factor I
- Table 9: Response reduction factor R (grouped by ductility class)
- Clause 6.4.2: Design acceleration spectrum Sa/g
- Clause 7.2.1: Design horizontal seismic coefficient Ah
- Clause 7.6.3: Vertical distribution of base shear
"""

from dataclasses import dataclass
from types import MappingProxyType

from structiq.models.inputs import (
    SeismicZone, SoilType, BuildingImportance, DuctilityClass
)


ZONE_FACTORS = MappingProxyType({
    SeismicZone.II: 0.10,
    SeismicZone.III: 0.16,
    SeismicZone.IV: 0.24,
    SeismicZone.V: 0.36,
})

IMPORTANCE_FACTORS = MappingProxyType({
    BuildingImportance.RESIDENTIAL: 1.0,
    BuildingImportance.COMMERCIAL: 1.0,
    BuildingImportance.INDUSTRIAL: 1.2,
    BuildingImportance.IMPORTANT: 1.5,
})

RESPONSE_REDUCTION_FACTORS = MappingProxyType({
    DuctilityClass.ORDINARY: 3.0,
    DuctilityClass.SPECIAL: 4.0,
    DuctilityClass.DUCTILE: 5.0,
})


@dataclass(frozen=True)
class SpectrumShape:
    """Plateau end, decay constant and long-period floor of Sa/g."""
    plateau_end: float  # s
    decay: float  # Sa/g = decay / T on the descending branch
    floor: float  # Sa/g beyond T = 4.0 s


SPECTRUM_SHAPES = MappingProxyType({
    SoilType.I: SpectrumShape(plateau_end=0.40, decay=1.00, floor=0.25),
    SoilType.II: SpectrumShape(plateau_end=0.55, decay=1.36, floor=0.34),
    SoilType.III: SpectrumShape(plateau_end=0.67, decay=1.67, floor=0.42),
})

PLATEAU_VALUE = 2.5
RISING_BRANCH_END = 0.1  # s
DECAY_BRANCH_END = 4.0  # s


def spectral_acceleration(period: float, soil_type: SoilType) -> float:
    """
    Design spectrum Sa/g for 5% damping (Clause 6.4.2).

    Args:
        period: Natural period T in seconds
        soil_type: Founding strata class

    Returns:
        Sa/g
    """
    shape = SPECTRUM_SHAPES[soil_type]
    if period <= RISING_BRANCH_END:
        return 1 + 15 * period
    if period <= shape.plateau_end:
        return PLATEAU_VALUE
    if period <= DECAY_BRANCH_END:
        return shape.decay / period
    return shape.floor


def design_seismic_coefficient(
    zone_factor: float,
    importance_factor: float,
    sa: float,
    response_reduction: float,
) -> float:
    """Ah = (Z/2)·(I/R)·(Sa/g) per Clause 7.2.1."""
    return (zone_factor * importance_factor * sa) / (2 * response_reduction)


def distribution_exponent(period: float) -> int:
    """Exponent k on storey height: 2 for flexible buildings (T > 0.5 s), else 1."""
    return 2 if period > 0.5 else 1
