"""
Output data models for calculator results.

Results are immutable and carry fixed fields per calculator; failures are
reported through ``CalculationFailure`` instead of exceptions.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from structiq.errors import FailureKind


class DesignStatus(str, Enum):
    """Status of a design check."""
    PASS = "pass"
    FAIL = "fail"


class CalculationStep(BaseModel):
    """Single calculation step for transparency."""
    model_config = ConfigDict(frozen=True)

    step_number: int
    description: str
    formula: str
    substitution: str
    result: float
    unit: str
    code_reference: Optional[str] = None


class CalculationFailure(BaseModel):
    """Tagged failure returned in place of a result."""
    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    message: str
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Beam analysis
# ---------------------------------------------------------------------------

class BeamCurvePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float  # m
    shear: float  # kN
    moment: float  # kNm
    deflection_mm: float


class BeamLoadResult(_Result):
    """Shear, moment and deflection of a simply supported beam under UDL."""
    max_shear: float  # kN
    max_moment: float  # kNm
    max_deflection: float  # mm
    curve: list[BeamCurvePoint]


# ---------------------------------------------------------------------------
# Deflection
# ---------------------------------------------------------------------------

class DeflectionCurvePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float  # m
    deflection_mm: float


class DeflectionResult(_Result):
    """Maximum deflection and serviceability check."""
    max_deflection_mm: float
    allowable_deflection_mm: float  # span / n
    limit_denominator: int
    ratio: float  # actual / allowable
    passes: bool
    curve: list[DeflectionCurvePoint]


# ---------------------------------------------------------------------------
# Seismic
# ---------------------------------------------------------------------------

class FloorForce(BaseModel):
    model_config = ConfigDict(frozen=True)

    floor_index: int
    height_m: float
    weight_kn: float
    force_kn: float


class SpectrumPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: float  # s
    sa: float  # Sa/g


class SeismicResult(_Result):
    """Design base shear and its vertical distribution."""
    base_shear_kn: float
    zone_factor: float  # Z
    importance_factor: float  # I
    response_reduction_factor: float  # R
    spectral_acceleration_coefficient: float  # Sa/g
    design_seismic_coefficient: float  # Ah
    distribution_exponent: int  # k
    per_floor_forces: list[FloorForce]
    spectrum_curve: list[SpectrumPoint]
    calculation_steps: list[CalculationStep]


# ---------------------------------------------------------------------------
# Slab
# ---------------------------------------------------------------------------

class SlabCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    passed: bool
    actual_value: float
    limit_value: float
    unit: str

    @property
    def status(self) -> DesignStatus:
        return DesignStatus.PASS if self.passed else DesignStatus.FAIL


class SlabMomentPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float  # m
    moment: float  # kNm/m


class SlabDeflectionPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float  # m
    deflection_mm: float


class SlabResult(_Result):
    """Slab design checks and reinforcement layout."""
    checks: list[SlabCheck]
    main_bar_spacing_mm: float
    distribution_bar_spacing_mm: float
    effective_depth_mm: float
    design_moment_knm: float  # per m width
    k_factor: float
    lever_arm_mm: float
    required_steel_area_mm2: float  # per m width
    moment_curve: list[SlabMomentPoint]
    deflection_curve: list[SlabDeflectionPoint]
    calculation_steps: list[CalculationStep]

    @property
    def all_checks_pass(self) -> bool:
        return all(check.passed for check in self.checks)


# ---------------------------------------------------------------------------
# Design code checks
# ---------------------------------------------------------------------------

class CodeCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    limit_description: str  # e.g. "≤ 20"
    passed: bool
    code_reference: str
    unit: str = ""

    @property
    def status(self) -> DesignStatus:
        return DesignStatus.PASS if self.passed else DesignStatus.FAIL


class CodeCheckResult(_Result):
    """Outcome of all checks for one design code."""
    code_name: str
    checks: list[CodeCheck]
    overall_pass: bool
    calculation_steps: list[CalculationStep]


# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------

class ConversionResult(_Result):
    """Converted stress value."""
    value: float
    from_unit: str
    to_unit: str
    converted_value: float

    @property
    def summary(self) -> str:
        return f"{self.value:g} {self.from_unit} = {self.converted_value:.4f} {self.to_unit}"
