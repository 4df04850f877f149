"""
Input data models for the structural calculators using Pydantic for validation.

Every numeric field rejects NaN and infinity; physical quantities that
cannot be zero or negative carry ``gt=0``.
"""

from enum import Enum, IntEnum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from structiq.settings import SETTINGS
from structiq.utils.constants import DEFLECTION_LIMITS


class SupportType(str, Enum):
    """Beam support conditions for the deflection calculator."""
    SIMPLY_SUPPORTED = "simply_supported"
    CANTILEVER = "cantilever"
    FIXED_ENDS = "fixed_ends"


class LoadType(str, Enum):
    """Load arrangements for the deflection calculator."""
    POINT_CENTER = "point_center"
    POINT_ANYWHERE = "point_anywhere"
    UNIFORM = "uniform"
    VARYING_TRIANGULAR = "varying_triangular"


class SeismicZone(IntEnum):
    """Seismic zones per IS 1893 (Part 1)."""
    II = 2
    III = 3
    IV = 4
    V = 5


class SoilType(str, Enum):
    """Founding strata classes per IS 1893."""
    I = "I"  # noqa: E741 - rock or hard soil
    II = "II"  # Medium soil
    III = "III"  # Soft soil


class BuildingImportance(str, Enum):
    """Building use categories for the importance factor."""
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    IMPORTANT = "important"


class DuctilityClass(str, Enum):
    """Structural system ductility for the response reduction factor."""
    ORDINARY = "ordinary"
    SPECIAL = "special"
    DUCTILE = "ductile"


class SlabType(str, Enum):
    """Spanning behaviour of a slab panel."""
    ONE_WAY = "one_way"
    TWO_WAY = "two_way"


class CodeStandard(str, Enum):
    """Design codes supported by the code checker."""
    ACI = "ACI"
    EUROCODE = "Eurocode"
    IS = "IS"


class BeamLoadInput(BaseModel):
    """Simply supported beam under a uniformly distributed load."""
    model_config = ConfigDict(frozen=True)

    length: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Beam length in m"
    )
    distributed_load: float = Field(
        ...,
        allow_inf_nan=False,
        description="Uniform load in kN/m (positive = downward)"
    )
    elastic_modulus: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Young's modulus in GPa"
    )
    moment_of_inertia: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Second moment of area in m^4"
    )


class DeflectionInput(BaseModel):
    """Beam deflection problem: support condition, load arrangement and section."""
    model_config = ConfigDict(frozen=True)

    support_type: SupportType = SupportType.SIMPLY_SUPPORTED
    load_type: LoadType = LoadType.UNIFORM
    span: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Span in m"
    )
    load_magnitude: float = Field(
        ...,
        allow_inf_nan=False,
        description="Point load or load intensity (kN/m for distributed loads)"
    )
    point_load_position: Optional[float] = Field(
        None,
        ge=0,
        allow_inf_nan=False,
        description="Distance of the point load from the left support "
                    "(fixed end for cantilevers) in m"
    )
    elastic_modulus: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Young's modulus in MPa"
    )
    moment_of_inertia: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Second moment of area in mm^4"
    )
    deflection_limit: int = Field(
        default=SETTINGS.default_deflection_limit,
        description="Allowable deflection as span / n (250, 360 or 480)"
    )

    @field_validator("deflection_limit", mode="before")
    @classmethod
    def resolve_limit(cls, value: Union[int, str, None]) -> int:
        """Accept 360 or 'L/360'; anything unrecognized falls back to the default limit."""
        if isinstance(value, str):
            value = value.strip().upper().removeprefix("L/")
        try:
            denominator = int(value)
        except (TypeError, ValueError):
            return SETTINGS.default_deflection_limit
        if denominator not in DEFLECTION_LIMITS:
            return SETTINGS.default_deflection_limit
        return denominator

    @model_validator(mode="after")
    def check_load_position(self) -> "DeflectionInput":
        if self.load_type == LoadType.POINT_ANYWHERE and self.point_load_position is not None:
            if self.point_load_position > self.span:
                raise ValueError(
                    f"point_load_position ({self.point_load_position} m) "
                    f"must lie within the span ({self.span} m)"
                )
        return self

    @property
    def load_position(self) -> float:
        """Point load position in m, midspan when not given."""
        if self.point_load_position is None:
            return self.span / 2
        return self.point_load_position


class SeismicInput(BaseModel):
    """Building data for the equivalent static seismic procedure."""
    model_config = ConfigDict(frozen=True)

    zone: SeismicZone = SeismicZone.III
    soil_type: SoilType = SoilType.II
    building_importance: BuildingImportance = BuildingImportance.RESIDENTIAL
    ductility: DuctilityClass = DuctilityClass.ORDINARY
    height_m: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Building height in m"
    )
    floor_count: int = Field(
        ...,
        ge=1,
        description="Number of floors"
    )
    total_weight_kn: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Seismic weight of the building in kN"
    )
    fundamental_period_s: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Fundamental natural period in s"
    )


class SlabInput(BaseModel):
    """Single panel slab geometry, materials, loads and bar choice."""
    model_config = ConfigDict(frozen=True)

    slab_type: SlabType = SlabType.ONE_WAY
    length_m: float = Field(..., gt=0, allow_inf_nan=False, description="Panel length in m")
    width_m: float = Field(..., gt=0, allow_inf_nan=False, description="Panel width in m")
    thickness_mm: float = Field(..., gt=0, allow_inf_nan=False, description="Overall thickness in mm")
    concrete_grade_mpa: float = Field(
        ...,
        gt=0,
        allow_inf_nan=False,
        description="Characteristic cube strength fck in MPa"
    )
    dead_load_kpa: float = Field(..., ge=0, allow_inf_nan=False, description="Superimposed dead load in kN/m²")
    live_load_kpa: float = Field(..., ge=0, allow_inf_nan=False, description="Imposed load in kN/m²")
    main_bar_diameter_mm: float = Field(..., gt=0, allow_inf_nan=False)
    distribution_bar_diameter_mm: float = Field(..., gt=0, allow_inf_nan=False)
    cover_mm: float = Field(..., ge=0, allow_inf_nan=False, description="Clear cover in mm")

    @property
    def governing_span(self) -> float:
        """Longer panel dimension in m."""
        return max(self.length_m, self.width_m)

    @property
    def total_load(self) -> float:
        """Dead plus live load in kN/m²."""
        return self.dead_load_kpa + self.live_load_kpa

    @property
    def effective_depth(self) -> float:
        """Depth to the centroid of the main bars in mm."""
        return self.thickness_mm - self.cover_mm - self.main_bar_diameter_mm / 2


class CodeCheckInput(BaseModel):
    """Rectangular beam section checked against a design code."""
    model_config = ConfigDict(frozen=True)

    span_m: float = Field(..., gt=0, allow_inf_nan=False, description="Span in m")
    depth_mm: float = Field(..., gt=0, allow_inf_nan=False, description="Overall depth in mm")
    width_mm: float = Field(..., gt=0, allow_inf_nan=False, description="Section width in mm")
    distributed_load_knm: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Uniform load in kN/m"
    )
    code_standard: CodeStandard = CodeStandard.ACI
