"""StructIQ: structural engineering calculators."""

from structiq.engine import (
    analyze_beam, calculate_deflection, calculate_seismic_load, design_slab,
    check_design_code, convert_stress, CALCULATORS,
)
from structiq.errors import (
    CalculationError, DomainMathError, FailureKind, InvalidInputError
)
from structiq.models import (
    BeamLoadInput, DeflectionInput, SeismicInput, SlabInput, CodeCheckInput,
    BeamLoadResult, DeflectionResult, SeismicResult, SlabResult,
    CodeCheckResult, ConversionResult, CalculationFailure,
)
from structiq.core.units import StressUnit, UnitValue

__version__ = "0.1.0"
