"""
Entry points for the structural calculators.

Each function accepts either the input model or a plain mapping (e.g. a
parsed YAML document), validates it, runs the calculation and returns the
result record. Invalid input and non-real intermediate results come back
as ``CalculationFailure`` instead of raising, so a caller can show a
specific message.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from structiq.core import (
    BeamAnalyzer, DeflectionCalculator, SeismicLoadCalculator, SlabDesigner,
    DesignCodeChecker,
)
from structiq.core.units import StressUnit, UnitValue, convert, parse_unit
from structiq.errors import CalculationError, FailureKind
from structiq.models.inputs import (
    BeamLoadInput, DeflectionInput, SeismicInput, SlabInput, CodeCheckInput
)
from structiq.models.outputs import (
    BeamLoadResult, DeflectionResult, SeismicResult, SlabResult,
    CodeCheckResult, ConversionResult, CalculationFailure,
)

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)


def _failure_from_validation(exc: ValidationError) -> CalculationFailure:
    errors = exc.errors()
    messages = []
    for error in errors:
        loc = ".".join(str(part) for part in error["loc"]) or "input"
        messages.append(f"{loc}: {error['msg']}")
    first_loc = errors[0]["loc"] if errors else ()
    return CalculationFailure(
        kind=FailureKind.INVALID_INPUT,
        message="; ".join(messages),
        field=str(first_loc[0]) if first_loc else None,
    )


def _run(
    model: Type[InputT],
    data: Union[InputT, Mapping[str, Any]],
    compute: Callable[[InputT], Any],
):
    if isinstance(data, model):
        inputs = data
    else:
        try:
            inputs = model.model_validate(data)
        except ValidationError as exc:
            failure = _failure_from_validation(exc)
            logger.warning("Invalid %s: %s", model.__name__, failure.message)
            return failure

    try:
        return compute(inputs)
    except CalculationError as exc:
        logger.warning("%s failed (%s): %s", model.__name__, exc.kind.value, exc.message)
        return CalculationFailure(kind=exc.kind, message=exc.message, field=exc.field)


def analyze_beam(
    data: Union[BeamLoadInput, Mapping[str, Any]],
) -> Union[BeamLoadResult, CalculationFailure]:
    """Shear, moment and deflection of a simply supported UDL beam."""
    return _run(BeamLoadInput, data, BeamAnalyzer().analyze)


def calculate_deflection(
    data: Union[DeflectionInput, Mapping[str, Any]],
) -> Union[DeflectionResult, CalculationFailure]:
    """Maximum deflection and span/n serviceability check."""
    return _run(DeflectionInput, data, DeflectionCalculator().calculate)


def calculate_seismic_load(
    data: Union[SeismicInput, Mapping[str, Any]],
) -> Union[SeismicResult, CalculationFailure]:
    """Base shear and storey forces per IS 1893."""
    return _run(SeismicInput, data, SeismicLoadCalculator().calculate)


def design_slab(
    data: Union[SlabInput, Mapping[str, Any]],
) -> Union[SlabResult, CalculationFailure]:
    """One-way or two-way slab design."""
    return _run(SlabInput, data, SlabDesigner().design)


def check_design_code(
    data: Union[CodeCheckInput, Mapping[str, Any]],
) -> Union[CodeCheckResult, CalculationFailure]:
    """Beam proportioning checks for ACI 318, Eurocode 2 or IS 456."""
    return _run(CodeCheckInput, data, DesignCodeChecker().check)


def convert_stress(
    value: Union[float, str, UnitValue],
    from_unit: Union[StressUnit, str, None] = None,
    to_unit: Union[StressUnit, str] = StressUnit.PSI,
) -> Union[ConversionResult, CalculationFailure]:
    """
    Convert a stress between units.

    Accepts either a UnitValue or a raw value plus its unit.
    """
    if isinstance(value, UnitValue):
        from_unit = value.unit
        value = value.magnitude
    try:
        source = parse_unit(from_unit if from_unit is not None else StressUnit.MPA)
        target = parse_unit(to_unit)
        converted = convert(value, source, target)
    except CalculationError as exc:
        logger.warning("Conversion failed: %s", exc.message)
        return CalculationFailure(kind=exc.kind, message=exc.message, field=exc.field)
    return ConversionResult(
        value=float(value),
        from_unit=source.value,
        to_unit=target.value,
        converted_value=converted,
    )


@dataclass(frozen=True)
class Calculator:
    """Registry entry used by the CLI."""
    name: str
    title: str
    input_model: Type[BaseModel]
    run: Callable[[Any], Any]


CALCULATORS = {
    calc.name: calc
    for calc in (
        Calculator("beam", "Beam Analysis", BeamLoadInput, analyze_beam),
        Calculator("deflection", "Deflection Calculator", DeflectionInput, calculate_deflection),
        Calculator("seismic", "Seismic Load Calculator", SeismicInput, calculate_seismic_load),
        Calculator("slab", "Slab Design Tool", SlabInput, design_slab),
        Calculator("code-check", "Design Code Checker", CodeCheckInput, check_design_code),
    )
}
