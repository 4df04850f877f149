# Data models for the structural calculators
from .inputs import (
    BeamLoadInput, DeflectionInput, SeismicInput, SlabInput, CodeCheckInput,
    SupportType, LoadType, SeismicZone, SoilType, BuildingImportance,
    DuctilityClass, SlabType, CodeStandard
)
from .outputs import (
    BeamLoadResult, BeamCurvePoint, DeflectionResult, DeflectionCurvePoint,
    SeismicResult, FloorForce, SpectrumPoint, SlabResult, SlabCheck,
    SlabMomentPoint, SlabDeflectionPoint, CodeCheckResult, CodeCheck,
    ConversionResult, CalculationFailure, CalculationStep, DesignStatus
)
