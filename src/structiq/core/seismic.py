"""
Equivalent static seismic load per IS 1893 (Part 1):2016.

Implements:
- Design horizontal seismic coefficient Ah = Z·I·Sa / (2·R)
- Design base shear VB = Ah·W
- Vertical distribution Qi = VB·Wi·hi^k / Σ(Wj·hj^k)
- Design response spectrum for charting
"""

import logging
from typing import List

import numpy as np

from structiq.codes.is1893 import (
    ZONE_FACTORS, IMPORTANCE_FACTORS, RESPONSE_REDUCTION_FACTORS,
    spectral_acceleration, design_seismic_coefficient, distribution_exponent,
)
from structiq.models.inputs import (
    SeismicInput, SeismicZone, SoilType, BuildingImportance, DuctilityClass
)
from structiq.models.outputs import (
    CalculationStep, FloorForce, SeismicResult, SpectrumPoint
)
from structiq.utils.constants import SPECTRUM_MAX_PERIOD, SPECTRUM_PERIOD_STEP

logger = logging.getLogger(__name__)


class SeismicLoadCalculator:
    """
    Base shear and storey forces for a regular building.

    Floors are equally spaced and share the seismic weight equally.
    """

    def calculate(self, inputs: SeismicInput) -> SeismicResult:
        """
        Run the equivalent static procedure.

        Args:
            inputs: SeismicInput with zone, soil, use, ductility and building data

        Returns:
            SeismicResult with base shear, floor forces and spectrum curve
        """
        steps = []
        soil = SoilType(inputs.soil_type)
        T = inputs.fundamental_period_s
        W = inputs.total_weight_kn

        Z = ZONE_FACTORS[SeismicZone(inputs.zone)]
        I = IMPORTANCE_FACTORS[BuildingImportance(inputs.building_importance)]  # noqa: E741
        R = RESPONSE_REDUCTION_FACTORS[DuctilityClass(inputs.ductility)]
        sa = spectral_acceleration(T, soil)

        steps.append(CalculationStep(
            step_number=1,
            description="Spectral acceleration coefficient (Sa/g)",
            formula=f"Soil type {soil.value} spectrum at T",
            substitution=f"T = {T:.3f} s",
            result=round(sa, 4),
            unit="",
            code_reference="IS 1893:2016 Cl. 6.4.2"
        ))

        Ah = design_seismic_coefficient(Z, I, sa, R)
        steps.append(CalculationStep(
            step_number=2,
            description="Design horizontal seismic coefficient (Ah)",
            formula="Ah = Z·I·Sa / (2·R)",
            substitution=f"= {Z}×{I}×{sa:.3f} / (2×{R})",
            result=round(Ah, 5),
            unit="",
            code_reference="IS 1893:2016 Cl. 6.4.2"
        ))

        base_shear = Ah * W
        steps.append(CalculationStep(
            step_number=3,
            description="Design base shear (VB)",
            formula="VB = Ah·W",
            substitution=f"= {Ah:.5f}×{W:.1f}",
            result=round(base_shear, 2),
            unit="kN",
            code_reference="IS 1893:2016 Cl. 7.2.1"
        ))

        k = distribution_exponent(T)
        floor_forces = self._distribute(base_shear, inputs.height_m, inputs.floor_count, W, k)

        logger.debug(
            "Seismic Z=%s I=%s R=%s Sa/g=%.4f Ah=%.5f VB=%.2f kN k=%d",
            Z, I, R, sa, Ah, base_shear, k,
        )

        return SeismicResult(
            base_shear_kn=base_shear,
            zone_factor=Z,
            importance_factor=I,
            response_reduction_factor=R,
            spectral_acceleration_coefficient=sa,
            design_seismic_coefficient=Ah,
            distribution_exponent=k,
            per_floor_forces=floor_forces,
            spectrum_curve=self.spectrum_curve(soil),
            calculation_steps=steps,
        )

    @staticmethod
    def _distribute(
        base_shear: float,
        height: float,
        floor_count: int,
        total_weight: float,
        k: int,
    ) -> List[FloorForce]:
        """Distribute VB over the floors in proportion to Wi·hi^k."""
        storey_height = height / floor_count
        floor_weight = total_weight / floor_count

        heights = storey_height * np.arange(1, floor_count + 1)
        weights_hk = floor_weight * heights**k
        forces = base_shear * weights_hk / weights_hk.sum()

        return [
            FloorForce(
                floor_index=i + 1,
                height_m=float(h),
                weight_kn=floor_weight,
                force_kn=float(q),
            )
            for i, (h, q) in enumerate(zip(heights, forces))
        ]

    @staticmethod
    def spectrum_curve(soil_type: SoilType) -> List[SpectrumPoint]:
        """Sa/g at T = 0.0, 0.1, ..., 4.0 s."""
        count = int(round(SPECTRUM_MAX_PERIOD / SPECTRUM_PERIOD_STEP)) + 1
        periods = np.round(np.linspace(0.0, SPECTRUM_MAX_PERIOD, count), 1)
        return [
            SpectrumPoint(
                period=float(t),
                sa=round(spectral_acceleration(float(t), soil_type), 2),
            )
            for t in periods
        ]
