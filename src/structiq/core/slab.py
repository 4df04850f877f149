"""
Simplified ultimate limit state design of one-way and two-way slabs.

Implements (per metre strip):
- Design moment M = α·q·L² with α = 0.125 (one-way) or 0.086 (two-way)
- Singly reinforced section: K = M/(b·d²·fck), z = d(0.5 + √(0.25 - 0.882K)) ≤ 0.95d
- Steel area As = M/(0.87·fy·z) and bar spacing
- Checks: bending (K ≤ 0.168), shear, minimum thickness (L/28 or L/32)
"""

import logging
import math
from typing import List, Tuple

import numpy as np

from structiq.errors import DomainMathError, InvalidInputError
from structiq.models.inputs import SlabInput, SlabType
from structiq.models.outputs import (
    CalculationStep, SlabCheck, SlabDeflectionPoint, SlabMomentPoint, SlabResult
)
from structiq.utils.constants import (
    CURVE_INTERVALS, KNM_TO_NMM, M_TO_MM, MAX_BAR_SPACING,
    SLAB_CONCRETE_MODULUS, SLAB_STRIP_WIDTH, STEEL_YIELD_STRENGTH,
)

logger = logging.getLogger(__name__)


class SlabDesigner:
    """
    Reinforcement design and checks for a single slab panel.

    One-way slabs span the longer dimension; two-way slabs use a reduced
    moment coefficient on the same span.
    """

    MOMENT_COEFFICIENTS = {
        SlabType.ONE_WAY: 0.125,
        SlabType.TWO_WAY: 0.086,
    }

    # Distribution steel as a fraction of main steel
    DISTRIBUTION_FRACTIONS = {
        SlabType.ONE_WAY: 0.2,
        SlabType.TWO_WAY: 0.8,
    }

    # Minimum thickness as span / n
    THICKNESS_RATIOS = {
        SlabType.ONE_WAY: 28,
        SlabType.TWO_WAY: 32,
    }

    K_LIMIT = 0.168

    def __init__(self, fy: float = STEEL_YIELD_STRENGTH):
        self.fy = fy

    def design(self, inputs: SlabInput) -> SlabResult:
        """
        Design the slab panel.

        Args:
            inputs: SlabInput with geometry, loads, materials and bar sizes

        Returns:
            SlabResult with checks, bar spacings and curves

        Raises:
            InvalidInputError: if the effective depth is not positive
            DomainMathError: if the section needs compression steel
                (0.25 - 0.882K < 0, no real lever arm)
        """
        steps = []
        slab_type = SlabType(inputs.slab_type)
        fck = inputs.concrete_grade_mpa
        fy = self.fy
        b = SLAB_STRIP_WIDTH
        q = inputs.total_load
        span = inputs.governing_span

        d = inputs.effective_depth
        if d <= 0:
            raise InvalidInputError(
                f"Effective depth {d:.1f} mm is not positive; "
                "increase thickness or reduce cover/bar diameter",
                field="thickness_mm",
            )
        steps.append(CalculationStep(
            step_number=1,
            description="Effective depth (d)",
            formula="d = h - c - φ/2",
            substitution=f"= {inputs.thickness_mm} - {inputs.cover_mm} - {inputs.main_bar_diameter_mm}/2",
            result=round(d, 1),
            unit="mm",
        ))

        # Design moment
        alpha = self.MOMENT_COEFFICIENTS[slab_type]
        M = alpha * q * span**2
        steps.append(CalculationStep(
            step_number=2,
            description="Design moment (M)",
            formula="M = α·q·L²",
            substitution=f"= {alpha}×{q:.2f}×{span:.2f}²",
            result=round(M, 3),
            unit="kNm/m",
        ))

        K = M * KNM_TO_NMM / (b * d**2 * fck)
        steps.append(CalculationStep(
            step_number=3,
            description="Moment factor (K)",
            formula="K = M/(b·d²·fck)",
            substitution=f"= {M:.3f}×10⁶/({b:.0f}×{d:.1f}²×{fck})",
            result=round(K, 5),
            unit="",
        ))

        z = self._lever_arm(K, d)
        steps.append(CalculationStep(
            step_number=4,
            description="Lever arm (z)",
            formula="z = d(0.5 + √(0.25 - 0.882K)) ≤ 0.95d",
            substitution=f"K = {K:.5f}, d = {d:.1f}",
            result=round(z, 1),
            unit="mm",
        ))

        as_req = M * KNM_TO_NMM / (0.87 * fy * z)
        steps.append(CalculationStep(
            step_number=5,
            description="Required steel area (As,req)",
            formula="As = M/(0.87·fy·z)",
            substitution=f"= {M:.3f}×10⁶/(0.87×{fy:.0f}×{z:.1f})",
            result=round(as_req, 1),
            unit="mm²/m",
        ))

        main_spacing = self._bar_spacing(inputs.main_bar_diameter_mm, as_req)
        dist_area = self.DISTRIBUTION_FRACTIONS[slab_type] * as_req
        dist_spacing = self._bar_spacing(inputs.distribution_bar_diameter_mm, dist_area)

        checks = self._checks(inputs, slab_type, M, K, d, span)
        moment_curve, deflection_curve = self._curves(inputs, slab_type)

        logger.debug(
            "Slab %s L=%.2f m: M=%.3f kNm/m K=%.4f z=%.1f mm As=%.1f mm²/m",
            slab_type.value, span, M, K, z, as_req,
        )

        return SlabResult(
            checks=checks,
            main_bar_spacing_mm=round(main_spacing),
            distribution_bar_spacing_mm=round(dist_spacing),
            effective_depth_mm=d,
            design_moment_knm=M,
            k_factor=K,
            lever_arm_mm=z,
            required_steel_area_mm2=as_req,
            moment_curve=moment_curve,
            deflection_curve=deflection_curve,
            calculation_steps=steps,
        )

    @staticmethod
    def _lever_arm(K: float, d: float) -> float:
        radicand = 0.25 - 0.882 * K
        if radicand < 0:
            raise DomainMathError(
                f"No real lever arm: 0.25 - 0.882K = {radicand:.4f} < 0 "
                f"(K = {K:.4f}); section requires compression reinforcement",
                field="thickness_mm",
            )
        return min(0.95 * d, 0.95 * d * (0.5 + math.sqrt(radicand)))

    @staticmethod
    def _bar_spacing(bar_diameter: float, area_required: float) -> float:
        """Centre-to-centre spacing for the required area per metre, capped at 250 mm."""
        if area_required <= 0:
            return MAX_BAR_SPACING
        bar_area = math.pi * (bar_diameter / 2)**2
        return min(1000 * bar_area / area_required, MAX_BAR_SPACING)

    def _checks(
        self,
        inputs: SlabInput,
        slab_type: SlabType,
        M: float,
        K: float,
        d: float,
        span: float,
    ) -> List[SlabCheck]:
        fck = inputs.concrete_grade_mpa
        q = inputs.total_load

        shear_capacity = 0.25 * math.sqrt(fck) * d / 1000  # kN
        design_shear = q * span / 2
        min_thickness = span * M_TO_MM / self.THICKNESS_RATIOS[slab_type]

        return [
            SlabCheck(
                name="Bending Moment",
                passed=K <= self.K_LIMIT,
                actual_value=M,
                limit_value=self.K_LIMIT * SLAB_STRIP_WIDTH * d**2 * fck / KNM_TO_NMM,
                unit="kNm/m",
            ),
            SlabCheck(
                name="Shear Capacity",
                passed=shear_capacity >= design_shear,
                actual_value=design_shear,
                limit_value=shear_capacity,
                unit="kN/m",
            ),
            SlabCheck(
                name="Minimum Thickness",
                passed=inputs.thickness_mm >= min_thickness,
                actual_value=inputs.thickness_mm,
                limit_value=min_thickness,
                unit="mm",
            ),
        ]

    @staticmethod
    def _curves(
        inputs: SlabInput,
        slab_type: SlabType,
    ) -> Tuple[List[SlabMomentPoint], List[SlabDeflectionPoint]]:
        """Moment and deflection shapes for charting (simplified)."""
        q = inputs.total_load
        I = inputs.thickness_mm**3 / 12  # noqa: E741
        E = SLAB_CONCRETE_MODULUS

        if slab_type == SlabType.ONE_WAY:
            L = inputs.governing_span
            moment_divisor = 2
            amplitude = (5 * q * L**4 * 1e9) / (384 * E * I)
        else:
            L = inputs.length_m
            moment_divisor = 3
            amplitude = (q * L**4 * 1e9) / (180 * E * I)

        x = np.linspace(0.0, L, CURVE_INTERVALS + 1)
        moments = q * x * (L - x) / moment_divisor
        s = 2 * x / L - 1
        deflections = amplitude * (1 - s**2) * s**2 / 1000

        moment_curve = [
            SlabMomentPoint(position=float(xi), moment=float(mi))
            for xi, mi in zip(x, moments)
        ]
        deflection_curve = [
            SlabDeflectionPoint(position=float(xi), deflection_mm=float(di))
            for xi, di in zip(x, deflections)
        ]
        return moment_curve, deflection_curve
