"""
Simplified beam proportioning checks against a selected design code.

Checks:
1. Span/depth ratio ≤ code limit
2. Width/depth ratio ≥ code minimum
3. Moment M = wL²/8 ≤ c·b·D²·fck (fck = 25 MPa)
4. IS 456 only: tension steel for M ≥ minimum reinforcement percentage
"""

import logging
from typing import List

from structiq.codes import get_design_code
from structiq.codes.base_code import DesignCode
from structiq.models.inputs import CodeCheckInput
from structiq.models.outputs import CalculationStep, CodeCheck, CodeCheckResult
from structiq.utils.constants import (
    CODE_CHECK_CONCRETE_STRENGTH, KNM_TO_NMM, M_TO_MM, STEEL_YIELD_STRENGTH
)

logger = logging.getLogger(__name__)

# Lever arm assumed when sizing steel for the minimum reinforcement check
LEVER_ARM_FACTOR = 0.9


class DesignCodeChecker:
    """Runs the per-code checks for a rectangular beam."""

    def check(self, inputs: CodeCheckInput) -> CodeCheckResult:
        """
        Check a beam section against its selected code.

        Args:
            inputs: CodeCheckInput with span (m), depth and width (mm), load (kN/m)

        Returns:
            CodeCheckResult; overall_pass is True only if every check passes
        """
        code = get_design_code(inputs.code_standard)
        refs = code.references
        steps = []
        checks: List[CodeCheck] = []

        span = inputs.span_m
        D = inputs.depth_mm
        b = inputs.width_mm
        w = inputs.distributed_load_knm

        # 1. Span/depth
        span_depth = span * M_TO_MM / D
        span_depth_limit = code.get_span_depth_limit()
        checks.append(CodeCheck(
            name="Span-to-Depth Ratio",
            value=span_depth,
            limit_description=f"≤ {span_depth_limit:g}",
            passed=span_depth <= span_depth_limit,
            code_reference=refs.span_depth,
        ))

        # 2. Width/depth
        width_depth = b / D
        width_depth_min = code.get_min_width_depth_ratio()
        checks.append(CodeCheck(
            name="Width-to-Depth Ratio",
            value=width_depth,
            limit_description=f"≥ {width_depth_min:g}",
            passed=width_depth >= width_depth_min,
            code_reference=refs.width_depth,
        ))

        # 3. Moment capacity
        moment = w * span**2 / 8
        c = code.get_moment_capacity_coefficient()
        allowable = c * b * D**2 * CODE_CHECK_CONCRETE_STRENGTH / KNM_TO_NMM
        steps.append(CalculationStep(
            step_number=1,
            description="Applied moment (M)",
            formula="M = wL²/8",
            substitution=f"= {w}×{span}²/8",
            result=round(moment, 2),
            unit="kNm",
        ))
        steps.append(CalculationStep(
            step_number=2,
            description="Allowable moment (M_allow)",
            formula="M_allow = c·b·D²·fck",
            substitution=f"= {c}×{b:.0f}×{D:.0f}²×{CODE_CHECK_CONCRETE_STRENGTH:.0f}/10⁶",
            result=round(allowable, 2),
            unit="kNm",
            code_reference=refs.moment_capacity,
        ))
        checks.append(CodeCheck(
            name="Moment Capacity",
            value=moment,
            limit_description=f"≤ {allowable:.2f} kN·m",
            passed=moment <= allowable,
            code_reference=refs.moment_capacity,
            unit="kN·m",
        ))

        # 4. Minimum reinforcement (code-specific)
        pt_min = code.get_minimum_reinforcement_ratio()
        if pt_min is not None:
            checks.append(self._minimum_reinforcement(code, moment, b, D, pt_min, steps))

        overall = all(check.passed for check in checks)
        logger.debug(
            "%s checks: %s",
            code.code_name,
            ", ".join(f"{c.name}={'pass' if c.passed else 'fail'}" for c in checks),
        )

        return CodeCheckResult(
            code_name=code.code_name,
            checks=checks,
            overall_pass=overall,
            calculation_steps=steps,
        )

    @staticmethod
    def _minimum_reinforcement(
        code: DesignCode,
        moment: float,
        b: float,
        D: float,
        pt_min: float,
        steps: List[CalculationStep],
    ) -> CodeCheck:
        """Steel percentage needed for the applied moment vs the code minimum."""
        z = LEVER_ARM_FACTOR * D
        ast = moment * KNM_TO_NMM / (0.87 * STEEL_YIELD_STRENGTH * z)
        pt = 100 * ast / (b * D)
        steps.append(CalculationStep(
            step_number=len(steps) + 1,
            description="Tension steel percentage (pt)",
            formula="pt = 100·M/(0.87·fy·0.9D·b·D)",
            substitution=f"Ast = {ast:.1f} mm², b·D = {b:.0f}×{D:.0f}",
            result=round(pt, 3),
            unit="%",
            code_reference=code.references.min_reinforcement,
        ))
        return CodeCheck(
            name="Minimum Reinforcement",
            value=pt,
            limit_description=f"≥ {pt_min:g}%",
            passed=pt >= pt_min,
            code_reference=code.references.min_reinforcement or code.code_name,
            unit="%",
        )
