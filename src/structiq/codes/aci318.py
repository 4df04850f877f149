"""
ACI 318-19 provisions used by the simplified beam checks.

Key sections:
- Table 9.3.1.1: Minimum depth of nonprestressed beams
- Section 9.2: Beam dimensional limits
- Section 22.3: Flexural strength
"""

from .base_code import DesignCode, CodeReferences


class ACI318(DesignCode):
    """ACI 318-19 Building Code Requirements for Structural Concrete."""

    SPAN_DEPTH_LIMIT = 20
    MIN_WIDTH_DEPTH_RATIO = 0.3
    MOMENT_CAPACITY_COEFFICIENT = 0.5

    @property
    def code_name(self) -> str:
        return "ACI 318-19"

    @property
    def references(self) -> CodeReferences:
        return CodeReferences(
            span_depth="ACI 318-19 Table 9.3.1.1",
            width_depth="ACI 318-19 Section 9.2",
            moment_capacity="ACI 318-19 Section 22.3",
        )

    def get_span_depth_limit(self) -> float:
        return self.SPAN_DEPTH_LIMIT

    def get_min_width_depth_ratio(self) -> float:
        return self.MIN_WIDTH_DEPTH_RATIO

    def get_moment_capacity_coefficient(self) -> float:
        return self.MOMENT_CAPACITY_COEFFICIENT
