"""
EN 1992-1-1:2004 (Eurocode 2) provisions used by the simplified beam checks.

Key clauses:
- 7.4.1: Deflection control by span/depth ratio
- 5.3.1: Structural models, beam geometry
- 6.1: Bending with or without axial force
"""

from .base_code import DesignCode, CodeReferences


class Eurocode2(DesignCode):
    """EN 1992-1-1:2004 Design of concrete structures."""

    SPAN_DEPTH_LIMIT = 18
    MIN_WIDTH_DEPTH_RATIO = 0.3
    MOMENT_CAPACITY_COEFFICIENT = 0.5

    @property
    def code_name(self) -> str:
        return "EN 1992-1-1:2004"

    @property
    def references(self) -> CodeReferences:
        return CodeReferences(
            span_depth="EN 1992-1-1:2004 7.4.1",
            width_depth="EN 1992-1-1:2004 5.3.1",
            moment_capacity="EN 1992-1-1:2004 6.1",
        )

    def get_span_depth_limit(self) -> float:
        return self.SPAN_DEPTH_LIMIT

    def get_min_width_depth_ratio(self) -> float:
        return self.MIN_WIDTH_DEPTH_RATIO

    def get_moment_capacity_coefficient(self) -> float:
        return self.MOMENT_CAPACITY_COEFFICIENT
