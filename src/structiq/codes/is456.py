"""
IS 456:2000 code provisions used by the simplified beam checks.

Key clauses implemented:
- Clause 23.2.1: Span/depth ratios
- Clause 20.1: Lateral stability, width/depth proportion
- Clause 38.1: Limit state of collapse - Flexure
- Clause 26.5.2.1: Minimum reinforcement
"""

from typing import Optional

from .base_code import DesignCode, CodeReferences


class IS456(DesignCode):
    """
    IS 456:2000 - Indian Standard for Plain and Reinforced Concrete.
    Code of Practice for Plain and Reinforced Concrete (Fourth Revision).
    """

    SPAN_DEPTH_LIMIT = 16
    MIN_WIDTH_DEPTH_RATIO = 0.5

    # Mu,lim = 0.36·fck·b·xu,max(d - 0.42·xu,max), simplified to 0.36·fck·b·D²
    MOMENT_CAPACITY_COEFFICIENT = 0.36

    # Clause 26.5.2.1: 0.12% for HYSD bars
    MIN_REINFORCEMENT_PERCENT = 0.12

    @property
    def code_name(self) -> str:
        return "IS 456:2000"

    @property
    def references(self) -> CodeReferences:
        return CodeReferences(
            span_depth="IS 456:2000 23.2.1",
            width_depth="IS 456:2000 20.1",
            moment_capacity="IS 456:2000 38.1",
            min_reinforcement="IS 456:2000 26.5.2.1",
        )

    def get_span_depth_limit(self) -> float:
        return self.SPAN_DEPTH_LIMIT

    def get_min_width_depth_ratio(self) -> float:
        return self.MIN_WIDTH_DEPTH_RATIO

    def get_moment_capacity_coefficient(self) -> float:
        return self.MOMENT_CAPACITY_COEFFICIENT

    def get_minimum_reinforcement_ratio(self) -> Optional[float]:
        """
        Minimum reinforcement per Clause 26.5.2.1.

        Returns:
            Minimum tension steel as percentage of b·D
        """
        return self.MIN_REINFORCEMENT_PERCENT
