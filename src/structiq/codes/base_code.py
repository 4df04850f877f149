"""
Abstract base class for design code provisions.
Enables the code checker to switch between ACI 318, Eurocode 2 and IS 456.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodeReferences:
    """Clause citations printed next to each check."""
    span_depth: str
    width_depth: str
    moment_capacity: str
    min_reinforcement: Optional[str] = None


class DesignCode(ABC):
    """
    Abstract base class for structural design codes.

    Purpose:
    - Define the per-code limits used by the simplified beam checks
    - Centralize code clause references
    """

    @property
    @abstractmethod
    def code_name(self) -> str:
        """Return the code name/version."""
        pass

    @property
    @abstractmethod
    def references(self) -> CodeReferences:
        """Return clause references for the standard checks."""
        pass

    @abstractmethod
    def get_span_depth_limit(self) -> float:
        """Return the maximum span/depth ratio."""
        pass

    @abstractmethod
    def get_min_width_depth_ratio(self) -> float:
        """Return the minimum width/depth ratio."""
        pass

    @abstractmethod
    def get_moment_capacity_coefficient(self) -> float:
        """Return the coefficient c in M_allow = c·b·D²·fck."""
        pass

    def get_minimum_reinforcement_ratio(self) -> Optional[float]:
        """Return the minimum tension steel percentage, or None if not checked."""
        return None
