"""
Error taxonomy for the calculation core.

Calculators raise these exceptions where a condition is detected; the
entry points in ``structiq.engine`` turn them into ``CalculationFailure``
records so callers can render a specific message.
"""

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Category of a failed calculation."""
    INVALID_INPUT = "invalid_input"
    DOMAIN_MATH_ERROR = "domain_math_error"


class CalculationError(Exception):
    """Base class for per-call calculation failures."""

    kind: FailureKind = FailureKind.INVALID_INPUT

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidInputError(CalculationError):
    """Raised when a numeric input is missing, non-finite or out of range."""

    kind = FailureKind.INVALID_INPUT


class DomainMathError(CalculationError):
    """Raised when an intermediate formula has no real result."""

    kind = FailureKind.DOMAIN_MATH_ERROR
