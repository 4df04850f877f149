"""
Elastic beam deflection per Euler-Bernoulli beam theory.

Covers three support conditions (simply supported, cantilever, fixed
ends) under four load arrangements (central point load, point load
anywhere, UDL, triangular load). Each combination has a closed-form
maximum deflection and a shape function sampled along the span.

Approximations kept deliberately:
- Simply supported, point load anywhere: max = P·a·b·√(ab) / (9√3·EI·L)
- Triangular loads: half of the corresponding UDL deflection
- Fixed ends, point load anywhere / triangular: parabolic shape 4x(1 - x)

Units: span in m (converted to mm), E in MPa, I in mm⁴. Distributed loads
in kN/m (numerically N/mm). Point loads are entered in kN and multiplied by
1000 to N before use, so P·L³/EI comes out in mm like the UDL formulas.
Deflections are returned in mm.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

import numpy as np

from structiq.models.inputs import DeflectionInput, LoadType, SupportType
from structiq.models.outputs import DeflectionCurvePoint, DeflectionResult
from structiq.utils.constants import CURVE_INTERVALS, M_TO_MM

logger = logging.getLogger(__name__)

KN_TO_N = 1000.0


@dataclass(frozen=True)
class _Beam:
    """Beam quantities in N-mm units shared by every formula."""
    L: float  # span (mm)
    EI: float  # N·mm²
    P: float  # point load (N)
    w: float  # load intensity (N/mm)
    a: float  # point load position from the left support / fixed end (mm)
    r: np.ndarray  # normalized positions x / L
    x: np.ndarray  # positions (mm)


# Formula signature: beam -> (max deflection, deflection at each sample)
Formula = Callable[[_Beam], Tuple[float, np.ndarray]]


# ---------------------------------------------------------------------------
# Simply supported
# ---------------------------------------------------------------------------

def _ss_udl_shape(beam: _Beam) -> np.ndarray:
    r = beam.r
    return (beam.w * beam.L**4 / (24 * beam.EI)) * (r - 2 * r**3 + r**4)


def _simply_supported_uniform(beam: _Beam) -> Tuple[float, np.ndarray]:
    # δ_max = 5wL⁴/(384EI)
    max_deflection = (5 * beam.w * beam.L**4) / (384 * beam.EI)
    return max_deflection, _ss_udl_shape(beam)


def _simply_supported_point_center(beam: _Beam) -> Tuple[float, np.ndarray]:
    # δ_max = PL³/(48EI)
    coeff = beam.P * beam.L**3 / (48 * beam.EI)
    r = np.minimum(beam.r, 1 - beam.r)
    return coeff, coeff * (3 * r - 4 * r**3)


def _simply_supported_point_anywhere(beam: _Beam) -> Tuple[float, np.ndarray]:
    L, EI, P, a = beam.L, beam.EI, beam.P, beam.a
    b = L - a
    max_deflection = (P * a * b * math.sqrt(a * b)) / (9 * math.sqrt(3) * EI * L)

    x = beam.x
    left = (P * b * x) / (6 * EI * L) * (L**2 - b**2 - x**2)
    right = (P * a * (L - x)) / (6 * EI * L) * (L**2 - a**2 - (L - x)**2)
    return max_deflection, np.where(x <= a, left, right)


def _simply_supported_triangular(beam: _Beam) -> Tuple[float, np.ndarray]:
    max_deflection = (0.5 * 5 * beam.w * beam.L**4) / (384 * beam.EI)
    return max_deflection, 0.5 * _ss_udl_shape(beam)


# ---------------------------------------------------------------------------
# Cantilever (x measured from the fixed end)
# ---------------------------------------------------------------------------

def _cantilever_udl_shape(beam: _Beam) -> np.ndarray:
    r = beam.r
    return (beam.w * beam.L**4 / (24 * beam.EI)) * (6 * r**2 - 4 * r**3 + r**4)


def _cantilever_uniform(beam: _Beam) -> Tuple[float, np.ndarray]:
    # δ_max = wL⁴/(8EI)
    max_deflection = (beam.w * beam.L**4) / (8 * beam.EI)
    return max_deflection, _cantilever_udl_shape(beam)


def _cantilever_point(beam: _Beam, a: float) -> Tuple[float, np.ndarray]:
    # δ_max = Pa³/(3EI); the beam stays straight beyond the load
    P, EI, x = beam.P, beam.EI, beam.x
    max_deflection = (P * a**3) / (3 * EI)
    loaded = (P * x**2 / (6 * EI)) * (3 * a - x)
    return max_deflection, np.where(x <= a, loaded, max_deflection)


def _cantilever_point_center(beam: _Beam) -> Tuple[float, np.ndarray]:
    # Central option places the load at the free end
    return _cantilever_point(beam, beam.L)


def _cantilever_point_anywhere(beam: _Beam) -> Tuple[float, np.ndarray]:
    return _cantilever_point(beam, beam.a)


def _cantilever_triangular(beam: _Beam) -> Tuple[float, np.ndarray]:
    max_deflection = (0.5 * beam.w * beam.L**4) / (8 * beam.EI)
    return max_deflection, 0.5 * _cantilever_udl_shape(beam)


# ---------------------------------------------------------------------------
# Fixed ends
# ---------------------------------------------------------------------------

def _fixed_uniform(beam: _Beam) -> Tuple[float, np.ndarray]:
    # δ_max = wL⁴/(384EI)
    max_deflection = (beam.w * beam.L**4) / (384 * beam.EI)
    r = beam.r
    return max_deflection, max_deflection * (1 - 2 * r + r**2) * (1 - r) * r


def _fixed_point_center(beam: _Beam) -> Tuple[float, np.ndarray]:
    # δ_max = PL³/(192EI)
    max_deflection = (beam.P * beam.L**3) / (192 * beam.EI)
    coeff = beam.P * beam.L**3 / (48 * beam.EI)
    r = np.minimum(beam.r, 1 - beam.r)
    return max_deflection, coeff * r * r * (3 - 4 * r)


def _parabolic(beam: _Beam, max_deflection: float) -> Tuple[float, np.ndarray]:
    return max_deflection, max_deflection * 4 * beam.r * (1 - beam.r)


def _fixed_point_anywhere(beam: _Beam) -> Tuple[float, np.ndarray]:
    return _parabolic(beam, (beam.P * beam.L**3) / (192 * beam.EI))


def _fixed_triangular(beam: _Beam) -> Tuple[float, np.ndarray]:
    return _parabolic(beam, (0.5 * beam.w * beam.L**4) / (384 * beam.EI))


FORMULAS: Dict[Tuple[SupportType, LoadType], Formula] = {
    (SupportType.SIMPLY_SUPPORTED, LoadType.UNIFORM): _simply_supported_uniform,
    (SupportType.SIMPLY_SUPPORTED, LoadType.POINT_CENTER): _simply_supported_point_center,
    (SupportType.SIMPLY_SUPPORTED, LoadType.POINT_ANYWHERE): _simply_supported_point_anywhere,
    (SupportType.SIMPLY_SUPPORTED, LoadType.VARYING_TRIANGULAR): _simply_supported_triangular,
    (SupportType.CANTILEVER, LoadType.UNIFORM): _cantilever_uniform,
    (SupportType.CANTILEVER, LoadType.POINT_CENTER): _cantilever_point_center,
    (SupportType.CANTILEVER, LoadType.POINT_ANYWHERE): _cantilever_point_anywhere,
    (SupportType.CANTILEVER, LoadType.VARYING_TRIANGULAR): _cantilever_triangular,
    (SupportType.FIXED_ENDS, LoadType.UNIFORM): _fixed_uniform,
    (SupportType.FIXED_ENDS, LoadType.POINT_CENTER): _fixed_point_center,
    (SupportType.FIXED_ENDS, LoadType.POINT_ANYWHERE): _fixed_point_anywhere,
    (SupportType.FIXED_ENDS, LoadType.VARYING_TRIANGULAR): _fixed_triangular,
}


class DeflectionCalculator:
    """
    Maximum deflection, deflection curve and serviceability check.

    The allowable deflection is span/n with n = 250, 360 or 480.
    """

    def __init__(self, intervals: int = CURVE_INTERVALS):
        self.intervals = intervals

    def calculate(self, inputs: DeflectionInput) -> DeflectionResult:
        """
        Evaluate the beam for one support/load combination.

        Args:
            inputs: DeflectionInput (span in m, E in MPa, I in mm⁴)

        Returns:
            DeflectionResult with deflections in mm
        """
        support = SupportType(inputs.support_type)
        load_type = LoadType(inputs.load_type)
        formula = FORMULAS[(support, load_type)]

        span_mm = inputs.span * M_TO_MM
        ratios = np.linspace(0.0, 1.0, self.intervals + 1)
        beam = _Beam(
            L=span_mm,
            EI=inputs.elastic_modulus * inputs.moment_of_inertia,
            P=inputs.load_magnitude * KN_TO_N,
            w=inputs.load_magnitude,
            a=inputs.load_position * M_TO_MM,
            r=ratios,
            x=ratios * span_mm,
        )

        max_deflection, deflections = formula(beam)

        allowable = span_mm / inputs.deflection_limit
        passes = max_deflection <= allowable

        logger.debug(
            "Deflection %s/%s span=%.3f m: max=%.4f mm allowable=%.4f mm",
            support.value, load_type.value, inputs.span, max_deflection, allowable,
        )

        curve = [
            DeflectionCurvePoint(position=float(r * inputs.span), deflection_mm=float(d))
            for r, d in zip(ratios, deflections)
        ]

        return DeflectionResult(
            max_deflection_mm=float(max_deflection),
            allowable_deflection_mm=allowable,
            limit_denominator=inputs.deflection_limit,
            ratio=float(max_deflection / allowable),
            passes=bool(passes),
            curve=curve,
        )
