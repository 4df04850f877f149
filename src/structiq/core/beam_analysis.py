"""
Simply supported beam under a uniformly distributed load.

Closed-form shear, bending moment and elastic deflection sampled along
the span for charting.
"""

import logging

import numpy as np

from structiq.models.inputs import BeamLoadInput
from structiq.models.outputs import BeamCurvePoint, BeamLoadResult
from structiq.utils.constants import BEAM_ANALYSIS_INTERVALS, GPA_TO_PA, M_TO_MM

logger = logging.getLogger(__name__)


class BeamAnalyzer:
    """
    Shear, moment and deflection of a simply supported UDL beam.

    Units: L in m, w in kN/m, E in GPa, I in m⁴. E·I is scaled by 1e9 and
    deflections are reported in mm.
    """

    def __init__(self, intervals: int = BEAM_ANALYSIS_INTERVALS):
        self.intervals = intervals

    def analyze(self, inputs: BeamLoadInput) -> BeamLoadResult:
        """
        Evaluate the beam.

        Args:
            inputs: BeamLoadInput with span, load and section stiffness

        Returns:
            BeamLoadResult with maxima and the sampled curve
        """
        L = inputs.length
        w = inputs.distributed_load
        EI = inputs.elastic_modulus * inputs.moment_of_inertia * GPA_TO_PA

        max_shear = w * L / 2
        max_moment = w * L**2 / 8
        max_deflection = (5 * w * L**4) / (384 * EI)

        x = np.linspace(0.0, L, self.intervals + 1)
        shear = w * (L / 2 - x)
        moment = w * x * (L - x) / 2
        deflection = w * x * (L**3 - 2 * L * x**2 + x**3) / (24 * EI)

        curve = [
            BeamCurvePoint(
                position=float(xi),
                shear=float(vi),
                moment=float(mi),
                deflection_mm=float(di * M_TO_MM),
            )
            for xi, vi, mi, di in zip(x, shear, moment, deflection)
        ]

        logger.debug(
            "Beam L=%.3f m w=%.3f kN/m: Vmax=%.3f kN Mmax=%.3f kNm dmax=%.4f mm",
            L, w, max_shear, max_moment, max_deflection * M_TO_MM,
        )

        return BeamLoadResult(
            max_shear=max_shear,
            max_moment=max_moment,
            max_deflection=max_deflection * M_TO_MM,
            curve=curve,
        )
