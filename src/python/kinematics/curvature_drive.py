import math
from typing import Optional

import log
from config import drive_config
from geometry import primitives

from kinematics import output_limiter

# Stands in for a zero ratio so the inner side never divides by zero.
_MIN_RATIO = 1e-10


class CurvatureDrive:
    """Drives along an arc, mostly for autonomous moves. Curvature is negative for a
    left arc and positive for a right arc, zero drives straight. The inner side is
    slowed by a ratio derived from the log of the curvature, the sensitivity sets how
    quickly the arc tightens.
    """

    def __init__(
        self, config: drive_config.CurvatureDriveConfig = drive_config.CurvatureDriveConfig()
    ) -> None:
        self._config = config
        log.info(f"Curvature drive configured with {config!r}")

    def drive(
        self, magnitude: float, curvature: float, sensitivity: Optional[float] = None
    ) -> primitives.TankCommand:
        """Left and right efforts in [-1, 1] for the commanded speed and arc."""
        if sensitivity is None:
            sensitivity = self._config.sensitivity

        if curvature < 0.0:
            left = self._inner_output(magnitude, -curvature, sensitivity)
            right = magnitude
        elif curvature > 0.0:
            left = magnitude
            right = self._inner_output(magnitude, curvature, sensitivity)
        else:
            left = magnitude
            right = magnitude

        return primitives.TankCommand(
            output_limiter.limit(left), output_limiter.limit(right)
        )

    def _inner_output(
        self, magnitude: float, abs_curvature: float, sensitivity: float
    ) -> float:
        value = math.log(abs_curvature)
        if value + sensitivity == 0.0:
            # An infinite ratio stops the inner side.
            return 0.0

        ratio = (value - sensitivity) / (value + sensitivity)
        if ratio == 0.0:
            ratio = _MIN_RATIO

        return magnitude / ratio
