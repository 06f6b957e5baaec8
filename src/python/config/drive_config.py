from __future__ import annotations

import enum
import json
import math
import pathlib
from typing import List, Optional

import pydantic

from geometry import math_helpers, primitives

_FROZEN = pydantic.ConfigDict(frozen=True)


# Str inheritance required so pydantic treats this as a string when
# serializing base model objects.
class TurnMode(str, enum.Enum):
    """How the differential drive decides whether turn authority scales with
    throttle.
    """

    # Turn scales with throttle unless the quick turn button is held.
    QUICK_TURN = "QUICK_TURN"
    # Turn scales with throttle only above a throttle threshold.
    THRESHOLD_TURN = "THRESHOLD_TURN"


class DifferentialDriveConfig(pydantic.BaseModel):
    """Tunable gains of the cheesy style differential drive."""

    model_config = _FROZEN

    mode: TurnMode = TurnMode.QUICK_TURN
    # Fraction of one side's overflow fed back into the opposite side.
    skim_gain: float = pydantic.Field(default=0.5, ge=0.0)
    turn_gain: float = pydantic.Field(default=1.0, ge=0.0)
    # Throttle magnitude above which turn scaling kicks in, THRESHOLD_TURN only.
    turn_threshold: float = pydantic.Field(default=0.5, ge=0.0)


class CurvatureDriveConfig(pydantic.BaseModel):
    model_config = _FROZEN

    sensitivity: float = pydantic.Field(default=0.5, gt=0.0)


class RadiusEnablementCurve(pydantic.BaseModel):
    """Full effect below `full_below` degrees from stick vertical, fading linearly to
    nothing at `zero_at`.
    """

    model_config = _FROZEN

    full_below: float = 95.0
    zero_at: float = 115.0

    @pydantic.model_validator(mode="after")
    def _check_breakpoints(self) -> RadiusEnablementCurve:
        if not 0.0 <= self.full_below < self.zero_at:
            raise ValueError(f"Breakpoints must increase, got {self!r}")
        return self

    def value(self, abs_theta: float) -> float:
        fade = math_helpers.linear_ramp(
            abs_theta - self.full_below, self.zero_at - self.full_below
        )
        return 1.0 - fade


class AltRawEnablementCurve(pydantic.BaseModel):
    """Zero near stick vertical, rising to full effect between `rise_start` and
    `full_start`, flat until `fall_start` and falling off to nothing at `zero_at`.
    """

    model_config = _FROZEN

    rise_start: float = 90.0
    full_start: float = 135.0
    fall_start: float = 175.0
    zero_at: float = 180.0

    @pydantic.model_validator(mode="after")
    def _check_breakpoints(self) -> AltRawEnablementCurve:
        if not (
            0.0 <= self.rise_start < self.full_start <= self.fall_start < self.zero_at
        ):
            raise ValueError(f"Breakpoints must increase, got {self!r}")
        return self

    def value(self, abs_theta: float) -> float:
        if abs_theta <= self.rise_start:
            return 0.0
        elif abs_theta <= self.full_start:
            return math_helpers.linear_ramp(
                abs_theta - self.rise_start, self.full_start - self.rise_start
            )
        elif abs_theta < self.fall_start:
            return 1.0
        elif abs_theta < self.zero_at:
            return 1.0 - math_helpers.linear_ramp(
                abs_theta - self.fall_start, self.zero_at - self.fall_start
            )
        else:
            return 0.0


class PolarDriveConfig(pydantic.BaseModel):
    """Tunable gains and enablement curves of the culver style polar steering."""

    model_config = _FROZEN

    radius_gain: float = 1.0
    raw_gain: float = 1.0
    alt_raw_gain: float = 1.0
    radius_curve: RadiusEnablementCurve = RadiusEnablementCurve()
    alt_raw_curve: AltRawEnablementCurve = AltRawEnablementCurve()


class SwerveGeometry(pydantic.BaseModel):
    """Either a rectangular chassis (length, width) or an explicit ordered list of
    module positions. The order of the modules must match the order the actuation
    layer expects.
    """

    model_config = _FROZEN

    length: Optional[float] = pydantic.Field(default=None, gt=0.0)
    width: Optional[float] = pydantic.Field(default=None, gt=0.0)
    positions: Optional[List[primitives.Point2D]] = None

    @pydantic.model_validator(mode="after")
    def _check_layout(self) -> SwerveGeometry:
        has_dimensions = self.length is not None and self.width is not None
        if (self.length is None) != (self.width is None):
            raise ValueError("Both length and width are required for a rectangle.")
        if has_dimensions == (self.positions is not None):
            raise ValueError("Specify either length and width or module positions.")
        if self.positions is not None and not self.positions:
            raise ValueError("At least one module position is required.")
        return self

    @property
    def is_rectangular(self) -> bool:
        return self.positions is None

    @property
    def phi(self) -> float:
        """The angle (radians) of the chassis diagonal, only defined for rectangles."""
        if self.length is None or self.width is None:
            raise ValueError("Chassis angle is only defined for a rectangular geometry.")
        return math.atan2(self.length, self.width)

    @property
    def module_positions(self) -> List[primitives.Point2D]:
        """Module positions, a rectangle is ordered front left, front right, rear left
        then rear right.
        """
        if self.positions is not None:
            return list(self.positions)

        assert self.length is not None and self.width is not None
        half_length = self.length / 2
        half_width = self.width / 2
        return [
            primitives.Point2D(half_length, half_width),
            primitives.Point2D(half_length, -half_width),
            primitives.Point2D(-half_length, half_width),
            primitives.Point2D(-half_length, -half_width),
        ]


class DriveConfig(pydantic.BaseModel):
    """Every tunable of the drive kinematics, set once at startup."""

    model_config = _FROZEN

    differential: DifferentialDriveConfig = DifferentialDriveConfig()
    curvature: CurvatureDriveConfig = CurvatureDriveConfig()
    polar: PolarDriveConfig = PolarDriveConfig()
    swerve: Optional[SwerveGeometry] = None

    @classmethod
    def from_json(cls, file_path: pathlib.Path) -> DriveConfig:
        if not file_path.exists():
            raise ValueError(f"File path does not exist. {file_path}")

        with open(file_path, "r") as f:
            drive_config_dict = json.load(f)

        return DriveConfig.model_validate(drive_config_dict)
