"""Culver style polar steering.

The steering stick is split into how far it is pushed (radius) and which way it
points relative to stick vertical (theta). Turn sharpness is then a continuous
function of the stick angle rather than a separate axis. Enablement curves over
|theta| keep a nearly vertical stick from injecting turn.

Stick convention: positive x is the stick pushed left and positive y is the stick
pushed forward, which makes theta positive when the stick leans right.
"""
import math

import log
from config import drive_config
from geometry import primitives

from kinematics import output_limiter


def theta_from_vertical(x: float, y: float) -> float:
    """The stick angle from vertical in degrees, in [-180, 180]."""
    # Adding 0.0 folds -0.0 into 0.0.
    return 0.0 + (-math.degrees(math.atan2(x, y)))


def normalize_angle_90(theta: float) -> float:
    """theta / 90 while |theta| is within 90 degrees, zero beyond. Keeps the sign of
    theta so the turn keeps its direction.
    """
    if abs(theta) <= 90.0:
        return theta / 90.0
    else:
        return 0.0


def theta_sign(theta: float) -> float:
    return 1.0 if theta > 0.0 else -1.0


class PolarDrive:
    """Maps a throttle and a steering stick position to left and right efforts."""

    def __init__(
        self, config: drive_config.PolarDriveConfig = drive_config.PolarDriveConfig()
    ) -> None:
        self._config = config
        log.info(f"Polar drive configured with {config!r}")

    @property
    def config(self) -> drive_config.PolarDriveConfig:
        return self._config

    def drive(
        self, throttle: float, x: float, y: float, quick_turn: bool
    ) -> primitives.TankCommand:
        """The quick turn variant. While quick turn is held the stick turns the robot
        regardless of throttle, otherwise the turn scales with throttle and flips when
        driving backwards.
        """
        left = throttle
        right = throttle

        if quick_turn:
            raw = self.raw(x, y)
            left += raw
            right -= raw
        else:
            radius = self.radius(throttle, x, y)
            # Reverse turning if moving backwards
            if throttle < 0.0:
                left -= radius
                right += radius
            else:
                left += radius
                right -= radius

        return primitives.TankCommand(
            output_limiter.limit(left), output_limiter.limit(right)
        )

    def drive_alt(self, throttle: float, x: float, y: float) -> primitives.TankCommand:
        """The alternate raw variant, no quick turn button. Pulling the stick past
        horizontal adds a throttle independent turn on top of the radius term.
        """
        turn = self.radius(throttle, x, y) + self.alt_raw(x, y)

        left = throttle
        right = throttle
        # Reverse turning if moving backwards
        if throttle > 0.0:
            left -= turn
            right += turn
        else:
            left += turn
            right -= turn

        return primitives.TankCommand(
            output_limiter.limit(left), output_limiter.limit(right)
        )

    def radius(self, throttle: float, x: float, y: float) -> float:
        """The throttle scaled turn term."""
        r = math.sqrt(x * x + y * y)
        if r == 0.0:
            return 0.0

        theta = theta_from_vertical(x, y)
        return (
            r
            * throttle
            * normalize_angle_90(theta)
            * self._config.radius_gain
            * self._config.radius_curve.value(abs(theta))
        )

    def raw(self, x: float, y: float) -> float:
        """The throttle independent turn term used while quick turning."""
        r = math.sqrt(x * x + y * y)
        if r == 0.0:
            return 0.0

        theta = theta_from_vertical(x, y)
        return (
            r
            * normalize_angle_90(theta)
            * self._config.raw_gain
            * self._config.radius_curve.value(abs(theta))
        )

    def alt_raw(self, x: float, y: float) -> float:
        """The turn term that only engages once the stick is pulled behind
        horizontal.
        """
        r = math.sqrt(x * x + y * y)
        if r == 0.0:
            return 0.0

        theta = theta_from_vertical(x, y)
        return (
            r
            * theta_sign(theta)
            * self._config.alt_raw_gain
            * self._config.alt_raw_curve.value(abs(theta))
        )
