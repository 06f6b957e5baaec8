from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numba as nb  # type: ignore[import-untyped]
import numpy as np

import log
from config import drive_config
from geometry import math_helpers, primitives

from kinematics import output_limiter

_F64_VECTOR = nb.types.Array(nb.types.float64, 1, "C")


class SwerveDrive:
    """Swerve drive module speed and angle calculator, field centric when given a
    gyro heading.

    Module angles are degrees in (-180, 180], 0 is straight ahead and positive
    angles point right. Speeds are normalized as a set so the largest is at most 1,
    which keeps the ratios between modules (and so the path) intact.

    The returned wheel vectors are buffers owned by this object and are overwritten
    on every call.
    """

    def __init__(self, geometry: drive_config.SwerveGeometry) -> None:
        self._geometry = geometry
        self._phi: Optional[float] = geometry.phi if geometry.is_rectangular else None

        positions = geometry.module_positions
        self._sin_phi = np.zeros(len(positions))
        self._cos_phi = np.zeros(len(positions))
        for i, position in enumerate(positions):
            # A module on the rotation center does not move when the robot rotates.
            if position.x == 0.0 and position.y == 0.0:
                continue
            phi = math.atan2(position.y, position.x)
            self._sin_phi[i] = math.sin(phi)
            self._cos_phi[i] = math.cos(phi)

        self._speeds = np.zeros(len(positions))
        self._angles = np.zeros(len(positions))
        self._output_vectors = [primitives.WheelVector() for _ in positions]
        log.info(f"Swerve drive configured with {len(positions)} modules: {geometry!r}")

    @classmethod
    def rectangular(cls, length: float, width: float) -> SwerveDrive:
        """Four modules at the corners of a length x width chassis."""
        return cls(drive_config.SwerveGeometry(length=length, width=width))

    @classmethod
    def from_positions(cls, positions: Sequence[primitives.Point2D]) -> SwerveDrive:
        """Modules at the given positions relative to the rotation center."""
        return cls(drive_config.SwerveGeometry(positions=list(positions)))

    @property
    def geometry(self) -> drive_config.SwerveGeometry:
        return self._geometry

    @property
    def module_count(self) -> int:
        return len(self._output_vectors)

    def calc_4_wheel_vectors(
        self, strafe: float, throttle: float, rotation: float, gyro_angle: float = 0.0
    ) -> List[primitives.WheelVector]:
        """Wheel vectors of a rectangular chassis ordered front left, front right,
        rear left and rear right. Rotation is clockwise and the gyro angle is in
        degrees.
        """
        if self._phi is None:
            raise ValueError("Four wheel vectors require a rectangular geometry.")

        field_fwd, field_str = _field_centric(strafe, throttle, gyro_angle)
        sin_phi = math.sin(self._phi)
        cos_phi = math.cos(self._phi)

        a = field_str - rotation * sin_phi
        b = field_str + rotation * sin_phi
        c = field_fwd - rotation * cos_phi
        d = field_fwd + rotation * cos_phi

        # (strafe, forward) components of each module.
        components = ((b, d), (b, c), (a, d), (a, c))
        for i, (wheel_str, wheel_fwd) in enumerate(components):
            self._speeds[i] = math_helpers.magnitude(wheel_str, wheel_fwd)
            self._angles[i] = _module_angle(wheel_str, wheel_fwd)

        return self._write_output_vectors()

    def calc_wheel_vectors(
        self, strafe: float, throttle: float, rotation: float, gyro_angle: float = 0.0
    ) -> List[primitives.WheelVector]:
        """Wheel vectors for any module layout, in the configured module order."""
        field_fwd, field_str = _field_centric(strafe, throttle, gyro_angle)
        _calc_module_vectors(
            field_fwd,
            field_str,
            float(rotation),
            self._sin_phi,
            self._cos_phi,
            self._speeds,
            self._angles,
        )
        return self._write_output_vectors()

    def _write_output_vectors(self) -> List[primitives.WheelVector]:
        math_helpers.normalize_by_max(self._speeds)
        for vector, speed, angle in zip(
            self._output_vectors, self._speeds, self._angles, strict=True
        ):
            # A non finite input must never reach a module as a command.
            vector.magnitude = output_limiter.limit(float(speed))
            vector.angle = 0.0 if math.isnan(angle) else float(angle)

        return self._output_vectors


def find_absolute_angle(current_angle: float, target_angle: float) -> float:
    """The shortest signed rotation (degrees) from the current to the target angle,
    in (-180, 180]. The current angle may be unwrapped, e.g. a module that has spun
    several turns.
    """
    return math_helpers.wrap_degrees(target_angle - current_angle)


def absolute_target_angle(current_angle: float, target_angle: float) -> float:
    """A continuous setpoint for the target angle that never jumps by 360 degrees
    relative to the current angle.
    """
    return current_angle + find_absolute_angle(current_angle, target_angle)


def _field_centric(
    strafe: float, throttle: float, gyro_angle: float
) -> Tuple[float, float]:
    """Rotates the stick input by the robot heading. Returns (forward, strafe). A
    non finite heading drives robot centric.
    """
    if not math.isfinite(gyro_angle):
        gyro_angle = 0.0

    mag = math_helpers.magnitude(float(strafe), float(throttle))
    theta = math.atan2(throttle, strafe) - math.radians(gyro_angle)
    return mag * math.sin(theta), mag * math.cos(theta)


def _module_angle(wheel_str: float, wheel_fwd: float) -> float:
    angle = math_helpers.degree_angle(wheel_str, wheel_fwd)
    return 180.0 if angle == -180.0 else angle


@nb.njit(
    nb.void(
        nb.float64,
        nb.float64,
        nb.float64,
        _F64_VECTOR,
        _F64_VECTOR,
        _F64_VECTOR,
        _F64_VECTOR,
    )
)
def _calc_module_vectors(
    field_fwd: float,
    field_str: float,
    rotation: float,
    sin_phi: np.ndarray,
    cos_phi: np.ndarray,
    speeds: np.ndarray,
    angles: np.ndarray,
) -> None:
    for i in range(speeds.shape[0]):
        wheel_fwd = field_fwd + rotation * sin_phi[i]
        wheel_str = field_str + rotation * cos_phi[i]

        speeds[i] = math.sqrt(wheel_fwd * wheel_fwd + wheel_str * wheel_str)
        angle = math.degrees(math.atan2(wheel_str, wheel_fwd))
        angles[i] = 180.0 if angle == -180.0 else angle
