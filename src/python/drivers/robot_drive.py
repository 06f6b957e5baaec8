import math
from typing import List, Optional

import geometry
import log
from config import drive_config
from kinematics import (
    curvature_drive,
    differential_drive,
    output_limiter,
    polar_drive,
    swerve_drive,
)

from drivers import interfaces


class RobotDrive:
    """Drives a differential drivetrain (kit of parts base, tank drive, west coast
    drive) through any of the differential kinematics. For four and six wheel
    drivetrains the sink only commands the master motor of each side.

    Every method returns the command handed to the sink.
    """

    def __init__(
        self,
        sink: interfaces.TankDriveSink,
        config: drive_config.DriveConfig = drive_config.DriveConfig(),
    ) -> None:
        self._sink = sink
        self._differential = differential_drive.DifferentialDrive(config.differential)
        self._curvature = curvature_drive.CurvatureDrive(config.curvature)
        self._polar = polar_drive.PolarDrive(config.polar)

    def tank_drive(
        self, left: float, right: float, squared_inputs: bool = False
    ) -> geometry.TankCommand:
        _warn_if_not_finite("tank", left=left, right=right)
        command = self._differential.tank(left, right, squared_inputs)
        return self._apply(command)

    def cheesy_drive(
        self,
        throttle: float,
        turn: float,
        quick_turn: bool = False,
        squared_inputs: bool = False,
    ) -> geometry.TankCommand:
        """Throttle and turn steering, squaring both inputs lowers sensitivity."""
        _warn_if_not_finite("cheesy", throttle=throttle, turn=turn)
        if squared_inputs:
            throttle = output_limiter.square_input(throttle)
            turn = output_limiter.square_input(turn)

        command = self._differential.drive(throttle, turn, quick_turn)
        return self._apply(command)

    def culver_drive(
        self, throttle: float, x: float, y: float, quick_turn: bool
    ) -> geometry.TankCommand:
        """Throttle plus a steering stick, quick turn variant."""
        _warn_if_not_finite("culver", throttle=throttle, x=x, y=y)
        command = self._polar.drive(throttle, x, y, quick_turn)
        return self._apply(command)

    def culver_drive_alt(self, throttle: float, x: float, y: float) -> geometry.TankCommand:
        """Throttle plus a steering stick, alternate raw variant."""
        _warn_if_not_finite("culver alt", throttle=throttle, x=x, y=y)
        command = self._polar.drive_alt(throttle, x, y)
        return self._apply(command)

    def curvature_drive(
        self, magnitude: float, curvature: float, sensitivity: Optional[float] = None
    ) -> geometry.TankCommand:
        """Sensitivity defaults to the configured one."""
        _warn_if_not_finite("curvature", magnitude=magnitude, curvature=curvature)
        command = self._curvature.drive(magnitude, curvature, sensitivity)
        return self._apply(command)

    def stop(self) -> geometry.TankCommand:
        return self._apply(geometry.TankCommand(0.0, 0.0))

    def _apply(self, command: geometry.TankCommand) -> geometry.TankCommand:
        self._sink.tank_drive(command.left, command.right)
        return command


class SwerveRobotDrive:
    """Drives a swerve drivetrain. A rectangular chassis uses the four wheel
    kinematics, any other layout the N wheel kinematics.
    """

    def __init__(
        self,
        sink: interfaces.SwerveDriveSink,
        swerve_geometry: drive_config.SwerveGeometry,
    ) -> None:
        self._sink = sink
        self._swerve = swerve_drive.SwerveDrive(swerve_geometry)
        self._is_rectangular = swerve_geometry.is_rectangular

    def drive(
        self, strafe: float, throttle: float, rotation: float, gyro_angle: float = 0.0
    ) -> List[geometry.WheelVector]:
        """Field centric drive, a gyro angle of 0 drives robot centric."""
        _warn_if_not_finite(
            "swerve", strafe=strafe, throttle=throttle, rotation=rotation, gyro=gyro_angle
        )
        if self._is_rectangular:
            vectors = self._swerve.calc_4_wheel_vectors(strafe, throttle, rotation, gyro_angle)
        else:
            vectors = self._swerve.calc_wheel_vectors(strafe, throttle, rotation, gyro_angle)

        self._sink.set_module_vectors(vectors)
        return vectors


def _warn_if_not_finite(mode: str, **inputs: float) -> None:
    """Logs any non finite input, the command itself stays bounded."""
    bad_inputs = {name: value for name, value in inputs.items() if not math.isfinite(value)}
    if bad_inputs:
        log.warning(f"Non finite {mode} drive input {bad_inputs}")
