"""The capabilities the drive kinematics depend on. Hardware specific classes
implement these, the kinematics never see a concrete hardware type.
"""
import abc
from typing import Sequence

import geometry

# No POV hat pressed, the same value gamepads report.
POV_RELEASED = -1


class TankDriveSink(abc.ABC):
    """Accepts bounded left and right effort for a differential drivetrain."""

    @abc.abstractmethod
    def tank_drive(self, left: float, right: float) -> None:
        """Both efforts are in [-1, 1]."""
        ...


class SwerveDriveSink(abc.ABC):
    """Accepts one (speed, angle) vector per swerve module."""

    @abc.abstractmethod
    def set_module_vectors(self, vectors: Sequence[geometry.WheelVector]) -> None:
        """Vectors are in the configured module order. They are reused by the
        kinematics so copy them if they must outlive the call.
        """
        ...


class AxisSource(abc.ABC):
    """Produces raw axis readings and button states of an operator input device."""

    @abc.abstractmethod
    def get_raw_axis(self, axis: int) -> float:
        ...

    @abc.abstractmethod
    def get_raw_button(self, button: int) -> bool:
        ...

    def get_pov(self) -> int:
        """The POV hat angle in degrees."""
        return POV_RELEASED

    def set_rumble(self, left: float, right: float) -> None:
        """Drives the rumble motors, each in [0, 1]. Devices without them ignore it."""
