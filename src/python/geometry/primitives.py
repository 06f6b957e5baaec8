from __future__ import annotations

import dataclasses
from typing import Tuple


@dataclasses.dataclass(frozen=True)
class Point2D:
    """An (x, y) coordinate of a swerve module relative to the robot's rotation
    center. x points forward and y points left.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        # Ensures that values are floats.
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @property
    def data(self) -> Tuple[float, float]:
        return self.x, self.y

    def __str__(self) -> str:
        return f"[ {self.x}, {self.y} ]"


@dataclasses.dataclass
class WheelVector:
    """The desired speed and heading (degrees) of a single swerve module. These are
    reused between control cycles, copy one if its value must outlive the cycle.
    """

    magnitude: float = 0.0
    angle: float = 0.0

    def copy(self) -> WheelVector:
        return WheelVector(self.magnitude, self.angle)

    def as_tuple(self) -> Tuple[float, float]:
        return self.magnitude, self.angle

    def __str__(self) -> str:
        return f"[ {self.magnitude}, {self.angle} ]"


@dataclasses.dataclass(frozen=True)
class TankCommand:
    """Left and right side efforts for a differential drivetrain, each in [-1, 1]."""

    left: float
    right: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.left, self.right

    def __str__(self) -> str:
        return f"[ {self.left}, {self.right} ]"
