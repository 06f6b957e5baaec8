import collections
import enum
import math
import time
from typing import Callable, DefaultDict

from drivers import interfaces
from geometry import math_helpers

_DEFAULT_DEADBAND = 0.15


class Axis(enum.IntEnum):
    """Raw axis numbers of an Xbox 360 / Logitech F310 style controller."""

    LEFT_X = 0
    LEFT_Y = 1
    LEFT_TRIGGER = 2
    RIGHT_TRIGGER = 3
    RIGHT_X = 4
    RIGHT_Y = 5


class Button(enum.IntEnum):
    A = 1
    B = 2
    X = 3
    Y = 4
    LB = 5
    RB = 6
    SELECT = 7
    START = 8
    LS = 9
    RS = 10


class Controller:
    """Wraps an operator input device as a gamepad with a stick deadband.

    Sticks are inverted from the raw axes so that pushing a stick left or up reads
    positive, the convention the drive kinematics expect.
    """

    def __init__(
        self,
        source: interfaces.AxisSource,
        deadband: float = _DEFAULT_DEADBAND,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._source = source
        self._deadband = deadband
        self._clock = clock
        self._last_pressed_ts: DefaultDict[Button, float] = collections.defaultdict(
            lambda: -math.inf
        )

    @property
    def deadband(self) -> float:
        return self._deadband

    def left_stick_x(self) -> float:
        return self._stick(Axis.LEFT_X)

    def left_stick_y(self) -> float:
        return self._stick(Axis.LEFT_Y)

    def right_stick_x(self) -> float:
        return self._stick(Axis.RIGHT_X)

    def right_stick_y(self) -> float:
        return self._stick(Axis.RIGHT_Y)

    def left_trigger(self) -> float:
        return self._source.get_raw_axis(Axis.LEFT_TRIGGER)

    def right_trigger(self) -> float:
        return self._source.get_raw_axis(Axis.RIGHT_TRIGGER)

    def triggers(self) -> float:
        """Left trigger positive, right trigger negative."""
        return self.left_trigger() - self.right_trigger()

    def dpad(self) -> int:
        return self._source.get_pov()

    def button(self, button: Button) -> bool:
        """Whether the button is currently held."""
        return self._source.get_raw_button(button)

    def set_vibration(self, value: float) -> None:
        """Rumbles both motors at the same strength, clipped to [0, 1]."""
        value = math_helpers.clip(value, 0.0, 1.0)
        self._source.set_rumble(value, value)

    def button_pressed(self, button: Button, period: float) -> bool:
        """True while the button is held, at most once every period seconds."""
        if not self._source.get_raw_button(button):
            return False

        now = self._clock()
        if now - self._last_pressed_ts[button] > period:
            self._last_pressed_ts[button] = now
            return True

        return False

    def _stick(self, axis: Axis) -> float:
        value = self._source.get_raw_axis(axis)
        if abs(value) > self._deadband:
            return -value
        else:
            return 0.0
