import collections
import dataclasses
from typing import DefaultDict, Union

from drivers import interfaces
from pynput import keyboard

from controls import controller

_THROTTLE_DEFAULT = 1.0
_TURN_DEFAULT = 1.0

KeyType = Union[keyboard.Key, keyboard.KeyCode]


@dataclasses.dataclass(frozen=True)
class ArrowKeys:
    """The keys that steer the robot, the arrow keys unless remapped e.g. to WASD."""

    up: KeyType = keyboard.Key.up
    down: KeyType = keyboard.Key.down
    left: KeyType = keyboard.Key.left
    right: KeyType = keyboard.Key.right


class KeyboardRCController(interfaces.AxisSource):
    """Reads the steering keys as a gamepad. Up and down drive the left stick, left and
    right drive the right stick, both with the raw axis signs a gamepad reports.
    """

    def __init__(
        self,
        throttle_default: float = _THROTTLE_DEFAULT,
        turn_default: float = _TURN_DEFAULT,
        keys: ArrowKeys = ArrowKeys(),
    ) -> None:
        self._keys = keys
        self._throttle_default = throttle_default
        self._turn_default = turn_default
        self._pressed_keys: DefaultDict[KeyType, bool] = collections.defaultdict(
            lambda: False
        )

    def update(self, key: KeyType, *, pressed: bool) -> None:
        self._pressed_keys[key] = pressed

    def throttle(self) -> float:
        """Forward is positive."""
        value = 0.0
        if self._up_key_pressed:
            value += self._throttle_default
        if self._down_key_pressed:
            value -= self._throttle_default

        return value

    def turn(self) -> float:
        """Left turn is positive, matching the differential drive turn command."""
        value = 0.0
        if self._right_key_pressed:
            value -= self._turn_default
        if self._left_key_pressed:
            value += self._turn_default

        return value

    def get_raw_axis(self, axis: int) -> float:
        # Gamepads report up and left as negative.
        if axis == controller.Axis.LEFT_Y:
            return -self.throttle()
        elif axis == controller.Axis.RIGHT_X:
            return -self.turn()
        else:
            return 0.0

    def get_raw_button(self, button: int) -> bool:
        return False

    @property
    def _up_key_pressed(self) -> bool:
        return self._pressed_keys[self._keys.up]

    @property
    def _down_key_pressed(self) -> bool:
        return self._pressed_keys[self._keys.down]

    @property
    def _left_key_pressed(self) -> bool:
        return self._pressed_keys[self._keys.left]

    @property
    def _right_key_pressed(self) -> bool:
        return self._pressed_keys[self._keys.right]
