from typing import Dict, List, Set, Tuple
from unittest import mock

import pytest

from controls import controller
from drivers import interfaces


class FakeGamepad(interfaces.AxisSource):
    def __init__(self) -> None:
        self.axes: Dict[int, float] = {}
        self.buttons: Set[int] = set()
        self.rumble: List[Tuple[float, float]] = []

    def get_raw_axis(self, axis: int) -> float:
        return self.axes.get(axis, 0.0)

    def get_raw_button(self, button: int) -> bool:
        return button in self.buttons

    def set_rumble(self, left: float, right: float) -> None:
        self.rumble.append((left, right))


@pytest.fixture
def gamepad() -> FakeGamepad:
    return FakeGamepad()


def test_sticks_inverted(gamepad: FakeGamepad) -> None:
    pad = controller.Controller(gamepad)
    gamepad.axes[controller.Axis.LEFT_X] = 0.5
    gamepad.axes[controller.Axis.LEFT_Y] = -1.0
    gamepad.axes[controller.Axis.RIGHT_X] = -0.3
    gamepad.axes[controller.Axis.RIGHT_Y] = 0.9

    assert pad.left_stick_x() == -0.5
    assert pad.left_stick_y() == 1.0
    assert pad.right_stick_x() == 0.3
    assert pad.right_stick_y() == -0.9


@pytest.mark.parametrize("value", [0.0, 0.1, -0.15, 0.15])
def test_deadband(gamepad: FakeGamepad, value: float) -> None:
    pad = controller.Controller(gamepad)
    gamepad.axes[controller.Axis.LEFT_Y] = value
    assert pad.left_stick_y() == 0.0


def test_custom_deadband(gamepad: FakeGamepad) -> None:
    pad = controller.Controller(gamepad, deadband=0.5)
    gamepad.axes[controller.Axis.RIGHT_X] = 0.4
    assert pad.deadband == 0.5
    assert pad.right_stick_x() == 0.0


def test_triggers_and_dpad(gamepad: FakeGamepad) -> None:
    pad = controller.Controller(gamepad)
    gamepad.axes[controller.Axis.LEFT_TRIGGER] = 0.75
    gamepad.axes[controller.Axis.RIGHT_TRIGGER] = 0.25

    assert pad.left_trigger() == 0.75
    assert pad.right_trigger() == 0.25
    assert pad.triggers() == 0.5
    assert pad.dpad() == interfaces.POV_RELEASED


def test_button_held(gamepad: FakeGamepad) -> None:
    pad = controller.Controller(gamepad)
    assert not pad.button(controller.Button.A)

    gamepad.buttons.add(controller.Button.A)
    assert pad.button(controller.Button.A)
    assert not pad.button(controller.Button.B)


def test_button_pressed_period(gamepad: FakeGamepad) -> None:
    clock = mock.MagicMock(return_value=10.0)
    pad = controller.Controller(gamepad, clock=clock)
    assert not pad.button_pressed(controller.Button.START, 0.5)

    gamepad.buttons.add(controller.Button.START)
    assert pad.button_pressed(controller.Button.START, 0.5)
    # Held, but inside the period.
    clock.return_value = 10.3
    assert not pad.button_pressed(controller.Button.START, 0.5)
    clock.return_value = 10.6
    assert pad.button_pressed(controller.Button.START, 0.5)


def test_button_periods_independent(gamepad: FakeGamepad) -> None:
    clock = mock.MagicMock(return_value=0.0)
    pad = controller.Controller(gamepad, clock=clock)
    gamepad.buttons.update({controller.Button.X, controller.Button.Y})

    assert pad.button_pressed(controller.Button.X, 1.0)
    assert pad.button_pressed(controller.Button.Y, 1.0)
    assert not pad.button_pressed(controller.Button.X, 1.0)


def test_vibration_drives_both_motors(gamepad: FakeGamepad) -> None:
    pad = controller.Controller(gamepad)
    pad.set_vibration(0.6)
    pad.set_vibration(1.5)
    pad.set_vibration(-0.2)

    assert gamepad.rumble == [(0.6, 0.6), (1.0, 1.0), (0.0, 0.0)]


def test_vibration_without_rumble_motors() -> None:
    class NoRumbleGamepad(interfaces.AxisSource):
        def get_raw_axis(self, axis: int) -> float:
            return 0.0

        def get_raw_button(self, button: int) -> bool:
            return False

    controller.Controller(NoRumbleGamepad()).set_vibration(1.0)
