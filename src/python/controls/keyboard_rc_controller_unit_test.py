import pytest
from pynput import keyboard

from controls import controller, keyboard_rc_controller

_WASD = keyboard_rc_controller.ArrowKeys(
    up=keyboard.KeyCode.from_char("w"),
    down=keyboard.KeyCode.from_char("s"),
    left=keyboard.KeyCode.from_char("a"),
    right=keyboard.KeyCode.from_char("d"),
)


@pytest.fixture
def rc_controller() -> keyboard_rc_controller.KeyboardRCController:
    return keyboard_rc_controller.KeyboardRCController(keys=_WASD)


def test_no_keys(rc_controller: keyboard_rc_controller.KeyboardRCController) -> None:
    assert rc_controller.throttle() == 0.0
    assert rc_controller.turn() == 0.0


def test_steering_keys(
    rc_controller: keyboard_rc_controller.KeyboardRCController,
) -> None:
    rc_controller.update(_WASD.up, pressed=True)
    rc_controller.update(_WASD.left, pressed=True)
    assert rc_controller.throttle() == 1.0
    assert rc_controller.turn() == 1.0

    rc_controller.update(_WASD.up, pressed=False)
    rc_controller.update(_WASD.down, pressed=True)
    rc_controller.update(_WASD.right, pressed=True)
    assert rc_controller.throttle() == -1.0
    # Left and right cancel out.
    assert rc_controller.turn() == 0.0


def test_each_key_read_separately(
    rc_controller: keyboard_rc_controller.KeyboardRCController,
) -> None:
    rc_controller.update(_WASD.left, pressed=True)
    assert rc_controller.throttle() == 0.0
    assert rc_controller.turn() == 1.0


def test_unmapped_key_ignored(
    rc_controller: keyboard_rc_controller.KeyboardRCController,
) -> None:
    rc_controller.update(keyboard.KeyCode.from_char("q"), pressed=True)
    assert rc_controller.throttle() == 0.0
    assert rc_controller.turn() == 0.0


def test_custom_defaults() -> None:
    rc_controller = keyboard_rc_controller.KeyboardRCController(
        throttle_default=0.5, turn_default=0.25, keys=_WASD
    )
    rc_controller.update(_WASD.up, pressed=True)
    rc_controller.update(_WASD.right, pressed=True)
    assert rc_controller.throttle() == 0.5
    assert rc_controller.turn() == -0.25


def test_default_keys_are_arrows() -> None:
    keys = keyboard_rc_controller.ArrowKeys()
    assert keys.up == keyboard.Key.up
    assert keys.down == keyboard.Key.down
    assert keys.left == keyboard.Key.left
    assert keys.right == keyboard.Key.right


def test_reads_as_gamepad(
    rc_controller: keyboard_rc_controller.KeyboardRCController,
) -> None:
    pad = controller.Controller(rc_controller)
    rc_controller.update(_WASD.up, pressed=True)
    rc_controller.update(_WASD.left, pressed=True)

    assert rc_controller.get_raw_axis(controller.Axis.LEFT_Y) == -1.0
    assert pad.left_stick_y() == 1.0
    assert pad.right_stick_x() == 1.0
    assert pad.left_stick_x() == 0.0
    assert not pad.button(controller.Button.A)
