import log
from config import drive_config
from geometry import primitives

from kinematics import output_limiter


class DifferentialDrive:
    """Cheesy style differential drive. Maps a throttle and a turn command to left and
    right side efforts.

    Turning authority scales with the throttle so the robot does not spin out of
    control at low speed. In QUICK_TURN mode the scaling is bypassed while the quick
    turn button is held, allowing a turn in place. In THRESHOLD_TURN mode the scaling
    only applies once the throttle passes the configured threshold, so the robot can
    pivot while creeping and steers like a car when driving.

    When one side saturates, the overflow is skimmed off and fed into the opposite
    side so the turn rate is preserved instead of being clipped away.
    """

    def __init__(
        self, config: drive_config.DifferentialDriveConfig = drive_config.DifferentialDriveConfig()
    ) -> None:
        self._config = config
        log.info(f"Differential drive configured with {config!r}")

    @property
    def config(self) -> drive_config.DifferentialDriveConfig:
        return self._config

    def drive(
        self, throttle: float, turn: float, quick_turn: bool = False
    ) -> primitives.TankCommand:
        """Left and right efforts in [-1, 1]. The quick turn flag is ignored in
        THRESHOLD_TURN mode.
        """
        if self._should_scale_turn(throttle, quick_turn):
            turn = turn * (self._config.turn_gain * abs(throttle))

        left_raw = throttle - turn
        right_raw = throttle + turn

        left = left_raw + output_limiter.skim(right_raw, self._config.skim_gain)
        right = right_raw + output_limiter.skim(left_raw, self._config.skim_gain)

        return primitives.TankCommand(
            output_limiter.limit(left), output_limiter.limit(right)
        )

    def tank(
        self, left: float, right: float, squared_inputs: bool = False
    ) -> primitives.TankCommand:
        """Plain tank drive, each side commanded directly."""
        if squared_inputs:
            left = output_limiter.square_input(left)
            right = output_limiter.square_input(right)

        return primitives.TankCommand(
            output_limiter.limit(left), output_limiter.limit(right)
        )

    def _should_scale_turn(self, throttle: float, quick_turn: bool) -> bool:
        if self._config.mode == drive_config.TurnMode.QUICK_TURN:
            return not quick_turn
        else:
            return abs(throttle) > self._config.turn_threshold
