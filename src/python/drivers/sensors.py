from typing import Callable

# Voltage at which the Sharp GP2Y0A21YK reports an object roughly 80 cm away.
_DEFAULT_MIN_VOLTAGE = 0.5


class PhotoEye:
    """A binary proximity sensor built on an analog distance sensor. The sensor is
    covered once its voltage reaches the threshold.
    """

    def __init__(
        self, read_voltage: Callable[[], float], min_voltage: float = _DEFAULT_MIN_VOLTAGE
    ) -> None:
        self._read_voltage = read_voltage
        self._min_voltage = min_voltage

    @property
    def covered(self) -> bool:
        return self._read_voltage() >= self._min_voltage


class PIDOutputCapture:
    """Stands in for a motor as the output of a PID loop so the loop's output can be
    read elsewhere without driving hardware. Useful when several loops combine into
    one drive command.
    """

    def __init__(self) -> None:
        self._output = 0.0

    def pid_write(self, output: float) -> None:
        self._output = output

    @property
    def output(self) -> float:
        return self._output
