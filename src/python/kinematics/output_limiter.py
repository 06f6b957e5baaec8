import math

# Fraction of a side's overflow fed back into the opposite side.
DEFAULT_SKIM_GAIN = 0.5


def limit(value: float) -> float:
    """Clamps the value to [-1, 1]. NaN becomes 0 so a bad read can never reach a
    motor as a non-finite command.
    """
    if math.isnan(value):
        return 0.0
    elif value > 1.0:
        return 1.0
    elif value < -1.0:
        return -1.0
    else:
        return value


def skim(value: float, gain: float = DEFAULT_SKIM_GAIN) -> float:
    """The correction to apply to the opposite drive side when this side's raw output
    saturates. Zero when the value is inside [-1, 1].
    """
    if value > 1.0:
        return -((value - 1.0) * gain)
    elif value < -1.0:
        return -((value + 1.0) * gain)
    else:
        return 0.0


def square_input(value: float) -> float:
    """Squares the value while keeping its sign, lowers sensitivity near zero."""
    return math.copysign(value * value, value)
