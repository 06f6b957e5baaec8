import math

import numba as nb  # type: ignore[import-untyped]
import numpy as np

_F64_VECTOR = nb.types.Array(nb.types.float64, 1, "C")


def linear_ramp(val: float, width: float = 1) -> float:
    """A ramped value by the width between 0 and 1."""
    return clip(val / width, 0.0, 1.0)


def clip(val: float, lower: float, upper: float) -> float:
    """Clips the value between the lower and upper."""
    if val < lower:
        return lower
    elif val > upper:
        return upper
    else:
        return val


def wrap_degrees(angle: float) -> float:
    """Wraps the angle to the range (-180, 180]."""
    wrapped = ((angle + 180.0) % 360.0) - 180.0
    # The modulo lands on the open end of the range, fold it to the closed end.
    if wrapped == -180.0:
        return 180.0
    return wrapped


@nb.njit(nb.float64(nb.float64, nb.float64))
def magnitude(x: float, y: float) -> float:
    """Cartesian distance of (x, y) from the origin."""
    return math.sqrt(x * x + y * y)


@nb.njit(nb.float64(nb.float64, nb.float64))
def degree_angle(y: float, x: float) -> float:
    """Same argument order as atan2, in degrees. atan2(0, 0) is 0 so a zero length
    vector always has a defined angle.
    """
    return math.degrees(math.atan2(y, x))


@nb.njit(nb.float64(_F64_VECTOR))
def normalize_by_max(values: np.ndarray) -> float:
    """Divides every element in place by the largest absolute element, never by less
    than 1 so values already in [-1, 1] are untouched. Returns the divisor.
    """
    divisor = 1.0
    for i in range(values.shape[0]):
        if abs(values[i]) > divisor:
            divisor = abs(values[i])

    for i in range(values.shape[0]):
        values[i] /= divisor

    return divisor
