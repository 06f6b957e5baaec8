import math

import pytest

from kinematics import output_limiter


@pytest.mark.parametrize("value", [-1.0, -0.5, -0.0, 0.0, 0.3, 1.0])
def test_limit_passes_in_range(value: float) -> None:
    assert output_limiter.limit(value) == value


@pytest.mark.parametrize(
    "value, expected",
    [(1.5, 1.0), (-1.5, -1.0), (1e9, 1.0), (-math.inf, -1.0), (math.inf, 1.0)],
)
def test_limit_clamps(value: float, expected: float) -> None:
    assert output_limiter.limit(value) == expected


def test_limit_nan() -> None:
    assert output_limiter.limit(math.nan) == 0.0


@pytest.mark.parametrize("value", [-1.0, -0.99, 0.0, 0.5, 1.0])
def test_skim_zero_in_range(value: float) -> None:
    assert output_limiter.skim(value) == 0.0


def test_skim_overflow() -> None:
    assert output_limiter.skim(1.5) == -0.25
    assert output_limiter.skim(-1.5) == 0.25
    assert output_limiter.skim(2.0, gain=1.0) == -1.0
    assert output_limiter.skim(-3.0, gain=0.0) == 0.0


def test_square_input() -> None:
    assert output_limiter.square_input(0.5) == 0.25
    assert output_limiter.square_input(-0.5) == -0.25
    assert output_limiter.square_input(0.0) == 0.0
