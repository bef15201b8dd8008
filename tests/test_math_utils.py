from __future__ import annotations

import math

import pytest

from mathview.model.math_utils import (
    clamp,
    float_range,
    pick_closest_to_value,
    round_to,
    round_to_nearest_power_of_10,
)


@pytest.mark.parametrize("value, precision, expected", [
    (3.14159, 2, 3.14),
    (3.14159, 3, 3.142),
    (3.14159, 0, 3.0),
    (-3.14159, 2, -3.14),
    (3.6, 0, 4.0),
    (3.4, 0, 3.0),
    (2.5, 0, 3.0),
    (-2.5, 0, -3.0),
])
def test_round_to(value, precision, expected):
    assert round_to(value, precision) == expected


def test_round_to_passes_non_finite_through():
    assert round_to(math.inf, 2) == math.inf
    assert math.isnan(round_to(math.nan, 2))


@pytest.mark.parametrize("value, expected", [
    (350, 100),
    (3500, 1000),
    (35, 10),
    (5, 1),
    (0.5, 0.1),
    (100, 100),
    (1001, 1000),
    (0, 1),
    (-5, 1),
])
def test_round_to_nearest_power_of_10(value, expected):
    assert round_to_nearest_power_of_10(value) == pytest.approx(expected)


def test_pick_closest_to_value():
    assert pick_closest_to_value(5.0, [1.0, 3.0, 7.0, 10.0]) == (3.0, 1)
    assert pick_closest_to_value(7.0, [1.0, 3.0, 7.0, 10.0]) == (7.0, 2)
    assert pick_closest_to_value(100.0, [5.0]) == (5.0, 0)
    assert pick_closest_to_value(-2.0, [-5.0, -1.0, 3.0]) == (-1.0, 1)
    # equidistant: first one wins
    assert pick_closest_to_value(5.0, [3.0, 7.0]) == (3.0, 0)


def test_pick_closest_rejects_empty_options():
    with pytest.raises(ValueError):
        pick_closest_to_value(1.0, [])


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-5, 0, 10) == 0
    assert clamp(15, 0, 10) == 10
    assert clamp(10, 0, 10) == 10
    assert clamp(-5, -10, -1) == -5
    assert clamp(0, -10, -1) == -1


def test_float_range():
    assert float_range(0, 5) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    assert float_range(0, 10, 2) == [0.0, 2.0, 4.0, 6.0, 8.0, 10.0]
    assert float_range(-3, 0) == [-3.0, -2.0, -1.0, 0.0]
    assert float_range(5, 5) == [5]

    quarters = float_range(0, 1, 0.25)
    assert len(quarters) == 5
    assert quarters[1] == pytest.approx(0.25)
    assert quarters[-1] == 1


def test_float_range_off_grid_stop_rounds_to_the_grid():
    # 4.3 is not on the unit grid: the last value is the next grid point
    assert float_range(0, 4.3) == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert float_range(0, 4.7) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
