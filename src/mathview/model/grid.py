"""
Automatic grid spacing for cartesian coordinates.

Picks a "nice" major grid step (1, 2 or 5 times a power of ten) for the
visible span and lists the grid line positions that cover the viewport.
"""
from __future__ import annotations

import math
from typing import NamedTuple

from mathview import config
from mathview.model.math_utils import float_range, pick_closest_to_value, round_to_nearest_power_of_10

# (multiple of the power of ten, minor subdivisions between major lines)
GRID_MULTIPLES: tuple[tuple[float, int], ...] = ((1.0, 5), (2.0, 4), (5.0, 5))


class AxisGrid(NamedTuple):
    """Major grid step and the number of minor subdivisions per step."""
    lines: float
    subdivisions: int


def auto_grid(span: float, lines_per_view: float = config.GRID_LINES_PER_VIEW) -> AxisGrid:
    """
    Grid for an axis showing `span` math units.

    The step is the nice value closest to span / lines_per_view; ties go to
    the smaller step.
    """
    target = span / lines_per_view
    power = round_to_nearest_power_of_10(target)
    options = [power * multiple for multiple, _ in GRID_MULTIPLES]
    step, index = pick_closest_to_value(target, options)
    return AxisGrid(lines=step, subdivisions=GRID_MULTIPLES[index][1])


def grid_lines(lo: float, hi: float, step: float) -> list[float]:
    """
    Positions of the grid lines every `step` units covering [lo, hi].

    The first and last lines are snapped outward onto the grid.

    Raises:
        ValueError: If `step` is not positive and finite.
    """
    if not (math.isfinite(step) and step > 0):
        raise ValueError(f"Grid 'step' must be positive and finite, got {step}.")

    first = math.floor(lo / step) * step
    last = math.ceil(hi / step) * step
    return float_range(first, last, step)
