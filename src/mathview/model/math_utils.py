from __future__ import annotations

import math
from typing import Sequence


def round_to(value: float, precision: int = 0) -> float:
    """
    Round `value` to `precision` decimal places, halves away from zero.

    Python's built-in `round` uses banker's rounding, which would turn
    round_to(2.5) into 2.0; axis labels and view scales expect 3.0.
    """
    if not math.isfinite(value):
        return value
    multiplier = 10 ** precision
    scaled = abs(value) * multiplier
    rounded = math.floor(scaled + 0.5) / multiplier
    return math.copysign(rounded, value) if value != 0 else 0.0


def round_to_nearest_power_of_10(value: float) -> float:
    """
    Round a positive value down to a power of ten (350 -> 100, 0.5 -> 0.1).

    Non-positive values return 1.
    """
    if value <= 0:
        return 1.0
    return 10.0 ** math.floor(math.log10(value))


def pick_closest_to_value(value: float, options: Sequence[float]) -> tuple[float, int]:
    """
    Find the option closest to `value`.

    Returns:
        A (closest value, index) pair. The first option wins on ties.

    Raises:
        ValueError: If `options` is empty.
    """
    if not options:
        raise ValueError("'options' must contain at least one value.")

    closest_index = 0
    closest_distance = abs(options[0] - value)
    for i in range(1, len(options)):
        distance = abs(options[i] - value)
        if distance < closest_distance:
            closest_distance = distance
            closest_index = i

    return options[closest_index], closest_index


def clamp(number: float, lower: float, upper: float) -> float:
    return max(lower, min(number, upper))


def float_range(start: float, stop: float, step: float = 1.0) -> list[float]:
    """
    Numbers from `start` to `stop` (inclusive) spaced by `step`.

    The last element is `stop` when it lies on the grid (within step/1e6),
    otherwise the first grid value past the last one below `stop - step/2`.
    Values are computed as start + k*step so no error accumulates.
    """
    result: list[float] = []
    k = 0
    while start + k * step < stop - step / 2:
        result.append(start + k * step)
        k += 1

    if not result:
        result.append(start)
        if stop != start:
            result.append(stop)
        return result

    computed_stop = result[-1] + step
    if abs(stop - computed_stop) < step / 1e6:
        result.append(stop)
    else:
        result.append(computed_stop)

    return result
