"""
Geometric Primitives for the math coordinate space.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Union
import math


class Interval(NamedTuple):
    """
    A (min, max) pair of reals.

    Used both as a sampling domain and as a pane bound. Ordering is not
    enforced; callers are responsible for passing min <= max.
    """
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class Vec2:
    """
    A vector (or point) in the 2D math plane.
    """
    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if scalar == 0.0: raise ZeroDivisionError
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, value: PointLike) -> Vec2:
        """Coerce a Vec2 or an (x, y) pair into a Vec2."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(float(x), float(y))

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation: t=0 gives self, t=1 gives other."""
        return Vec2(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def squared_distance_to(self, other: Vec2) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


PointLike = Union[Vec2, tuple[float, float]]
