"""
2D Affine Transform Algebra
===========================
Value-type affine transforms, their composition and inversion, and the
builder used to compose nested transform scopes.

Convention (named coefficients, never positional indices):

    x' = a*x + c*y + e
    y' = b*x + d*y + f

which is the homogeneous matrix

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

Classes:
    AffineTransform: Immutable six-coefficient transform.
    TransformBuilder: Fluent accumulator of elementary operations.
    TransformScope: A user transform nested inside a fixed view transform.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from mathview import config
from mathview.model.geometry_primitives import Vec2

if TYPE_CHECKING:
    import numpy.typing as npt
    from mathview.model.geometry_primitives import PointLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AffineTransform:
    """
    Immutable 2D affine transform.

    Well-formed for any real coefficients; invertible iff |a*d - b*c| is not
    below `config.SINGULAR_EPSILON`.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def __matmul__(self, other: AffineTransform) -> AffineTransform:
        # self @ other applies `other` first, like matrix products
        return multiply(self, other)

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def is_invertible(self) -> bool:
        return abs(self.determinant) >= config.SINGULAR_EPSILON

    def apply(self, point: PointLike) -> Vec2:
        return apply(self, point)

    def apply_array(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        return apply_array(self, points)

    def invert(self) -> Optional[AffineTransform]:
        return invert(self)

    def to_array(self) -> npt.NDArray[np.float64]:
        """The 3x3 homogeneous matrix."""
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    @classmethod
    def from_array(cls, matrix: npt.ArrayLike) -> AffineTransform:
        """
        Build a transform from a 3x3 homogeneous (or 2x3) matrix.

        Raises:
            ValueError: If the matrix is not 2x3 or 3x3.
        """
        m = np.asarray(matrix, dtype=np.float64)
        if m.shape not in ((2, 3), (3, 3)):
            raise ValueError(f"Expected a 2x3 or 3x3 matrix, got shape {m.shape}.")
        return cls(
            a=float(m[0, 0]), b=float(m[1, 0]),
            c=float(m[0, 1]), d=float(m[1, 1]),
            e=float(m[0, 2]), f=float(m[1, 2]),
        )

    def to_css(self) -> str:
        """CSS/SVG `matrix(...)` notation, which uses the same (a..f) order."""
        return f"matrix({self.a}, {self.b}, {self.c}, {self.d}, {self.e}, {self.f})"


# ------------------------------------------------------------------------------
# Elementary transforms
# ------------------------------------------------------------------------------

IDENTITY = AffineTransform()


def identity() -> AffineTransform:
    return IDENTITY


def translate(dx: float, dy: float) -> AffineTransform:
    return AffineTransform(1.0, 0.0, 0.0, 1.0, dx, dy)


def scale(sx: float, sy: float) -> AffineTransform:
    return AffineTransform(sx, 0.0, 0.0, sy, 0.0, 0.0)


def rotate(theta: float) -> AffineTransform:
    """Counter-clockwise rotation by `theta` radians."""
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return AffineTransform(cos_t, sin_t, -sin_t, cos_t, 0.0, 0.0)


def shear(kx: float, ky: float) -> AffineTransform:
    """x' = x + kx*y, y' = ky*x + y."""
    return AffineTransform(1.0, ky, kx, 1.0, 0.0, 0.0)


# ------------------------------------------------------------------------------
# Algebra
# ------------------------------------------------------------------------------

def multiply(m1: AffineTransform, m2: AffineTransform) -> AffineTransform:
    """
    Compose two transforms: the result applies `m2` first, then `m1`.

    apply(multiply(A, B), p) == apply(A, apply(B, p))
    """
    return AffineTransform(
        a=m1.a * m2.a + m1.c * m2.b,
        b=m1.b * m2.a + m1.d * m2.b,
        c=m1.a * m2.c + m1.c * m2.d,
        d=m1.b * m2.c + m1.d * m2.d,
        e=m1.a * m2.e + m1.c * m2.f + m1.e,
        f=m1.b * m2.e + m1.d * m2.f + m1.f,
    )


def apply(m: AffineTransform, point: PointLike) -> Vec2:
    """Transform a single point."""
    x, y = point
    return Vec2(m.a * x + m.c * y + m.e, m.b * x + m.d * y + m.f)


def apply_array(m: AffineTransform, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Transform an (N, 2) array of points in one go.

    Args:
        m: The transform.
        points: Array-like of shape (N, 2) (or a single (2,) point).

    Returns:
        An array of the same shape with the transformed coordinates.
    """
    pts = np.asarray(points, dtype=np.float64)
    linear = np.array([[m.a, m.b], [m.c, m.d]], dtype=np.float64)
    return pts @ linear + np.array([m.e, m.f], dtype=np.float64)


def invert(m: AffineTransform) -> Optional[AffineTransform]:
    """
    The unique inverse of `m`, or None when `m` is (near-)singular.

    Never raises: a degenerate transform is a normal outcome that callers
    handle (e.g. by skipping a drag-to-math conversion).
    """
    det = m.determinant
    if abs(det) < config.SINGULAR_EPSILON:
        logger.debug(f"No inverse for {m} (det={det!r}).")
        return None

    inv_det = 1.0 / det
    return AffineTransform(
        a=m.d * inv_det,
        b=-m.b * inv_det,
        c=-m.c * inv_det,
        d=m.a * inv_det,
        e=(m.c * m.f - m.d * m.e) * inv_det,
        f=(m.b * m.e - m.a * m.f) * inv_det,
    )


# ------------------------------------------------------------------------------
# Builder & scopes
# ------------------------------------------------------------------------------

class TransformBuilder:
    """
    Accumulates elementary operations; each call runs after the previous ones.

    Example:
        >>> m = TransformBuilder().translate(10, 10).scale(2, 2).build()
        >>> m.apply((0, 0))
        Vec2(x=20.0, y=20.0)
    """
    def __init__(self, start: AffineTransform = IDENTITY) -> None:
        self._matrix = start

    def matrix(self, m: AffineTransform) -> TransformBuilder:
        self._matrix = multiply(m, self._matrix)
        return self

    def translate(self, dx: float, dy: float) -> TransformBuilder:
        return self.matrix(translate(dx, dy))

    def scale(self, sx: float, sy: float) -> TransformBuilder:
        return self.matrix(scale(sx, sy))

    def rotate(self, theta: float) -> TransformBuilder:
        return self.matrix(rotate(theta))

    def shear(self, kx: float, ky: float) -> TransformBuilder:
        return self.matrix(shear(kx, ky))

    def build(self, ambient: Optional[AffineTransform] = None) -> AffineTransform:
        """
        The accumulated transform, followed by `ambient` when given.

        Local operations are applied to a point before the ambient transform.
        """
        if ambient is None:
            return self._matrix
        return multiply(ambient, self._matrix)


def local_transform(
    matrix: Optional[AffineTransform] = None,
    translate: Optional[PointLike] = None,
    scale: Optional[PointLike] = None,
    rotate: Optional[float] = None,
    shear: Optional[PointLike] = None,
    ambient: Optional[AffineTransform] = None,
) -> AffineTransform:
    """
    Compose the operations of one transform scope in their fixed order.

    Order of application to a point:
        1. matrix (custom transform)
        2. translate
        3. scale
        4. rotate
        5. shear
        6. ambient (the enclosing scope's transform)
    """
    builder = TransformBuilder()
    if matrix is not None:
        builder.matrix(matrix)
    if translate is not None:
        builder.translate(*translate)
    if scale is not None:
        builder.scale(*scale)
    if rotate is not None:
        builder.rotate(rotate)
    if shear is not None:
        builder.shear(*shear)
    return builder.build(ambient)


@dataclass(frozen=True)
class TransformScope:
    """
    Transforms in effect at one level of a nested drawing scope.

    Attributes:
        user_transform: Accumulated transforms of all enclosing scopes (math -> math).
        view_transform: Maps math space to pixel space; shared by every nested scope.
    """
    user_transform: AffineTransform = IDENTITY
    view_transform: AffineTransform = IDENTITY

    @property
    def combined(self) -> AffineTransform:
        """User space straight to pixel space."""
        return multiply(self.view_transform, self.user_transform)

    def nested(
        self,
        matrix: Optional[AffineTransform] = None,
        translate: Optional[PointLike] = None,
        scale: Optional[PointLike] = None,
        rotate: Optional[float] = None,
        shear: Optional[PointLike] = None,
    ) -> TransformScope:
        """
        A child scope. Its own operations run first, then this scope's user transform.
        """
        user = local_transform(
            matrix=matrix,
            translate=translate,
            scale=scale,
            rotate=rotate,
            shear=shear,
            ambient=self.user_transform,
        )
        return TransformScope(user_transform=user, view_transform=self.view_transform)
