"""
Viewport Resolution
===================
Turns the requested view box, the surface size and the camera into the
visible math bounds, and converts between math and pixel space.

Why is this file needed?
------------------------
1. Bounds: The renderer, the sampler (domain and error threshold) and the
   pane manager all start from the same visible bounds.
2. Gestures: Screen deltas and focal points must be converted into math
   units before they are handed to the CameraController.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import math
from typing import Optional, TYPE_CHECKING

from mathview import config
from mathview.controller.camera import CameraController
from mathview.model.geometry_primitives import Interval, Vec2
from mathview.model.grid import AxisGrid, auto_grid, grid_lines
from mathview.model.math_utils import clamp, round_to
from mathview.model.panes import PaneSet, compute_panes
from mathview.model.sampling import pixel_error_threshold
from mathview.model.transform import IDENTITY, AffineTransform, scale

if TYPE_CHECKING:
    from mathview.model.geometry_primitives import PointLike

logger = logging.getLogger(__name__)


class PreserveAspectRatio(StrEnum):
    """How the view box is fitted when its aspect differs from the surface."""
    CONTAIN = "contain"  # grow one axis so the whole view box stays visible
    NONE = "none"  # stretch the view box to the surface


@dataclass(frozen=True)
class ViewBox:
    """The math-space area the view should show, plus padding on every side."""
    x: Interval = Interval(-3.0, 3.0)
    y: Interval = Interval(-3.0, 3.0)
    padding: float = config.DEFAULT_VIEW_PADDING


@dataclass(frozen=True)
class ZoomConfig:
    """
    Zoom limits.

    Raises:
        ValueError: Unless 0 < min <= 1 <= max.
    """
    min: float = config.DEFAULT_MIN_ZOOM
    max: float = config.DEFAULT_MAX_ZOOM

    def __post_init__(self) -> None:
        if not 0 < self.min <= 1:
            raise ValueError(f"Zoom 'min' must be in range (0, 1], got {self.min}.")
        if self.max < 1:
            raise ValueError(f"Zoom 'max' must be in range [1, inf), got {self.max}.")

    def create_camera(self) -> CameraController:
        return CameraController(min_zoom=self.min, max_zoom=self.max)


def wheel_zoom_factor(scroll_dy: float) -> float:
    """
    Zoom factor for one scroll-wheel event.

    A sigmoid flattens extreme scroll deltas into the open range (0, 2).
    A positive dy gives a factor above 1 (zoom in), no scroll gives 1.
    """
    scaled = clamp(-scroll_dy / config.WHEEL_ZOOM_DIVISOR, -10.0, 10.0)
    return 2 / (1 + math.exp(scaled))


@dataclass(frozen=True)
class Viewport:
    """
    Visible math bounds of a surface of `width` x `height` pixels.

    Attributes:
        base_x_span / base_y_span: Spans after aspect-ratio fitting but
            before the camera; used for 1:1 drag panning at any zoom.
    """
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    width: float
    height: float
    base_x_span: float
    base_y_span: float

    @classmethod
    def resolve(
        cls,
        view_box: ViewBox,
        width: float,
        height: float,
        camera_matrix: AffineTransform = IDENTITY,
        preserve_aspect_ratio: PreserveAspectRatio = PreserveAspectRatio.CONTAIN,
    ) -> Viewport:
        """
        Compute the visible bounds.

        Args:
            view_box: Requested math area.
            width: Surface width in pixels.
            height: Surface height in pixels.
            camera_matrix: CameraController.matrix (identity for a static view).
            preserve_aspect_ratio: Aspect-ratio policy.
        """
        pad = view_box.padding
        x_min = view_box.x.min - pad
        x_max = view_box.x.max + pad
        y_min = view_box.y.min - pad
        y_max = view_box.y.max + pad

        if preserve_aspect_ratio == PreserveAspectRatio.CONTAIN:
            aspect = width / height
            box_aspect = (x_max - x_min) / (y_max - y_min)

            if box_aspect > aspect:
                # view box is wider than the surface: expand y
                y_center = (y_max + y_min) / 2
                half_span = (x_max - x_min) / aspect / 2
                y_min, y_max = y_center - half_span, y_center + half_span
            else:
                x_center = (x_max + x_min) / 2
                half_span = (y_max - y_min) * aspect / 2
                x_min, x_max = x_center - half_span, x_center + half_span

        base_x_span = x_max - x_min
        base_y_span = y_max - y_min

        lower = camera_matrix.apply((x_min, y_min))
        upper = camera_matrix.apply((x_max, y_max))

        viewport = cls(
            x_min=lower.x,
            x_max=upper.x,
            y_min=lower.y,
            y_max=upper.y,
            width=width,
            height=height,
            base_x_span=base_x_span,
            base_y_span=base_y_span,
        )
        logger.debug(f"Resolved viewport x=[{viewport.x_min}, {viewport.x_max}], y=[{viewport.y_min}, {viewport.y_max}].")
        return viewport

    @classmethod
    def from_camera(
        cls,
        view_box: ViewBox,
        width: float,
        height: float,
        camera: CameraController,
        preserve_aspect_ratio: PreserveAspectRatio = PreserveAspectRatio.CONTAIN,
    ) -> Viewport:
        return cls.resolve(view_box, width, height, camera.matrix, preserve_aspect_ratio)

    @property
    def x_span(self) -> float:
        return self.x_bounds.span

    @property
    def y_span(self) -> float:
        return self.y_bounds.span

    @property
    def x_bounds(self) -> Interval:
        return Interval(self.x_min, self.x_max)

    @property
    def y_bounds(self) -> Interval:
        return Interval(self.y_min, self.y_max)

    @property
    def view_transform(self) -> AffineTransform:
        """
        Math space to pixel space scaling (y flipped: screen y grows downward).

        The factors are rounded to `VIEW_TRANSFORM_PRECISION` decimals so
        tiny float noise does not produce a "changed" transform.
        """
        precision = config.VIEW_TRANSFORM_PRECISION
        return scale(
            round_to(self.width / self.x_span, precision),
            round_to(-self.height / self.y_span, precision),
        )

    @property
    def error_threshold(self) -> float:
        """Sampler threshold worth about one device pixel at this zoom."""
        return pixel_error_threshold(self.width, self.height, self.x_span, self.y_span)

    def screen_to_math(self, point: PointLike) -> Vec2:
        sx, sy = point
        return Vec2(
            sx / self.width * self.x_span + self.x_min,
            (1 - sy / self.height) * self.y_span + self.y_min,
        )

    def math_to_screen(self, point: PointLike) -> Vec2:
        mx, my = point
        return Vec2(
            (mx - self.x_min) / self.x_span * self.width,
            (1 - (my - self.y_min) / self.y_span) * self.height,
        )

    def drag_to_pan(self, delta: PointLike) -> Vec2:
        """
        Math-space camera pan for a screen drag of `delta` pixels.

        Dragging right moves the content right, i.e. the camera left.
        """
        dx, dy = delta
        return Vec2(
            -dx / self.width * self.base_x_span,
            dy / self.height * self.base_y_span,
        )

    def compute_panes(self) -> PaneSet:
        return compute_panes(self.x_min, self.x_max, self.y_min, self.y_max)

    def auto_grid(self) -> AxisGrid:
        """Grid spacing for the visible x span, shared by both axes."""
        return auto_grid(self.x_span)

    def grid_lines(self, grid: Optional[AxisGrid] = None) -> tuple[list[float], list[float]]:
        """Major grid line positions (x, y) covering the view; `auto_grid` when not given."""
        if grid is None:
            grid = self.auto_grid()
        return (
            grid_lines(self.x_min, self.x_max, grid.lines),
            grid_lines(self.y_min, self.y_max, grid.lines),
        )
