"""
Camera Controller
=================
Pan/zoom state driven by gestures.

Why is this file needed?
------------------------
1. Drift-free gestures: Every `move` is computed from the snapshot taken by
   `set_base` at gesture start, so callers pass the TOTAL delta since the
   gesture began, never per-frame deltas.
2. Focal-point zoom: Zooming keeps the point under the fingers/cursor fixed,
   including when the zoom saturates at a limit.
3. Output: The current state is exposed as an AffineTransform for the
   renderer to compose with its own transforms.

Classes:
    CameraState: Immutable (offset, scale) pair.
    Zoom: A zoom request (focal point + multiplicative factor).
    CameraController: The mutable holder, with change listeners.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import NamedTuple, Optional, TYPE_CHECKING

from mathview.controller.notifier import ChangeNotifier
from mathview.model.geometry_primitives import Vec2
from mathview.model.math_utils import clamp
from mathview.model.transform import AffineTransform, TransformBuilder

if TYPE_CHECKING:
    from mathview.model.geometry_primitives import PointLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CameraState:
    """
    Pan offset and zoom scale of the view.

    A scale above 1 means "zoomed in": the visible coordinate span shrinks.
    """
    offset: Vec2 = field(default_factory=Vec2.zero)
    scale: float = 1.0

    @property
    def matrix(self) -> AffineTransform:
        """Translate by the offset, then scale by the reciprocal of the zoom."""
        return (
            TransformBuilder()
            .translate(self.offset.x, self.offset.y)
            .scale(1 / self.scale, 1 / self.scale)
            .build()
        )


class Zoom(NamedTuple):
    """
    A zoom about the focal point `at` (same space as the camera offset).
    """
    at: Vec2
    factor: float


class CameraController(ChangeNotifier):
    """
    Owns the current camera state and the base snapshot of the running gesture.

    The scale is kept within [min_zoom, max_zoom] by every mutating call.
    Every mutating call notifies the listeners synchronously, once.
    """
    def __init__(self, min_zoom: float = 1.0, max_zoom: float = 1.0) -> None:
        """
        Args:
            min_zoom: Zoom-out limit, in (0, 1] for typical use.
            max_zoom: Zoom-in limit, in [1, inf) for typical use.

        Raises:
            ValueError: If `min_zoom` is not positive or exceeds `max_zoom`.
        """
        super().__init__()
        if min_zoom <= 0:
            raise ValueError(f"min_zoom must be positive, got {min_zoom}.")
        if min_zoom > max_zoom:
            raise ValueError(f"min_zoom ({min_zoom}) must not exceed max_zoom ({max_zoom}).")

        self.min_zoom = min_zoom
        self.max_zoom = max_zoom
        self._state = self._home_state()
        self._base_state = self._state

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(offset=({self.offset.x}, {self.offset.y}), "
            f"scale={self.scale}, zoom=[{self.min_zoom}, {self.max_zoom}])"
        )

    def _home_state(self) -> CameraState:
        # scale 1 unless the zoom limits exclude it
        return CameraState(scale=clamp(1.0, self.min_zoom, self.max_zoom))

    # ------------------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> CameraState:
        return self._state

    @property
    def base_state(self) -> CameraState:
        return self._base_state

    @property
    def offset(self) -> Vec2:
        return self._state.offset

    @property
    def scale(self) -> float:
        return self._state.scale

    @property
    def matrix(self) -> AffineTransform:
        return self._state.matrix

    # ------------------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------------------

    def set_base(self) -> None:
        """Snapshot the current state; call once at the start of each gesture."""
        self._base_state = self._state

    def move(self, pan: Optional[PointLike] = None, zoom: Optional[Zoom] = None) -> None:
        """
        Set the state to base snapshot + the total gesture delta.

        Args:
            pan: Total pan since `set_base`, in math units.
            zoom: Total zoom since `set_base`. The applied ratio is the one
                left after clamping, so the focal point does not jump when
                the zoom saturates.
        """
        base = self._base_state
        new_offset = base.offset
        new_scale = base.scale

        if pan is not None:
            new_offset = new_offset + Vec2.of(pan)

        if zoom is not None:
            at = Vec2.of(zoom.at)
            new_scale = clamp(base.scale * zoom.factor, self.min_zoom, self.max_zoom)
            ratio = new_scale / base.scale
            new_offset = at + (new_offset - at) * ratio

        self._state = CameraState(offset=new_offset, scale=new_scale)
        logger.debug(f"Camera moved: {self}")
        self.notify_listeners()

    def set_offset(self, offset: PointLike) -> None:
        self._state = replace(self._state, offset=Vec2.of(offset))
        self.notify_listeners()

    def set_scale(self, scale: float) -> None:
        """Set the zoom directly; out-of-range values are clamped, never rejected."""
        self._state = replace(self._state, scale=clamp(scale, self.min_zoom, self.max_zoom))
        self.notify_listeners()

    def reset(self) -> None:
        """Back to offset (0, 0) and scale 1, base snapshot included."""
        self._state = self._home_state()
        self._base_state = self._state
        logger.debug("Camera reset.")
        self.notify_listeners()
