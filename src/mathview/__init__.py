"""
mathview: geometry/numerics engine for interactive 2D math plots.
"""
from importlib.metadata import version, PackageNotFoundError

from mathview.controller.camera import CameraController, CameraState, Zoom
from mathview.controller.viewport import PreserveAspectRatio, ViewBox, Viewport, ZoomConfig
from mathview.model.geometry_primitives import Interval, Vec2
from mathview.model.grid import AxisGrid, auto_grid
from mathview.model.panes import PaneSet, compute_panes
from mathview.model.sampling import SamplePoint, adaptive_sample, sample_parametric
from mathview.model.transform import AffineTransform, TransformBuilder, TransformScope

try:
    __version__ = version("mathview")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "AffineTransform",
    "AxisGrid",
    "CameraController",
    "CameraState",
    "Interval",
    "PaneSet",
    "PreserveAspectRatio",
    "SamplePoint",
    "TransformBuilder",
    "TransformScope",
    "Vec2",
    "ViewBox",
    "Viewport",
    "Zoom",
    "ZoomConfig",
    "adaptive_sample",
    "auto_grid",
    "compute_panes",
    "sample_parametric",
]
