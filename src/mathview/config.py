"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric defaults used by
the geometry engine.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sampling depths, zoom limits,
   tolerances) scattered throughout the code.
2. Environment: It reads the few settings that may be overridden from the
   environment (currently only the log level).

Exports:
    DEFAULT_MIN_SAMPLING_DEPTH (int): Minimum recursion depth of the sampler.
    DEFAULT_MAX_SAMPLING_DEPTH (int): Maximum recursion depth of the sampler.
    SINGULAR_EPSILON (float): Determinant magnitude below which a transform has no inverse.
    PANE_PAD (float): Hysteresis pad (fraction of a pane) used by the pane manager.
    GRID_LINES_PER_VIEW (float): Roughly how many major grid lines span the view.
    LOG_LEVEL (str): Default level name for `setup_logging`.
"""
import os


def get_env_setting(name: str, default: str) -> str:
    """
    Get a setting from the environment, falling back to `default` when unset or blank.
    """
    value = os.environ.get(name, "").strip()
    return value if value else default


# Adaptive sampling
DEFAULT_MIN_SAMPLING_DEPTH: int = 8
DEFAULT_MAX_SAMPLING_DEPTH: int = 14

# Transform algebra
SINGULAR_EPSILON: float = 1e-12

# Pane manager
PANE_PAD: float = 1 / 8

# Camera / viewport
DEFAULT_MIN_ZOOM: float = 0.5
DEFAULT_MAX_ZOOM: float = 5.0
DEFAULT_VIEW_PADDING: float = 0.5
VIEW_TRANSFORM_PRECISION: int = 5
WHEEL_ZOOM_DIVISOR: float = 300.0

# Grid
GRID_LINES_PER_VIEW: float = 3.5

LOG_LEVEL: str = get_env_setting("MATHVIEW_LOG_LEVEL", "INFO").upper()
