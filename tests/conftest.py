"""
Pytest configuration for the mathview test suite.
"""
from __future__ import annotations

import pytest

from mathview.controller.camera import CameraController


@pytest.fixture
def camera() -> CameraController:
    return CameraController(min_zoom=0.5, max_zoom=5.0)


@pytest.fixture
def notifications(camera: CameraController) -> list[str]:
    """Records one entry per listener call on the `camera` fixture."""
    calls: list[str] = []
    camera.add_listener(lambda: calls.append("changed"))
    return calls
