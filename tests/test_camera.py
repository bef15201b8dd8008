from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mathview.controller.camera import CameraController, CameraState, Zoom
from mathview.controller.notifier import ChangeNotifier
from mathview.model.geometry_primitives import Vec2

factors = st.floats(min_value=1e-3, max_value=1e3, allow_nan=False, allow_infinity=False)
scales = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False)


# ------------------------------------------------------------------------------
# CameraState
# ------------------------------------------------------------------------------

def test_state_defaults():
    state = CameraState()
    assert state.offset == Vec2(0, 0)
    assert state.scale == 1.0


def test_state_matrix_translates_then_applies_reciprocal_scale():
    state = CameraState(offset=Vec2(10, 20), scale=2.0)
    p = state.matrix.apply((0, 0))
    assert p.x == pytest.approx(5)
    assert p.y == pytest.approx(10)


def test_zoomed_in_state_shrinks_visible_span():
    m = CameraState(scale=4.0).matrix
    lower, upper = m.apply((-4, -4)), m.apply((4, 4))
    assert upper.x - lower.x == pytest.approx(2)


# ------------------------------------------------------------------------------
# CameraController
# ------------------------------------------------------------------------------

def test_initial_state(camera):
    assert camera.offset == Vec2(0, 0)
    assert camera.scale == 1.0
    assert camera.base_state == camera.state


@pytest.mark.parametrize("min_zoom, max_zoom", [(0.0, 1.0), (-1.0, 2.0), (3.0, 2.0)])
def test_invalid_zoom_limits_are_rejected(min_zoom, max_zoom):
    with pytest.raises(ValueError):
        CameraController(min_zoom=min_zoom, max_zoom=max_zoom)


def test_focal_point_zoom(camera):
    camera.set_base()
    camera.move(zoom=Zoom(at=Vec2(5, 5), factor=2))
    assert camera.scale == pytest.approx(2)
    assert camera.offset.x == pytest.approx(-5)
    assert camera.offset.y == pytest.approx(-5)


def test_zoom_accepts_tuple_focal_point(camera):
    camera.move(zoom=Zoom(at=(5, 5), factor=2))
    assert camera.offset == Vec2(-5, -5)


def test_move_is_absolute_from_base(camera):
    camera.set_base()
    camera.move(pan=(1, 1))
    camera.move(pan=(2, 3))
    assert camera.offset == Vec2(2, 3)


def test_set_base_establishes_new_reference(camera):
    camera.move(pan=Vec2(10, 20))
    camera.set_base()
    camera.move(pan=Vec2(5, 5))
    assert camera.offset == Vec2(15, 25)


def test_pan_and_zoom_combine_from_same_base(camera):
    camera.set_base()
    camera.move(pan=(2, 0), zoom=Zoom(at=(0, 0), factor=2))
    # pan first, then the offset is scaled about the focal point
    assert camera.offset == Vec2(4, 0)
    assert camera.scale == 2


def test_clamped_zoom_uses_applied_ratio(camera):
    camera.set_base()
    camera.move(zoom=Zoom(at=Vec2(1, 1), factor=100))
    assert camera.scale == 5.0
    # ratio 5 (not 100): offset = at + (0 - at) * 5
    assert camera.offset == Vec2(-4, -4)

    camera.set_base()
    camera.move(zoom=Zoom(at=Vec2(0, 0), factor=1e-3))
    assert camera.scale == 0.5


def test_set_offset_and_set_scale(camera):
    camera.set_offset((100, 200))
    assert camera.offset == Vec2(100, 200)

    camera.set_scale(1.5)
    assert camera.scale == 1.5
    camera.set_scale(10.0)
    assert camera.scale == 5.0
    camera.set_scale(0.1)
    assert camera.scale == 0.5
    assert camera.offset == Vec2(100, 200)


def test_reset(camera):
    camera.move(pan=Vec2(10, 20))
    camera.set_base()
    camera.move(zoom=Zoom(at=Vec2(0, 0), factor=2))
    camera.reset()
    assert camera.offset == Vec2(0, 0)
    assert camera.scale == 1.0
    assert camera.base_state == camera.state

    # a move after reset starts from the cleared base
    camera.move(pan=(1, 0))
    assert camera.offset == Vec2(1, 0)


def test_reset_respects_zoom_limits():
    camera = CameraController(min_zoom=2.0, max_zoom=4.0)
    assert camera.scale == 2.0
    camera.reset()
    assert camera.scale == 2.0


def test_matrix_matches_state(camera):
    camera.set_offset(Vec2(10, 20))
    camera.set_scale(2.0)
    assert camera.matrix == camera.state.matrix


@given(st.lists(st.one_of(
    st.tuples(st.just("move"), factors),
    st.tuples(st.just("set_scale"), scales),
    st.tuples(st.just("set_base"), st.just(0.0)),
), max_size=30))
def test_scale_always_within_limits(operations):
    camera = CameraController(min_zoom=0.5, max_zoom=5.0)
    for name, value in operations:
        if name == "move":
            camera.move(zoom=Zoom(at=Vec2(1, -1), factor=value))
        elif name == "set_scale":
            camera.set_scale(value)
        else:
            camera.set_base()
        assert 0.5 <= camera.scale <= 5.0


# ------------------------------------------------------------------------------
# Listeners
# ------------------------------------------------------------------------------

def test_every_mutation_notifies_once(camera, notifications):
    camera.move(pan=Vec2(10, 20))
    assert len(notifications) == 1
    camera.set_offset(Vec2(30, 40))
    assert len(notifications) == 2
    camera.set_scale(2.0)
    assert len(notifications) == 3
    camera.reset()
    assert len(notifications) == 4
    camera.set_base()
    assert len(notifications) == 4


def test_listeners_called_in_registration_order():
    notifier = ChangeNotifier()
    order: list[int] = []
    notifier.add_listener(lambda: order.append(1))
    notifier.add_listener(lambda: order.append(2))
    notifier.add_listener(lambda: order.append(3))
    notifier.notify_listeners()
    assert order == [1, 2, 3]


def test_remove_listener_and_dispose(camera):
    calls: list[str] = []

    def listener() -> None:
        calls.append("a")

    camera.add_listener(listener)
    camera.move(pan=(1, 1))
    camera.remove_listener(listener)
    camera.remove_listener(listener)
    camera.move(pan=(2, 2))
    assert calls == ["a"]

    camera.add_listener(listener)
    assert camera.has_listeners
    camera.dispose()
    assert not camera.has_listeners
    camera.move(pan=(3, 3))
    assert calls == ["a"]
