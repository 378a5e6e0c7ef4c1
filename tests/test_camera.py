import pytest

from gravitysim.body import Vec2
from gravitysim.camera import (
    Camera,
    CursorState,
    GrabMode,
    ScrollUnit,
    spawn_camera,
)


def test_spawn_camera_defaults():
    camera = spawn_camera()
    assert camera.position == Vec2(0.0, 0.0)
    assert camera.scale == 2.5
    assert camera.viewport_height == 720.0


def test_keyboard_no_keys_does_not_move():
    camera = Camera()
    camera.keyboard_move(False, False, False, False)
    assert camera.position == Vec2(0.0, 0.0)


def test_keyboard_opposite_keys_cancel():
    camera = Camera()
    camera.keyboard_move(True, True, True, True)
    assert camera.position == Vec2(0.0, 0.0)


def test_keyboard_up_moves_positive_y_only():
    camera = Camera()
    camera.keyboard_move(True, False, False, False)
    assert camera.position.x == 0.0
    assert camera.position.y > 0.0


def test_keyboard_up_then_down_returns():
    camera = Camera()
    camera.keyboard_move(True, False, False, False)
    camera.keyboard_move(False, True, False, False)
    assert camera.position.y == pytest.approx(0.0)


def test_keyboard_diagonal_has_same_length_as_straight():
    straight = Camera()
    straight.keyboard_move(False, False, False, True)
    diagonal = Camera()
    diagonal.keyboard_move(True, False, False, True)
    assert diagonal.position.length() == pytest.approx(straight.position.length())
    assert diagonal.position.x == pytest.approx(diagonal.position.y)


def test_keyboard_speed_grows_with_scale():
    near = Camera(scale=1.0)
    far = Camera(scale=3.0)
    near.keyboard_move(False, False, True, False)
    far.keyboard_move(False, False, True, False)
    assert far.position.x == pytest.approx(3.0 * near.position.x)
    assert far.position.x < 0.0


def test_mouse_motion_screen_y_is_inverted():
    camera = Camera()
    camera.mouse_motion(10.0, 10.0)
    assert camera.position.x > 0.0
    assert camera.position.y < 0.0
    assert camera.position.x == pytest.approx(-camera.position.y)


def test_mouse_motion_round_trip():
    camera = Camera()
    camera.mouse_motion(7.0, -3.0)
    camera.mouse_motion(-7.0, 3.0)
    assert camera.position.x == pytest.approx(0.0)
    assert camera.position.y == pytest.approx(0.0)


def test_scroll_positive_zooms_in():
    camera = Camera()
    camera.scroll(ScrollUnit.LINE, 1.0)
    assert camera.scale < 2.5


def test_scroll_round_trip():
    camera = Camera()
    camera.scroll(ScrollUnit.PIXEL, 2.0)
    camera.scroll(ScrollUnit.PIXEL, -2.0)
    assert camera.scale == pytest.approx(2.5)


def test_scroll_pixel_clamps_to_minimum():
    camera = Camera()
    camera.scroll(ScrollUnit.PIXEL, 1000.0)
    assert camera.scale == 0.2


def test_scroll_line_clamps_to_minimum():
    camera = Camera()
    camera.scroll(ScrollUnit.LINE, 1000.0)
    assert camera.scale == 0.5


def test_scroll_line_steps_more_than_pixel():
    line = Camera()
    pixel = Camera()
    line.scroll(ScrollUnit.LINE, -1.0)
    pixel.scroll(ScrollUnit.PIXEL, -1.0)
    assert line.scale > pixel.scale > 2.5


def test_scroll_rejects_unknown_unit():
    with pytest.raises(ValueError):
        Camera().scroll("sideways", 1.0)


def test_focus_gained_locks_and_centres():
    cursor = CursorState(visible=True)
    cursor.on_focus(True, 800, 600)
    assert cursor.visible is False
    assert cursor.grab_mode is GrabMode.LOCKED
    assert cursor.warp_to == (400.0, 300.0)


def test_focus_lost_releases():
    cursor = CursorState()
    cursor.on_focus(True, 100, 100)
    cursor.on_focus(False, 100, 100)
    assert cursor.visible is True
    assert cursor.grab_mode is GrabMode.NONE