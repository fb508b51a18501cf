import math

import pytest

from catshooter.camera import (
    Camera,
    CameraMode,
    look_at_lh,
    perspective_fov_lh,
)
from catshooter.geometry import Vec3
from catshooter.input import Key, Keyboard
from catshooter.model import Model


def _state(*keys):
    data = bytearray(256)
    for key in keys:
        data[key] = 0x80
    return bytes(data)


def _keyboard(*keys):
    keyboard = Keyboard()
    keyboard.update(_state(*keys))
    return keyboard


def _transform(point, matrix):
    row = (point.x, point.y, point.z, 1.0)
    return tuple(sum(row[i] * matrix[i][c] for i in range(4)) for c in range(4))


def test_reset_pins_start_view():
    camera = Camera()
    assert camera.pos_v == Vec3(0.0, 200.0, -300.0)
    assert camera.pos_r == Vec3(0.0, 0.0, 0.0)
    assert camera.mode is CameraMode.NORMAL
    assert camera.distance == pytest.approx((camera.pos_r - camera.pos_v).length())


def test_orbit_keeps_distance_to_focus():
    camera = Camera()
    keyboard = Keyboard()
    for _ in range(30):
        keyboard.update(_state(Key.E))
        camera.update(keyboard)
    assert (camera.pos_v - camera.pos_r).length() == pytest.approx(camera.distance)
    assert camera.rot.y == pytest.approx(-0.3)


def test_orbit_without_turn_matches_start():
    camera = Camera()
    camera.rot = Vec3(camera.rot.x, 0.0, 0.0)
    start = camera.pos_v
    keyboard = Keyboard()
    keyboard.update(_state(Key.E))
    camera.update(keyboard)
    keyboard.update(_state(Key.Q))
    camera.update(keyboard)
    assert camera.pos_v.x == pytest.approx(start.x, abs=1e-9)
    assert camera.pos_v.y == pytest.approx(start.y)
    assert camera.pos_v.z == pytest.approx(start.z)


def test_pitch_is_clamped_at_pi():
    camera = Camera()
    keyboard = Keyboard()
    for _ in range(200):
        keyboard.update(_state(Key.Y))
        camera.update(keyboard)
    assert camera.rot.x <= math.pi


def test_reset_key_restores_view():
    camera = Camera()
    keyboard = Keyboard()
    keyboard.update(_state(Key.E))
    camera.update(keyboard)
    keyboard.update(_state(Key.R))
    camera.update(keyboard)
    assert camera.pos_v == Vec3(0.0, 200.0, -300.0)
    assert camera.rot.y == 0.0


def test_follow_toggle_requires_target():
    camera = Camera()
    with pytest.raises(ValueError):
        camera.update(_keyboard(Key.F))


def test_follow_approaches_target():
    camera = Camera()
    target = Model(pos=Vec3(50.0, 0.0, 20.0))
    keyboard = Keyboard()
    keyboard.update(_state(Key.F))
    camera.update(keyboard, target)
    assert camera.mode is CameraMode.FOLLOW
    for _ in range(300):
        keyboard.update(_state())
        camera.update(keyboard, target)
    assert camera.pos_r.x == pytest.approx(camera.pos_r_dest.x, abs=1e-6)
    assert camera.pos_r.z == pytest.approx(camera.pos_r_dest.z, abs=1e-6)
    assert camera.pos_v.x == pytest.approx(camera.pos_v_dest.x, abs=1e-6)


def test_debug_turn_only_when_enabled():
    camera = Camera()
    camera.update(_keyboard(Key.LEFT), debug=False)
    assert camera.rot.y == 0.0
    camera.update(_keyboard(Key.LEFT), debug=True)
    assert camera.rot.y == pytest.approx(-0.01)
    horizontal = math.hypot(camera.pos_r.x - camera.pos_v.x, camera.pos_r.z - camera.pos_v.z)
    assert horizontal == pytest.approx(camera.distance)


def test_view_matrix_maps_eye_to_origin_and_target_ahead():
    eye = Vec3(0.0, 200.0, -300.0)
    at = Vec3(0.0, 0.0, 0.0)
    view = look_at_lh(eye, at, Vec3(0.0, 1.0, 0.0))
    origin = _transform(eye, view)
    assert origin[:3] == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)
    ahead = _transform(at, view)
    assert ahead[0] == pytest.approx(0.0, abs=1e-9)
    assert ahead[2] == pytest.approx((at - eye).length())


def test_look_at_rejects_degenerate_view():
    with pytest.raises(ValueError):
        look_at_lh(Vec3(), Vec3(), Vec3(0.0, 1.0, 0.0))


def test_projection_maps_near_and_far_planes():
    proj = perspective_fov_lh(math.radians(40.0), 16 / 9, 10.0, 2000.0)
    near = _transform(Vec3(0.0, 0.0, 10.0), proj)
    far = _transform(Vec3(0.0, 0.0, 2000.0), proj)
    assert near[2] / near[3] == pytest.approx(0.0, abs=1e-12)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_projection_rejects_bad_planes():
    with pytest.raises(ValueError):
        perspective_fov_lh(1.0, 1.0, 5.0, 5.0)


def test_camera_projection_uses_screen_aspect():
    proj = Camera().projection_matrix()
    assert proj[1][1] / proj[0][0] == pytest.approx(1280 / 720)