import numpy as np
import pytest

from panoview.camera import Camera, CameraDirection, CameraType


@pytest.fixture
def camera():
    cam = Camera()
    cam.position = np.array([0.0, 0.0, 0.0])
    cam.look_at = np.array([0.0, -2.0, 0.0])
    cam.up = np.array([0.0, 0.0, 1.0])
    cam.set_viewport(0, 0, 1920, 768)
    cam.near_clip, cam.far_clip = 0.1, 1000.0
    return cam


def test_defaults():
    cam = Camera()
    assert cam.mode is CameraType.FREE
    assert cam.field_of_view == 45.0
    assert cam.scale == pytest.approx(0.1)
    assert cam.near_clip == pytest.approx(0.1)
    assert cam.far_clip == 100000.0
    assert list(cam.up) == [0.0, 1.0, 0.0]


def test_pitch_is_rate_limited():
    cam = Camera()
    cam.change_pitch(5.0)
    assert cam.pitch == pytest.approx(cam.max_pitch_rate)
    cam.pitch = 0.0
    cam.change_pitch(-5.0)
    assert cam.pitch == pytest.approx(-cam.max_pitch_rate)


def test_pitch_wraps_within_bounds():
    cam = Camera()
    cam.pitch = 359.9
    cam.change_pitch(0.3)
    assert -360.0 <= cam.pitch <= 360.0
    assert cam.pitch < 359.9


def test_heading_reverses_when_upside_down():
    cam = Camera()
    cam.pitch = 100.0
    cam.change_heading(0.1)
    assert cam.heading == pytest.approx(-0.1)
    cam.pitch = 0.0
    cam.heading = 0.0
    cam.change_heading(0.1)
    assert cam.heading == pytest.approx(0.1)


def test_move_2d_only_turns_while_dragging():
    cam = Camera()
    cam.move_2d(-10, -5)
    assert cam.heading == 0.0 and cam.pitch == 0.0
    assert list(cam.mouse_position) == [-10.0, -5.0, 0.0]
    cam.move_camera = True
    cam.move_2d(-20, -5)
    assert cam.heading == pytest.approx(0.1)
    assert cam.pitch == 0.0


def test_viewport_and_aspect(camera):
    assert camera.viewport() == (0, 0, 1920, 768)
    assert camera.aspect == pytest.approx(1920 / 768)


def test_zero_height_viewport_rejected():
    with pytest.raises(ValueError):
        Camera().set_viewport(0, 0, 100, 0)


def test_update_free_without_rotation(camera):
    camera.update()
    np.testing.assert_allclose(camera.direction, [0.0, -1.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(camera.look_at, [0.0, -1.0, 0.0], atol=1e-12)
    eye_space = camera.view @ np.array([*camera.look_at, 1.0])
    np.testing.assert_allclose(eye_space[:3], [0.0, 0.0, -1.0], atol=1e-12)
    np.testing.assert_allclose(camera.mvp, camera.projection @ camera.view, atol=1e-12)


def test_update_damps_rotation(camera):
    camera.heading = 0.2
    camera.pitch = 0.1
    camera.update()
    assert camera.heading == pytest.approx(0.2 * 0.5)
    assert camera.pitch == pytest.approx(0.1 * 0.5)
    assert np.linalg.norm(camera.direction) == pytest.approx(1.0)


def test_move_forward_then_update(camera):
    camera.update()
    direction = camera.direction.copy()
    camera.move(CameraDirection.FORWARD)
    np.testing.assert_allclose(camera.position_delta, direction * camera.scale)
    delta = camera.position_delta.copy()
    camera.update()
    np.testing.assert_allclose(camera.position, delta)
    np.testing.assert_allclose(camera.position_delta, delta * 0.8)


def test_left_and_right_cancel(camera):
    camera.update()
    camera.move(CameraDirection.LEFT)
    camera.move(CameraDirection.RIGHT)
    camera.move(CameraDirection.UP)
    camera.move(CameraDirection.DOWN)
    np.testing.assert_allclose(camera.position_delta, [0.0, 0.0, 0.0], atol=1e-12)


def test_ortho_mode_ignores_moves_and_maps_box(camera):
    camera.set_mode(CameraType.ORTHO)
    assert list(camera.up) == [0.0, 1.0, 0.0]
    camera.look_at = np.array([0.0, 0.0, -1.0])
    camera.move(CameraDirection.FORWARD)
    assert list(camera.position_delta) == [0.0, 0.0, 0.0]
    camera.update()
    corner = camera.projection @ np.array([1.5 * camera.aspect, 1.5, 0.0, 1.0])
    np.testing.assert_allclose(corner[:2], [1.0, 1.0])


def test_matrices_returns_current_state(camera):
    camera.update()
    projection, view, model = camera.matrices()
    assert projection is camera.projection
    assert view is camera.view
    np.testing.assert_array_equal(model, np.identity(4))


def test_update_with_coincident_look_at_fails():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.update()