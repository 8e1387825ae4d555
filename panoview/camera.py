"""A free-flying or orthographic camera driven by quaternion pitch and heading."""

from __future__ import annotations

from enum import Enum

import numpy as np

from . import transforms as tf


class CameraType(Enum):
    """Projection mode of the camera."""

    ORTHO = "ortho"
    FREE = "free"


class CameraDirection(Enum):
    """Directions a free camera can be nudged in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FORWARD = "forward"
    BACK = "back"


class Camera:
    """Camera state plus the projection, view and model matrices derived from it.

    Pitch and heading are accumulated per frame and damped on every
    :meth:`update`; translation is accumulated in ``position_delta`` and
    damped the same way, which gives smooth motion.
    """

    def __init__(self) -> None:
        self.mode = CameraType.FREE
        self.move_camera = False

        self.field_of_view = 45.0
        self.max_pitch_rate = 0.3
        self.max_heading_rate = 0.3

        self.viewport_x = 0
        self.viewport_y = 0
        self.window_width = 0
        self.window_height = 0
        self.aspect = 1.0

        self.scale = 0.1
        self.heading = 0.0
        self.pitch = 0.0

        self.near_clip = 0.1
        self.far_clip = 100000.0

        self.position = np.zeros(3)
        self.position_delta = np.zeros(3)
        self.look_at = np.zeros(3)
        self.direction = np.zeros(3)
        self.up = np.array([0.0, 1.0, 0.0])
        self.mouse_position = np.zeros(3)

        self.projection = np.identity(4)
        self.projection_zoom = np.identity(4)
        self.view = np.identity(4)
        self.model = np.identity(4)
        self.mv = np.identity(4)
        self.mvp = np.identity(4)

    def update(self) -> None:
        """Recompute direction, position and all matrices for the current mode."""
        position = np.asarray(self.position, dtype=float)
        look_at = np.asarray(self.look_at, dtype=float)
        up = np.asarray(self.up, dtype=float)
        self.direction = tf.normalize(look_at - position)

        if self.mode is CameraType.ORTHO:
            half_w = 1.5 * self.aspect
            self.projection = tf.ortho(-half_w, half_w, -1.5, 1.5, -10.0, 10.0)
        elif self.mode is CameraType.FREE:
            self.projection = tf.perspective(
                self.field_of_view, self.aspect, self.near_clip, self.far_clip)
            self.projection_zoom = tf.perspective(
                self.field_of_view - 20, self.aspect, self.near_clip, self.far_clip)

            axis = np.cross(self.direction, up)
            pitch_quat = tf.angle_axis(self.pitch, axis)
            heading_quat = tf.angle_axis(self.heading, up)
            rotation = tf.quat_normalize(tf.quat_cross(pitch_quat, heading_quat))
            self.direction = tf.quat_rotate(rotation, self.direction)

            position = position + np.asarray(self.position_delta, dtype=float)
            look_at = position + self.direction * 1.0

            self.heading *= 0.5
            self.pitch *= 0.5
            self.position_delta = np.asarray(self.position_delta, dtype=float) * 0.8

        self.position = position
        self.look_at = look_at
        self.view = tf.look_at(position, look_at, up)
        self.model = np.identity(4)
        self.mv = self.view @ self.model
        self.mvp = self.projection @ self.mv

    def move(self, direction: CameraDirection) -> None:
        """Accumulate a translation step; only a free camera moves."""
        if self.mode is not CameraType.FREE:
            return
        up = np.asarray(self.up, dtype=float)
        forward = np.asarray(self.direction, dtype=float)
        side = np.cross(forward, up)
        steps = {
            CameraDirection.UP: up,
            CameraDirection.DOWN: -up,
            CameraDirection.LEFT: -side,
            CameraDirection.RIGHT: side,
            CameraDirection.FORWARD: forward,
            CameraDirection.BACK: -forward,
        }
        try:
            step = steps[direction]
        except KeyError:
            raise ValueError(f"unknown camera direction: {direction!r}") from None
        self.position_delta = np.asarray(self.position_delta, dtype=float) + step * self.scale

    def change_pitch(self, degrees: float) -> None:
        """Add a rate-limited pitch change, keeping pitch within ±360."""
        degrees = max(-self.max_pitch_rate, min(self.max_pitch_rate, degrees))
        self.pitch += degrees
        if self.pitch > 360.0:
            self.pitch -= 360.0
        elif self.pitch < -360.0:
            self.pitch += 360.0

    def change_heading(self, degrees: float) -> None:
        """Add a rate-limited heading change, reversed while upside down."""
        degrees = max(-self.max_heading_rate, min(self.max_heading_rate, degrees))
        if 90 < self.pitch < 270 or -270 < self.pitch < -90:
            self.heading -= degrees
        else:
            self.heading += degrees
        if self.heading > 360.0:
            self.heading -= 360.0
        elif self.heading < -360.0:
            self.heading += 360.0

    def move_2d(self, x: int, y: int) -> None:
        """Turn the camera from a mouse move while dragging, and record the position."""
        new_position = np.array([float(x), float(y), 0.0])
        delta = np.asarray(self.mouse_position, dtype=float) - new_position
        if self.move_camera:
            rate = 0.01
            self.change_heading(rate * delta[0])
            self.change_pitch(rate * delta[1])
        self.mouse_position = new_position

    def set_mode(self, mode: CameraType) -> None:
        """Switch projection mode and reset the up vector."""
        self.mode = CameraType(mode)
        self.up = np.array([0.0, 1.0, 0.0])

    def set_viewport(self, x: int, y: int, width: int, height: int) -> None:
        """Set viewport origin and size; the aspect ratio follows from the size."""
        if height == 0:
            raise ValueError("viewport height must not be zero")
        self.viewport_x = x
        self.viewport_y = y
        self.window_width = width
        self.window_height = height
        self.aspect = float(width) / float(height)

    def viewport(self) -> tuple[int, int, int, int]:
        """Return (x, y, width, height) of the viewport."""
        return (self.viewport_x, self.viewport_y, self.window_width, self.window_height)

    def matrices(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return the (projection, view, model) matrices."""
        return (self.projection, self.view, self.model)