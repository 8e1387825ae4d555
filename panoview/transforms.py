"""Vector, matrix and quaternion helpers for a right-handed GL camera.

Matrices are 4x4 numpy arrays indexed ``[row, column]``; quaternions are
arrays ordered (w, x, y, z). Angles are in radians.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def normalize(v: Sequence[float]) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection mapping depth [-near, -far] to [-1, 1]."""
    if aspect == 0.0 or near == far:
        raise ValueError("degenerate perspective parameters")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


def ortho(left: float, right: float, bottom: float, top: float,
          near: float, far: float) -> np.ndarray:
    """Orthographic projection of the given box onto the unit cube."""
    if left == right or bottom == top or near == far:
        raise ValueError("degenerate orthographic box")
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


def look_at(eye: Sequence[float], center: Sequence[float],
            up: Sequence[float]) -> np.ndarray:
    """View matrix placing ``eye`` at the origin looking down -Z at ``center``."""
    eye_v = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye_v)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, eye_v))
    m[1, 3] = -float(np.dot(u, eye_v))
    m[2, 3] = float(np.dot(f, eye_v))
    return m


def angle_axis(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Quaternion for a rotation of ``angle`` about ``axis`` (axis used as given)."""
    half = angle / 2.0
    s = math.sin(half)
    ax = np.asarray(axis, dtype=float)
    return np.array([math.cos(half), ax[0] * s, ax[1] * s, ax[2] * s])


def quat_cross(q1: Sequence[float], q2: Sequence[float]) -> np.ndarray:
    """Hamilton product ``q1 * q2``."""
    w1, x1, y1, z1 = (float(c) for c in q1)
    w2, x2, y2, z2 = (float(c) for c in q2)
    return np.array([
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
        w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
    ])


def quat_normalize(q: Sequence[float]) -> np.ndarray:
    """Unit quaternion; a zero quaternion becomes the identity."""
    arr = np.asarray(q, dtype=float)
    length = float(np.linalg.norm(arr))
    if length <= 0.0:
        return np.array([1.0, 0.0, 0.0, 0.0])
    return arr / length


def quat_rotate(q: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Rotate vector ``v`` by quaternion ``q``."""
    qa = np.asarray(q, dtype=float)
    w, qv = qa[0], qa[1:]
    vec = np.asarray(v, dtype=float)
    uv = np.cross(qv, vec)
    uuv = np.cross(qv, uv)
    return vec + (uv * w + uuv) * 2.0