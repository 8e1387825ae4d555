"""View-frustum extraction and bounding-box visibility tests."""

from __future__ import annotations

import math
import time
from typing import Sequence

Plane = tuple[float, float, float, float]


def get_time() -> int:
    """Wall-clock milliseconds, wrapped to an unsigned 32-bit value."""
    return int(time.time() * 1000) & 0xFFFFFFFF


def count_in_front(plane: Sequence[float], box: Sequence[float]) -> int:
    """Count how many of the box's 8 corners lie in front of ``plane``.

    ``plane`` is (a, b, c, d); ``box`` is two opposite corners given as
    (x0, y0, z0, x1, y1, z1).
    """
    if len(plane) != 4:
        raise ValueError("plane must have 4 components")
    if len(box) != 6:
        raise ValueError("box must have 6 components")
    a, b, c, d = plane
    xs = (box[0] * a, box[3] * a)
    ys = (box[1] * b, box[4] * b)
    zs = (box[2] * c, box[5] * c)
    return sum(1 for kx in xs for ky in ys for kz in zs if kx + ky + kz + d > 0)


def classify_box(planes: Sequence[Sequence[float]], box: Sequence[float]) -> int:
    """Return -1 if the box is outside, 1 if fully inside, 0 if it straddles."""
    if len(planes) != 6:
        raise ValueError("a frustum has 6 planes")
    total = 0
    for plane in planes:
        count = count_in_front(plane, box)
        if count == 0:
            return -1
        total += count
    return 1 if total == 48 else 0


def get_frustum(matrix: Sequence[float]) -> list[Plane]:
    """Extract normalized left, right, bottom, top, near, far planes.

    ``matrix`` is a column-major 4x4 matrix given as 16 floats.
    """
    if len(matrix) != 16:
        raise ValueError("matrix must have 16 elements")
    x = [float(v) for v in matrix]
    w_row = (x[3], x[7], x[11], x[15])
    rows = [(x[i], x[i + 4], x[i + 8], x[i + 12]) for i in range(3)]

    planes: list[Plane] = []
    for row in rows:
        for sign in (1.0, -1.0):
            raw = tuple(w + sign * r for w, r in zip(w_row, row))
            length = math.sqrt(raw[0] ** 2 + raw[1] ** 2 + raw[2] ** 2)
            if length == 0.0:
                raise ValueError("degenerate frustum plane")
            planes.append(tuple(v / length for v in raw))  # type: ignore[arg-type]
    return planes