import math
import time

import pytest

from panoview.frustum import classify_box, count_in_front, get_frustum, get_time

IDENTITY = [1.0, 0, 0, 0, 0, 1.0, 0, 0, 0, 0, 1.0, 0, 0, 0, 0, 1.0]


def test_get_time_tracks_wall_clock():
    now = int(time.time() * 1000) & 0xFFFFFFFF
    assert abs(get_time() - now) < 1000


def test_count_in_front_all_or_none():
    box = (-1.0, -1.0, -1.0, 1.0, 1.0, 1.0)
    assert count_in_front((0.0, 0.0, 0.0, 1.0), box) == 8
    assert count_in_front((0.0, 0.0, 0.0, -1.0), box) == 0


def test_count_in_front_half_split():
    box = (-1.0, -1.0, -1.0, 1.0, 1.0, 1.0)
    assert count_in_front((1.0, 0.0, 0.0, 0.0), box) == 4


def test_identity_frustum_planes_are_unit_cube():
    planes = get_frustum(IDENTITY)
    assert len(planes) == 6
    assert planes[0] == pytest.approx((1.0, 0.0, 0.0, 1.0))
    for plane in planes:
        assert math.sqrt(sum(c * c for c in plane[:3])) == pytest.approx(1.0)
        assert plane[3] == pytest.approx(1.0)


def test_classify_box_inside_outside_and_split():
    planes = get_frustum(IDENTITY)
    assert classify_box(planes, (-0.5, -0.5, -0.5, 0.5, 0.5, 0.5)) == 1
    assert classify_box(planes, (2.0, 2.0, 2.0, 3.0, 3.0, 3.0)) == -1
    assert classify_box(planes, (0.5, 0.5, 0.5, 1.5, 1.5, 1.5)) == 0


def test_invalid_shapes_rejected():
    with pytest.raises(ValueError):
        get_frustum([0.0] * 15)
    with pytest.raises(ValueError):
        count_in_front((0.0, 0.0, 1.0), (0,) * 6)
    with pytest.raises(ValueError):
        classify_box(get_frustum(IDENTITY)[:5], (0,) * 6)


def test_degenerate_matrix_rejected():
    with pytest.raises(ValueError):
        get_frustum([0.0] * 16)