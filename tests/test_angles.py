import math

import numpy as np
import pytest

from motionkit import angles


def test_degrees_radians():
    assert angles.to_degrees(math.pi) == pytest.approx(180.0)
    assert angles.to_radians(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("x", [-7.5, -1.0, 0.0, 0.3, 2.0, 12.25])
def test_degrees_round_trip(x):
    assert angles.to_radians(angles.to_degrees(x)) == pytest.approx(x)


@pytest.mark.parametrize("a", [-20.0, -4.0, -math.pi, -0.5, 0.0, 1.0, 3.5, 7.0, 25.0])
def test_normalize_angle_range_and_equivalence(a):
    n = angles.normalize_angle(a)
    assert -math.pi <= n <= math.pi
    assert math.sin(n) == pytest.approx(math.sin(a), abs=1e-12)
    assert math.cos(n) == pytest.approx(math.cos(a), abs=1e-12)


@pytest.mark.parametrize("a", [-20.0, -4.0, -0.5, 0.0, 1.0, 7.0])
def test_normalize_angle_positive(a):
    n = angles.normalize_angle_positive(a)
    assert 0.0 <= n < 2.0 * math.pi
    assert math.sin(n) == pytest.approx(math.sin(a), abs=1e-12)
    assert math.cos(n) == pytest.approx(math.cos(a), abs=1e-12)


def test_shortest_diff_is_small_and_signed():
    d = angles.shortest_angle_diff(0.1, 2.0 * math.pi - 0.1)
    assert d == pytest.approx(0.2)
    assert angles.shortest_angle_dist(0.1, 0.3) == pytest.approx(0.2)
    assert angles.shortest_angle_diff(0.1, 0.3) == pytest.approx(-0.2)


@pytest.mark.parametrize("af,ai", [(0.5, 0.1), (3.0, -2.0), (-1.0, 1.5)])
def test_minor_and_major_arcs_sum_to_full_circle(af, ai):
    total = angles.minor_arc_dist(af, ai) + angles.major_arc_dist(af, ai)
    assert total == pytest.approx(2.0 * math.pi)
    minor = angles.minor_arc_diff(af, ai)
    major = angles.major_arc_diff(af, ai)
    assert minor * major < 0.0
    assert minor - major == pytest.approx(math.copysign(2.0 * math.pi, minor))


@pytest.mark.parametrize("ai,af", [(0.0, 1.0), (1.0, 0.5), (-2.0, 3.0), (0.5, -0.5)])
def test_unwind_equivalent_and_greater(ai, af):
    u = angles.unwind(ai, af)
    assert u >= ai
    assert math.sin(u) == pytest.approx(math.sin(af), abs=1e-12)
    assert math.cos(u) == pytest.approx(math.cos(af), abs=1e-12)


@pytest.mark.parametrize("y,p,r", [(0.3, -0.2, 0.9), (-2.5, 1.0, -1.2), (0.0, 0.0, 0.0)])
def test_euler_matrix_round_trip(y, p, r):
    rot = angles.from_euler_zyx(y, p, r)
    assert np.allclose(rot @ rot.T, np.eye(3))
    assert angles.get_euler_zyx(rot) == pytest.approx((y, p, r))


@pytest.mark.parametrize("y,p,r", [(0.3, -0.2, 0.9), (-2.5, 1.0, -1.2), (3.0, 0.1, 3.0)])
def test_quaternion_round_trip(y, p, r):
    q = angles.quaternion_from_euler_zyx(y, p, r)
    assert sum(c * c for c in q) == pytest.approx(1.0)
    assert np.allclose(angles.quaternion_to_matrix(q), angles.from_euler_zyx(y, p, r))
    assert angles.get_euler_zyx_from_quaternion(q) == pytest.approx((y, p, r))


def test_normalize_euler_same_rotation():
    y, p, r = angles.normalize_euler_zyx(7.0, 0.4, -8.0)
    assert -math.pi <= y <= math.pi
    assert -math.pi <= r <= math.pi
    assert np.allclose(angles.from_euler_zyx(y, p, r), angles.from_euler_zyx(7.0, 0.4, -8.0))


@pytest.mark.parametrize("yaw", [0.4, -1.3, 2.9])
def test_nearest_planar_rotation_recovers_yaw(yaw):
    q = angles.quaternion_from_euler_zyx(yaw, 0.0, 0.0)
    assert angles.get_nearest_planar_rotation(q) == pytest.approx(yaw)


def test_nearest_planar_rotation_identity():
    assert angles.get_nearest_planar_rotation((1.0, 0.0, 0.0, 0.0)) == 0.0


def test_get_euler_rejects_bad_shape():
    with pytest.raises(ValueError):
        angles.get_euler_zyx(np.eye(2))