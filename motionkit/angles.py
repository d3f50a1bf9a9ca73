"""Angle arithmetic and Z-Y-X Euler angle conversions.

Rotation matrices are 3x3 numpy arrays; quaternions are ``(w, x, y, z)`` tuples.
"""

from __future__ import annotations

import math
import sys
from typing import Sequence

import numpy as np

Quaternion = tuple[float, float, float, float]

_TWO_PI = 2.0 * math.pi
_EPSILON = sys.float_info.epsilon


def to_degrees(rads: float) -> float:
    """Convert an angle in radians to degrees."""
    return rads * 180.0 / math.pi


def to_radians(degs: float) -> float:
    """Convert an angle in degrees to radians."""
    return degs * math.pi / 180.0


def normalize_angle(angle: float) -> float:
    """Normalize an angle into the range [-pi, pi]."""
    if abs(angle) > _TWO_PI:
        angle = math.fmod(angle, _TWO_PI)
    if angle < -math.pi:
        angle += _TWO_PI
    if angle > math.pi:
        angle -= _TWO_PI
    return angle


def normalize_angle_positive(angle: float) -> float:
    """Normalize an angle into the range [0, 2*pi)."""
    angle = normalize_angle(angle)
    if angle < 0.0:
        angle += _TWO_PI
    return angle


def shortest_angle_diff(af: float, ai: float) -> float:
    """Return the shortest signed difference ``af - ai``."""
    return normalize_angle(af - ai)


def shortest_angle_dist(af: float, ai: float) -> float:
    """Return the shortest unsigned distance between two angles."""
    return abs(shortest_angle_diff(af, ai))


def minor_arc_diff(af: float, ai: float) -> float:
    """Signed difference along the minor arc."""
    return shortest_angle_diff(af, ai)


def major_arc_diff(af: float, ai: float) -> float:
    """Signed difference along the major arc."""
    diff = shortest_angle_diff(af, ai)
    return -1.0 * math.copysign(1.0, diff) * (_TWO_PI - abs(diff))


def minor_arc_dist(af: float, ai: float) -> float:
    """Length of the minor arc between two angles."""
    return abs(minor_arc_diff(af, ai))


def major_arc_dist(af: float, ai: float) -> float:
    """Length of the major arc between two angles."""
    return abs(major_arc_diff(af, ai))


def unwind(ai: float, af: float) -> float:
    """Return the angle equivalent to ``af`` that is numerically greater than ``ai``."""
    af = math.remainder(af - ai, _TWO_PI)
    if af < ai:
        af += _TWO_PI
    return af


def get_euler_zyx(rot) -> tuple[float, float, float]:
    """Extract (yaw, pitch, roll) from a 3x3 rotation matrix."""
    m = np.asarray(rot, dtype=float)
    if m.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {m.shape}")
    y = math.atan2(m[1, 0], m[0, 0])
    p = math.atan2(-m[2, 0], math.sqrt(m[2, 1] * m[2, 1] + m[2, 2] * m[2, 2]))
    r = math.atan2(m[2, 1], m[2, 2])
    return y, p, r


def quaternion_to_matrix(q: Sequence[float]) -> np.ndarray:
    """Return the rotation matrix of a unit quaternion ``(w, x, y, z)``."""
    w, x, y, z = (float(c) for c in q)
    tx, ty, tz = 2.0 * x, 2.0 * y, 2.0 * z
    twx, twy, twz = tx * w, ty * w, tz * w
    txx, txy, txz = tx * x, ty * x, tz * x
    tyy, tyz, tzz = ty * y, tz * y, tz * z
    return np.array(
        [
            [1.0 - (tyy + tzz), txy - twz, txz + twy],
            [txy + twz, 1.0 - (txx + tzz), tyz - twx],
            [txz - twy, tyz + twx, 1.0 - (txx + tyy)],
        ]
    )


def get_euler_zyx_from_quaternion(q: Sequence[float]) -> tuple[float, float, float]:
    """Extract (yaw, pitch, roll) from a quaternion ``(w, x, y, z)``."""
    return get_euler_zyx(quaternion_to_matrix(q))


def _axis_rotation(angle: float, axis: int) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    if axis == 0:
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis == 1:
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def from_euler_zyx(y: float, p: float, r: float) -> np.ndarray:
    """Build the rotation matrix Rz(y) * Ry(p) * Rx(r)."""
    return _axis_rotation(y, 2) @ _axis_rotation(p, 1) @ _axis_rotation(r, 0)


def _matrix_to_quaternion(m: np.ndarray) -> Quaternion:
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        t = math.sqrt(trace + 1.0)
        w = 0.5 * t
        t = 0.5 / t
        return (
            w,
            (m[2, 1] - m[1, 2]) * t,
            (m[0, 2] - m[2, 0]) * t,
            (m[1, 0] - m[0, 1]) * t,
        )
    i = 0
    if m[1, 1] > m[0, 0]:
        i = 1
    if m[2, 2] > m[i, i]:
        i = 2
    j = (i + 1) % 3
    k = (j + 1) % 3
    t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
    vec = [0.0, 0.0, 0.0]
    vec[i] = 0.5 * t
    t = 0.5 / t
    w = (m[k, j] - m[j, k]) * t
    vec[j] = (m[j, i] + m[i, j]) * t
    vec[k] = (m[k, i] + m[i, k]) * t
    return (w, vec[0], vec[1], vec[2])


def quaternion_from_euler_zyx(y: float, p: float, r: float) -> Quaternion:
    """Build the quaternion ``(w, x, y, z)`` for Z-Y-X Euler angles."""
    return tuple(float(c) for c in _matrix_to_quaternion(from_euler_zyx(y, p, r)))


def normalize_euler_zyx(y: float, p: float, r: float) -> tuple[float, float, float]:
    """Return the canonical (yaw, pitch, roll) for the same rotation."""
    return get_euler_zyx(from_euler_zyx(y, p, r))


def get_nearest_planar_rotation(q: Sequence[float]) -> float:
    """Return the rotation about Z closest to the quaternion ``(w, x, y, z)``."""
    w, _, _, z = (float(c) for c in q)
    s_squared = 1.0 - w * w
    if s_squared < 10.0 * _EPSILON:
        return 0.0
    s = 1.0 / math.sqrt(s_squared)
    return (2.0 * math.acos(w)) * (z * s)