"""Construction of 2D and 3D rigid transforms as homogeneous numpy matrices."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def rotation2d(theta: float) -> np.ndarray:
    """Return the 2x2 rotation matrix for angle ``theta``."""
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, -s], [s, c]])


def angle_axis(angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return the 3x3 rotation of ``angle`` radians about ``axis``."""
    a = np.asarray(axis, dtype=float)
    if a.shape != (3,):
        raise ValueError(f"axis must have three components, got shape {a.shape}")
    norm = np.linalg.norm(a)
    if norm == 0.0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = a / norm
    c, s = math.cos(angle), math.sin(angle)
    k = 1.0 - c
    return np.array(
        [
            [c + x * x * k, x * y * k - z * s, x * z * k + y * s],
            [y * x * k + z * s, c + y * y * k, y * z * k - x * s],
            [z * x * k - y * s, z * y * k + x * s, c + z * z * k],
        ]
    )


def make_affine2(x: float, y: float, theta: float = 0.0) -> np.ndarray:
    """Return the 3x3 homogeneous transform translating by (x, y) then rotating by theta."""
    t = np.eye(3)
    t[:2, :2] = rotation2d(theta)
    t[:2, 2] = (x, y)
    return t


_UNIT_X = (1.0, 0.0, 0.0)
_UNIT_Y = (0.0, 1.0, 0.0)
_UNIT_Z = (0.0, 0.0, 1.0)


def make_affine(
    x: float,
    y: float,
    z: float,
    yaw: float = 0.0,
    pitch: float = 0.0,
    roll: float = 0.0,
) -> np.ndarray:
    """Return the 4x4 transform: translation, then yaw about Z, pitch about Y, roll about X."""
    t = np.eye(4)
    t[:3, :3] = (
        angle_axis(yaw, _UNIT_Z) @ angle_axis(pitch, _UNIT_Y) @ angle_axis(roll, _UNIT_X)
    )
    t[:3, 3] = (x, y, z)
    return t