"""Planar geometry used to build Dubins paths.

The pieces are turning circles, tangent segments between circles, arc lengths,
and sampled turn and straight segments. Vectors are 2-element numpy arrays.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from motionkit.angles import normalize_angle_positive, shortest_angle_diff
from motionkit.pose import Pose2D, pos

_NAN = float("nan")


class AngleDir(enum.Enum):
    """Direction of rotation: clockwise or counter-clockwise."""

    CW = "cw"
    CCW = "ccw"


def _vec(v: Sequence[float]) -> np.ndarray:
    return np.asarray(v, dtype=float).reshape(2)


@dataclass
class Circle2D:
    """A circle given by its center and radius."""

    center: np.ndarray = field(default_factory=lambda: np.zeros(2))
    radius: float = 0.0

    def __post_init__(self) -> None:
        self.center = _vec(self.center)


@dataclass
class DirectionalCircle2D:
    """A circle travelled in one direction: -1 turns left, 1 turns right."""

    circle: Circle2D = field(default_factory=Circle2D)
    direction: int = -1

    def left(self) -> bool:
        """Whether the circle is travelled counter-clockwise."""
        return self.direction == -1

    def right(self) -> bool:
        """Whether the circle is travelled clockwise."""
        return self.direction == 1


@dataclass
class Segment2D:
    """A line segment from ``a`` to ``b``; NaN endpoints mean no segment exists."""

    a: np.ndarray = field(default_factory=lambda: np.zeros(2))
    b: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self) -> None:
        self.a = _vec(self.a)
        self.b = _vec(self.b)


def _signd(d: float) -> float:
    if d > 0.0:
        return 1.0
    if d < 0.0:
        return -1.0
    return 0.0


def _acos(x: float) -> float:
    """Arc cosine that yields NaN outside [-1, 1] instead of raising."""
    if math.isnan(x) or x < -1.0 or x > 1.0:
        return _NAN
    return math.acos(x)


def _ratio(num: float, den: float) -> float:
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return _NAN
        return math.copysign(math.inf, num)
    return num / den


def _normalized(v: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(v))
    if norm > 0.0:
        return v / norm
    return v.copy()


def interp_angle(aa: float, ab: float, t: float, direction: AngleDir) -> float:
    """Interpolate from ``aa`` toward ``ab`` turning in ``direction``; result in [0, 2*pi)."""
    sadist = shortest_angle_diff(ab, aa)
    if (sadist < 0 and direction == AngleDir.CW) or (
        sadist > 0 and direction == AngleDir.CCW
    ):
        af = aa + t * sadist
    else:
        af = aa + t * -_signd(sadist) * (2.0 * math.pi - abs(sadist))
    return normalize_angle_positive(af)


def rotate(v: Sequence[float], theta: float) -> np.ndarray:
    """Rotate a 2-vector counter-clockwise by ``theta``."""
    x, y = _vec(v)
    c, s = math.cos(theta), math.sin(theta)
    return np.array([x * c - y * s, x * s + y * c])


def heading(v: Sequence[float]) -> float:
    """Return the angle of a 2-vector."""
    x, y = _vec(v)
    return math.atan2(y, x)


def heading_vector(theta: float) -> np.ndarray:
    """Return the unit vector pointing along ``theta``."""
    return np.array([math.cos(theta), math.sin(theta)])


def rotate90cw(v: Sequence[float]) -> np.ndarray:
    """Rotate a 2-vector by 90 degrees clockwise."""
    x, y = _vec(v)
    return np.array([y, -x])


def rotate90ccw(v: Sequence[float]) -> np.ndarray:
    """Rotate a 2-vector by 90 degrees counter-clockwise."""
    x, y = _vec(v)
    return np.array([-y, x])


def compute_arc_length(
    circle: DirectionalCircle2D, start_angle: float, end_angle: float
) -> float:
    """Length of the arc from ``start_angle`` to ``end_angle`` in the circle's direction."""
    center = circle.circle.center
    radius = circle.circle.radius
    start = center + radius * heading_vector(start_angle)
    end = center + radius * heading_vector(end_angle)
    theta = heading(end - center) - heading(start - center)
    if theta < 0 and circle.left():
        theta += 2.0 * math.pi
    elif theta > 0 and circle.right():
        theta -= 2.0 * math.pi
    return abs(theta * radius)


def compute_turning_circles(
    pose: Pose2D, turning_radius: float
) -> tuple[DirectionalCircle2D, DirectionalCircle2D]:
    """Return the (left-turn, right-turn) circles tangent to ``pose``."""
    direction = _normalized(heading_vector(pose.theta))
    direction = rotate(direction, math.pi / 2.0)
    p = pos(pose)
    left = DirectionalCircle2D(Circle2D(p + turning_radius * direction, turning_radius), -1)
    direction = rotate(direction, math.pi)
    right = DirectionalCircle2D(Circle2D(p + turning_radius * direction, turning_radius), 1)
    return left, right


def compute_inner_tangent(
    dc1: DirectionalCircle2D, dc2: DirectionalCircle2D
) -> Segment2D:
    """Return the inner tangent leaving ``dc1`` and arriving on ``dc2``.

    When the circles overlap there is none, and both endpoints are NaN.
    """
    c1, c2 = dc1.circle, dc2.circle
    p1, p2 = c1.center, c2.center
    r1, r2 = c1.radius, c2.radius

    v1 = p2 - p1
    d = float(np.linalg.norm(v1))
    r3 = 0.5 * d

    if d < r1 + r2:
        return Segment2D(np.array([_NAN, _NAN]), np.array([_NAN, _NAN]))

    r4 = r1 + r2
    gamma = _acos(_ratio(r4, 2.0 * r3))

    v2 = rotate(_normalized(v1), gamma)
    pt = p1 + r4 * v2
    upper_a = p1 + r1 * v2
    upper = Segment2D(upper_a, upper_a + (p2 - pt))

    v2 = rotate(_normalized(v1), -gamma)
    lpt = p1 + r4 * v2
    lower_a = p1 + r1 * v2
    lower = Segment2D(lower_a, lower_a + (p2 - lpt))

    return upper if dc1.right() else lower


def compute_outer_tangent(
    dc1: DirectionalCircle2D, dc2: DirectionalCircle2D
) -> Segment2D:
    """Return the outer tangent leaving ``dc1`` and arriving on ``dc2``.

    When no such tangent exists the endpoints are NaN.
    """
    c1, c2 = dc1.circle, dc2.circle
    first_larger = c1.radius > c2.radius
    p1 = c1.center if first_larger else c2.center
    p2 = c2.center if first_larger else c1.center
    r1 = c1.radius if first_larger else c2.radius
    r2 = c2.radius if first_larger else c1.radius

    v1 = p2 - p1
    d = float(np.linalg.norm(v1))
    r3 = 0.5 * d
    r4 = r1 - r2

    gamma = _acos(_ratio(r4, 2.0 * r3))

    v2 = rotate(_normalized(v1), gamma)
    pt = p1 + r4 * v2
    upper_a = p1 + r1 * v2
    upper = Segment2D(upper_a, upper_a + (p2 - pt))

    v2 = rotate(_normalized(v1), -gamma)
    lpt = p1 + r4 * v2
    lower_a = p1 + r1 * v2
    lower = Segment2D(lower_a, lower_a + (p2 - lpt))

    if dc1.right():
        tangent = upper if first_larger else lower
    else:
        tangent = lower if first_larger else upper

    if not first_larger:
        tangent = Segment2D(tangent.b, tangent.a)
    return tangent


def generate_turn_path(
    circle: DirectionalCircle2D,
    start_angle: float,
    end_angle: float,
    interp_res: float,
) -> list[Pose2D]:
    """Sample poses along a turn, spaced ``interp_res`` apart along the arc."""
    center = circle.circle.center
    radius = circle.circle.radius
    cx, cy = float(center[0]), float(center[1])
    offset = -math.pi / 2.0 if circle.right() else math.pi / 2.0

    def on_circle(angle: float) -> Pose2D:
        return Pose2D(
            cx + radius * math.cos(angle),
            cy + radius * math.sin(angle),
            angle + offset,
        )

    path = [on_circle(start_angle)]
    arc_length = compute_arc_length(circle, start_angle, end_angle)
    num_interm_points = math.floor(arc_length / interp_res)
    angle_res = interp_res / radius
    step = -angle_res if circle.right() else angle_res
    path.extend(on_circle(start_angle + step * i) for i in range(1, num_interm_points + 1))
    path.append(on_circle(end_angle))
    return path


def generate_straight_path(
    start: Sequence[float], end: Sequence[float], interp_res: float
) -> list[Pose2D]:
    """Return the two end poses of a straight segment, both facing along it."""
    s, e = _vec(start), _vec(end)
    angle = heading(e - s)
    return [
        Pose2D(float(s[0]), float(s[1]), angle),
        Pose2D(float(e[0]), float(e[1]), angle),
    ]