"""Dubins paths: two constant-radius turns joined by a straight segment."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from motionkit.angles import shortest_angle_diff
from motionkit.dubins_geometry import (
    AngleDir,
    DirectionalCircle2D,
    Segment2D,
    compute_arc_length,
    compute_inner_tangent,
    compute_outer_tangent,
    compute_turning_circles,
    heading,
    heading_vector,
    interp_angle,
    rotate,
    rotate90ccw,
    rotate90cw,
)
from motionkit.pose import Pose2D, pos


def _turn_sign(direction: AngleDir) -> float:
    return 1.0 if direction == AngleDir.CCW else -1.0


def _interp(src: Pose2D, dst: Pose2D, a: float) -> Pose2D:
    return Pose2D(
        (1.0 - a) * src.x + a * dst.x,
        (1.0 - a) * src.y + a * dst.y,
        src.theta + a * shortest_angle_diff(dst.theta, src.theta),
    )


@dataclass
class DubinsMotion:
    """A Dubins path from ``start`` to ``goal``, parametrised by ``t`` in [0, 1].

    ``arc1`` and ``arc2`` are the turn lengths in radians; ``radius`` is the
    radius of both turns.
    """

    start: Pose2D = field(default_factory=Pose2D)
    goal: Pose2D = field(default_factory=Pose2D)
    radius: float = 0.0
    arc1: float = 0.0
    arc2: float = 0.0
    dir1: AngleDir = AngleDir.CW
    dir2: AngleDir = AngleDir.CW

    def pivot1(self) -> np.ndarray:
        """Return the center of the first turn."""
        hv = heading_vector(self.start.theta)
        hv = rotate90cw(hv) if self.dir1 == AngleDir.CW else rotate90ccw(hv)
        return pos(self.start) + hv * self.radius

    def pivot2(self) -> np.ndarray:
        """Return the center of the second turn."""
        hv = heading_vector(self.goal.theta)
        hv = rotate90cw(hv) if self.dir2 == AngleDir.CW else rotate90ccw(hv)
        return pos(self.goal) + hv * self.radius

    def straight_start(self) -> Pose2D:
        """Return the pose at the start of the straight segment."""
        piv1 = self.pivot1()
        h2s = pos(self.start) - piv1
        sign = _turn_sign(self.dir1)
        return Pose2D.from_vector(
            piv1 + rotate(h2s, sign * self.arc1), self.start.theta + sign * self.arc1
        )

    def straight_end(self) -> Pose2D:
        """Return the pose at the end of the straight segment."""
        piv2 = self.pivot2()
        h2g = pos(self.goal) - piv2
        sign = _turn_sign(self.dir2)
        return Pose2D.from_vector(
            piv2 + rotate(h2g, -sign * self.arc2), self.goal.theta - sign * self.arc2
        )

    def t0(self) -> float:
        """Time at the start of the path (always 0)."""
        return 0.0

    def t1(self) -> float:
        """Time at the start of the straight segment."""
        total = self.length()
        if total == 0.0:
            return 0.0
        return self.arc1 * self.radius / total

    def t2(self) -> float:
        """Time at the end of the straight segment."""
        total = self.length()
        if total == 0.0:
            return 0.0
        return (total - self.arc2 * self.radius) / total

    def t3(self) -> float:
        """Time at the end of the path (always 1)."""
        return 1.0

    def length(self) -> float:
        """Return the linear length of the path."""
        straight = float(
            np.linalg.norm(pos(self.straight_start()) - pos(self.straight_end()))
        )
        return self.arc1 * self.radius + straight + self.arc2 * self.radius

    def __call__(self, t: float) -> Pose2D:
        """Sample the path at time ``t``."""
        if t <= 0.0:
            return self.start
        if t >= 1.0:
            return self.goal

        t_1 = self.t1()
        t_2 = self.t2()

        if t < t_1:
            a = t / t_1
            piv1 = self.pivot1()
            h2s = pos(self.start) - piv1
            sign = _turn_sign(self.dir1)
            return Pose2D.from_vector(
                piv1 + rotate(h2s, sign * a * self.arc1),
                interp_angle(
                    self.start.theta, self.start.theta + sign * self.arc1, a, self.dir1
                ),
            )
        if t > t_2:
            a = (t - t_2) / (1.0 - t_2)
            piv2 = self.pivot2()
            h2g = pos(self.goal) - piv2
            sign = _turn_sign(self.dir2)
            return Pose2D.from_vector(
                piv2 + rotate(h2g, -sign * (1.0 - a) * self.arc2),
                interp_angle(
                    self.goal.theta - sign * self.arc2, self.goal.theta, a, self.dir2
                ),
            )
        span = t_2 - t_1
        if span == 0.0:
            return self.straight_start()
        return _interp(self.straight_start(), self.straight_end(), (t - t_1) / span)


def _construct_path(
    start: Pose2D,
    goal: Pose2D,
    radius: float,
    start_circle: DirectionalCircle2D,
    goal_circle: DirectionalCircle2D,
    tangent: Segment2D,
    dir1: AngleDir,
    dir2: AngleDir,
) -> DubinsMotion:
    start_center = start_circle.circle.center
    goal_center = goal_circle.circle.center

    arc1 = (
        compute_arc_length(
            start_circle,
            heading(pos(start) - start_center),
            heading(tangent.a - start_center),
        )
        / radius
    )
    arc2 = (
        compute_arc_length(
            goal_circle,
            heading(tangent.b - goal_center),
            heading(pos(goal) - goal_center),
        )
        / radius
    )
    return DubinsMotion(start, goal, radius, arc1, arc2, dir1, dir2)


def _exists(tangent: Segment2D) -> bool:
    return not math.isnan(float(tangent.a[0]))


def make_dubins_paths(start: Pose2D, goal: Pose2D, radius: float) -> list[DubinsMotion]:
    """Return the feasible RR, LL, LR and RL paths, in that order."""
    start_l, start_r = compute_turning_circles(start, radius)
    goal_l, goal_r = compute_turning_circles(goal, radius)

    ll_tangent = compute_outer_tangent(start_l, goal_l)
    rr_tangent = compute_outer_tangent(start_r, goal_r)
    lr_tangent = compute_inner_tangent(start_l, goal_r)
    rl_tangent = compute_inner_tangent(start_r, goal_l)

    candidates = [
        (start_r, goal_r, rr_tangent, AngleDir.CW, AngleDir.CW),
        (start_l, goal_l, ll_tangent, AngleDir.CCW, AngleDir.CCW),
        (start_l, goal_r, lr_tangent, AngleDir.CCW, AngleDir.CW),
        (start_r, goal_l, rl_tangent, AngleDir.CW, AngleDir.CCW),
    ]
    return [
        _construct_path(start, goal, radius, sc, gc, tangent, d1, d2)
        for sc, gc, tangent, d1, d2 in candidates
        if _exists(tangent)
    ]