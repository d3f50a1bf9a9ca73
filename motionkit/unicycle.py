"""Unicycle motions: a straight segment followed by a constant-radius arc."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field

import numpy as np

from motionkit.angles import shortest_angle_diff, shortest_angle_dist
from motionkit.pose import Pose2D

_EPSILON = sys.float_info.epsilon


def _pinv(a: np.ndarray, eps: float) -> np.ndarray:
    """Pseudo-inverse via SVD, treating singular values within ``eps`` of zero as zero."""
    u, singular, vh = np.linalg.svd(a)
    inverted = np.array([0.0 if abs(s) <= eps else 1.0 / s for s in singular])
    return vh.T @ np.diag(inverted) @ u.T


@dataclass
class UnicycleMotion:
    """A motion parametrised by time ``t`` in [0, 1]."""

    start: Pose2D = field(default_factory=Pose2D)
    goal: Pose2D = field(default_factory=Pose2D)
    l: float = 0.0  # length of the straight segment
    r: float = 0.0  # turning radius
    w: float = 0.0  # angular velocity
    v: float = 0.0  # linear velocity
    tl: float = 0.0  # time at the end of the straight segment
    valid: bool = False

    def at(self, t: float) -> Pose2D:
        """Return the pose at time ``t``."""
        s = self.start
        if t <= self.tl:
            return Pose2D(
                s.x + self.v * t * math.cos(s.theta),
                s.y + self.v * t * math.sin(s.theta),
                s.theta,
            )
        turned = self.w * (t - self.tl)
        x = (
            s.x
            + self.l * math.cos(s.theta)
            + self.r * math.sin(turned + s.theta)
            - self.r * math.sin(s.theta)
        )
        y = (
            s.y
            + self.l * math.sin(s.theta)
            - self.r * math.cos(turned + s.theta)
            + self.r * math.cos(s.theta)
        )
        return Pose2D(x, y, s.theta + turned)

    def __call__(self, t: float) -> Pose2D:
        return self.at(t)

    def length(self) -> float:
        """Return the total path length: straight part plus arc."""
        arc_len = self.r * abs(self.goal.theta - self.start.theta)
        return abs(self.l) + abs(arc_len)

    def is_valid(self) -> bool:
        """Whether the motion actually reaches the goal pose."""
        return self.valid


def make_unicycle_motion(
    start_x: float,
    start_y: float,
    start_theta: float,
    goal_x: float,
    goal_y: float,
    goal_theta: float,
    eps: float = _EPSILON,
) -> UnicycleMotion:
    """Solve for the straight-then-arc motion between two poses.

    The result is marked invalid when the headings match but the goal lies off
    the start heading, or when the headings differ and the goal lies on the
    start heading (which would need a turn in place).
    """
    motion = UnicycleMotion(
        start=Pose2D(start_x, start_y, start_theta),
        goal=Pose2D(goal_x, goal_y, goal_theta),
        valid=True,
    )

    dx = goal_x - start_x
    dy = goal_y - start_y
    dtheta = shortest_angle_diff(goal_theta, start_theta)

    sst, cst = math.sin(start_theta), math.cos(start_theta)
    sgt, cgt = math.sin(goal_theta), math.cos(goal_theta)

    rot = np.array([[cst, -sst + sgt], [sst, cst - cgt]])
    solution = _pinv(rot, eps) @ np.array([dx, dy])

    motion.l = float(solution[0])
    motion.r = float(solution[1])

    lmag = abs(motion.l)
    rmag = abs(motion.r)

    if rmag < eps:
        motion.r = 0.0
        motion.w = math.inf
        motion.v = motion.l
        motion.tl = 1.0
        motion.valid = (
            abs(dtheta) < eps
            and shortest_angle_dist(start_theta, math.atan2(dy, dx)) < eps
        )
        return motion

    if motion.r * dtheta < 0.0:
        motion.w = math.copysign(2.0 * math.pi - abs(dtheta), motion.r) + lmag / motion.r
    else:
        motion.w = math.copysign(dtheta, motion.r) + lmag / motion.r

    motion.v = math.copysign(motion.r * motion.w, motion.l)
    motion.tl = motion.l / motion.v
    return motion


def make_unicycle_motion_from_poses(
    start: Pose2D, goal: Pose2D, eps: float = _EPSILON
) -> UnicycleMotion:
    """Solve for the motion between two poses given as :class:`Pose2D`."""
    return make_unicycle_motion(
        start.x, start.y, start.theta, goal.x, goal.y, goal.theta, eps
    )