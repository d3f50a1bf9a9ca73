"""Planar (x, y, theta) poses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


@dataclass(frozen=True, slots=True)
class Pose2D:
    """A position in the plane with a heading angle."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0

    @classmethod
    def from_vector(cls, v: Sequence[float], theta: float) -> "Pose2D":
        """Build a pose from a 2-vector position and a heading."""
        px, py = (float(c) for c in v)
        return cls(px, py, float(theta))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.theta


def pos(pose: Pose2D) -> np.ndarray:
    """Return the position of a pose as a 2-vector."""
    return np.array([pose.x, pose.y])