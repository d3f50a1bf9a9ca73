import dataclasses

import numpy as np
import pytest

from motionkit.pose import Pose2D, pos


def test_from_vector_round_trip():
    p = Pose2D.from_vector(np.array([1.5, -2.0]), 0.75)
    assert p == Pose2D(1.5, -2.0, 0.75)
    assert np.allclose(pos(p), [1.5, -2.0])


def test_pos_of_pose():
    p = Pose2D(3.0, 4.0, 1.0)
    assert np.array_equal(pos(p), np.array([3.0, 4.0]))


def test_unpacking():
    x, y, theta = Pose2D(1.0, 2.0, 3.0)
    assert (x, y, theta) == (1.0, 2.0, 3.0)


def test_default_is_origin():
    assert tuple(Pose2D()) == (0.0, 0.0, 0.0)


def test_from_vector_rejects_wrong_length():
    with pytest.raises(ValueError):
        Pose2D.from_vector([1.0, 2.0, 3.0], 0.0)


def test_pose_is_immutable():
    p = Pose2D(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0
    assert (p.x, p.y, p.theta) == (1.0, 2.0, 3.0)