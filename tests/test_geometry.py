import numpy as np
import pytest

from reptrack.core.keypoints import FrameSize, Keypoint, KeypointIndex, Pose, rescale
from reptrack.exercises.base import AngleCalculator


def test_right_angle():
    assert AngleCalculator.angle_at((1, 0), (0, 0), (0, 1)) == pytest.approx(90.0)


def test_straight_and_folded():
    assert AngleCalculator.angle_at((-2, 0), (0, 0), (3, 0)) == pytest.approx(180.0)
    assert AngleCalculator.angle_at((3, 0), (0, 0), (6, 0)) == pytest.approx(0.0)


def test_nearly_parallel_rays_stay_in_range():
    angle = AngleCalculator.angle_at((1e-9, 1.0), (0, 0), (2e-9, 2.0))
    assert angle is not None
    assert 0.0 <= angle < 1e-3


def test_degenerate_rays_are_undefined():
    assert AngleCalculator.angle_at((5, 5), (5, 5), (0, 1)) is None
    assert AngleCalculator.angle_at((1, 0), (0, 0), (0, 0)) is None


def test_average_angle_needs_every_side():
    assert AngleCalculator.average_angle([80.0, 100.0]) == pytest.approx(90.0)
    assert AngleCalculator.average_angle([80.0, None]) is None
    assert AngleCalculator.average_angle([]) is None


def test_rescale_keeps_confidence():
    kp = Keypoint(100.0, 50.0, 0.7)
    scaled = rescale(kp, FrameSize(200, 100), FrameSize(400, 400))
    assert scaled == Keypoint(200.0, 200.0, 0.7)


def test_rescale_zero_source_is_total():
    kp = Keypoint(10.0, 20.0, 0.5)
    assert rescale(kp, FrameSize(0, 0), FrameSize(640, 480)) == kp


def test_missing_joints_are_synthesized():
    pose = Pose([Keypoint(1.0, 2.0, 0.8)])
    assert pose[KeypointIndex.NOSE].confidence == 0.8
    missing = pose[KeypointIndex.RIGHT_ANKLE]
    assert (missing.x, missing.y, missing.confidence) == (0.0, 0.0, 0.0)


def test_pose_rejects_extra_keypoints():
    with pytest.raises(ValueError):
        Pose([Keypoint(0, 0, 1.0)] * 18)


def test_pose_rescale_scales_every_joint():
    pose = Pose([Keypoint(10.0, 10.0, 0.3), Keypoint(20.0, 40.0, 0.9)])
    scaled = pose.rescale(FrameSize(100, 100), FrameSize(200, 50))
    assert [(kp.x, kp.y, kp.confidence) for kp in scaled] == [(20.0, 5.0, 0.3), (40.0, 20.0, 0.9)]


def test_from_movenet_swaps_axes_and_scales():
    raw = np.zeros((17, 3))
    raw[KeypointIndex.LEFT_ELBOW] = [0.5, 0.25, 0.8]
    pose = Pose.from_movenet(raw, FrameSize(640, 480))
    elbow = pose[KeypointIndex.LEFT_ELBOW]
    assert (elbow.x, elbow.y, elbow.confidence) == pytest.approx((160.0, 240.0, 0.8))


def test_from_movenet_accepts_multipose_row():
    row = np.zeros(56)
    row[0:3] = [0.1, 0.2, 0.9]
    pose = Pose.from_movenet(row, FrameSize(100, 100))
    assert pose[KeypointIndex.NOSE].point == pytest.approx((20.0, 10.0))


def test_from_movenet_rejects_bad_shape():
    with pytest.raises(ValueError):
        Pose.from_movenet(np.zeros((5, 3)), FrameSize(100, 100))
