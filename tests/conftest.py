import math

import pytest

from reptrack.core.keypoints import FrameSize, Keypoint, KeypointIndex, Pose


FRAME = FrameSize(640, 480)
LIMB = 100.0


def _bend(vertex, toward, angle_deg, length=LIMB):
    """Point at `length` from vertex making `angle_deg` with the ray vertex->toward."""
    vx, vy = vertex
    tx, ty = toward
    base = math.atan2(ty - vy, tx - vx)
    theta = base + math.radians(angle_deg)
    return (vx + length * math.cos(theta), vy + length * math.sin(theta))


def _limb(joints, origin, angle_deg, confidence, vertex_confidence=None):
    """Hang a two-segment limb straight down from origin, bent at the middle joint."""
    top, mid, end = joints
    ox, oy = origin
    vertex = (ox, oy + LIMB)
    tip = _bend(vertex, origin, angle_deg)
    vc = confidence if vertex_confidence is None else vertex_confidence
    return {
        top: Keypoint(ox, oy, confidence),
        mid: Keypoint(vertex[0], vertex[1], vc),
        end: Keypoint(tip[0], tip[1], confidence),
    }


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def build_push_pose(elbow_angle, confidence=0.9, torso_offset=20.0, elbow_confidence=None):
    """Plank-like pose: shoulders and hips level, arms bent to elbow_angle."""
    K = KeypointIndex
    joints = {}
    joints.update(_limb((K.LEFT_SHOULDER, K.LEFT_ELBOW, K.LEFT_WRIST), (200.0, 200.0),
                        elbow_angle, confidence, elbow_confidence))
    joints.update(_limb((K.RIGHT_SHOULDER, K.RIGHT_ELBOW, K.RIGHT_WRIST), (260.0, 200.0),
                        elbow_angle, confidence, elbow_confidence))
    joints[K.LEFT_HIP] = Keypoint(400.0, 200.0 + torso_offset, confidence)
    joints[K.RIGHT_HIP] = Keypoint(460.0, 200.0 + torso_offset, confidence)
    return Pose.from_mapping(joints)


def build_squat_pose(knee_angle, confidence=0.9, knee_confidence=None, hip_y=250.0):
    """Upright pose with straight arms hanging and knees bent to knee_angle."""
    K = KeypointIndex
    joints = {}
    joints.update(_limb((K.LEFT_SHOULDER, K.LEFT_ELBOW, K.LEFT_WRIST), (280.0, 50.0),
                        175.0, confidence))
    joints.update(_limb((K.RIGHT_SHOULDER, K.RIGHT_ELBOW, K.RIGHT_WRIST), (360.0, 50.0),
                        175.0, confidence))
    joints.update(_limb((K.LEFT_HIP, K.LEFT_KNEE, K.LEFT_ANKLE), (290.0, hip_y),
                        knee_angle, confidence, knee_confidence))
    joints.update(_limb((K.RIGHT_HIP, K.RIGHT_KNEE, K.RIGHT_ANKLE), (350.0, hip_y),
                        knee_angle, confidence, knee_confidence))
    return Pose.from_mapping(joints)


class RecordingAnnouncer:
    """Keeps announced messages in memory, newest last."""

    def __init__(self):
        self.messages = []

    def announce(self, text):
        self.messages.append(text)


def build_empty_pose():
    return Pose([Keypoint(12.0, 34.0, 0.0) for _ in KeypointIndex])


@pytest.fixture
def frame():
    return FRAME


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def announcer():
    return RecordingAnnouncer()


@pytest.fixture
def push_pose():
    return build_push_pose


@pytest.fixture
def squat_pose():
    return build_squat_pose


@pytest.fixture
def empty_pose():
    return build_empty_pose()
