"""
base.py - Base classes and utilities for exercise detection
============================================================
Contains common functionality shared across all exercise types.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from ..core.keypoints import KeypointIndex, Pose


Point = Tuple[float, float]

# (vertex-side joint, vertex, far joint) for each side of the body
LEFT_ARM = (KeypointIndex.LEFT_SHOULDER, KeypointIndex.LEFT_ELBOW, KeypointIndex.LEFT_WRIST)
RIGHT_ARM = (KeypointIndex.RIGHT_SHOULDER, KeypointIndex.RIGHT_ELBOW, KeypointIndex.RIGHT_WRIST)
LEFT_LEG = (KeypointIndex.LEFT_HIP, KeypointIndex.LEFT_KNEE, KeypointIndex.LEFT_ANKLE)
RIGHT_LEG = (KeypointIndex.RIGHT_HIP, KeypointIndex.RIGHT_KNEE, KeypointIndex.RIGHT_ANKLE)


class ExerciseType(enum.Enum):
    """Enum for different exercise types"""
    PUSH_UP = "pushup"
    SQUAT = "squat"
    UNKNOWN = "unknown"


class AngleCalculator:
    """Utility class for calculating angles from keypoints."""

    @staticmethod
    def angle_at(a: Point, b: Point, c: Point) -> Optional[float]:
        """
        Calculate angle ABC (at point B) in degrees.

        Args:
            a, b, c: Points as (x, y) coordinates

        Returns:
            Angle in degrees (0-180), or None if either ray has zero length
        """
        ba = np.subtract(a, b, dtype=float)
        bc = np.subtract(c, b, dtype=float)
        norm_ba = np.linalg.norm(ba)
        norm_bc = np.linalg.norm(bc)
        if norm_ba == 0 or norm_bc == 0:
            return None

        cosine = np.clip(np.dot(ba, bc) / (norm_ba * norm_bc), -1.0, 1.0)
        return float(np.degrees(np.arccos(cosine)))

    @classmethod
    def joint_angle(cls, pose: Pose, joints: Tuple[KeypointIndex, KeypointIndex, KeypointIndex]) -> Optional[float]:
        a, b, c = joints
        return cls.angle_at(pose[a].point, pose[b].point, pose[c].point)

    @staticmethod
    def average_angle(angles: Iterable[Optional[float]]) -> Optional[float]:
        """Mean of the given angles, or None if any of them is undefined."""
        angles = list(angles)
        if not angles or any(angle is None for angle in angles):
            return None
        return sum(angles) / len(angles)


@dataclass
class CycleState:
    """Down/up phase of one exercise's repetition cycle."""
    is_down: bool = False

    def reset(self):
        self.is_down = False


class ExerciseDetector:
    """
    Shared geometry for a bilateral exercise.

    Subclasses name the joints they measure and the thresholds they use.
    """

    EXERCISE = ExerciseType.UNKNOWN
    LEFT_JOINTS: Tuple[KeypointIndex, KeypointIndex, KeypointIndex] = ()
    RIGHT_JOINTS: Tuple[KeypointIndex, KeypointIndex, KeypointIndex] = ()

    # Rep counting
    COUNT_MIN_KEYPOINT_SCORE = 0.3
    DOWN_ANGLE_THRESHOLD = 100.0
    UP_ANGLE_THRESHOLD = 160.0
    CALORIES_PER_REP = 0.0

    def __init__(self):
        self.angle_calculator = AngleCalculator()

    def average_angle(self, pose: Pose) -> Optional[float]:
        """Average of the left and right joint angles."""
        return self.angle_calculator.average_angle((
            self.angle_calculator.joint_angle(pose, self.LEFT_JOINTS),
            self.angle_calculator.joint_angle(pose, self.RIGHT_JOINTS),
        ))

    def counting_joints(self) -> Tuple[KeypointIndex, ...]:
        """Joints whose confidence gates the rep transition check."""
        return (self.LEFT_JOINTS[1], self.RIGHT_JOINTS[1])

    def matches(self, pose: Pose) -> bool:
        """Whether this frame is evidence that the exercise is in progress."""
        raise NotImplementedError

    def evaluate_form(self, pose: Pose) -> Tuple[bool, str]:
        """Judge form for this frame; returns (acceptable, reason)."""
        raise NotImplementedError

    def update_cycle(self, state: CycleState, pose: Pose) -> bool:
        """
        Advance the down/up cycle with a new frame.

        Args:
            state: Cycle state for this exercise
            pose: Scaled pose for the current frame

        Returns:
            True if a rep was completed
        """
        if not pose.confident(self.counting_joints(), self.COUNT_MIN_KEYPOINT_SCORE):
            return False

        angle = self.average_angle(pose)
        if angle is None:
            return False

        if angle < self.DOWN_ANGLE_THRESHOLD:
            state.is_down = True
            return False

        if angle > self.UP_ANGLE_THRESHOLD and state.is_down:
            state.is_down = False
            return True

        return False
