"""
squat.py - Squat Detection Logic
================================
Handles detection, rep counting and form checks for squats.
"""

from typing import Tuple

from ..core.keypoints import KeypointIndex, Pose
from .base import LEFT_LEG, RIGHT_LEG, ExerciseDetector, ExerciseType

HIPS = (KeypointIndex.LEFT_HIP, KeypointIndex.RIGHT_HIP)
KNEES = (KeypointIndex.LEFT_KNEE, KeypointIndex.RIGHT_KNEE)


class SquatDetector(ExerciseDetector):
    """Detects squats and counts their repetitions from knee angle."""

    EXERCISE = ExerciseType.SQUAT
    LEFT_JOINTS = LEFT_LEG
    RIGHT_JOINTS = RIGHT_LEG

    # ===== CONFIGURATION =====
    DETECT_MIN_KEYPOINT_SCORE = 0.4
    KNEE_BENT_ANGLE = 140          # Standing is ~170-180

    COUNT_MIN_KEYPOINT_SCORE = 0.3
    DOWN_ANGLE_THRESHOLD = 100
    UP_ANGLE_THRESHOLD = 150
    CALORIES_PER_REP = 0.32

    FORM_MIN_KEYPOINT_SCORE = 0.3
    MIN_DEPTH = 40                 # knee y - hip y, display units

    GOOD_FORM_MESSAGE = "Good squat form!"
    NOT_LOW_ENOUGH_MESSAGE = "Not low enough — try deeper squat."

    def matches(self, pose: Pose) -> bool:
        if not pose.confident(KNEES + HIPS, self.DETECT_MIN_KEYPOINT_SCORE):
            return False

        angle = self.average_angle(pose)
        return angle is not None and angle < self.KNEE_BENT_ANGLE

    def evaluate_form(self, pose: Pose) -> Tuple[bool, str]:
        if not pose.confident(HIPS + KNEES, self.FORM_MIN_KEYPOINT_SCORE):
            return True, self.GOOD_FORM_MESSAGE

        depth = pose.mean_y(*KNEES) - pose.mean_y(*HIPS)
        if depth < self.MIN_DEPTH:
            return False, self.NOT_LOW_ENOUGH_MESSAGE
        return True, self.GOOD_FORM_MESSAGE
