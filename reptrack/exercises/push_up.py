"""
push_up.py - Push-up Detection Logic
====================================
Handles detection, rep counting and form checks for push-ups.
"""

from typing import Tuple

from ..core.keypoints import KeypointIndex, Pose
from .base import LEFT_ARM, RIGHT_ARM, ExerciseDetector, ExerciseType

SHOULDERS = (KeypointIndex.LEFT_SHOULDER, KeypointIndex.RIGHT_SHOULDER)
HIPS = (KeypointIndex.LEFT_HIP, KeypointIndex.RIGHT_HIP)
ELBOWS = (KeypointIndex.LEFT_ELBOW, KeypointIndex.RIGHT_ELBOW)


class PushUpDetector(ExerciseDetector):
    """Detects push-ups and counts their repetitions from elbow angle."""

    EXERCISE = ExerciseType.PUSH_UP
    LEFT_JOINTS = LEFT_ARM
    RIGHT_JOINTS = RIGHT_ARM

    # ===== CONFIGURATION =====
    # Classification
    DETECT_MIN_KEYPOINT_SCORE = 0.4
    BODY_FLAT_MAX_DIFF = 120       # |shoulder y - hip y| in display units
    ARMS_EXTENDED_ANGLE = 150
    ARMS_BENT_ANGLE = 120

    # Rep counting
    COUNT_MIN_KEYPOINT_SCORE = 0.3
    DOWN_ANGLE_THRESHOLD = 100     # Chest lowered
    UP_ANGLE_THRESHOLD = 160       # Arms locked out
    CALORIES_PER_REP = 0.29

    # Form
    FORM_MIN_KEYPOINT_SCORE = 0.3
    HIPS_SAG_MAX_DIFF = 140
    ELBOW_MIN_ANGLE = 40
    ELBOW_MAX_ANGLE = 170

    GOOD_FORM_MESSAGE = "Good form — keep going!"
    HIPS_SAGGING_MESSAGE = "Tuck your hips down — keep a straight line."
    ELBOWS_TOO_BENT_MESSAGE = "Elbows too bent at bottom — push lower or keep wrists stable."
    ARMS_STRAIGHT_MESSAGE = "Arms fully straight — ensure full range and controlled tempo."

    @staticmethod
    def torso_offset(pose: Pose) -> float:
        """Vertical distance between shoulder line and hip line."""
        return abs(pose.mean_y(*SHOULDERS) - pose.mean_y(*HIPS))

    def matches(self, pose: Pose) -> bool:
        if not pose.confident(ELBOWS + SHOULDERS, self.DETECT_MIN_KEYPOINT_SCORE):
            return False

        angle = self.average_angle(pose)
        if angle is None:
            return False

        body_flat = self.torso_offset(pose) < self.BODY_FLAT_MAX_DIFF
        # Both lockout and bottom position count as evidence
        return body_flat and (angle > self.ARMS_EXTENDED_ANGLE or angle < self.ARMS_BENT_ANGLE)

    def evaluate_form(self, pose: Pose) -> Tuple[bool, str]:
        # Checks whose joints are not confidently visible are skipped
        if (pose.confident(SHOULDERS + HIPS, self.FORM_MIN_KEYPOINT_SCORE) and
                self.torso_offset(pose) > self.HIPS_SAG_MAX_DIFF):
            return False, self.HIPS_SAGGING_MESSAGE

        if pose.confident(LEFT_ARM + RIGHT_ARM, self.FORM_MIN_KEYPOINT_SCORE):
            angle = self.average_angle(pose)
            if angle is not None:
                if angle < self.ELBOW_MIN_ANGLE:
                    return False, self.ELBOWS_TOO_BENT_MESSAGE
                if angle > self.ELBOW_MAX_ANGLE:
                    return False, self.ARMS_STRAIGHT_MESSAGE

        return True, self.GOOD_FORM_MESSAGE
