"""
form_evaluator.py - Form Quality Checks
=======================================
Judges per-frame form for the classified exercise.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ..exercises import DETECTORS, ExerciseDetector, ExerciseType
from .keypoints import Pose

NO_PERSON_MESSAGE = "No person detected"
NEUTRAL_MESSAGE = "Form detected"


@dataclass(frozen=True)
class FormJudgment:
    acceptable: bool
    reason: str


class FormEvaluator:
    """Applies the classified exercise's form rules to a frame."""

    def __init__(self, detectors: Optional[Dict[ExerciseType, ExerciseDetector]] = None):
        self.detectors = detectors if detectors is not None else DETECTORS

    def evaluate(self, pose: Pose, exercise: ExerciseType) -> FormJudgment:
        """
        Evaluate form for one frame.

        Args:
            pose: Scaled pose for the current frame
            exercise: Exercise locked for the session (may be UNKNOWN)

        Returns:
            FormJudgment with a non-empty reason
        """
        if pose.is_empty():
            return FormJudgment(False, NO_PERSON_MESSAGE)

        detector = self.detectors.get(exercise)
        if detector is None:
            return FormJudgment(True, NEUTRAL_MESSAGE)

        acceptable, reason = detector.evaluate_form(pose)
        return FormJudgment(acceptable, reason)
