"""
classifier.py - Exercise Classification
=======================================
Infers which exercise a single frame shows.
"""

from typing import Dict, Optional

from ..exercises import DETECTORS, ExerciseDetector, ExerciseType
from .keypoints import Pose


class ExerciseClassifier:
    """
    Stateless per-frame exercise classifier.

    Each detector's hypothesis is tried in order; the first that matches wins.
    Callers poll every frame until a non-unknown result comes back and then
    lock it for the rest of the session.
    """

    def __init__(self, detectors: Optional[Dict[ExerciseType, ExerciseDetector]] = None):
        self.detectors = detectors if detectors is not None else DETECTORS

    def classify(self, pose: Pose) -> ExerciseType:
        if pose.is_empty():
            return ExerciseType.UNKNOWN

        for exercise, detector in self.detectors.items():
            if detector.matches(pose):
                return exercise

        return ExerciseType.UNKNOWN
