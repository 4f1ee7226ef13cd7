"""
Exercise Logic Module
=====================
Contains exercise detection logic for different exercise types.
"""

from .base import AngleCalculator, CycleState, ExerciseDetector, ExerciseType
from .push_up import PushUpDetector
from .squat import SquatDetector

# Classification order matters: push-up is tried before squat
DETECTORS = {
    ExerciseType.PUSH_UP: PushUpDetector(),
    ExerciseType.SQUAT: SquatDetector(),
}

__all__ = [
    'ExerciseType',
    'AngleCalculator',
    'CycleState',
    'ExerciseDetector',
    'PushUpDetector',
    'SquatDetector',
    'DETECTORS',
]
