"""
rep_counter.py - Repetition Counting
====================================
Down/up hysteresis state machine per exercise type.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ..exercises import DETECTORS, CycleState, ExerciseDetector, ExerciseType
from .keypoints import Pose


def calories_per_rep(exercise: ExerciseType) -> float:
    """Estimated kcal burned by one rep; 0 for unrecognized exercises."""
    detector = DETECTORS.get(exercise)
    return detector.CALORIES_PER_REP if detector is not None else 0.0


@dataclass(frozen=True)
class RepEvent:
    """Emitted when a full down-then-up cycle completes."""
    exercise: ExerciseType
    rep_count: int
    calories: float


class RepCounter:
    """
    Counts reps for the session's exercise.

    A rep is counted when the average joint angle first drops below the
    exercise's down threshold and then rises above its up threshold. Frames
    with low-confidence joints or undefined angles leave the state untouched.
    """

    def __init__(self, detectors: Optional[Dict[ExerciseType, ExerciseDetector]] = None,
                 verbose: bool = False):
        self.detectors = detectors if detectors is not None else DETECTORS
        self.verbose = verbose
        self.cycle_states = {exercise: CycleState() for exercise in self.detectors}
        self.rep_count = 0
        self.calories = 0.0

    def update(self, pose: Pose, exercise: ExerciseType) -> Optional[RepEvent]:
        """
        Process one frame.

        Returns:
            RepEvent if this frame completed a rep, else None
        """
        detector = self.detectors.get(exercise)
        if detector is None:
            return None

        if not detector.update_cycle(self.cycle_states[exercise], pose):
            return None

        self.rep_count += 1
        self.calories += detector.CALORIES_PER_REP
        if self.verbose:
            print(f"💪 [RepCounter] {exercise.value} rep #{self.rep_count}")

        return RepEvent(exercise, self.rep_count, detector.CALORIES_PER_REP)

    def is_down(self, exercise: ExerciseType) -> bool:
        state = self.cycle_states.get(exercise)
        return state.is_down if state is not None else False

    def reset(self):
        """Reset all cycle states and totals."""
        for state in self.cycle_states.values():
            state.reset()
        self.rep_count = 0
        self.calories = 0.0
