"""
session.py - Session Metrics
============================
Accumulates per-frame outcomes into session summary metrics.
"""

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..exercises import ExerciseType
from .form_evaluator import FormJudgment
from .rep_counter import RepEvent


@dataclass(frozen=True)
class SessionMetrics:
    """Immutable summary of one tracked session."""
    exercise: ExerciseType
    rep_count: int
    elapsed_seconds: int
    good_form_frames: int
    total_frames: int
    calories_estimate: float

    @property
    def accuracy(self) -> float:
        """Share of frames with acceptable form; 1.0 when no frames were seen."""
        if self.total_frames == 0:
            return 1.0
        return self.good_form_frames / self.total_frames


@dataclass(frozen=True)
class SessionRecord:
    """Frozen metrics plus the wall-clock time the session ended."""
    metrics: SessionMetrics
    ended_at: float

    def to_dict(self) -> dict:
        return {
            "endedAt": int(self.ended_at * 1000),
            # Older readers look the session timestamp up under this key
            "startedAt": int(self.ended_at * 1000),
            "exercise": self.metrics.exercise.value,
            "reps": self.metrics.rep_count,
            "duration": self.metrics.elapsed_seconds,
            "accuracy": self.metrics.accuracy,
            "calories": self.metrics.calories_estimate,
            "goodFormFrames": self.metrics.good_form_frames,
            "totalFrames": self.metrics.total_frames,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionRecord":
        """
        Rebuild a record from its stored form.

        Older entries only carry accuracy, so frame counts are recovered
        from it on a 100-frame basis when missing.
        """
        try:
            exercise = ExerciseType(data.get("exercise") or ExerciseType.UNKNOWN.value)
        except ValueError:
            exercise = ExerciseType.UNKNOWN

        total_frames = int(data.get("totalFrames") or 0)
        if data.get("goodFormFrames") is not None:
            good_form_frames = int(data["goodFormFrames"])
        else:
            accuracy = data.get("accuracy")
            accuracy = 1.0 if accuracy is None else float(accuracy)
            total_frames = total_frames or 100
            good_form_frames = round(accuracy * total_frames)

        metrics = SessionMetrics(
            exercise=exercise,
            rep_count=int(data.get("reps") or 0),
            elapsed_seconds=int(data.get("duration") or 0),
            good_form_frames=min(good_form_frames, total_frames),
            total_frames=total_frames,
            calories_estimate=float(data.get("calories") or 0.0),
        )
        ended_at = data.get("endedAt") or data.get("startedAt") or 0
        return cls(metrics=metrics, ended_at=ended_at / 1000.0)


class SessionAggregator:
    """
    Running totals for a session.

    begin_session() must precede end_session(). A begin while a session is
    active is refused, and an end without a matching begin, or a second end,
    is a no-op returning None.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self.start_time: Optional[float] = None
        self.good_form_frames = 0
        self.total_frames = 0
        self.rep_count = 0
        self.calories = 0.0

    @property
    def active(self) -> bool:
        return self.start_time is not None

    def begin_session(self) -> bool:
        """
        Reset counters and record the start time.

        Returns:
            False if a session is already active (nothing is reset)
        """
        if self.active:
            return False

        self.start_time = self.clock()
        self.good_form_frames = 0
        self.total_frames = 0
        self.rep_count = 0
        self.calories = 0.0
        return True

    def record_frame(self, judgment: FormJudgment):
        self.total_frames += 1
        if judgment.acceptable:
            self.good_form_frames += 1

    def record_rep(self, event: RepEvent):
        self.rep_count = max(self.rep_count, event.rep_count)
        self.calories += event.calories

    def elapsed_seconds(self) -> int:
        if self.start_time is None:
            return 0
        return max(0, math.floor(self.clock() - self.start_time))

    def snapshot(self, exercise: ExerciseType) -> SessionMetrics:
        """Current totals without ending the session."""
        return SessionMetrics(
            exercise=exercise,
            rep_count=self.rep_count,
            elapsed_seconds=self.elapsed_seconds(),
            good_form_frames=self.good_form_frames,
            total_frames=self.total_frames,
            calories_estimate=self.calories,
        )

    def end_session(self, exercise: ExerciseType) -> Optional[SessionMetrics]:
        if self.start_time is None:
            return None

        metrics = self.snapshot(exercise)
        self.start_time = None
        return metrics
