"""
engine.py - Motion Analysis Engine
==================================
Owns one tracking session: lifecycle, exercise lock, rep counting, form
evaluation and metrics.
"""

import enum
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

import numpy as np

from ..exercises import ExerciseType
from .announcer import Announcer, safe_announce
from .classifier import ExerciseClassifier
from .form_evaluator import FormEvaluator, FormJudgment
from .keypoints import FrameSize, Pose
from .rep_counter import RepCounter, RepEvent
from .session import SessionAggregator, SessionMetrics, SessionRecord


class SessionStatus(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class SessionStore(Protocol):
    def save(self, record: SessionRecord) -> None:
        ...


@dataclass(frozen=True)
class FrameResult:
    """Outcome of processing one frame."""
    exercise: ExerciseType
    newly_detected: bool
    rep_event: Optional[RepEvent]
    judgment: FormJudgment
    metrics: SessionMetrics

    @property
    def rep_count(self) -> int:
        return self.metrics.rep_count


class MotionAnalysisEngine:
    """
    Turns a stream of poses into exercise telemetry.

    Frames are processed one at a time in a fixed order: classify (only while
    the exercise is unknown), count, evaluate, aggregate. start/pause/end are
    no-ops from states where they do not apply, so duplicate control signals
    are harmless.
    """

    START_MESSAGE = "Session started. I'll track your form."
    PAUSE_MESSAGE = "Session paused."

    def __init__(self,
                 source_size: FrameSize,
                 target_size: Optional[FrameSize] = None,
                 announcer: Optional[Announcer] = None,
                 store: Optional[SessionStore] = None,
                 clock: Callable[[], float] = time.time,
                 verbose: bool = True):
        """
        Initialize the engine.

        Args:
            source_size: Coordinate extent of incoming keypoints
            target_size: Display extent to rescale into (defaults to source_size)
            announcer: Optional sink for spoken/status messages
            store: Optional persistence collaborator receiving finished sessions
            clock: Time source in seconds, used for elapsed time and timestamps
            verbose: Print lifecycle status lines
        """
        self.source_size = source_size
        self.target_size = target_size or source_size
        self.announcer = announcer
        self.store = store
        self.clock = clock
        self.verbose = verbose

        self.classifier = ExerciseClassifier()
        self.form_evaluator = FormEvaluator()
        self.rep_counter = RepCounter(verbose=verbose)
        self.aggregator = SessionAggregator(clock=clock)

        self.status = SessionStatus.NOT_STARTED
        self.exercise = ExerciseType.UNKNOWN
        self.last_judgment: Optional[FormJudgment] = None
        self.last_record: Optional[SessionRecord] = None

    def _log(self, message: str):
        if self.verbose:
            print(message)

    def announce(self, text: str):
        safe_announce(self.announcer, text)

    @property
    def running(self) -> bool:
        return self.status == SessionStatus.RUNNING

    @property
    def rep_count(self) -> int:
        return self.rep_counter.rep_count

    def set_frame_sizes(self, source_size: FrameSize, target_size: Optional[FrameSize] = None):
        """Update coordinate extents, e.g. after the camera resolution is known."""
        self.source_size = source_size
        self.target_size = target_size or source_size

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """
        Start a new session, or resume a paused one.

        Returns:
            True if the status changed
        """
        if self.status == SessionStatus.RUNNING:
            self._log("🔄 [Engine] Session already running — ignored duplicate start")
            return False

        if self.status == SessionStatus.PAUSED:
            self.status = SessionStatus.RUNNING
            self._log("✅ [Engine] Session resumed")
            return True

        self.exercise = ExerciseType.UNKNOWN
        self.last_judgment = None
        self.rep_counter.reset()
        self.aggregator.begin_session()
        self.status = SessionStatus.RUNNING

        self._log("✅ [Engine] Session started")
        self.announce(self.START_MESSAGE)
        return True

    def pause(self) -> bool:
        if self.status != SessionStatus.RUNNING:
            return False

        self.status = SessionStatus.PAUSED
        self._log("🔹 [Engine] Session paused")
        self.announce(self.PAUSE_MESSAGE)
        return True

    def end(self) -> Optional[SessionRecord]:
        """
        End the session and hand its record to the store.

        Returns:
            The frozen session record, or None if no session was active
        """
        if self.status not in (SessionStatus.RUNNING, SessionStatus.PAUSED):
            self._log("🔄 [Engine] Session already stopped — ignoring duplicate end")
            return None

        metrics = self.aggregator.end_session(self.exercise)
        self.status = SessionStatus.ENDED
        if metrics is None:
            return None

        record = SessionRecord(metrics=metrics, ended_at=self.clock())
        self.last_record = record
        self._save(record)

        self._log(
            f"✅ [Engine] Session ended: {metrics.rep_count} reps of {metrics.exercise.value}, "
            f"{metrics.elapsed_seconds}s, accuracy {metrics.accuracy:.0%}"
        )
        self.announce(self.summary_message(metrics))
        return record

    def _save(self, record: SessionRecord):
        if self.store is None:
            return
        try:
            self.store.save(record)
        except Exception as e:
            print(f"⚠️ [Engine] Failed to save session: {str(e)}")

    @staticmethod
    def summary_message(metrics: SessionMetrics) -> str:
        exercise = metrics.exercise.value if metrics.exercise != ExerciseType.UNKNOWN else "reps"
        return (
            f"Session ended. You did {metrics.rep_count} {exercise} in "
            f"{metrics.elapsed_seconds} seconds. Calories burned {metrics.calories_estimate:.1f}. "
            f"Form accuracy {round(metrics.accuracy * 100)} percent."
        )

    def metrics(self) -> SessionMetrics:
        """Live metrics for the current (or last) session."""
        if self.aggregator.active:
            return self.aggregator.snapshot(self.exercise)
        if self.last_record is not None:
            return self.last_record.metrics
        return self.aggregator.snapshot(self.exercise)

    # ------------------------------------------------------------------
    # Frame processing
    # ------------------------------------------------------------------

    def process_movenet(self, keypoints_with_scores: np.ndarray) -> Optional[FrameResult]:
        """Process raw MoveNet output given in normalized [y, x, score] rows."""
        return self.process_pose(Pose.from_movenet(keypoints_with_scores, self.source_size))

    def process_pose(self, pose: Pose) -> Optional[FrameResult]:
        """
        Process a single pose in source coordinates.

        Args:
            pose: Keypoints from the pose source

        Returns:
            FrameResult, or None if no session is running
        """
        if self.status != SessionStatus.RUNNING:
            return None

        scaled = pose.rescale(self.source_size, self.target_size)

        newly_detected = False
        if self.exercise == ExerciseType.UNKNOWN:
            detected = self.classifier.classify(scaled)
            if detected != ExerciseType.UNKNOWN:
                self.exercise = detected
                newly_detected = True
                self._log(f"✅ [Engine] Exercise detected: {detected.value}")
                self.announce(f"Detected {detected.value}")

        rep_event = self.rep_counter.update(scaled, self.exercise)
        if rep_event is not None:
            self.aggregator.record_rep(rep_event)
            self.announce(str(rep_event.rep_count))

        judgment = self.form_evaluator.evaluate(scaled, self.exercise)
        self.aggregator.record_frame(judgment)
        self.last_judgment = judgment

        return FrameResult(
            exercise=self.exercise,
            newly_detected=newly_detected,
            rep_event=rep_event,
            judgment=judgment,
            metrics=self.aggregator.snapshot(self.exercise),
        )
