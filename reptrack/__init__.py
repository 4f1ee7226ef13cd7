"""
reptrack - Pose-based Exercise Tracking
=======================================
Turns a stream of MoveNet keypoints into exercise telemetry: detected
exercise, rep count, form feedback and session metrics.
"""

from .core import (
    CommandDispatcher,
    ExerciseClassifier,
    FormEvaluator,
    FrameSize,
    Keypoint,
    KeypointIndex,
    MotionAnalysisEngine,
    Pose,
    RepCounter,
    SessionAggregator,
    SessionHistory,
    SessionMetrics,
)
from .exercises import ExerciseType, PushUpDetector, SquatDetector

__version__ = "1.0.0"
__all__ = [
    "MotionAnalysisEngine",
    "ExerciseClassifier",
    "FormEvaluator",
    "RepCounter",
    "SessionAggregator",
    "SessionHistory",
    "SessionMetrics",
    "CommandDispatcher",
    "FrameSize",
    "Keypoint",
    "KeypointIndex",
    "Pose",
    "ExerciseType",
    "PushUpDetector",
    "SquatDetector",
]
