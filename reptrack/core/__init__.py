"""
Core Processing Module
======================
Contains the pose data model, classification, rep counting, form checks and
session handling.
"""

# keypoints must load before the modules that pull in ..exercises
from .keypoints import FrameSize, Keypoint, KeypointIndex, Pose, rescale
from .announcer import Announcer, ConsoleAnnouncer, NullAnnouncer
from .classifier import ExerciseClassifier
from .form_evaluator import FormEvaluator, FormJudgment
from .rep_counter import RepCounter, RepEvent, calories_per_rep
from .session import SessionAggregator, SessionMetrics, SessionRecord
from .history import SessionHistory
from .engine import FrameResult, MotionAnalysisEngine, SessionStatus
from .commands import CommandDispatcher

# Alias for convenience
Engine = MotionAnalysisEngine

__all__ = [
    'FrameSize',
    'Keypoint',
    'KeypointIndex',
    'Pose',
    'rescale',
    'Announcer',
    'ConsoleAnnouncer',
    'NullAnnouncer',
    'ExerciseClassifier',
    'FormEvaluator',
    'FormJudgment',
    'RepCounter',
    'RepEvent',
    'calories_per_rep',
    'SessionAggregator',
    'SessionMetrics',
    'SessionRecord',
    'SessionHistory',
    'FrameResult',
    'MotionAnalysisEngine',
    'Engine',
    'SessionStatus',
    'CommandDispatcher',
]
