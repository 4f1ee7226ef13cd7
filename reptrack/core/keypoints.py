"""
keypoints.py - Pose Data Model
==============================
Keypoints, the fixed MoveNet landmark table and coordinate rescaling.
"""

import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np


class KeypointIndex(enum.IntEnum):
    """MoveNet landmark indices."""
    NOSE = 0
    LEFT_EYE = 1
    RIGHT_EYE = 2
    LEFT_EAR = 3
    RIGHT_EAR = 4
    LEFT_SHOULDER = 5
    RIGHT_SHOULDER = 6
    LEFT_ELBOW = 7
    RIGHT_ELBOW = 8
    LEFT_WRIST = 9
    RIGHT_WRIST = 10
    LEFT_HIP = 11
    RIGHT_HIP = 12
    LEFT_KNEE = 13
    RIGHT_KNEE = 14
    LEFT_ANKLE = 15
    RIGHT_ANKLE = 16


NUM_KEYPOINTS = len(KeypointIndex)


@dataclass(frozen=True)
class Keypoint:
    """One landmark position with its detection confidence."""
    x: float
    y: float
    confidence: float = 0.0

    @property
    def point(self):
        return (self.x, self.y)


MISSING_KEYPOINT = Keypoint(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class FrameSize:
    width: float
    height: float


def rescale(keypoint: Keypoint, source: FrameSize, target: FrameSize) -> Keypoint:
    """
    Remap a keypoint from source (model) space into target (display) space.

    Confidence is carried through unchanged. A zero-sized source axis leaves
    that coordinate as-is.
    """
    sx = target.width / source.width if source.width else 1.0
    sy = target.height / source.height if source.height else 1.0
    return Keypoint(keypoint.x * sx, keypoint.y * sy, keypoint.confidence)


class Pose:
    """
    All landmark observations for one instant.

    Joints that were not supplied are returned as a zero-confidence keypoint
    at the origin.
    """

    def __init__(self, keypoints: Iterable[Optional[Keypoint]] = ()):
        keypoints = list(keypoints)
        if len(keypoints) > NUM_KEYPOINTS:
            raise ValueError(
                f"Pose accepts at most {NUM_KEYPOINTS} keypoints, got {len(keypoints)}"
            )
        self._keypoints: List[Keypoint] = [
            kp if kp is not None else MISSING_KEYPOINT for kp in keypoints
        ]

    @classmethod
    def from_mapping(cls, joints: dict) -> "Pose":
        """Build a pose from a {KeypointIndex: Keypoint} mapping."""
        keypoints = [joints.get(index, MISSING_KEYPOINT) for index in KeypointIndex]
        return cls(keypoints)

    @classmethod
    def from_movenet(cls, keypoints_with_scores: np.ndarray, frame_size: FrameSize) -> "Pose":
        """
        Convert MoveNet output into a pose in pixel coordinates.

        Args:
            keypoints_with_scores: Array of shape (17, 3) with normalized [y, x, score]
            frame_size: Size of the frame the model was run on

        Returns:
            Pose in frame pixel space
        """
        raw = np.asarray(keypoints_with_scores, dtype=float)
        if raw.ndim == 1 and raw.size >= NUM_KEYPOINTS * 3:
            # Multipose rows carry the bounding box after the 51 keypoint values
            raw = raw[:NUM_KEYPOINTS * 3].reshape((NUM_KEYPOINTS, 3))
        if raw.shape != (NUM_KEYPOINTS, 3):
            raise ValueError(f"Expected MoveNet keypoints of shape (17, 3), got {raw.shape}")

        return cls(
            Keypoint(float(kx * frame_size.width), float(ky * frame_size.height), float(score))
            for ky, kx, score in raw
        )

    def __getitem__(self, index: KeypointIndex) -> Keypoint:
        if 0 <= index < len(self._keypoints):
            return self._keypoints[index]
        return MISSING_KEYPOINT

    def __len__(self) -> int:
        return len(self._keypoints)

    def __iter__(self):
        return iter(self._keypoints)

    def is_empty(self) -> bool:
        """True when nobody is visible: no keypoints or all at zero confidence."""
        return all(kp.confidence <= 0 for kp in self._keypoints)

    def confident(self, indices: Sequence[KeypointIndex], min_score: float) -> bool:
        """Check every listed joint meets the confidence threshold."""
        return all(self[i].confidence >= min_score for i in indices)

    def mean_y(self, *indices: KeypointIndex) -> float:
        return sum(self[i].y for i in indices) / len(indices)

    def rescale(self, source: FrameSize, target: FrameSize) -> "Pose":
        return Pose(rescale(kp, source, target) for kp in self._keypoints)
