"""
commands.py - Voice Command Dispatch
====================================
Maps recognized speech (or any free text) onto session controls.
"""

from typing import Optional

from .engine import MotionAnalysisEngine


class CommandDispatcher:
    """Routes transcripts to engine start/pause/end and spoken queries."""

    ENCOURAGEMENT_MESSAGE = "Take a break. You're doing great!"

    def __init__(self, engine: MotionAnalysisEngine):
        self.engine = engine

    def handle(self, transcript: str) -> Optional[str]:
        """
        Act on one transcript.

        Returns:
            Name of the command that ran, or None if nothing matched
        """
        text = transcript.strip().lower()

        if "start" in text:
            self.engine.start()
            return "start"
        if "pause" in text or "stop" in text:
            self.engine.pause()
            return "pause"
        if "end" in text or "finish" in text:
            self.engine.end()
            return "end"
        if "how many" in text:
            self.engine.announce(f"You've done {self.engine.rep_count} reps")
            return "count"
        if "i can't" in text or "can't do" in text:
            self.engine.announce(self.ENCOURAGEMENT_MESSAGE)
            return "encourage"

        return None
