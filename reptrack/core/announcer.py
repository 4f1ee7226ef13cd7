"""
announcer.py - Spoken Feedback Sink
===================================
Optional output for short status messages (exercise detected, rep counts,
session summaries). A speech engine, a UI toast or a test double can stand
behind it.
"""

from typing import Optional, Protocol


class Announcer(Protocol):
    def announce(self, text: str) -> None:
        ...


class NullAnnouncer:
    """Discards every message."""

    def announce(self, text: str) -> None:
        pass


class ConsoleAnnouncer:
    """Prints messages to stdout."""

    def announce(self, text: str) -> None:
        print(f"🔊 {text}")


def safe_announce(announcer: Optional[Announcer], text: str) -> bool:
    """
    Deliver a message if an announcer is attached.

    Errors raised by the announcer are reported and dropped so that frame
    processing carries on without it.

    Returns:
        True if the message was delivered
    """
    if announcer is None:
        return False
    try:
        announcer.announce(text)
    except Exception as e:
        print(f"⚠️ [Announcer] Failed to announce {text!r}: {str(e)}")
        return False
    return True
