"""
history.py - Session History Store
==================================
Keeps finished sessions newest first, capped, optionally mirrored to a JSON
file.

Does NOT handle:
- Charting or rendering history
"""

import json
import os
from typing import Dict, List, Optional

from .session import SessionRecord


class SessionHistory:
    """
    Capped, newest-first list of session records.

    When a path is given the list is loaded from it on construction and
    rewritten after every save.
    """

    # ===== CONFIGURATION =====
    DEFAULT_CAPACITY = 50

    def __init__(self, path: Optional[str] = None, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")

        self.path = path
        self.capacity = capacity
        self._records: List[SessionRecord] = []

        if path is not None and os.path.exists(path):
            self._records = self._load(path)[:capacity]

    @staticmethod
    def _load(path: str) -> List[SessionRecord]:
        """
        Load records from a JSON file.

        An unreadable file yields an empty history; malformed entries are
        dropped.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"⚠️ [SessionHistory] Ignoring unreadable history {path}: {str(e)}")
            return []

        if not isinstance(raw, list):
            print(f"⚠️ [SessionHistory] Ignoring history {path}: expected a list")
            return []

        records = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            try:
                records.append(SessionRecord.from_dict(item))
            except (TypeError, ValueError) as e:
                print(f"⚠️ [SessionHistory] Skipping malformed session entry: {str(e)}")
        return records

    def _write(self):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([record.to_dict() for record in self._records], f, indent=2)

    def save(self, record: SessionRecord):
        """Insert a record at the front, evicting the oldest past capacity."""
        self._records.insert(0, record)
        del self._records[self.capacity:]
        if self.path is not None:
            self._write()

    def last(self) -> Optional[SessionRecord]:
        return self._records[0] if self._records else None

    def sessions(self) -> List[SessionRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def summary(self) -> Dict[str, float]:
        """Totals shown on the progress dashboard."""
        if not self._records:
            return {
                "total_sessions": 0,
                "total_reps": 0,
                "best_accuracy": 0.0,
                "average_duration": 0.0,
                "total_calories": 0.0,
            }

        metrics = [record.metrics for record in self._records]
        return {
            "total_sessions": len(metrics),
            "total_reps": sum(m.rep_count for m in metrics),
            "best_accuracy": max(m.accuracy for m in metrics),
            "average_duration": sum(m.elapsed_seconds for m in metrics) / len(metrics),
            "total_calories": sum(m.calories_estimate for m in metrics),
        }
