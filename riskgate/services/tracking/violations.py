"""Per-session rejection counters owned by the host application."""

import threading
import time
from dataclasses import dataclass, field
from typing import Any

from riskgate.services.classifier.models import ClassificationResult


@dataclass
class SessionViolations:
    """Rejection counts for one session."""

    session_id: str
    total: int = 0
    by_signal: dict[str, int] = field(default_factory=dict)
    last_violation_at: float | None = None

    def copy(self) -> "SessionViolations":
        return SessionViolations(
            session_id=self.session_id,
            total=self.total,
            by_signal=dict(self.by_signal),
            last_violation_at=self.last_violation_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "session_id": self.session_id,
            "total": self.total,
            "by_signal": dict(self.by_signal),
            "last_violation_at": self.last_violation_at,
        }


class ViolationTracker:
    """Thread-safe per-session violation counters with a max session count."""

    def __init__(self, max_sessions: int = 1000):
        if max_sessions <= 0:
            raise ValueError(f"max_sessions must be positive, got {max_sessions}")
        self._max_sessions = max_sessions
        self._sessions: dict[str, SessionViolations] = {}
        self._lock = threading.Lock()

    def record(self, session_id: str, result: ClassificationResult) -> SessionViolations | None:
        """Count a rejection for session_id. Accepted results are ignored."""
        if result.accepted:
            return None
        with self._lock:
            # Most recently violating session last
            entry = self._sessions.pop(session_id, None)
            if entry is None:
                if len(self._sessions) >= self._max_sessions:
                    del self._sessions[next(iter(self._sessions))]
                entry = SessionViolations(session_id=session_id)
            self._sessions[session_id] = entry
            signal = result.triggered_signal.value
            entry.total += 1
            entry.by_signal[signal] = entry.by_signal.get(signal, 0) + 1
            entry.last_violation_at = time.time()
            return entry.copy()

    def get(self, session_id: str) -> SessionViolations:
        """Return a snapshot of a session's counters (zeroed if unknown)."""
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                return SessionViolations(session_id=session_id)
            return entry.copy()

    def reset(self, session_id: str) -> bool:
        """Drop a session's counters. Returns True if it existed."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
