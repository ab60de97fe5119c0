"""
Session Repository

Storage for capture sessions. The engine never touches this - API
handlers receive a repository as a dependency and persist analyses
through it.
"""

import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..domain.analysis import CBSwingAnalysis, SessionSummary
from ..domain.features import AgeGroup


@dataclass
class CaptureSession:
    """One player's batch of swings."""
    id: str
    age_group: AgeGroup
    created_at: datetime
    swings: list[CBSwingAnalysis] = field(default_factory=list)
    summary: Optional[SessionSummary] = None
    player_name: Optional[str] = None


class SessionNotFoundError(KeyError):
    """No session with the requested id."""


class SessionRepository(ABC):
    """Typed access to capture sessions."""

    @abstractmethod
    def create(self, age_group: AgeGroup, player_name: Optional[str] = None) -> CaptureSession:
        ...

    @abstractmethod
    def get(self, session_id: str) -> Optional[CaptureSession]:
        ...

    @abstractmethod
    def add_swing(self, session_id: str, analysis: CBSwingAnalysis) -> CaptureSession:
        """
        Append a swing.

        Raises:
            SessionNotFoundError: If the session does not exist
        """

    @abstractmethod
    def save_summary(self, session_id: str, summary: SessionSummary) -> CaptureSession:
        """
        Store a recomputed summary.

        Raises:
            SessionNotFoundError: If the session does not exist
        """


class InMemorySessionRepository(SessionRepository):
    """
    Process-local repository.

    Request handlers may run on several threads, so every access goes
    through one lock. Returned sessions are copies; mutate through the
    repository.
    """

    def __init__(self):
        self._sessions: dict[str, CaptureSession] = {}
        self._lock = threading.Lock()

    def create(self, age_group: AgeGroup, player_name: Optional[str] = None) -> CaptureSession:
        session = CaptureSession(
            id=str(uuid.uuid4()),
            age_group=age_group,
            created_at=datetime.now(),
            player_name=player_name,
        )
        with self._lock:
            self._sessions[session.id] = session
            return self._copy(session)

    def get(self, session_id: str) -> Optional[CaptureSession]:
        with self._lock:
            session = self._sessions.get(session_id)
            return self._copy(session) if session else None

    def add_swing(self, session_id: str, analysis: CBSwingAnalysis) -> CaptureSession:
        with self._lock:
            session = self._require(session_id)
            session.swings.append(analysis)
            return self._copy(session)

    def save_summary(self, session_id: str, summary: SessionSummary) -> CaptureSession:
        with self._lock:
            session = self._require(session_id)
            session.summary = summary
            return self._copy(session)

    def _require(self, session_id: str) -> CaptureSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    @staticmethod
    def _copy(session: CaptureSession) -> CaptureSession:
        return CaptureSession(
            id=session.id,
            age_group=session.age_group,
            created_at=session.created_at,
            swings=list(session.swings),
            summary=session.summary,
            player_name=session.player_name,
        )
