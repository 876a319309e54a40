"""
fair_rps._state — Game session phase tracker
=============================================

Tracks the lifecycle of a single round: the opponent's move, the
commitment, and which phase the session is in.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional
import logging

from .errors import SessionStateError

logger = logging.getLogger("fair_rps.state")


class SessionPhase(Enum):
    """Current phase of a game session."""
    INITIALIZED     = "initialized"       # Move set fixed, opponent move picked
    COMMITTED       = "committed"         # Digest published
    AWAITING_CHOICE = "awaiting_choice"   # Menu shown, reading user input
    RESOLVED        = "resolved"          # Outcome decided, key revealed
    TERMINATED      = "terminated"        # User quit, no outcome


ALLOWED_TRANSITIONS: Dict[SessionPhase, FrozenSet[SessionPhase]] = {
    SessionPhase.INITIALIZED: frozenset({SessionPhase.COMMITTED}),
    SessionPhase.COMMITTED: frozenset({SessionPhase.AWAITING_CHOICE}),
    SessionPhase.AWAITING_CHOICE: frozenset({
        SessionPhase.AWAITING_CHOICE,   # help / invalid input
        SessionPhase.RESOLVED,
        SessionPhase.TERMINATED,
    }),
    SessionPhase.RESOLVED: frozenset(),
    SessionPhase.TERMINATED: frozenset(),
}


@dataclass
class SessionState:
    """Mutable state of one session. Owned by GameSession."""
    session_id: str
    opponent_move: str
    phase: SessionPhase = SessionPhase.INITIALIZED
    digest: Optional[str] = None
    user_move: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        return self.phase in (SessionPhase.RESOLVED, SessionPhase.TERMINATED)

    def can_advance(self, new_phase: SessionPhase) -> bool:
        return new_phase in ALLOWED_TRANSITIONS[self.phase]

    def advance_phase(self, new_phase: SessionPhase):
        if not self.can_advance(new_phase):
            raise SessionStateError(self.phase.value, new_phase.value)
        if new_phase is not self.phase:
            logger.info(f"[{self.session_id}] Phase: {self.phase.value} → {new_phase.value}")
        self.phase = new_phase
