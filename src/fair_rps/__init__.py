"""
fair_rps — Provably fair rock-paper-scissors for any odd number of moves
=========================================================================

Quick Start:
    fair-rps rock paper scissors lizard spock

From Python:
    from fair_rps import MoveSet, GameSession, ConsoleIO
    moves = MoveSet.from_args(["rock", "paper", "scissors"])
    result = GameSession(moves, ConsoleIO()).run()
    if result is not None:
        assert result.verify()

How fairness works:
1. The opponent picks its move and publishes HMAC(key, move).
2. The user picks a move.
3. The key is revealed; anyone can recompute the HMAC.
"""

from .commitment import (
    Commitment,
    CommitmentGenerator,
    RandomSource,
    SystemRandomSource,
    compute_digest,
    verify_commitment,
)
from .console import ConsoleIO, TerminalIO
from .errors import (
    FairRPSError,
    MoveListError,
    InvalidMoveError,
    EntropyError,
    CommitmentError,
    SessionStateError,
    ConfigError,
)
from .help_matrix import HelpMatrix, build_matrix, render_matrix
from .menu import Help, Invalid, Quit, SelectMove, parse_choice
from .moves import MoveSet, validate_moves
from .outcome import Outcome, OutcomeResolver, resolve
from .session import GameSession, RoundResult

__all__ = [
    # Core
    "MoveSet",
    "validate_moves",
    "Outcome",
    "OutcomeResolver",
    "resolve",
    "Commitment",
    "CommitmentGenerator",
    "RandomSource",
    "SystemRandomSource",
    "compute_digest",
    "verify_commitment",
    "HelpMatrix",
    "build_matrix",
    "render_matrix",
    # Session
    "GameSession",
    "RoundResult",
    "TerminalIO",
    "ConsoleIO",
    "Quit",
    "Help",
    "SelectMove",
    "Invalid",
    "parse_choice",
    # Errors
    "FairRPSError",
    "MoveListError",
    "InvalidMoveError",
    "EntropyError",
    "CommitmentError",
    "SessionStateError",
    "ConfigError",
]
__version__ = "1.0.0"
