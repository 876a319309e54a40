# Area: Session
"""
fair_rps.session — One provably-fair round
===========================================

The GameSession picks the opponent's move, publishes the HMAC of it,
collects the user's choice through the terminal collaborator, decides
the outcome and reveals the key. It blocks on each input line and runs
exactly once.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import uuid

from ._state import SessionPhase, SessionState
from .commitment import CommitmentGenerator, RandomSource, verify_commitment
from .console import PROMPT, TerminalIO, format_menu
from .errors import EntropyError, SessionStateError
from .help_matrix import DEFAULT_COLUMN_WIDTH, build_matrix, render_matrix
from .menu import Help, Invalid, Quit, SelectMove, parse_choice
from .moves import MoveSet
from .outcome import Outcome, OutcomeResolver

logger = logging.getLogger("fair_rps.session")


@dataclass(frozen=True)
class RoundResult:
    """Everything the user needs to check the round was fair."""
    user_move: str
    opponent_move: str
    outcome: Outcome
    digest: str
    key: str
    algorithm: str

    def verify(self) -> bool:
        return verify_commitment(self.key, self.opponent_move, self.digest, self.algorithm)


class GameSession:
    """
    A single round between the user and the automated opponent.

    Usage
    -----
        session = GameSession(MoveSet.from_args(["rock", "paper", "scissors"]), ConsoleIO())
        result = session.run()   # None if the user quit
    """

    def __init__(
        self,
        moves: MoveSet,
        io: TerminalIO,
        generator: Optional[CommitmentGenerator] = None,
        source: Optional[RandomSource] = None,
        column_width: int = DEFAULT_COLUMN_WIDTH,
    ):
        self.moves = moves
        self.io = io
        self.generator = generator or CommitmentGenerator(source=source)
        self.source = source or self.generator.source
        self.resolver = OutcomeResolver(moves)
        self.column_width = column_width
        self.state = SessionState(
            session_id=uuid.uuid4().hex[:8],
            opponent_move=self._pick_opponent_move(),
        )
        logger.info(f"[{self.state.session_id}] Session created with {len(moves)} moves")

    def _pick_opponent_move(self) -> str:
        try:
            index = self.source.randbelow(len(self.moves))
        except (OSError, NotImplementedError) as e:
            raise EntropyError("opponent move", str(e)) from e
        return self.moves.move_at(index)

    @property
    def phase(self) -> SessionPhase:
        return self.state.phase

    # ── Lifecycle ────────────────────────────────────────────────

    def run(self) -> Optional[RoundResult]:
        """Play the round. Returns None if the user quits."""
        if self.state.phase is not SessionPhase.INITIALIZED:
            raise SessionStateError(self.state.phase.value, SessionPhase.COMMITTED.value)

        self._commit()
        self.state.advance_phase(SessionPhase.AWAITING_CHOICE)

        while True:
            self.io.show(format_menu(self.moves.moves))
            try:
                line = self.io.ask(PROMPT)
            except EOFError:
                logger.info(f"[{self.state.session_id}] End of input, quitting")
                return self._quit()

            choice = parse_choice(line, len(self.moves))
            if isinstance(choice, Quit):
                return self._quit()
            if isinstance(choice, Help):
                self._show_help()
                self.state.advance_phase(SessionPhase.AWAITING_CHOICE)
            elif isinstance(choice, SelectMove):
                return self._resolve(self.moves.move_at(choice.index))
            elif isinstance(choice, Invalid):
                logger.debug(f"[{self.state.session_id}] Invalid input {choice.raw!r}: {choice.reason}")
                self.io.show("Invalid input, please try again.")
                self.state.advance_phase(SessionPhase.AWAITING_CHOICE)

    # ── Phase handlers ───────────────────────────────────────────

    def _commit(self):
        commitment = self.generator.commit(self.state.opponent_move)
        self.state.digest = commitment.digest
        self.state.advance_phase(SessionPhase.COMMITTED)
        self.io.show(f"HMAC: {commitment.digest}")

    def _show_help(self):
        matrix = build_matrix(self.moves, self.resolver)
        self.io.show("")
        self.io.show(render_matrix(matrix, self.column_width))

    def _quit(self) -> None:
        self.state.advance_phase(SessionPhase.TERMINATED)
        self.io.show("Goodbye!")
        return None

    def _resolve(self, user_move: str) -> RoundResult:
        self.state.user_move = user_move
        outcome = self.resolver.resolve(user_move, self.state.opponent_move)
        self.state.advance_phase(SessionPhase.RESOLVED)
        key = self.generator.reveal()

        self.io.show(f"Your move: {user_move}")
        self.io.show(f"Computer's move: {self.state.opponent_move}")
        self.io.show(f"Result: You {outcome.value}!")
        self.io.show(f"HMAC key: {key}")

        logger.info(
            f"[{self.state.session_id}] {user_move} vs {self.state.opponent_move}: {outcome.value}"
        )
        return RoundResult(
            user_move=user_move,
            opponent_move=self.state.opponent_move,
            outcome=outcome,
            digest=self.state.digest,
            key=key,
            algorithm=self.generator.algorithm,
        )
