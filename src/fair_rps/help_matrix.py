# Area: Core
"""
fair_rps.help_matrix — Pairwise outcome table
==============================================

Rows are the opponent's ("PC") moves, columns are the user's moves, and
each cell is the outcome for the user.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidMoveError
from .moves import MoveSet
from .outcome import Outcome, OutcomeResolver

HEADER_LABEL = "v PC\\User >"
INTRO_LINE = "Help Table: Results are from the user's point of view."
DEFAULT_COLUMN_WIDTH = 12


@dataclass(frozen=True)
class HelpMatrix:
    moves: Tuple[str, ...]
    cells: Tuple[Tuple[Outcome, ...], ...]

    def _index(self, move: str) -> int:
        try:
            return self.moves.index(move)
        except ValueError:
            raise InvalidMoveError(move, self.moves) from None

    def outcome(self, opponent_move: str, user_move: str) -> Outcome:
        return self.cells[self._index(opponent_move)][self._index(user_move)]


def build_matrix(moves: MoveSet, resolver: OutcomeResolver) -> HelpMatrix:
    """Resolve every (opponent, user) pair with the user as perspective."""
    cells = tuple(
        tuple(resolver.resolve(user_move, opponent_move) for user_move in moves)
        for opponent_move in moves
    )
    return HelpMatrix(moves=tuple(moves), cells=cells)


def render_matrix(matrix: HelpMatrix, column_width: int = DEFAULT_COLUMN_WIDTH) -> str:
    """Format the matrix as a fixed-width text table."""
    longest = max(len(HEADER_LABEL), *(len(m) for m in matrix.moves))
    width = max(column_width, longest + 1)

    lines = [INTRO_LINE, ""]
    header = HEADER_LABEL.ljust(width) + "".join(m.ljust(width) for m in matrix.moves)
    lines.append(header.rstrip())
    lines.append("-" * len(header.rstrip()))
    for opponent_move, row in zip(matrix.moves, matrix.cells):
        line = opponent_move.ljust(width) + "".join(o.value.ljust(width) for o in row)
        lines.append(line.rstrip())
    return "\n".join(lines)
