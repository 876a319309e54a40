# Area: Core
"""
fair_rps.moves — The ordered move set
======================================

A move set is the fixed, ordered list of move names the game is played
with. Order matters: each move beats the half of the list that precedes it
cyclically and loses to the half that follows it.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from .errors import InvalidMoveError, MoveListError

MIN_MOVES = 3

# Rule identifiers carried by MoveListError
RULE_COUNT = "count"
RULE_PARITY = "parity"
RULE_UNIQUENESS = "uniqueness"


def validate_moves(moves: Sequence[str]) -> None:
    """
    Check a raw move list against the game rules.

    Rules are checked in order: count, parity, uniqueness.

    Raises
    ------
    MoveListError
        Naming the first rule that is violated.
    """
    if len(moves) < MIN_MOVES:
        raise MoveListError(
            RULE_COUNT,
            f"Error: You must provide at least {MIN_MOVES} moves.",
            moves,
        )
    if len(moves) % 2 == 0:
        raise MoveListError(
            RULE_PARITY,
            "Error: Number of moves must be odd.",
            moves,
        )
    duplicates = [move for move, count in Counter(moves).items() if count > 1]
    if duplicates:
        raise MoveListError(
            RULE_UNIQUENESS,
            f"Error: Moves must be non-repeating (repeated: {', '.join(duplicates)}).",
            moves,
        )


@dataclass(frozen=True)
class MoveSet:
    """Validated, immutable, ordered list of distinct moves."""
    moves: Tuple[str, ...]

    def __post_init__(self):
        validate_moves(self.moves)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "MoveSet":
        return cls(tuple(args))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[str]:
        return iter(self.moves)

    def __contains__(self, move: object) -> bool:
        return move in self.moves

    @property
    def half(self) -> int:
        """Number of moves each move beats (and loses to)."""
        return len(self.moves) // 2

    def index(self, move: str) -> int:
        try:
            return self.moves.index(move)
        except ValueError:
            raise InvalidMoveError(move, self.moves) from None

    def move_at(self, index: int) -> str:
        if not 0 <= index < len(self.moves):
            raise InvalidMoveError(str(index), self.moves)
        return self.moves[index]
