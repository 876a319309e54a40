# Area: Core
"""
fair_rps.outcome — Win/Lose/Draw resolution
============================================

Generalizes rock-paper-scissors to any odd number of moves using the
signed circular distance between two moves in the move set.
"""

from __future__ import annotations
from enum import Enum
from typing import List

from .moves import MoveSet


class Outcome(Enum):
    """Result of a round, always from one party's point of view."""
    WIN  = "Win"
    LOSE = "Lose"
    DRAW = "Draw"

    def opposite(self) -> "Outcome":
        if self is Outcome.WIN:
            return Outcome.LOSE
        if self is Outcome.LOSE:
            return Outcome.WIN
        return Outcome.DRAW


def signed_distance(moves: MoveSet, perspective_move: str, other_move: str) -> int:
    """
    Minimal residue of ``index(perspective) - index(other)`` in [-half, half].

    The extra ``+ n`` keeps the reduction non-negative on hosts whose
    modulo follows the dividend's sign.
    """
    n = len(moves)
    half = moves.half
    i = moves.index(perspective_move)
    j = moves.index(other_move)
    return ((i - j + half) % n + n) % n - half


def resolve(moves: MoveSet, perspective_move: str, other_move: str) -> Outcome:
    """
    Decide the round for the party that played ``perspective_move``.

    Raises
    ------
    InvalidMoveError
        If either move is not in ``moves``.
    """
    d = signed_distance(moves, perspective_move, other_move)
    if d > 0:
        return Outcome.WIN
    if d < 0:
        return Outcome.LOSE
    return Outcome.DRAW


def beats(moves: MoveSet, move: str) -> List[str]:
    """Moves that ``move`` wins against."""
    return [other for other in moves if resolve(moves, move, other) is Outcome.WIN]


def loses_to(moves: MoveSet, move: str) -> List[str]:
    """Moves that ``move`` loses against."""
    return [other for other in moves if resolve(moves, move, other) is Outcome.LOSE]


class OutcomeResolver:
    """Outcome resolution bound to one move set."""

    def __init__(self, moves: MoveSet):
        self.moves = moves

    def resolve(self, perspective_move: str, other_move: str) -> Outcome:
        return resolve(self.moves, perspective_move, other_move)
