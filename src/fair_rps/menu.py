# Area: Session
"""
fair_rps.menu — Parsing one line of menu input
===============================================

Each line the user types is parsed once into a closed set of choices:
Quit, Help, SelectMove or Invalid.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

QUIT_TOKEN = "0"
HELP_TOKEN = "?"


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class SelectMove:
    index: int  # 0-based position in the move set


@dataclass(frozen=True)
class Invalid:
    raw: str
    reason: str


MenuChoice = Union[Quit, Help, SelectMove, Invalid]


def parse_choice(line: str, move_count: int) -> MenuChoice:
    """Interpret a raw input line against a menu of ``move_count`` moves."""
    token = line.strip()
    if not token:
        return Invalid(raw=line, reason="empty input")
    if token == QUIT_TOKEN:
        return Quit()
    if token == HELP_TOKEN:
        return Help()
    if not (token.isascii() and token.isdigit()):
        return Invalid(raw=line, reason="not a menu number")
    number = int(token)
    if not 1 <= number <= move_count:
        return Invalid(raw=line, reason=f"choose 1-{move_count}, 0 or ?")
    return SelectMove(index=number - 1)
