# Area: Session
"""
fair_rps.console — Terminal I/O collaborator
=============================================

The game session talks to the user only through a ``TerminalIO``.
``ConsoleIO`` is the real terminal; tests substitute a scripted one.
"""

from __future__ import annotations
from typing import Protocol, Sequence

from .menu import HELP_TOKEN, QUIT_TOKEN

PROMPT = "Enter your move: "


class TerminalIO(Protocol):
    def show(self, text: str) -> None: ...

    def ask(self, prompt: str) -> str: ...


class ConsoleIO:
    """TerminalIO over stdin/stdout."""

    def show(self, text: str) -> None:
        print(text)

    def ask(self, prompt: str) -> str:
        return input(prompt)


def format_menu(moves: Sequence[str]) -> str:
    """Numbered move list followed by the exit and help entries."""
    lines = ["", "Available moves:"]
    lines.extend(f"{number} - {move}" for number, move in enumerate(moves, start=1))
    lines.append(f"{QUIT_TOKEN} - exit")
    lines.append(f"{HELP_TOKEN} - help")
    return "\n".join(lines)
