# Area: Tests
"""Shared fakes for the game tests."""

import logging

import pytest

from fair_rps.moves import MoveSet


class FixedRandomSource:
    """Deterministic RandomSource for tests."""

    def __init__(self, key: bytes = bytes(range(32)), index: int = 0):
        self.key = key
        self.index = index
        self.token_calls = []

    def token_bytes(self, n: int) -> bytes:
        self.token_calls.append(n)
        return (self.key * (n // len(self.key) + 1))[:n]

    def randbelow(self, n: int) -> int:
        return self.index % n


class BrokenRandomSource:
    """RandomSource whose OS entropy is unavailable."""

    def token_bytes(self, n: int) -> bytes:
        raise OSError("getrandom unavailable")

    def randbelow(self, n: int) -> int:
        raise NotImplementedError("no entropy")


class ScriptedIO:
    """TerminalIO that replays input lines and records output."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []
        self.prompts = []

    def show(self, text: str) -> None:
        self.output.append(text)

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def rps():
    return MoveSet.from_args(["rock", "paper", "scissors"])


@pytest.fixture
def rpsls():
    return MoveSet.from_args(["rock", "paper", "scissors", "lizard", "spock"])


@pytest.fixture
def fixed_source():
    return FixedRandomSource


@pytest.fixture
def broken_source():
    return BrokenRandomSource()


@pytest.fixture
def scripted_io():
    return ScriptedIO


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() between tests."""
    yield
    pkg_logger = logging.getLogger("fair_rps")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
