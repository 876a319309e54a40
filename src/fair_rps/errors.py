# Area: Shared
"""
fair_rps.errors — Custom exception classes
===========================================

Defines the exception hierarchy for the game.
User-facing errors carry the exact rule that was violated; fatal errors
store full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
import json


class FairRPSError(Exception):
    """Base exception for all fair_rps errors."""
    pass


class MoveListError(FairRPSError):
    """Raised when the command-line move list breaks a validation rule."""

    def __init__(self, rule: str, message: str, moves: Sequence[str]):
        self.rule = rule
        self.message = message
        self.moves = list(moves)
        super().__init__(message)


class InvalidMoveError(FairRPSError, AssertionError):
    """Raised when a move is not part of the move set.

    Upstream validation makes this unreachable; seeing it means an
    internal invariant was broken.
    """

    def __init__(self, move: str, moves: Sequence[str]):
        self.move = move
        self.moves = list(moves)
        super().__init__(f"Move {move!r} is not one of {self.moves}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_MOVE",
            context={"move": self.move, "moves": self.moves},
            details=[str(self)],
        )


class EntropyError(FairRPSError):
    """Raised when the secure random source cannot deliver randomness.

    ``purpose`` names what the randomness was for ("key", "opponent move");
    ``requested_bytes`` is set only for raw byte draws.
    """

    def __init__(self, purpose: str, reason: str, requested_bytes: Optional[int] = None):
        self.purpose = purpose
        self.reason = reason
        self.requested_bytes = requested_bytes
        super().__init__(f"Secure random source failed for {purpose}: {reason}")

    def format_error_log(self) -> str:
        context: Dict[str, Any] = {"purpose": self.purpose}
        if self.requested_bytes is not None:
            context["requested_bytes"] = self.requested_bytes
        return _format_error_block(
            error_type="ENTROPY_FAILURE",
            context=context,
            details=[self.reason],
        )


class CommitmentError(FairRPSError):
    """Raised when the commitment protocol is used out of order."""
    pass


class SessionStateError(FairRPSError):
    """Raised on an illegal game session phase transition."""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move session from {current} to {requested}")


class ConfigError(FairRPSError):
    """Raised when settings from the environment fail validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Invalid configuration: {'; '.join(errors)}")


def _format_error_block(
    error_type: str,
    context: Dict[str, Any],
    details: Optional[List[str]],
) -> str:
    """Format a structured block for a fatal error."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " FATAL ERROR — PROCESS TERMINATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        "",
        " ── CONTEXT " + "─" * 52,
        _indent_json(context),
    ]

    if details:
        lines.append("")
        lines.append(" ── DETAILS " + "─" * 52)
        for detail in details:
            lines.append(f" • {detail}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    formatted = json.dumps(data, indent=indent, default=str)
    return "\n".join(" " + line for line in formatted.split("\n"))
