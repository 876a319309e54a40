# Area: Shared
"""
Shared utilities used by the CLI and the game session.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
)

__all__ = [
    "setup_logging",
    "log_and_terminate",
]
