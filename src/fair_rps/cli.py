# Area: Shared
"""
fair_rps.cli — Command-line interface
======================================

Provides the CLI entry point for playing a round and for checking a
revealed key against a published HMAC.

Usage:
    fair-rps rock paper scissors                     # Play one round
    fair-rps rock paper scissors lizard spock        # Any odd count >= 3
    fair-rps --verify KEY MOVE HMAC                  # Check a commitment

Exit codes:
    0  quit or completed round; commitment verified
    1  invalid move list, bad configuration, commitment mismatch
    2  fatal internal error
"""

import argparse
import logging
import sys
from typing import List, Optional

from ._shared import log_and_terminate, setup_logging
from .commitment import SUPPORTED_ALGORITHMS, CommitmentGenerator, verify_commitment
from .config import GameSettings, load_settings
from .console import ConsoleIO
from .errors import ConfigError, FairRPSError, MoveListError
from .moves import MoveSet
from .session import GameSession

logger = logging.getLogger("fair_rps.cli")

EXAMPLE = "Example: fair-rps rock paper scissors"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Provably fair rock-paper-scissors with any odd number of moves",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fair-rps rock paper scissors
  fair-rps rock paper scissors lizard spock
  fair-rps --verify <key> rock <hmac>
  FAIR_RPS_ALGORITHM=sha256 fair-rps rock paper scissors
        """,
    )

    parser.add_argument(
        "moves",
        nargs="*",
        help="Odd number (>= 3) of distinct move names, in winning order",
    )

    parser.add_argument(
        "--verify",
        nargs=3,
        metavar=("KEY", "MOVE", "HMAC"),
        help="Check that HMAC was computed from MOVE with the revealed KEY",
    )

    parser.add_argument(
        "--algorithm",
        choices=SUPPORTED_ALGORITHMS,
        help="HMAC digest algorithm (default: sha3_256)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to the JSON log file (empty string disables it)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level for the log file",
    )

    return parser.parse_args(argv)


def run_verify(key_hex: str, move: str, digest: str, settings: GameSettings) -> int:
    """Print OK/MISMATCH for a revealed commitment."""
    try:
        matches = verify_commitment(key_hex, move, digest, settings.algorithm)
    except ValueError:
        print("Error: Key must be a hexadecimal string.", file=sys.stderr)
        return 1
    print("OK" if matches else "MISMATCH")
    return 0 if matches else 1


def play(moves: MoveSet, settings: GameSettings) -> int:
    """Play one round on the console."""
    setup_logging(
        log_file_path=settings.log_file,
        level=settings.log_level_number,
        console_level=settings.console_log_level_number,
    )
    logger.info(f"Starting round: {len(moves)} moves, {settings.algorithm}")
    print("Moves: " + ", ".join(moves))

    try:
        generator = CommitmentGenerator(
            key_bytes=settings.key_bytes,
            algorithm=settings.algorithm,
        )
        session = GameSession(
            moves,
            ConsoleIO(),
            generator=generator,
            column_width=settings.column_width,
        )
        session.run()
    except KeyboardInterrupt:
        print("\nGoodbye!")
    except FairRPSError as e:
        log_and_terminate(e, exit_code=2)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    overrides = {
        "algorithm": args.algorithm,
        "log_file": args.log_file,
        "log_level": args.log_level,
    }

    if args.verify:
        try:
            settings = load_settings(overrides)
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return run_verify(*args.verify, settings=settings)

    try:
        moves = MoveSet.from_args(args.moves)
    except MoveListError as e:
        print(e.message, file=sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        return 1

    try:
        settings = load_settings(overrides)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return play(moves, settings)
