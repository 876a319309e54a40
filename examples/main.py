"""
main.py — Play one round from Python and check it was fair
===========================================================

    python examples/main.py rock paper scissors lizard spock

Same game as the ``fair-rps`` command, but shows how to drive the
session from code and verify the revealed key afterwards.
"""

import logging
import sys

from fair_rps import ConsoleIO, GameSession, MoveListError, MoveSet

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

try:
    moves = MoveSet.from_args(sys.argv[1:] or ["rock", "paper", "scissors"])
except MoveListError as e:
    print(e.message)
    sys.exit(1)

result = GameSession(moves, ConsoleIO()).run()

if result is not None:
    print(f"Commitment verified: {result.verify()}")
