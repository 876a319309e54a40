# Area: Session Tests
"""Tests for the game session orchestration."""

import logging

import pytest

from fair_rps._state import SessionPhase
from fair_rps.commitment import CommitmentGenerator, compute_digest, verify_commitment
from fair_rps.errors import EntropyError, SessionStateError
from fair_rps.outcome import Outcome
from fair_rps.session import GameSession

KEY = bytes(range(32))


def _session(moves, io, source):
    return GameSession(moves, io, generator=CommitmentGenerator(source=source), source=source)


class TestOpponentMove:

    def test_picked_from_source(self, rpsls, scripted_io, fixed_source):
        session = _session(rpsls, scripted_io([]), fixed_source(index=4))
        assert session.state.opponent_move == "spock"
        assert session.phase == SessionPhase.INITIALIZED

    def test_broken_source_is_fatal(self, rps, scripted_io, broken_source):
        with pytest.raises(EntropyError) as exc:
            GameSession(rps, scripted_io([]), source=broken_source)
        assert exc.value.purpose == "opponent move"
        assert exc.value.requested_bytes is None
        assert "requested_bytes" not in exc.value.format_error_log()

    def test_default_source_shared_with_generator(self, rps, scripted_io):
        session = GameSession(rps, scripted_io([]))
        assert session.source is session.generator.source
        assert session.state.opponent_move in rps


class TestCompletedRound:

    def test_win(self, rps, scripted_io, fixed_source):
        io = scripted_io(["1"])  # rock
        result = _session(rps, io, fixed_source(key=KEY, index=2)).run()  # scissors
        assert result.user_move == "rock"
        assert result.opponent_move == "scissors"
        assert result.outcome is Outcome.WIN
        assert "Result: You Win!" in io.output

    def test_lose_and_draw(self, rps, scripted_io, fixed_source):
        lose = _session(rps, scripted_io(["1"]), fixed_source(index=1)).run()
        draw = _session(rps, scripted_io(["1"]), fixed_source(index=0)).run()
        assert lose.outcome is Outcome.LOSE
        assert draw.outcome is Outcome.DRAW

    def test_digest_shown_before_menu(self, rps, scripted_io, fixed_source):
        io = scripted_io(["2"])
        _session(rps, io, fixed_source(key=KEY, index=0)).run()
        digest = compute_digest(KEY, "rock")
        assert io.output[0] == f"HMAC: {digest}"
        assert "Available moves:" in io.output[1]

    def test_key_not_shown_before_choice(self, rps, scripted_io, fixed_source):
        io = scripted_io(["?", "bad", "2"])
        _session(rps, io, fixed_source(key=KEY, index=0)).run()
        key_line = f"HMAC key: {KEY.hex()}"
        assert io.output[-1] == key_line
        assert key_line not in io.output[:-1]
        assert all(KEY.hex() not in line for line in io.output[:-1])

    def test_revealed_key_verifies_published_digest(self, rpsls, scripted_io):
        for choice in ["1", "2", "3", "4", "5"]:
            io = scripted_io([choice])
            result = GameSession(rpsls, io).run()
            published = io.output[0].split("HMAC: ")[1]
            assert published == result.digest
            assert verify_commitment(result.key, result.opponent_move, published)
            assert result.verify()

    def test_reports_moves(self, rpsls, scripted_io, fixed_source):
        io = scripted_io(["5"])
        _session(rpsls, io, fixed_source(index=2)).run()
        assert "Your move: spock" in io.output
        assert "Computer's move: scissors" in io.output
        assert "Result: You Win!" in io.output

    def test_phase_is_resolved(self, rps, scripted_io, fixed_source):
        session = _session(rps, scripted_io(["1"]), fixed_source())
        session.run()
        assert session.phase == SessionPhase.RESOLVED
        assert session.state.user_move == "rock"


class TestMenuLoop:

    def test_quit_has_no_outcome(self, rps, scripted_io, fixed_source):
        io = scripted_io(["0"])
        session = _session(rps, io, fixed_source())
        assert session.run() is None
        assert session.phase == SessionPhase.TERMINATED
        assert io.output[-1] == "Goodbye!"
        assert not any(line.startswith("HMAC key") for line in io.output)

    def test_end_of_input_quits(self, rps, scripted_io, fixed_source):
        session = _session(rps, scripted_io([]), fixed_source())
        assert session.run() is None
        assert session.phase == SessionPhase.TERMINATED

    def test_invalid_input_reprompts(self, rps, scripted_io, fixed_source):
        io = scripted_io(["7", "rock", "", "3"])
        result = _session(rps, io, fixed_source(index=1)).run()
        assert result.user_move == "scissors"
        assert io.output.count("Invalid input, please try again.") == 3
        assert len(io.prompts) == 4

    def test_help_shows_matrix_and_returns_to_menu(self, rps, scripted_io, fixed_source):
        io = scripted_io(["?", "0"])
        _session(rps, io, fixed_source()).run()
        assert "Help Table" in io.text
        assert "v PC\\User >" in io.text
        assert io.text.count("Available moves:") == 2

    def test_menu_lists_moves_exit_and_help(self, rps, scripted_io, fixed_source):
        io = scripted_io(["0"])
        _session(rps, io, fixed_source()).run()
        menu = io.output[1].splitlines()
        assert menu[2:] == ["1 - rock", "2 - paper", "3 - scissors", "0 - exit", "? - help"]


class TestOneShot:

    def test_second_run_rejected(self, rps, scripted_io, fixed_source):
        session = _session(rps, scripted_io(["1"]), fixed_source())
        session.run()
        with pytest.raises(SessionStateError):
            session.run()

    def test_second_run_after_quit_rejected(self, rps, scripted_io, fixed_source):
        session = _session(rps, scripted_io(["0"]), fixed_source())
        session.run()
        with pytest.raises(SessionStateError):
            session.run()


class TestLogging:

    def test_key_not_logged_before_reveal(self, rps, scripted_io, fixed_source, caplog):
        pkg_logger = logging.getLogger("fair_rps")
        pkg_logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.DEBUG, logger="fair_rps"):
                _session(rps, scripted_io(["0"]), fixed_source(key=KEY)).run()
        finally:
            pkg_logger.removeHandler(caplog.handler)
        assert "Committed with sha3_256" in caplog.text
        assert KEY.hex() not in caplog.text
