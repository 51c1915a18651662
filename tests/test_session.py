"""
GameSession: modes, the idle/thinking phase machine and tally handling.
"""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from connectfour.game.actions import IllegalMoveError
from connectfour.game.session import GameSession, Phase

from conftest import board_from


def vs_computer(difficulty: str = "medium") -> GameSession:
    return GameSession(mode="vs_computer", difficulty=difficulty, rng=random.Random(0))


class TestTwoPlayers:
    def test_never_needs_computer(self):
        s = GameSession()
        s.submit_human_move(3)
        assert s.state.current == "second"
        assert not s.needs_computer_move()
        s.submit_human_move(3)
        assert s.state.board.piece_count() == 2

    def test_new_game_keeps_scores(self):
        s = GameSession()
        for col in [0, 1, 0, 1, 0, 1, 0]:
            s.submit_human_move(col)
        assert s.state.result.kind == "win"
        s.new_game()
        assert s.state.board.piece_count() == 0
        assert not s.state.result.is_terminal
        assert s.state.scores == {"first": 1, "second": 0}
        s.clear_scores()
        assert s.state.scores == {"first": 0, "second": 0}

    def test_switching_mode_starts_a_new_game(self):
        s = GameSession()
        s.submit_human_move(2)
        s.set_mode("two_players")
        assert s.state.board.piece_count() == 1
        s.set_mode("vs_computer")
        assert s.state.board.piece_count() == 0


class TestVsComputer:
    def test_computer_replies_after_human(self):
        s = vs_computer()
        s.submit_human_move(3)
        assert s.needs_computer_move()
        row = s.computer_move()
        assert row in range(6)
        assert s.phase is Phase.IDLE
        assert s.state.current == "first"
        assert s.state.board.piece_count() == 2

    def test_human_cannot_move_on_computer_turn(self):
        s = vs_computer()
        s.submit_human_move(3)
        with pytest.raises(IllegalMoveError):
            s.submit_human_move(4)
        assert s.state.board.piece_count() == 1

    def test_computer_move_when_not_due_raises(self):
        s = vs_computer()
        with pytest.raises(RuntimeError):
            s.computer_move()
        assert s.phase is Phase.IDLE

    def test_phase_guards_moves_while_thinking(self):
        s = vs_computer()
        s.submit_human_move(3)
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = s.start_computer_move(pool)
            assert s.phase is Phase.COMPUTER_THINKING
            assert not s.can_drop(0)
            with pytest.raises(IllegalMoveError) as exc:
                s.submit_human_move(0)
            assert exc.value.reason == "the computer is thinking"
            with pytest.raises(RuntimeError):
                s.start_computer_move(pool)
            s.finish_computer_move(future)
        assert s.phase is Phase.IDLE
        assert s.can_drop(0)
        assert s.state.board.piece_count() == 2

    def test_search_works_on_a_snapshot(self):
        s = vs_computer()
        s.submit_human_move(3)
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = s.start_computer_move(pool)
            future.result()
            # nothing lands until the owner thread applies it
            assert s.state.board.piece_count() == 1
            s.finish_computer_move(future)
        assert s.state.board.piece_count() == 2

    def test_computer_blocks(self):
        s = vs_computer("medium")
        s.state.board = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "O......",
            "XXX.O..",
        )
        s.state.current = "second"
        s.computer_move()
        assert s.state.board.grid[5][3] == "second"

    def test_computer_win_counts_in_tally(self):
        s = vs_computer()
        s.state.board = board_from(
            ".......",
            ".......",
            ".......",
            "......O",
            "X.....O",
            "X.X..XO",
        )
        s.state.current = "second"
        s.computer_move()
        assert s.state.result.kind == "win"
        assert s.state.result.winner == "second"
        assert s.state.scores["second"] == 1
        assert not s.needs_computer_move()

    def test_unknown_difficulty_is_rejected(self):
        with pytest.raises(ValueError):
            GameSession(difficulty="nightmare")
        s = GameSession()
        with pytest.raises(ValueError):
            s.set_difficulty("nightmare")
        assert s.depth == 4


class TestAbandonedSearch:
    def test_new_game_drops_move_started_for_old_game(self):
        s = vs_computer()
        s.submit_human_move(0)
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = s.start_computer_move(pool)
            s.new_game()
            future.result()
            assert s.finish_computer_move(future) is None
        assert s.state.board.piece_count() == 0
        assert s.state.current == "first"
        assert s.phase is Phase.IDLE

    def test_mode_switch_drops_move_in_flight(self):
        s = vs_computer()
        s.submit_human_move(3)
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = s.start_computer_move(pool)
            s.set_mode("two_players")
            assert s.finish_computer_move(future) is None
        assert s.state.board.piece_count() == 0

    def test_fresh_game_accepts_its_own_computer_move(self):
        s = vs_computer()
        s.submit_human_move(0)
        with ThreadPoolExecutor(max_workers=1) as pool:
            stale = s.start_computer_move(pool)
            s.new_game()
            s.submit_human_move(6)
            current = s.start_computer_move(pool)
            assert s.finish_computer_move(stale) is None
            assert s.phase is Phase.COMPUTER_THINKING
            row = s.finish_computer_move(current)
        assert row in range(6)
        assert s.state.board.piece_count() == 2
        assert s.state.board.grid[5][6] == "first"
        assert s.state.current == "first"

    def test_future_is_applied_once(self):
        s = vs_computer()
        s.submit_human_move(3)
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = s.start_computer_move(pool)
            assert s.finish_computer_move(future) is not None
            assert s.finish_computer_move(future) is None
        assert s.state.board.piece_count() == 2
