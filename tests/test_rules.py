"""
Win detection: the anchored single-cell check and the full-board scan.
"""

import pytest

from connectfour.core.board import Board
from connectfour.core.rules import check_win, check_winner_with_line, find_winner, is_draw

from conftest import DRAW_ROWS, board_from, random_positions


class TestCheckWin:
    def test_empty_cell_returns_none(self):
        assert check_win(Board(), 5, 3) is None

    def test_horizontal_line_through_middle_cell(self):
        b = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "OOO....",
            "XXXX...",
        )
        line = check_win(b, 5, 2)
        assert line == [(5, 0), (5, 1), (5, 2), (5, 3)]

    def test_vertical_line(self):
        b = board_from(
            ".......",
            ".......",
            "X......",
            "X......",
            "XO.....",
            "XOO....",
        )
        assert check_win(b, 2, 0) == [(2, 0), (3, 0), (4, 0), (5, 0)]

    def test_down_right_diagonal(self):
        b = board_from(
            ".......",
            ".......",
            "X......",
            "OX.....",
            "OOX....",
            "XOOX...",
        )
        line = check_win(b, 4, 2)
        assert line == [(2, 0), (3, 1), (4, 2), (5, 3)]

    def test_down_left_diagonal(self):
        b = board_from(
            ".......",
            ".......",
            "......O",
            ".....OX",
            "....OXX",
            "...OXXX",
        )
        line = check_win(b, 2, 6)
        assert line is not None
        assert set(line) == {(2, 6), (3, 5), (4, 4), (5, 3)}

    def test_run_longer_than_four_is_reported_whole(self):
        b = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "OOO.OO.",
            "XXXXX..",
        )
        line = check_win(b, 5, 4)
        assert line == [(5, 0), (5, 1), (5, 2), (5, 3), (5, 4)]

    def test_three_is_not_a_win(self):
        b = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "OO.....",
            "XXX....",
        )
        for c in range(3):
            assert check_win(b, 5, c) is None

    def test_line_never_mixes_owners(self):
        b = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "XXOXX..",
        )
        assert check_win(b, 5, 1) is None

    def test_only_lines_through_queried_cell_count(self):
        b = board_from(
            ".......",
            ".......",
            ".......",
            ".......",
            "O......",
            "XXXX..O",
        )
        assert check_win(b, 5, 6) is None
        assert check_win(b, 4, 0) is None

    def test_line_contains_query_cell_and_has_at_least_four(self):
        for b in random_positions(seed=7, count=30, max_moves=30):
            for r in range(b.rows):
                for c in range(b.cols):
                    line = check_win(b, r, c)
                    if b.grid[r][c] is None:
                        assert line is None
                    elif line is not None:
                        assert (r, c) in line
                        assert len(line) >= 4
                        assert {b.grid[rr][cc] for rr, cc in line} == {b.grid[r][c]}


class TestFullScan:
    def test_finds_owner_of_any_line(self):
        b = board_from(
            ".......",
            ".......",
            "......O",
            ".....OX",
            "....OXX",
            "...OXXX",
        )
        assert find_winner(b) == "second"
        player, line = check_winner_with_line(b)
        assert player == "second"
        assert len(line) == 4

    def test_no_winner_on_empty_or_drawn_board(self):
        assert find_winner(Board()) is None
        drawn = board_from(*DRAW_ROWS)
        assert find_winner(drawn) is None
        assert is_draw(drawn)

    def test_full_board_with_a_line_is_not_a_draw(self):
        rows = list(DRAW_ROWS)
        rows[0] = "XXXOOOO"
        b = board_from(*rows)
        assert b.is_full()
        assert find_winner(b) == "second"
        assert not is_draw(b)

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_undecided_positions_have_no_winner(self, seed):
        for b in random_positions(seed=seed, count=10):
            assert find_winner(b) is None
