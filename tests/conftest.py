from __future__ import annotations

import random
from typing import Iterable, List

import pytest

from connectfour.core.board import Board
from connectfour.game.actions import apply_move, new_game
from connectfour.game.state import GameState
from connectfour.types import opponent

# Full board, no four in a row anywhere. Top row first.
DRAW_ROWS = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]

# Legal move order (first player starts) that fills DRAW_ROWS exactly.
DRAW_SEQUENCE = [2] + [0] * 6 + [1] * 6 + [4] * 6 + [5] * 6 + [2] * 5 + [3] * 6 + [6] * 6


def board_from(*rows: str) -> Board:
    """X = first, O = second, anything else empty."""
    return Board.from_rows(list(rows))


def play(state: GameState, columns: Iterable[int]) -> GameState:
    for col in columns:
        apply_move(state, col)
    return state


def mirror(board: Board) -> Board:
    b = board.copy()
    b.grid = [row[::-1] for row in board.grid]
    return b


def swap_owners(board: Board) -> Board:
    b = board.copy()
    b.grid = [[None if cell is None else opponent(cell) for cell in row] for row in board.grid]
    return b


def random_positions(seed: int, count: int, max_moves: int = 20) -> List[Board]:
    """Undecided positions reached by random legal play."""
    rng = random.Random(seed)
    out: List[Board] = []
    while len(out) < count:
        state = new_game()
        for _ in range(rng.randint(1, max_moves)):
            snapshot = state.board.copy()
            apply_move(state, rng.choice(sorted(state.board.valid_moves())))
            if state.result.is_terminal:
                state.board = snapshot
                break
        out.append(state.board)
    return out


@pytest.fixture
def state() -> GameState:
    return new_game()
