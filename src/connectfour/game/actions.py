from __future__ import annotations
import logging
from typing import Set, Tuple

from connectfour.core.rules import check_win
from connectfour.game.results import DRAW, GameResult, ONGOING
from connectfour.game.state import GameState
from connectfour.types import FIRST, Move, opponent

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """A move that cannot be applied. The state is left untouched."""

    def __init__(self, column: int, reason: str) -> None:
        super().__init__(f"Illegal move in column {column + 1}: {reason}.")
        self.column = column
        self.reason = reason


def new_game() -> GameState:
    return GameState()


def _illegal_reason(state: GameState, column: int) -> str | None:
    if state.result.is_terminal:
        return "the game is over"
    if column < 0 or column >= state.board.cols:
        return "column out of range"
    if state.board.is_column_full(column):
        return "column is full"
    return None


def can_drop(state: GameState, column: int) -> bool:
    return _illegal_reason(state, column) is None


def legal_columns(state: GameState) -> Set[int]:
    if state.result.is_terminal:
        return set()
    return {int(m) for m in state.board.valid_moves()}


def apply_move(state: GameState, column: int) -> Tuple[GameState, int]:
    """
    Drop the current player's piece into ``column``.

    Returns the (mutated) state and the landing row. A win is checked through
    the landing cell before fullness, so the last cell completing a line is a
    win and never a draw.
    """
    reason = _illegal_reason(state, column)
    if reason is not None:
        raise IllegalMoveError(column, reason)

    player = state.current
    row = state.board.drop(Move(column), player)

    line = check_win(state.board, row, column)
    if line is not None:
        state.winning_line = line
        state.result = GameResult.win(player)
        state.scores[player] = state.scores.get(player, 0) + 1
        logger.info("%s wins with %s", player, line)
    elif state.board.is_full():
        state.result = DRAW
        logger.info("draw")
    else:
        state.current = opponent(player)

    return state, row


def reset(state: GameState) -> GameState:
    """Start a new game in place. The score tally is kept."""
    state.board.clear()
    state.current = FIRST
    state.result = ONGOING
    state.winning_line = None
    return state


def clear_scores(state: GameState) -> None:
    for p in state.scores:
        state.scores[p] = 0
