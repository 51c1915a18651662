from __future__ import annotations
from typing import Iterator, List, Tuple

from connectfour.config import (
    CENTER_WEIGHT,
    CONNECT_N,
    COLS,
    ROWS,
    WINDOW_FOUR,
    WINDOW_OPP_FOUR,
    WINDOW_OPP_THREE,
    WINDOW_THREE,
    WINDOW_TWO,
)
from connectfour.core.board import Board
from connectfour.types import Cell, Coord, Player, opponent


def iter_windows(rows: int, cols: int) -> Iterator[List[Coord]]:
    """Every run of CONNECT_N coordinates that fits on a rows x cols board."""
    n = CONNECT_N

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            yield [(r, c + i) for i in range(n)]

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            yield [(r + i, c) for i in range(n)]

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            yield [(r - i, c + i) for i in range(n)]

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            yield [(r + i, c + i) for i in range(n)]


WINDOWS: Tuple[Tuple[Coord, ...], ...] = tuple(tuple(w) for w in iter_windows(ROWS, COLS))


def score_window(cells: List[Cell], player: Player) -> int:
    """
    Score a single window for ``player``.

    The first matching rule wins. An opponent three scores -4 while our own
    three scores +5; the engine leans slightly towards its own threats.
    """
    opp = opponent(player)
    mine = cells.count(player)
    theirs = cells.count(opp)
    empty = cells.count(None)

    if mine == 4:
        return WINDOW_FOUR
    if mine == 3 and empty == 1:
        return WINDOW_THREE
    if mine == 2 and empty == 2:
        return WINDOW_TWO
    if theirs == 4:
        return WINDOW_OPP_FOUR
    if theirs == 3 and empty == 1:
        return WINDOW_OPP_THREE
    return 0


def center_score(board: Board, player: Player) -> int:
    center = board.cols // 2
    opp = opponent(player)
    score = 0
    for r in range(board.rows):
        p = board.grid[r][center]
        if p == player:
            score += CENTER_WEIGHT
        elif p == opp:
            score -= CENTER_WEIGHT
    return score


def evaluate(board: Board, player: Player) -> int:
    """Static evaluation from ``player``'s point of view (no terminal check)."""
    g = board.grid
    score = center_score(board, player)
    for coords in WINDOWS:
        score += score_window([g[r][c] for (r, c) in coords], player)
    return score
