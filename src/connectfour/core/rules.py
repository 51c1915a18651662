from __future__ import annotations
from typing import Optional, List, Tuple

from connectfour.config import CONNECT_N
from connectfour.types import Coord, Player
from connectfour.core.board import Board

# →, ↓, ↘, ↙
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _run(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> List[Coord]:
    cells: List[Coord] = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.grid[r][c] == player:
        cells.append((r, c))
        r += dr
        c += dc
    return cells


def check_win(board: Board, row: int, col: int) -> Optional[List[Coord]]:
    """
    Winning line through (row, col), or None.

    Only the four axes through the given cell are walked, so this is the check
    to run right after a piece lands there. The returned cells are ordered
    along the axis, from the backward end of the run to the forward end.
    """
    player = board.grid[row][col]
    if player is None:
        return None

    for dr, dc in DIRECTIONS:
        back = _run(board, row, col, -dr, -dc, player)
        fwd = _run(board, row, col, dr, dc, player)
        if len(back) + 1 + len(fwd) >= CONNECT_N:
            return back[::-1] + [(row, col)] + fwd

    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    g = board.grid
    for r in range(board.rows):
        for c in range(board.cols):
            p = g[r][c]
            if p is None:
                continue
            line = check_win(board, r, c)
            if line is not None:
                return p, line
    return None


def find_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and find_winner(board) is None
