from __future__ import annotations
from typing import Optional, Iterable, Set

from connectfour.config import CLEAR_SCREEN, USE_COLOR
from connectfour.core.board import Board
from connectfour.types import Cell, Coord, Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

# player -> (label, glyph, colour)
PIECES = {
    "first": ("Red", "R", "\033[31m"),
    "second": ("Yellow", "Y", "\033[33m"),
}
EMPTY = ("·", FG_GRAY)
# winning cells when colour is off
WIN_MARK = "#"


def paint(s: str, code: str) -> str:
    return f"{code}{s}{RESET}" if USE_COLOR else s


def label(player: Player) -> str:
    return PIECES[player][0]


def _piece(cell: Cell) -> str:
    if cell is None:
        return paint(*EMPTY)
    _, glyph, colour = PIECES[cell]
    return paint(glyph, colour)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [paint("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = []
        for cidx in range(board.cols):
            p = _piece(board.grid[r][cidx])
            if (r, cidx) in hl:
                p = paint(p, REVERSE) if USE_COLOR else WIN_MARK
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(paint("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(paint("CONNECT FOUR", BOLD))
    if status:
        print(paint(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)

    print(paint(f"   Enter 1-{board.cols} to drop. n = new game, q = quit.", DIM))
