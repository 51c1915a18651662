# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from connectfour.config import ROWS, COLS
from connectfour.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def clear(self) -> None:
        for row in self.grid:
            for c in range(self.cols):
                row[c] = None

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_column_full(self, col: int) -> bool:
        return self.grid[0][col] is not None

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def piece_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def drop_row(self, col: int) -> Optional[int]:
        """Lowest empty row in ``col``, or None when the column is full."""
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")

        r = self.drop_row(c)
        if r is None:
            raise ValueError("Column is full.")

        self.grid[r][c] = player
        return r

    def undo(self, col: Move) -> None:
        """Lift the last piece dropped in ``col``; the search pairs every drop with one."""
        c = int(col)
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                return
        raise ValueError("Cannot undo: column is empty.")

    @classmethod
    def from_rows(cls, rows: List[str], first: str = "X", second: str = "O") -> "Board":
        """
        Build a board from text rows, top row first. ``first``/``second`` mark
        pieces, anything else is empty. Intended for tests and tooling.
        """
        b = cls()
        if len(rows) != b.rows:
            raise ValueError(f"Expected {b.rows} rows, got {len(rows)}.")
        for r, line in enumerate(rows):
            cells = line.replace(" ", "")
            if len(cells) != b.cols:
                raise ValueError(f"Row {r} must have {b.cols} cells: {line!r}")
            for c, ch in enumerate(cells):
                if ch == first:
                    b.grid[r][c] = "first"
                elif ch == second:
                    b.grid[r][c] = "second"
        return b
