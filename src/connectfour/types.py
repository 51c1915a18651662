# src/connectfour/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["first", "second"]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6
Coord = Tuple[int, int]       # (row, col), row 0 is the top

FIRST: Player = "first"
SECOND: Player = "second"


def opponent(p: Player) -> Player:
    return SECOND if p == FIRST else FIRST
