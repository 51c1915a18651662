from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from connectfour.core.board import Board
from connectfour.game.results import GameResult, ONGOING
from connectfour.types import Coord, Player, FIRST, SECOND


def _zero_scores() -> Dict[Player, int]:
    return {FIRST: 0, SECOND: 0}


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = FIRST
    result: GameResult = ONGOING
    winning_line: Optional[List[Coord]] = None
    scores: Dict[Player, int] = field(default_factory=_zero_scores)
