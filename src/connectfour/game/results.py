from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from connectfour.types import Player

ResultKind = Literal["ongoing", "win", "draw"]


@dataclass(frozen=True, slots=True)
class GameResult:
    kind: ResultKind = "ongoing"
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "GameResult":
        return cls("win", player)

    @property
    def is_terminal(self) -> bool:
        return self.kind != "ongoing"

    def __str__(self) -> str:
        if self.kind == "win":
            return f"Win({self.winner})"
        return self.kind.capitalize()


ONGOING = GameResult("ongoing")
DRAW = GameResult("draw")
