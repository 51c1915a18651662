from __future__ import annotations

import enum
import logging
import random
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

from connectfour.ai.minimax_agent import difficulty_to_depth, random_move_probability, select_computer_move
from connectfour.config import DEFAULT_DIFFICULTY
from connectfour.game import actions
from connectfour.game.actions import IllegalMoveError
from connectfour.game.state import GameState
from connectfour.types import Move, Player, SECOND

logger = logging.getLogger(__name__)

GameMode = Literal["two_players", "vs_computer"]

COMPUTER: Player = SECOND


class Phase(enum.Enum):
    IDLE = "idle"
    COMPUTER_THINKING = "computer_thinking"


@dataclass
class GameSession:
    """
    What a front end holds on to between turns.

    Human moves are refused while a computer move is in flight. The search
    only ever sees a copy of the board, so rendering the live board from
    another thread is safe.
    """

    mode: GameMode = "two_players"
    difficulty: str = DEFAULT_DIFFICULTY
    state: GameState = field(default_factory=actions.new_game)
    phase: Phase = Phase.IDLE
    rng: random.Random = field(default_factory=random.Random)
    _pending: Optional[Future] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        difficulty_to_depth(self.difficulty)

    @property
    def depth(self) -> int:
        return difficulty_to_depth(self.difficulty)

    def can_drop(self, column: int) -> bool:
        return self.phase is Phase.IDLE and actions.can_drop(self.state, column)

    def new_game(self) -> None:
        actions.reset(self.state)
        self.phase = Phase.IDLE
        # a search still running belongs to the old game
        self._pending = None

    def clear_scores(self) -> None:
        actions.clear_scores(self.state)

    def set_mode(self, mode: GameMode) -> None:
        if mode != self.mode:
            self.mode = mode
            self.new_game()

    def set_difficulty(self, difficulty: str) -> None:
        difficulty_to_depth(difficulty)
        self.difficulty = difficulty

    def submit_human_move(self, column: int) -> int:
        if self.phase is Phase.COMPUTER_THINKING:
            raise IllegalMoveError(column, "the computer is thinking")
        if self.needs_computer_move():
            raise IllegalMoveError(column, "it is the computer's turn")
        _, row = actions.apply_move(self.state, column)
        return row

    def needs_computer_move(self) -> bool:
        return (
            self.mode == "vs_computer"
            and not self.state.result.is_terminal
            and self.state.current == COMPUTER
        )

    def _begin_computer_move(self) -> Tuple:
        if not self.needs_computer_move():
            raise RuntimeError("No computer move is due.")
        if self.phase is Phase.COMPUTER_THINKING:
            raise RuntimeError("A computer move is already in flight.")
        self.phase = Phase.COMPUTER_THINKING
        return (
            self.state.board.copy(),
            self.state.current,
            self.depth,
            random_move_probability(self.difficulty),
            self.rng,
        )

    def _finish_computer_move(self, column: Move) -> int:
        self.phase = Phase.IDLE
        _, row = actions.apply_move(self.state, int(column))
        logger.debug("computer dropped in column %d row %d", int(column), row)
        return row

    def computer_move(self) -> int:
        """Search and apply the computer's move on the calling thread."""
        args = self._begin_computer_move()
        try:
            column = select_computer_move(*args)
        except Exception:
            self.phase = Phase.IDLE
            raise
        return self._finish_computer_move(column)

    def start_computer_move(self, executor: Executor) -> "Future[Move]":
        """
        Run the search on ``executor``. Call ``finish_computer_move`` with
        the future's result on the thread that owns the session.
        """
        args = self._begin_computer_move()
        try:
            future = executor.submit(select_computer_move, *args)
        except Exception:
            self.phase = Phase.IDLE
            raise
        self._pending = future
        return future

    def finish_computer_move(self, future: "Future[Move]") -> Optional[int]:
        """
        Apply the column ``future`` found and return its row. A future started
        before the last ``new_game`` is dropped and None is returned.
        """
        if future is not self._pending:
            logger.debug("dropping computer move from an abandoned game")
            return None
        self._pending = None
        try:
            column = future.result()
        except Exception:
            self.phase = Phase.IDLE
            raise
        if self.phase is not Phase.COMPUTER_THINKING or not self.needs_computer_move():
            self.phase = Phase.IDLE
            logger.debug("dropping computer move; none is due")
            return None
        return self._finish_computer_move(column)
