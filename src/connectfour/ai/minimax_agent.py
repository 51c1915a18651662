from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import random
import time
from typing import Optional

from connectfour.config import (
    COLUMN_ORDER,
    DEFAULT_DIFFICULTY,
    DIFFICULTY_DEPTHS,
    SHALLOW_RANDOM_MOVE_PROB,
    WIN_SCORE,
)
from connectfour.core.board import Board
from connectfour.core.rules import check_win, find_winner
from connectfour.core.scoring import evaluate
from connectfour.game.state import GameState
from connectfour.types import Coord, Move, Player, opponent

logger = logging.getLogger(__name__)


def difficulty_to_depth(tier: str) -> int:
    try:
        return DIFFICULTY_DEPTHS[tier]
    except KeyError:
        raise ValueError(f"Unknown difficulty {tier!r}; expected one of {sorted(DIFFICULTY_DEPTHS)}.") from None


def random_move_probability(tier: str) -> float:
    # Only the shallowest tier is deliberately fallible.
    return SHALLOW_RANDOM_MOVE_PROB if tier == "shallow" else 0.0


def ordered_moves(board: Board) -> list[Move]:
    """Center-first candidate columns, full columns skipped."""
    return [Move(c) for c in COLUMN_ORDER if c < board.cols and not board.is_column_full(c)]


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def _terminal_score(board: Board, depth: int, me: Player, last: Optional[Coord]) -> Optional[int]:
    if last is None:
        w = find_winner(board)
    else:
        w = board.grid[last[0]][last[1]] if check_win(board, last[0], last[1]) else None
    if w is None:
        return None
    return WIN_SCORE + depth if w == me else -(WIN_SCORE + depth)


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    me: Player,
    last: Optional[Coord] = None,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Alpha-beta minimax score of ``board`` from ``me``'s point of view.

    ``last`` is the cell written by the caller's move. When given, only lines
    through that cell are checked for a win; this matches a full scan as long
    as the position before that move had no completed line. Wins found with
    more depth remaining score further from zero, so quicker wins and slower
    losses are preferred.

    The board is mutated during the walk and restored before returning.
    """
    if stats is not None:
        stats.nodes += 1

    term = _terminal_score(board, depth, me, last)
    if term is not None:
        return term
    if board.is_full():
        return 0
    if depth == 0:
        return evaluate(board, me)

    to_play = me if maximizing else opponent(me)

    if maximizing:
        best = -inf
        for c in range(board.cols):
            if board.is_column_full(c):
                continue
            r = board.drop(Move(c), to_play)
            score = minimax(board, depth - 1, alpha, beta, False, me, (r, c), stats)
            board.undo(Move(c))
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return int(best)

    best = inf
    for c in range(board.cols):
        if board.is_column_full(c):
            continue
        r = board.drop(Move(c), to_play)
        score = minimax(board, depth - 1, alpha, beta, True, me, (r, c), stats)
        board.undo(Move(c))
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return int(best)


def _scored_root(board: Board, to_move: Player, depth: int, stats: Optional[SearchStats]) -> tuple[Move, float]:
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}.")

    work = board.copy()
    if find_winner(work) is not None:
        raise ValueError("Position is already decided.")

    moves = ordered_moves(work)
    if not moves:
        raise ValueError("No valid moves.")

    best_move = moves[0]
    best_score = -inf
    for m in moves:
        r = work.drop(m, to_move)
        score = minimax(work, depth - 1, -inf, inf, False, to_move, (r, int(m)), stats)
        work.undo(m)
        if score > best_score:
            best_score = score
            best_move = m

    return best_move, best_score


def select_move(board: Board, to_move: Player, depth: int, stats: Optional[SearchStats] = None) -> Move:
    """
    Best column for ``to_move`` searching ``depth`` plies.

    The caller's board is never modified; the search runs on its own copy.
    Ties go to the more central column.
    """
    move, _ = _scored_root(board, to_move, depth, stats)
    return move


def random_override(board: Board, probability: float, rng: Optional[random.Random]) -> Optional[Move]:
    """
    With chance ``probability``, a uniformly random valid column; otherwise None
    and the caller searches as usual.
    """
    if probability <= 0.0:
        return None
    rng = rng or random.Random()
    if rng.random() >= probability:
        return None
    moves = board.valid_moves()
    if not moves:
        raise ValueError("No valid moves.")
    m = rng.choice(moves)
    logger.debug("random override picked column %d", int(m))
    return m


def select_computer_move(
    board: Board,
    owner_to_move: Player,
    depth: int,
    random_override_probability: float = 0.0,
    rng: Optional[random.Random] = None,
) -> Move:
    m = random_override(board, random_override_probability, rng)
    if m is not None:
        return m
    return select_move(board, owner_to_move, depth)


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Minimax AI"
    difficulty: str = DEFAULT_DIFFICULTY
    depth: int = 0  # 0 = derive from difficulty
    random_move_prob: Optional[float] = None  # None = derive from difficulty
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.depth <= 0:
            self.depth = difficulty_to_depth(self.difficulty)
        if self.random_move_prob is None:
            self.random_move_prob = random_move_probability(self.difficulty)

    def choose_move(self, state: GameState) -> Move:
        return self.choose_for(state.board, state.current)

    def choose_for(self, board: Board, me: Player) -> Move:
        start = time.perf_counter()
        stats = SearchStats()

        score: float = 0.0
        picked = random_override(board, float(self.random_move_prob or 0.0), self.rng)
        randomized = picked is not None
        if picked is None:
            move, score = _scored_root(board, me, self.depth, stats)
        else:
            move = picked

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 0 if randomized else self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": int(score) if score not in (inf, -inf) else score,
            "move_col": int(move) + 1,
            "random": randomized,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s chose column %d (eval=%s nodes=%d cutoffs=%d %dms%s)",
            self.name,
            int(move),
            self.last_info["eval"],
            stats.nodes,
            stats.cutoffs,
            self.last_info["time_ms"],
            " random" if randomized else "",
        )
        return move
