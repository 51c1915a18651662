from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from connectfour.ai.minimax_agent import MinimaxAgent, difficulty_to_depth
from connectfour.config import DIFFICULTY_DEPTHS
from connectfour.game.actions import apply_move, new_game
from connectfour.types import FIRST, SECOND

logger = logging.getLogger(__name__)

GAME_COLUMNS = [
    "first", "second", "seed", "result", "winner", "plies",
    "first_moves", "first_nodes", "first_ms",
    "second_moves", "second_nodes", "second_ms",
]


def play_game(first: str, second: str, seed: int, opening_plies: int = 2) -> Dict[str, object]:
    """
    One game between two difficulty tiers. The first ``opening_plies`` plies
    are random so repeated pairings do not replay the same game. Tier
    behaviour is unchanged otherwise, including the shallow random override.
    """
    agents = {
        FIRST: MinimaxAgent(name=first, difficulty=first, rng=random.Random(seed + 1)),
        SECOND: MinimaxAgent(name=second, difficulty=second, rng=random.Random(seed + 2)),
    }
    per_side = {p: {"moves": 0, "nodes": 0, "ms": 0} for p in agents}

    state = new_game()
    opening = random.Random(seed)
    for _ in range(opening_plies):
        if state.result.is_terminal:
            break
        apply_move(state, opening.choice(sorted(state.board.valid_moves())))

    while not state.result.is_terminal:
        mover = state.current
        agent = agents[mover]
        apply_move(state, agent.choose_move(state))
        side = per_side[mover]
        side["moves"] += 1
        side["nodes"] += agent.last_info["nodes"]
        side["ms"] += agent.last_info["time_ms"]

    res = state.result
    if res.kind == "win":
        result, winner = res.winner, first if res.winner == FIRST else second
    else:
        result, winner = "draw", None

    return {
        "first": first,
        "second": second,
        "seed": seed,
        "result": result,
        "winner": winner,
        "plies": state.board.piece_count(),
        "first_moves": per_side[FIRST]["moves"],
        "first_nodes": per_side[FIRST]["nodes"],
        "first_ms": per_side[FIRST]["ms"],
        "second_moves": per_side[SECOND]["moves"],
        "second_nodes": per_side[SECOND]["nodes"],
        "second_ms": per_side[SECOND]["ms"],
    }


def _play(job: Tuple[str, str, int, int]) -> Dict[str, object]:
    return play_game(*job)


def schedule(tiers: Sequence[str], games_per_pair: int, seed: int, opening_plies: int) -> List[Tuple[str, str, int, int]]:
    """Every pair of tiers, colours alternating game by game."""
    jobs = []
    for i, (a, b) in enumerate(combinations(tiers, 2)):
        for g in range(games_per_pair):
            first, second = (a, b) if g % 2 == 0 else (b, a)
            jobs.append((first, second, seed + i * 1000 + g, opening_plies))
    return jobs


def run_ladder(
    tiers: Sequence[str] = tuple(DIFFICULTY_DEPTHS),
    games_per_pair: int = 2,
    seed: int = 1234,
    opening_plies: int = 2,
    max_workers: Optional[int] = 0,
) -> pd.DataFrame:
    """
    Play the tiers against each other and return one row per game.
    ``max_workers=0`` plays in-process; anything else uses a process pool
    (None lets the executor pick).
    """
    tiers = list(dict.fromkeys(tiers))
    if len(tiers) < 2:
        raise ValueError("A ladder needs at least two tiers.")
    for t in tiers:
        difficulty_to_depth(t)
    if games_per_pair < 1:
        raise ValueError("games_per_pair must be positive.")

    jobs = schedule(tiers, games_per_pair, seed, opening_plies)
    logger.info("ladder: %d tiers, %d games", len(tiers), len(jobs))

    if max_workers == 0:
        records = [_play(j) for j in jobs]
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            records = list(ex.map(_play, jobs))

    return pd.DataFrame(records, columns=GAME_COLUMNS)
