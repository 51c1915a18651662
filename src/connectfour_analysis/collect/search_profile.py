from __future__ import annotations

import logging
from typing import Iterable, Sequence

import pandas as pd

from connectfour.ai.minimax_agent import MinimaxAgent
from connectfour.game.state import GameState

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = [
    "position", "plies", "to_move", "depth",
    "move", "eval", "nodes", "cutoffs", "time_ms",
]


def profile_search(positions: Sequence[GameState], depths: Iterable[int] = (1, 2, 3, 4)) -> pd.DataFrame:
    """
    Search every position at every depth and keep the agent's telemetry.

    One row per (position, depth). ``move`` is the 0-based column chosen.
    The random override is off so each row is a pure search result.
    """
    depths = sorted(set(depths))
    if not depths or depths[0] < 1:
        raise ValueError(f"Depths must be positive, got {depths}.")

    rows = []
    for i, state in enumerate(positions):
        for d in depths:
            agent = MinimaxAgent(name=f"d{d}", depth=d, random_move_prob=0.0)
            move = agent.choose_for(state.board, state.current)
            info = agent.last_info
            rows.append({
                "position": i,
                "plies": state.board.piece_count(),
                "to_move": state.current,
                "depth": d,
                "move": int(move),
                "eval": info["eval"],
                "nodes": info["nodes"],
                "cutoffs": info["cutoffs"],
                "time_ms": info["time_ms"],
            })
        logger.debug("profiled position %d at depths %s", i, depths)

    return pd.DataFrame(rows, columns=PROFILE_COLUMNS)
