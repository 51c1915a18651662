from __future__ import annotations

import random
from typing import List

from connectfour.game.actions import apply_move, new_game
from connectfour.game.state import GameState


def sample_positions(count: int, max_plies: int = 20, seed: int = 0) -> List[GameState]:
    """
    ``count`` undecided positions reached by random legal play, each between
    1 and ``max_plies`` plies deep. Same seed, same positions.
    """
    if count < 1:
        raise ValueError("count must be positive.")
    if max_plies < 1:
        raise ValueError("max_plies must be positive.")

    rng = random.Random(seed)
    out: List[GameState] = []
    while len(out) < count:
        state = new_game()
        for _ in range(rng.randint(1, max_plies)):
            col = rng.choice(sorted(state.board.valid_moves()))
            apply_move(state, col)
            if state.result.is_terminal:
                break
        if not state.result.is_terminal:
            out.append(state)
    return out
