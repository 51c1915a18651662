from __future__ import annotations

from typing import Callable

from connectfour.config import DEFAULT_DIFFICULTY, DIFFICULTY_DEPTHS
from connectfour.game.controller import run_game
from connectfour.game.session import GameSession
from connectfour.ui.prompts import parse_choice

MODES = ("two_players", "vs_computer")


def _ask(prompt: str, options: tuple[str, ...], default: str, input_fn: Callable[[str], str]) -> str:
    while True:
        try:
            return parse_choice(input_fn(prompt), options, default=default)
        except ValueError as e:
            print(e)


def run_menu(input_fn: Callable[[str], str] = input) -> None:
    print("Select mode:")
    print("1) Two players")
    print("2) Versus computer")

    mode = _ask("Choice (default 2): ", MODES, "vs_computer", input_fn)

    session = GameSession(mode=mode)

    if mode == "vs_computer":
        tiers = tuple(DIFFICULTY_DEPTHS)
        for i, t in enumerate(tiers, start=1):
            print(f"{i}) {t} (depth {DIFFICULTY_DEPTHS[t]})")
        session.set_difficulty(_ask(f"Difficulty (default {DEFAULT_DIFFICULTY}): ", tiers, DEFAULT_DIFFICULTY, input_fn))

    run_game(session, input_fn=input_fn)
