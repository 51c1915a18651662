from __future__ import annotations

import argparse

from connectfour.config import DEFAULT_DIFFICULTY, DIFFICULTY_DEPTHS, LOG_LEVEL
from connectfour.game.controller import run_game
from connectfour.game.session import GameSession
from connectfour.log import configure_logging
from connectfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Play Connect Four in the terminal.")
    ap.add_argument("--mode", choices=["two_players", "vs_computer"], default=None,
                    help="Skip the menu and start this mode directly.")
    ap.add_argument("--difficulty", choices=sorted(DIFFICULTY_DEPTHS), default=DEFAULT_DIFFICULTY,
                    help="Computer strength (search depth 2/4/6).")
    ap.add_argument("--log-level", default=LOG_LEVEL, help="Logging level for the engine (e.g. DEBUG).")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    if args.mode is None:
        run_menu()
        return 0

    run_game(GameSession(mode=args.mode, difficulty=args.difficulty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
