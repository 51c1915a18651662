from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from connectfour.game.session import GameSession
from connectfour.types import Player
from connectfour.ui.effects import ai_thinking
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import label, render


def _side_name(session: GameSession, player: Player) -> str:
    if session.mode == "vs_computer":
        return "You" if player == "first" else "CPU"
    return label(player)


def _header(session: GameSession) -> str:
    s = session.state.scores
    if session.mode == "vs_computer":
        who = f"You (Red) vs CPU (Yellow, {session.difficulty})"
    else:
        who = "Red vs Yellow"
    return f"{who} | Score {s['first']}-{s['second']}"


def _result_status(session: GameSession) -> str:
    res = session.state.result
    if res.kind == "win":
        name = _side_name(session, res.winner)
        verb = "win" if name == "You" else "wins"
        return f"{name} {verb}! Press n for a new game."
    return "Draw game. Press n for a new game."


def run_game(session: GameSession, input_fn: Callable[[str], str] = input) -> None:
    status = f"{_side_name(session, session.state.current)} starts."

    with ThreadPoolExecutor(max_workers=1) as pool:
        while True:
            state = session.state
            render(state.board, f"{_header(session)}\n{status}", highlight=state.winning_line)

            if session.needs_computer_move():
                future = session.start_computer_move(pool)
                ai_thinking(future)
                if session.finish_computer_move(future) is None:
                    continue
                status = f"CPU chose {int(future.result()) + 1}."
                if state.result.is_terminal:
                    status = _result_status(session)
                continue

            prompt = "New game (n) or quit (q): " if state.result.is_terminal else (
                f"{_side_name(session, state.current)} move: "
            )
            try:
                cmd = parse_move(input_fn(prompt), state.board.cols)
                if cmd == "quit":
                    render(state.board, f"{_header(session)}\nGame quit.", highlight=state.winning_line)
                    return
                if cmd == "new":
                    session.new_game()
                    status = f"{_side_name(session, session.state.current)} starts."
                    continue

                mover = state.current
                session.submit_human_move(int(cmd))
                status = f"{_side_name(session, mover)} chose {int(cmd) + 1}."
                if state.result.is_terminal:
                    status = _result_status(session)

            except ValueError as e:
                status = str(e)
