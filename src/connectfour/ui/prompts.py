from __future__ import annotations
from typing import Literal, Optional, Tuple, Union

from connectfour.types import Move

Command = Literal["quit", "new"]


def parse_move(raw: str, cols: int) -> Union[Move, Command]:
    """
    Parse one line of input: a 1-based column, ``q`` to quit or ``n`` for a
    new game. Raises ValueError with a user-facing message otherwise.
    """
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return "quit"
    if s in {"n", "new"}:
        return "new"
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number, n or q.")
    col = int(s) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(col)


def parse_choice(raw: str, options: Tuple[str, ...], default: Optional[str] = None) -> str:
    s = raw.strip()
    if not s and default is not None:
        return default
    if s.isdigit() and 1 <= int(s) <= len(options):
        return options[int(s) - 1]
    if s.lower() in options:
        return s.lower()
    raise ValueError(f"Choose 1-{len(options)}.")
