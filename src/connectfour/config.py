# src/connectfour/config.py

from __future__ import annotations

import os

ROWS = 6
COLS = 7
CONNECT_N = 4
CENTER_COL = COLS // 2

# Root move ordering: center first, then alternating outward
COLUMN_ORDER = (3, 2, 4, 1, 5, 0, 6)

# Search / evaluation
WIN_SCORE = 10_000
CENTER_WEIGHT = 3
WINDOW_FOUR = 100
WINDOW_THREE = 5
WINDOW_TWO = 2
WINDOW_OPP_FOUR = -100
WINDOW_OPP_THREE = -4   # deliberately smaller than WINDOW_THREE

DIFFICULTY_DEPTHS = {
    "shallow": 2,
    "medium": 4,
    "deep": 6,
}
DEFAULT_DIFFICULTY = "medium"
SHALLOW_RANDOM_MOVE_PROB = 0.3

# UI toggles
USE_COLOR = os.environ.get("NO_COLOR") is None
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.4  # minimum spinner time so AI moves aren’t instant

LOG_LEVEL = "WARNING"
