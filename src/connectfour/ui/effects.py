from __future__ import annotations
import sys
import time
from concurrent.futures import Future

from connectfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(future: Future, label: str = "Computer is thinking") -> None:
    """
    Spin until ``future`` is done, and for at least AI_THINK_DELAY_SEC so
    computer moves are not instant.
    """
    start = time.time()

    def waiting() -> bool:
        return not future.done() or (time.time() - start) < AI_THINK_DELAY_SEC

    if not AI_THINKING_SPINNER:
        while waiting():
            time.sleep(0.02)
        return

    frames = ["|", "/", "-", "\\"]
    i = 0
    while waiting():
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
