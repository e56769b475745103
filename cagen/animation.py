"""Tick loop: pace frames, check for quit, draw, then scroll the board."""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from .board import ScrollingBoard

FRAME_PERIOD_MS = 100


@dataclass
class AnimationConfig:
    """Settings for the terminal animation."""
    frame_period: float = FRAME_PERIOD_MS / 1000.0  # seconds between advances
    quit_keys: Sequence[str] = ("q", "Q")


class Ticker:
    """Rate limiter: at most one tick per `period` seconds."""

    def __init__(
        self,
        period: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.period = period
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None

    def wait(self):
        """Block for whatever is left of the current period, then start a new one."""
        now = self._clock()
        if self._last is not None:
            remaining = self.period - (now - self._last)
            if remaining > 0:
                self._sleep(remaining)
                now = self._clock()
        self._last = now


class AnimationLoop:
    """Drives a ScrollingBoard until a quit key arrives."""

    def __init__(
        self,
        board: ScrollingBoard,
        draw: Callable[[np.ndarray], None],
        poll_key: Callable[[], Optional[str]],
        ticker: Ticker,
        quit_keys: Sequence[str] = ("q", "Q"),
        on_tick: Optional[Callable[[ScrollingBoard], None]] = None,
    ):
        self.board = board
        self.draw = draw
        self.poll_key = poll_key
        self.ticker = ticker
        self.quit_keys = set(quit_keys)
        self.on_tick = on_tick
        self.stopped = False

    def tick(self) -> bool:
        """One frame. Returns False once a quit key has been seen."""
        self.ticker.wait()

        key = self.poll_key()
        if key is not None and key in self.quit_keys:
            self.stopped = True
            return False

        self.draw(self.board.grid)
        self.board.step()
        if self.on_tick is not None:
            self.on_tick(self.board)
        return True

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Loop until stopped (or `max_ticks` advances). Returns the advance count."""
        advances = 0
        while max_ticks is None or advances < max_ticks:
            if not self.tick():
                break
            advances += 1
        return advances
