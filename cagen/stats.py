"""CSV telemetry for animation runs."""

import time
from pathlib import Path
from typing import IO, Optional

from .board import ScrollingBoard


class StatsLogger:
    """Writes per-tick window stats to CSV for looking at runs afterwards."""

    HEADER = "gen,time_s,population,density,event\n"

    def __init__(self, path: Path, every: int = 10):
        self._path = Path(path)
        self._every = max(1, every)
        self._fh: Optional[IO[str]] = None
        self._t0 = time.monotonic()

    @property
    def active(self) -> bool:
        return self._fh is not None

    def open(self):
        try:
            self._fh = open(self._path, "w")
            self._fh.write(self.HEADER)
            self._fh.flush()
        except OSError:
            self._fh = None

    def log(self, gen: int, population: int, density: float, event: str = ""):
        if self._fh is None:
            return
        t = time.monotonic() - self._t0
        try:
            self._fh.write(f"{gen},{t:.1f},{population},{density:.4f},{event}\n")
            # Flush on events or periodically
            if event or gen % 50 == 0:
                self._fh.flush()
        except OSError:
            self.close()

    def on_tick(self, board: ScrollingBoard):
        """AnimationLoop hook: log every `every`-th generation."""
        if board.generation % self._every == 0:
            self.log(board.generation, board.population(), board.density())

    def close(self):
        if self._fh is not None:
            try:
                self._fh.close()
            except OSError:
                pass
            self._fh = None

    def __enter__(self) -> "StatsLogger":
        self.open()
        return self

    def __exit__(self, *exc):
        self.close()
