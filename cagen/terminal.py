"""Curses front end: draw the board full-screen and read keys without blocking."""

import curses
from pathlib import Path
from typing import Optional, Tuple

import numpy as np

from .animation import AnimationConfig, AnimationLoop, Ticker
from .automaton import Rule
from .board import ScrollingBoard
from .stats import StatsLogger

ALIVE_PAIR = 1
DEAD_PAIR = 2


class CursesDisplay:
    """Paints each cell as a blank whose background is white (alive) or black (dead)."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def setup(self):
        curses.curs_set(0)
        self.stdscr.nodelay(True)
        self.stdscr.timeout(0)
        curses.start_color()
        curses.init_pair(ALIVE_PAIR, curses.COLOR_WHITE, curses.COLOR_WHITE)
        curses.init_pair(DEAD_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)

    def size(self) -> Tuple[int, int]:
        """(width, height) of the screen in cells."""
        max_y, max_x = self.stdscr.getmaxyx()
        return max_x, max_y

    def draw(self, grid: np.ndarray):
        max_y, max_x = self.stdscr.getmaxyx()
        alive = curses.color_pair(ALIVE_PAIR)
        dead = curses.color_pair(DEAD_PAIR)
        _addstr = self.stdscr.addstr

        for y, row in enumerate(grid[:max_y].tolist()):
            for x, cell in enumerate(row[:max_x]):
                try:
                    _addstr(y, x, " ", alive if cell else dead)
                except curses.error:
                    # Writing the bottom-right cell moves the cursor off-screen
                    pass
        self.stdscr.refresh()

    def poll_key(self) -> Optional[str]:
        """Next pending key as a character, or None if nothing was pressed."""
        try:
            key = self.stdscr.getch()
        except curses.error:
            return None
        if key < 0 or key > 0x10FFFF:
            return None
        return chr(key)


def animate(display, rule: Rule, config: AnimationConfig, stats_path: Optional[Path] = None) -> int:
    """Scroll `rule` on an already set-up display. Returns the generation reached."""
    width, height = display.size()
    board = ScrollingBoard(width=width, height=height, rule=rule)

    logger = StatsLogger(stats_path) if stats_path is not None else None
    if logger is not None:
        logger.open()

    loop = AnimationLoop(
        board,
        draw=display.draw,
        poll_key=display.poll_key,
        ticker=Ticker(config.frame_period),
        quit_keys=config.quit_keys,
        on_tick=logger.on_tick if logger is not None else None,
    )
    event = "quit"
    try:
        loop.run()
    except KeyboardInterrupt:
        event = "interrupt"
    finally:
        if logger is not None:
            logger.log(board.generation, board.population(), board.density(), event=event)
            logger.close()
    return board.generation


def _session(stdscr, rule: Rule, config: AnimationConfig, stats_path: Optional[Path]) -> int:
    display = CursesDisplay(stdscr)
    display.setup()
    return animate(display, rule, config, stats_path)


def run_curses(
    rule: Rule,
    config: Optional[AnimationConfig] = None,
    stats_path: Optional[Path] = None,
) -> int:
    """Animate `rule` full-screen until a quit key or Ctrl-C. Returns generations shown."""
    config = config or AnimationConfig()
    return curses.wrapper(_session, rule, config, stats_path)
