"""Scrolling window of automaton rows sized to the display."""

import numpy as np
from typing import Optional

from .automaton import Rule, RuleLike, next_row


def seed(width: int) -> np.ndarray:
    """Initial condition: only the middle cell is on."""
    row = np.zeros(width, dtype=bool)
    row[width // 2] = True
    row.flags.writeable = False
    return row


def new_board(height: int, width: int) -> np.ndarray:
    """Empty (height, width) board with the seed as its first row."""
    if height <= 0 or width <= 0:
        raise ValueError(f"board must be at least 1x1, got {width}x{height}")
    board = np.zeros((height, width), dtype=bool)
    board[0] = seed(width)
    return board


def initial_fill(board: np.ndarray, rule: RuleLike) -> np.ndarray:
    """Generate rows 1..H-1 from row 0, in place. Done once before drawing."""
    for i in range(1, len(board)):
        board[i] = next_row(board[i - 1], rule)
    return board


def advance(board: np.ndarray, rule: RuleLike) -> np.ndarray:
    """Drop the oldest row and append the next generation as a new board."""
    nxt = np.empty_like(board)
    nxt[:-1] = board[1:]
    nxt[-1] = next_row(board[-1], rule)
    nxt.flags.writeable = False
    return nxt


class ScrollingBoard:
    """Fixed-height window onto the endless sequence of generations."""

    def __init__(self, width: int = 80, height: int = 40, rule: Optional[RuleLike] = None):
        self.width = width
        self.height = height
        self.rule = rule if rule is not None else Rule(30)
        self.grid = initial_fill(new_board(height, width), self.rule)
        self.grid.flags.writeable = False
        self.generation = 0

    def step(self):
        """Scroll the window by one generation."""
        self.grid = advance(self.grid, self.rule)
        self.generation += 1

    def run(self, steps: int):
        """Advance multiple steps."""
        for _ in range(steps):
            self.step()

    @property
    def newest_row(self) -> np.ndarray:
        return self.grid[-1]

    def population(self) -> int:
        """Count live cells in the visible window."""
        return int(np.sum(self.grid))

    def density(self) -> float:
        """Fraction of visible cells that are alive."""
        return self.population() / (self.width * self.height)
