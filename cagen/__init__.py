"""Elementary Cellular Automaton Generator - scroll 1D Wolfram rules through a terminal window."""

from .automaton import Rule, InvalidState, next_row
from .board import ScrollingBoard, advance, initial_fill, seed

__all__ = ["Rule", "InvalidState", "next_row", "ScrollingBoard", "advance", "initial_fill", "seed"]
