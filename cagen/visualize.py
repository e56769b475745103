"""Visualization utilities for automaton windows."""

import numpy as np
from pathlib import Path
from typing import Optional

from PIL import Image

from .automaton import Rule
from .board import ScrollingBoard

DEAD_SHADE = 30
ALIVE_SHADE = 255


def render_grid_fast(grid: np.ndarray, cell_size: int = 4) -> np.ndarray:
    """Grey-level RGB image of a window, one `cell_size` square per cell."""
    shades = np.where(grid, ALIVE_SHADE, DEAD_SHADE).astype(np.uint8)
    img = np.kron(shades, np.ones((cell_size, cell_size), dtype=np.uint8))
    return np.repeat(img[:, :, None], 3, axis=2)


def save_image(
    grid: np.ndarray,
    filepath: str,
    cell_size: int = 4,
):
    """Save grid state as PNG image."""
    img_array = render_grid_fast(grid, cell_size)
    img = Image.fromarray(img_array)
    img.save(filepath)


def grid_to_text(grid: np.ndarray, alive: str = "█", dead: str = " ") -> str:
    """One line of block characters per row."""
    return "\n".join("".join(alive if cell else dead for cell in row) for row in grid.tolist())


def render_rule(
    rule: Rule,
    width: int = 80,
    height: int = 40,
    output_path: Optional[str] = None,
    cell_size: int = 4,
) -> str:
    """
    Build the initial window for a rule and save it as PNG.

    Returns:
        Path the image was written to
    """
    if output_path is None:
        output_path = f"{rule.to_string()}_{width}x{height}.png"
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    board = ScrollingBoard(width=width, height=height, rule=rule)
    save_image(board.grid, output_path, cell_size=cell_size)
    return output_path
