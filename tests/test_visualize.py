"""Tests for image and text rendering."""

import numpy as np
from PIL import Image

from cagen.automaton import Rule
from cagen.visualize import grid_to_text, render_grid_fast, render_rule, save_image


def test_render_grid_fast_shape_and_colors():
    grid = np.array([[True, False], [False, True]])
    img = render_grid_fast(grid, cell_size=3)
    assert img.shape == (6, 6, 3)
    assert img.dtype == np.uint8
    assert (img[0:3, 0:3] == 255).all()
    assert (img[0:3, 3:6] == 30).all()


def test_save_image(tmp_path):
    path = tmp_path / "grid.png"
    save_image(np.eye(4, dtype=bool), str(path), cell_size=2)
    with Image.open(path) as img:
        assert img.size == (8, 8)


def test_render_rule_writes_png(tmp_path):
    path = render_rule(Rule(90), width=20, height=10, output_path=str(tmp_path / "out" / "r90.png"), cell_size=1)
    with Image.open(path) as img:
        assert img.size == (20, 10)


def test_grid_to_text():
    grid = np.array([[False, True, False], [True, False, True]])
    assert grid_to_text(grid) == " █ \n█ █"
    assert grid_to_text(grid, alive="#", dead=".") == ".#.\n#.#"
