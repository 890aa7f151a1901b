# pathviz/viz.py
from __future__ import annotations
import os
from typing import Dict, List, Optional

from PIL import Image, ImageDraw

from .types import Coord
from .grid import Grid

class Colors:
    BG = (30, 41, 59)
    FLOOR = (255, 255, 255)
    GRID = (51, 65, 85)
    WALL = (12, 53, 71)
    START = (34, 197, 94)
    FINISH = (239, 68, 68)
    OPEN = (74, 222, 128)
    VISITED = (64, 206, 227)
    PATH = (255, 254, 106)
    TEXT = (15, 23, 42)
    GRID_TEXT = (148, 163, 184)

def cell_color(grid: Grid, s: Coord, marks: Optional[Dict] = None) -> tuple:
    """Fill colour of one cell. Start and finish keep their colour whatever the run did."""
    n = grid.node(s)
    if n.is_start:
        return Colors.START
    if n.is_finish:
        return Colors.FINISH
    if n.is_wall:
        return Colors.WALL
    mark = (marks or {}).get(s)
    if mark is None:
        return Colors.FLOOR
    return {"open": Colors.OPEN, "visited": Colors.VISITED, "path": Colors.PATH}[mark.value]

def draw_grid_png(grid: Grid,
                  marks: Optional[Dict] = None,
                  path: Optional[List[Coord]] = None,
                  out_png: str = "grid.png",
                  cell: int = 24) -> str:
    W, H = grid.cols * cell, grid.rows * cell
    img = Image.new("RGB", (W, H), Colors.BG)
    drw = ImageDraw.Draw(img)

    path_cells = set(path or [])
    for node in grid:
        r, c = node.coord
        x0, y0 = c * cell, r * cell
        x1, y1 = x0 + cell - 1, y0 + cell - 1
        fill = cell_color(grid, (r, c), marks)
        if (r, c) in path_cells and not (node.is_start or node.is_finish):
            fill = Colors.PATH
        drw.rectangle((x0, y0, x1, y1), fill=fill, outline=Colors.GRID)

    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)
    return out_png
