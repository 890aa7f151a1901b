# pathviz/config.py
from __future__ import annotations
from dataclasses import dataclass

from .types import Coord
from .errors import GridError

GRID_ROWS = 10
GRID_COLS = 20
START_NODE = (4, 4)
FINISH_NODE = (4, 15)
ANIMATION_SPEED_MS = 50

@dataclass
class VisualizerConfig:
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    start: Coord = START_NODE
    finish: Coord = FINISH_NODE
    step_interval_ms: int = ANIMATION_SPEED_MS
    path_interval_ms: int = 50  # delay between path cells when the path is animated
    cell_size: int = 48
    fps: int = 60

    def validate(self) -> "VisualizerConfig":
        if self.rows < 1 or self.cols < 1:
            raise GridError(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        for name, (r, c) in (("start", self.start), ("finish", self.finish)):
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise GridError(f"{name} {(r, c)} is outside a {self.rows}x{self.cols} grid")
        if tuple(self.start) == tuple(self.finish):
            raise GridError("start and finish must differ")
        if self.step_interval_ms < 1 or self.cell_size < 4 or self.fps < 1:
            raise GridError("step interval, cell size and fps must be positive")
        return self

def default_endpoints(rows: int, cols: int):
    """Start and finish on the middle row, a fifth of the width in from each side."""
    r = (rows - 1) // 2
    return (r, cols // 5), (r, cols - 1 - cols // 5)

def config_for_size(rows: int, cols: int, **overrides) -> VisualizerConfig:
    start, finish = default_endpoints(rows, cols)
    overrides.setdefault("start", start)
    overrides.setdefault("finish", finish)
    return VisualizerConfig(rows=rows, cols=cols, **overrides).validate()
