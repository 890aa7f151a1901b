# pathviz/runner.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Set
import time

from .types import Coord
from .grid import Grid
from .astar import StepKind, create_run, reconstruct_path
from .controller import CellMark

@dataclass
class RunStats:
    reached: bool
    opened: int       # OPEN events, re-opens included
    visited: int      # VISITED events
    elapsed_sec: float
    path: List[Coord] = field(default_factory=list)
    closed: Set[Coord] = field(default_factory=set)
    frontier: Set[Coord] = field(default_factory=set)  # still open when the run ended

    @property
    def cost(self) -> int:
        return len(self.path) - 1 if self.path else 0

    def marks(self) -> Dict[Coord, CellMark]:
        out = {s: CellMark.OPEN for s in self.frontier}
        out.update({s: CellMark.VISITED for s in self.closed})
        out.update({s: CellMark.PATH for s in self.path})
        return out

def run_search(grid: Grid) -> RunStats:
    """Drive one run from grid.start to grid.finish to completion, without pacing."""
    run = create_run(grid, grid.start, grid.finish)
    opened = visited = 0
    closed: Set[Coord] = set()
    t0 = time.perf_counter()

    for event in run:
        if event.kind is StepKind.OPEN:
            opened += 1
        else:
            visited += 1
            closed.update(n.coord for n in event.nodes)

    elapsed = time.perf_counter() - t0
    frontier = {n.coord for n in run.open_set}
    if not run.outcome.success:
        return RunStats(False, opened, visited, elapsed, closed=closed, frontier=frontier)
    path = [n.coord for n in reconstruct_path(grid.finish)]
    return RunStats(True, opened, visited, elapsed, path, closed, frontier)
