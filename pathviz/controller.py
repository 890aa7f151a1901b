# pathviz/controller.py
from __future__ import annotations
from enum import Enum
from typing import Dict, List, Optional
import logging

from .types import Coord
from .config import VisualizerConfig
from .grid import Grid
from .astar import AStarRun, Done, Step, StepKind, create_run, reconstruct_path

logger = logging.getLogger(__name__)

class RunState(Enum):
    IDLE = "idle"          # walls may be edited
    RUNNING = "running"    # auto-play: tick() advances the run
    PAUSED = "paused"      # run alive, advanced only by step()
    FINISHED = "finished"

class CellMark(Enum):
    OPEN = "open"
    VISITED = "visited"
    PATH = "path"

class Visualizer:
    """
    Play / pause / step / reset logic of the visualizer, independent of any
    window. Front ends call these methods from their input handlers and their
    timer, then draw `grid` together with `marks` and `path`.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = (config or VisualizerConfig()).validate()
        self.grid = self._fresh_grid()
        self.state = RunState.IDLE
        self.run: Optional[AStarRun] = None
        self.marks: Dict[Coord, CellMark] = {}
        self.path: List[Coord] = []
        self.reached: Optional[bool] = None  # None until a run finishes
        self._paint_value: Optional[bool] = None

    def _fresh_grid(self) -> Grid:
        cfg = self.config
        return Grid.create(cfg.rows, cfg.cols, cfg.start, cfg.finish)

    def _set_state(self, state: RunState) -> None:
        if state is not self.state:
            logger.info("visualizer %s -> %s", self.state.value, state.value)
            self.state = state

    @property
    def editable(self) -> bool:
        return self.state is RunState.IDLE

    # ----------------- wall editing -----------------
    def toggle_wall(self, s: Coord) -> bool:
        if not self.editable or not self.grid.in_bounds(s):
            return False
        return self.grid.toggle_wall(s)

    def begin_paint(self, s: Coord) -> None:
        """Mouse down: toggle the cell, then keep painting that value while dragging."""
        if not self.editable or not self.grid.in_bounds(s):
            return
        self._paint_value = not self.grid.node(s).is_wall
        self.grid.set_wall(s, self._paint_value)

    def drag_paint(self, s: Coord) -> None:
        if self._paint_value is None or not self.editable or not self.grid.in_bounds(s):
            return
        self.grid.set_wall(s, self._paint_value)

    def end_paint(self) -> None:
        self._paint_value = None

    def randomize_walls(self, p_wall: float = 0.30, seed: Optional[int] = None) -> None:
        if not self.editable:
            return
        cfg = self.config
        self.grid = Grid.random(cfg.rows, cfg.cols, cfg.start, cfg.finish, p_wall=p_wall, seed=seed)

    # ----------------- run control -----------------
    def _start_run(self) -> None:
        self.grid = self.grid.reset()
        self.marks.clear()
        self.path = []
        self.reached = None
        self.run = create_run(self.grid, self.grid.start, self.grid.finish)

    def _perform_step(self) -> Optional[Step]:
        if self.run is None:
            return None
        res = self.run.step()
        if isinstance(res, Done):
            self.reached = res.success
            if res.success:
                self.path = [n.coord for n in reconstruct_path(self.grid.finish)]
                for s in self.path:
                    self.marks[s] = CellMark.PATH
            logger.info("run finished: %s", "path found" if res.success else "no path")
            self._set_state(RunState.FINISHED)
            return res

        mark = CellMark.OPEN if res.kind is StepKind.OPEN else CellMark.VISITED
        for n in res.nodes:
            self.marks[n.coord] = mark
        return res

    def play(self) -> None:
        if self.state is RunState.FINISHED:
            self.clear()
        if self.state is RunState.IDLE:
            self._start_run()
        if self.state in (RunState.IDLE, RunState.PAUSED):
            self._set_state(RunState.RUNNING)

    def pause(self) -> None:
        if self.state is RunState.RUNNING:
            self._set_state(RunState.PAUSED)

    def toggle_play(self) -> None:
        if self.state is RunState.RUNNING:
            self.pause()
        else:
            self.play()

    def step(self) -> Optional[Step]:
        """Single-step: starts a run when idle and always leaves it paused."""
        if self.state is RunState.FINISHED:
            return None
        if self.state is RunState.IDLE:
            self._start_run()
        self._set_state(RunState.PAUSED)
        return self._perform_step()

    def tick(self) -> Optional[Step]:
        """One unit of work for the auto-play timer; does nothing unless running."""
        if self.state is not RunState.RUNNING:
            return None
        return self._perform_step()

    def clear(self) -> None:
        """Drop the run and its marks, keep the walls."""
        self.run = None
        self.grid = self.grid.reset()
        self.marks.clear()
        self.path = []
        self.reached = None
        self._set_state(RunState.IDLE)

    def reset(self) -> None:
        """Back to a fresh grid with no walls."""
        self.clear()
        self.grid = self._fresh_grid()
