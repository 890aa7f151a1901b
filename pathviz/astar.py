# pathviz/astar.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union
import logging

from .grid import Grid, Node, INF
from .heuristics import heuristic
from .errors import InvalidGridError, PathNotFoundError

logger = logging.getLogger(__name__)

class StepKind(Enum):
    OPEN = "open"
    VISITED = "visited"

@dataclass(frozen=True)
class StepEvent:
    nodes: Tuple[Node, ...]
    kind: StepKind

@dataclass(frozen=True)
class Done:
    success: bool

Step = Union[StepEvent, Done]

class AStarRun:
    """
    A* over a Grid, advanced one unit of work per step().

    Each step() either finalizes one node (VISITED) or opens/updates one
    neighbour (OPEN); the very first step opens the start node. Once the goal
    is visited or the open set runs dry, step() returns the same Done forever.
    Node search-state fields are written in place, so the grid must not be
    edited while the run is alive.
    """

    def __init__(self, grid: Grid, start: Node, goal: Node):
        if start not in grid or goal not in grid:
            raise InvalidGridError("start and goal must be nodes of the grid being searched")
        if start is goal:
            raise InvalidGridError("start and goal are the same node")
        if start.is_wall or goal.is_wall:
            raise InvalidGridError(f"start {start.coord} or goal {goal.coord} is a wall")
        if any(n.has_search_state() for n in grid):
            raise InvalidGridError("grid carries state from an earlier run; reset it first")

        self.grid = grid
        self.start = start
        self.goal = goal
        self.outcome: Optional[Done] = None

        self._open: List[Node] = []
        self._current: Optional[Node] = None
        self._pending: List[Node] = []
        self._started = False

    @property
    def open_set(self) -> Tuple[Node, ...]:
        return tuple(self._open)

    @property
    def done(self) -> bool:
        return self.outcome is not None

    def _finish(self, success: bool) -> Done:
        self.outcome = Done(success)
        self._current = None
        self._pending = []
        logger.debug("A* run %s -> %s finished, success=%s", self.start.coord, self.goal.coord, success)
        return self.outcome

    def _pop_best(self) -> Node:
        # lowest f, then lowest h; remaining ties go to the earliest entry
        best = min(self._open, key=lambda n: (n.f_score, n.h_score))
        self._open.remove(best)
        return best

    def _relax_next(self) -> Optional[StepEvent]:
        cur = self._current
        while self._pending:
            nb = self._pending.pop(0)
            if nb.is_visited or nb.is_wall:
                continue
            tentative = cur.g_score + 1
            if tentative < nb.g_score:
                nb.previous_node = cur
                nb.g_score = tentative
                nb.h_score = heuristic(nb, self.goal)
                nb.f_score = nb.g_score + nb.h_score
                if nb not in self._open:
                    self._open.append(nb)
                return StepEvent((nb,), StepKind.OPEN)
        self._current = None
        return None

    def step(self) -> Step:
        if self.outcome is not None:
            return self.outcome

        if not self._started:
            self._started = True
            s = self.start
            s.g_score = 0
            s.h_score = heuristic(s, self.goal)
            s.f_score = s.g_score + s.h_score
            self._open.append(s)
            logger.debug("A* run %s -> %s started", s.coord, self.goal.coord)
            return StepEvent((s,), StepKind.OPEN)

        if self._current is not None:
            ev = self._relax_next()
            if ev is not None:
                return ev

        while self._open:
            node = self._pop_best()
            if node.is_wall:
                continue
            if node.g_score == INF:
                return self._finish(False)

            node.is_visited = True
            if node is self.goal:
                self._finish(True)
            else:
                self._current = node
                self._pending = [nb for nb in self.grid.neighbors(node) if not nb.is_visited]
            return StepEvent((node,), StepKind.VISITED)

        return self._finish(False)

    # iterator protocol over the StepEvents; `outcome` holds the Done afterwards
    def __iter__(self):
        return self

    def __next__(self) -> StepEvent:
        res = self.step()
        if isinstance(res, Done):
            raise StopIteration
        return res


def create_run(grid: Grid, start: Node, goal: Node) -> AStarRun:
    return AStarRun(grid, start, goal)


def reconstruct_path(goal: Node) -> List[Node]:
    """Nodes from start to goal inclusive, following previous_node links back from goal."""
    if not goal.is_visited:
        raise PathNotFoundError(f"goal {goal.coord} was never reached")
    path: List[Node] = []
    cur: Optional[Node] = goal
    while cur is not None:
        path.append(cur)
        cur = cur.previous_node
    path.reverse()
    return path
