# pathviz/grid.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set
import math, random

from .types import Coord
from .errors import GridError

INF = math.inf

@dataclass(eq=False)
class Node:
    """One grid cell: fixed position and role, plus the per-run search state."""
    row: int
    col: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False
    g_score: float = INF
    h_score: float = INF
    f_score: float = INF
    is_visited: bool = False
    # back-link for path reconstruction only; the grid owns every node
    previous_node: Optional["Node"] = field(default=None, repr=False)

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def has_search_state(self) -> bool:
        return (self.is_visited or self.previous_node is not None
                or self.g_score != INF or self.h_score != INF or self.f_score != INF)


@dataclass
class Grid:
    rows: int
    cols: int
    nodes: List[List[Node]]  # nodes[row][col]
    start: Node
    finish: Node

    @staticmethod
    def create(rows: int, cols: int, start: Coord, finish: Coord,
               walls: Iterable[Coord] = ()) -> "Grid":
        if rows < 1 or cols < 1:
            raise GridError(f"grid must be at least 1x1, got {rows}x{cols}")
        for name, (r, c) in (("start", start), ("finish", finish)):
            if not (0 <= r < rows and 0 <= c < cols):
                raise GridError(f"{name} {(r, c)} is outside a {rows}x{cols} grid")
        if tuple(start) == tuple(finish):
            raise GridError(f"start and finish must differ, both are {tuple(start)}")

        nodes = [[Node(r, c,
                       is_start=(r, c) == tuple(start),
                       is_finish=(r, c) == tuple(finish))
                  for c in range(cols)] for r in range(rows)]
        grid = Grid(rows, cols, nodes, nodes[start[0]][start[1]], nodes[finish[0]][finish[1]])
        for w in walls:
            grid.set_wall(w, True)
        return grid

    @staticmethod
    def from_strings(lines: Iterable[str]) -> "Grid":
        """
        Build a grid from a picture, one string per row:
        'S' start, 'F' finish, '#' wall, anything else floor.
        """
        rows = [line.strip() for line in lines if line.strip()]
        if not rows:
            raise GridError("empty grid picture")
        cols = len(rows[0])
        if any(len(r) != cols for r in rows):
            raise GridError("grid picture rows have different lengths")

        start = finish = None
        walls: List[Coord] = []
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch == "S":
                    if start is not None:
                        raise GridError("grid picture has more than one 'S'")
                    start = (r, c)
                elif ch == "F":
                    if finish is not None:
                        raise GridError("grid picture has more than one 'F'")
                    finish = (r, c)
                elif ch == "#":
                    walls.append((r, c))
        if start is None or finish is None:
            raise GridError("grid picture needs one 'S' and one 'F'")
        return Grid.create(len(rows), cols, start, finish, walls)

    @staticmethod
    def random(rows: int, cols: int, start: Coord, finish: Coord,
               p_wall: float = 0.30, seed: Optional[int] = None) -> "Grid":
        rng = random.Random(seed)
        walls = [(r, c) for r in range(rows) for c in range(cols) if rng.random() < p_wall]
        # set_wall leaves start/finish clear
        return Grid.create(rows, cols, start, finish, walls)

    def in_bounds(self, s: Coord) -> bool:
        r, c = s
        return 0 <= r < self.rows and 0 <= c < self.cols

    def node(self, s: Coord) -> Node:
        if not self.in_bounds(s):
            raise GridError(f"{tuple(s)} is outside a {self.rows}x{self.cols} grid")
        return self.nodes[s[0]][s[1]]

    def __iter__(self):
        for row in self.nodes:
            yield from row

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, Node) or not self.in_bounds(node.coord):
            return False
        return self.nodes[node.row][node.col] is node

    def neighbors(self, node: Node) -> List[Node]:
        r, c = node.row, node.col
        cand = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
        return [self.nodes[p[0]][p[1]] for p in cand if self.in_bounds(p)]

    def set_wall(self, s: Coord, value: bool = True) -> bool:
        """Returns whether the cell changed. Start and finish never become walls."""
        n = self.node(s)
        if n.is_start or n.is_finish or n.is_wall == value:
            return False
        n.is_wall = value
        return True

    def toggle_wall(self, s: Coord) -> bool:
        return self.set_wall(s, not self.node(s).is_wall)

    def walls(self) -> Set[Coord]:
        return {n.coord for n in self if n.is_wall}

    def reset(self) -> "Grid":
        """A structurally identical grid of fresh nodes: search state cleared, walls kept."""
        return Grid.create(self.rows, self.cols, self.start.coord, self.finish.coord, self.walls())


def reset_grid(grid: Grid) -> Grid:
    return grid.reset()
