# pathviz/heuristics.py
from __future__ import annotations
from typing import TYPE_CHECKING

from .types import Coord

if TYPE_CHECKING:
    from .grid import Node

def manhattan(a: Coord, b: Coord) -> int:
    """|drow| + |dcol|: admissible and consistent for unit-cost 4-way moves."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def heuristic(node: "Node", goal: "Node") -> int:
    return manhattan((node.row, node.col), (goal.row, goal.col))
