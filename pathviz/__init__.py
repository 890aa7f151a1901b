# pathviz/__init__.py
from .types import Coord
from .errors import PathvizError, GridError, InvalidGridError, PathNotFoundError
from .grid import Node, Grid, reset_grid
from .heuristics import manhattan
from .astar import StepKind, StepEvent, Done, AStarRun, create_run, reconstruct_path
from .config import VisualizerConfig, config_for_size
from .controller import Visualizer, RunState, CellMark
from .runner import run_search, RunStats

__all__ = [
    "Coord", "PathvizError", "GridError", "InvalidGridError", "PathNotFoundError",
    "Node", "Grid", "reset_grid", "manhattan",
    "StepKind", "StepEvent", "Done", "AStarRun", "create_run", "reconstruct_path",
    "VisualizerConfig", "config_for_size", "Visualizer", "RunState", "CellMark",
    "run_search", "RunStats",
]
