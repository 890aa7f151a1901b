# pathviz/types.py
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)
