# pathviz/errors.py
from __future__ import annotations


class PathvizError(Exception):
    """Base class for everything the package raises on bad input."""


class GridError(PathvizError):
    """Grid dimensions or start/finish placement are unusable."""


class InvalidGridError(PathvizError):
    """A search run was refused because of the grid it was given."""


class PathNotFoundError(PathvizError):
    """Path reconstruction was asked for a goal the search never reached."""
