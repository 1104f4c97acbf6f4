"""Public grid package interface.

Cell symbols and the storage-only ``Grid``. The generator lives in
``maze.grid.generator`` and is imported explicitly to keep this package free of
entity dependencies.
"""

from .grid import Coord, Grid
from .tiles import (
    BLOCKING,
    EMPTY,
    GOAL,
    MONSTER,
    OBSTACLE,
    TELEPORT,
    WALL,
    char_to_type,
)  # noqa: F401

__all__ = [
    "Coord",
    "Grid",
    "BLOCKING",
    "EMPTY",
    "GOAL",
    "MONSTER",
    "OBSTACLE",
    "TELEPORT",
    "WALL",
    "char_to_type",
]
