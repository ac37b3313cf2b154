from .analysis import reachable_cells, unreachable_floor
from .generator import MazeGenerator, is_structural
from .grid import CARDINAL_OFFSETS, Maze
from .tiles import Tile, is_walkable_tile

__all__ = [
    "CARDINAL_OFFSETS",
    "Maze",
    "MazeGenerator",
    "Tile",
    "is_structural",
    "is_walkable_tile",
    "reachable_cells",
    "unreachable_floor",
]
