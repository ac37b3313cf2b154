from __future__ import annotations

from enum import Enum
from typing import Set


class Tile(Enum):
    """Cell kinds of a maze grid."""

    FLOOR = 0
    WALL = 1


# Single source of truth for "can be occupied", shared by player and adversaries.
WALKABLE_TILES: Set[Tile] = {Tile.FLOOR}


def is_walkable_tile(tile: Tile) -> bool:
    return tile in WALKABLE_TILES
