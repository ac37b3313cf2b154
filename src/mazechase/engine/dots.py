from __future__ import annotations

import logging
from typing import List, Tuple

from ..maze import Maze, Tile

logger = logging.getLogger(__name__)


class DotField:
    """Collectible layer: one dot per floor cell, cleared as the player eats them."""

    __slots__ = ("_w", "_h", "_dots", "_remaining")

    def __init__(self, rows: List[List[bool]]) -> None:
        self._h = len(rows)
        self._w = len(rows[0]) if rows else 0
        self._dots = rows
        self._remaining = sum(sum(1 for d in row if d) for row in rows)

    @classmethod
    def initialize(cls, maze: Maze) -> "DotField":
        """Dots on every floor cell, none on walls."""
        return cls([[tile is Tile.FLOOR for tile in row] for row in maze.rows])

    @property
    def remaining(self) -> int:
        return self._remaining

    def has_dot(self, x: int, y: int) -> bool:
        if not (0 <= x < self._w and 0 <= y < self._h):
            return False
        return self._dots[y][x]

    def consume(self, x: int, y: int) -> bool:
        """Clear the dot at (x, y).

        Returns True if a dot was collected, False if the cell was already empty.
        """
        if not self.has_dot(x, y):
            return False
        self._dots[y][x] = False
        self._remaining -= 1
        logger.debug("Dot collected at (%d,%d); %d remaining", x, y, self._remaining)
        return True

    def as_rows(self) -> Tuple[Tuple[bool, ...], ...]:
        return tuple(tuple(row) for row in self._dots)
