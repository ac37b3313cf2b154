from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..exceptions import ConfigurationError
from ..rng import RNG, RandomSource
from .grid import Maze
from .tiles import Tile

logger = logging.getLogger(__name__)

DEFAULT_WALL_PROBABILITY = 0.15
DEFAULT_PILLAR_SPACING = 4


def is_structural(x: int, y: int, width: int, height: int, pillar_spacing: int = DEFAULT_PILLAR_SPACING) -> bool:
    """True for cells that are always walls: the border ring and the pillar lattice."""
    if x == 0 or y == 0 or x == width - 1 or y == height - 1:
        return True
    return x % pillar_spacing == 0 and y % pillar_spacing == 0


class MazeGenerator:
    """Random maze generator.

    - Solid wall border
    - A wall pillar wherever both coordinates are multiples of ``pillar_spacing``
    - Every other cell is a wall with probability ``wall_probability``

    No connectivity pass is performed, so isolated floor pockets can occur
    (see :mod:`mazechase.maze.analysis`). Cells listed in ``reserved`` are
    forced to floor unless they are structural, which keeps spawn points
    playable without weakening the border and pillar guarantees.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        wall_probability: float = DEFAULT_WALL_PROBABILITY,
        pillar_spacing: int = DEFAULT_PILLAR_SPACING,
    ) -> None:
        if not 0.0 <= wall_probability <= 1.0:
            raise ConfigurationError(f"wall_probability must be within [0, 1], got {wall_probability}")
        if pillar_spacing <= 0:
            raise ConfigurationError(f"pillar_spacing must be positive, got {pillar_spacing}")
        self._rng = rng if rng is not None else RNG()
        self.wall_probability = wall_probability
        self.pillar_spacing = pillar_spacing

    def generate(self, width: int, height: int, reserved: Iterable[Tuple[int, int]] = ()) -> Maze:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Maze dimensions must be positive, got {width}x{height}")
        logger.info("Generating %dx%d maze (wall_probability=%.2f)", width, height, self.wall_probability)
        keep_open = set(reserved)

        rows: List[List[Tile]] = []
        for y in range(height):
            row: List[Tile] = []
            for x in range(width):
                if is_structural(x, y, width, height, self.pillar_spacing):
                    row.append(Tile.WALL)
                    continue
                # Always draw so reserving cells does not shift the random sequence
                wall = self._rng.random() < self.wall_probability
                row.append(Tile.WALL if wall and (x, y) not in keep_open else Tile.FLOOR)
            rows.append(row)

        maze = Maze(rows)
        logger.debug("Generated maze:\n%s", "\n".join(maze.to_lines()))
        return maze


__all__ = ["MazeGenerator", "is_structural", "DEFAULT_WALL_PROBABILITY", "DEFAULT_PILLAR_SPACING"]
