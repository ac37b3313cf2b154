from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..config import GameConfig
from ..maze import Maze, MazeGenerator, unreachable_floor
from ..rng import RandomSource
from .dots import DotField

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal directions with their grid offsets (y grows downward)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, Direction):
            return value
        return cls(str(value).strip().lower())


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Adversary:
    """A wandering adversary.

    ``facing`` and ``color`` are for display only; motion never reads them.
    """

    id: int
    position: Position
    facing: Direction
    color: str


@dataclass
class SessionState:
    """Everything that changes during one play session.

    The maze is fixed for the lifetime of the session; a restart builds a
    fresh SessionState instead of resetting fields in place.
    """

    maze: Maze
    dots: DotField
    player: Position
    adversaries: List[Adversary]
    score: int = 0
    game_over: bool = False
    session_id: int = 0


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session handed to renderers and listeners."""

    maze: Maze
    dots: Tuple[Tuple[bool, ...], ...]
    player: Position
    adversaries: Tuple[Adversary, ...]
    score: int
    game_over: bool
    dots_remaining: int = field(default=0)


def snapshot_of(state: SessionState) -> Snapshot:
    return Snapshot(
        maze=state.maze,
        dots=state.dots.as_rows(),
        player=state.player,
        adversaries=tuple(state.adversaries),
        score=state.score,
        game_over=state.game_over,
        dots_remaining=state.dots.remaining,
    )


def adversary_spawns(width: int, height: int) -> Tuple[Position, Position, Position]:
    """Starting corners of the fixed roster: top-right, bottom-left, bottom-right."""
    return (
        Position(width - 2, 1),
        Position(1, height - 2),
        Position(width - 2, height - 2),
    )


def default_roster(width: int, height: int) -> List[Adversary]:
    top_right, bottom_left, bottom_right = adversary_spawns(width, height)
    return [
        Adversary(id=1, position=top_right, facing=Direction.LEFT, color="#ff0000"),
        Adversary(id=2, position=bottom_left, facing=Direction.UP, color="#00ff00"),
        Adversary(id=3, position=bottom_right, facing=Direction.LEFT, color="#0000ff"),
    ]


def new_session(
    config: GameConfig,
    rng: RandomSource,
    generator: Optional[MazeGenerator] = None,
    session_id: int = 0,
) -> SessionState:
    """Build a complete session: maze, dots, player at its start, full roster."""
    generator = generator or MazeGenerator(
        rng, wall_probability=config.wall_probability, pillar_spacing=config.pillar_spacing
    )
    start = Position(*config.player_start)
    reserved = [start.as_tuple()] + [p.as_tuple() for p in adversary_spawns(config.width, config.height)]
    maze = generator.generate(config.width, config.height, reserved=reserved)
    if not maze.is_walkable(start.x, start.y):
        # Only an injected generator can get here; the default one reserves the start
        logger.warning("Player start %s is not a floor cell in the generated maze", start.as_tuple())

    stranded = unreachable_floor(maze, start.as_tuple())
    if stranded:
        logger.warning("%d floor cells are unreachable from the player start", len(stranded))

    state = SessionState(
        maze=maze,
        dots=DotField.initialize(maze),
        player=start,
        adversaries=default_roster(maze.width, maze.height),
        session_id=session_id,
    )
    logger.info(
        "Session %d created: %dx%d maze, %d dots, player at %s",
        session_id,
        maze.width,
        maze.height,
        state.dots.remaining,
        start.as_tuple(),
    )
    return state
