"""Grid maze chase game engine.

The engine owns the maze, the dots, the player and the adversaries and
advances them on a fixed tick; presentation layers feed directional intents
in and read snapshots back out.
"""

from .config import GameConfig, load_config
from .engine import Direction, Game, GameEvent, ManualClock, Snapshot
from .exceptions import ConfigurationError, MazeChaseError

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Direction",
    "Game",
    "GameConfig",
    "GameEvent",
    "ManualClock",
    "MazeChaseError",
    "Snapshot",
    "__version__",
    "load_config",
]
