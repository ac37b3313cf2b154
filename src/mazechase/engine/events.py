from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by Game to notify renderers or other systems."""

    MOVE_APPLIED = auto()
    TICK_FIRED = auto()
    GAME_OVER = auto()
    RESTARTED = auto()
