from .adversaries import step_adversary, tick_adversaries
from .collision import check_collisions
from .dots import DotField
from .events import GameEvent
from .game import Game
from .movement import is_valid_move, move_player
from .scheduler import ManualClock, SchedulerEvent, SchedulerState, TickScheduler, TimerHandle, TimerHost
from .state import Adversary, Direction, Position, SessionState, Snapshot, new_session, snapshot_of

__all__ = [
    "Adversary",
    "Direction",
    "DotField",
    "Game",
    "GameEvent",
    "ManualClock",
    "Position",
    "SchedulerEvent",
    "SchedulerState",
    "SessionState",
    "Snapshot",
    "TickScheduler",
    "TimerHandle",
    "TimerHost",
    "check_collisions",
    "is_valid_move",
    "move_player",
    "new_session",
    "snapshot_of",
    "step_adversary",
    "tick_adversaries",
]
