from __future__ import annotations

import logging

from ..maze import Maze
from .state import SessionState

logger = logging.getLogger(__name__)

DEFAULT_DOT_REWARD = 10


def is_valid_move(maze: Maze, x: int, y: int) -> bool:
    """Return True iff (x, y) is inside the maze and a floor cell.

    This is the one rule for "can occupy this cell", used unchanged for the
    player and for adversaries. Pure and never raises.
    """
    return maze.is_within(x, y) and maze.is_walkable(x, y)


def move_player(state: SessionState, dx: int, dy: int, reward: int = DEFAULT_DOT_REWARD) -> bool:
    """Attempt to move the player by a unit cardinal offset.

    The move is ignored when the session is over, the offset is not a single
    cardinal step, or the destination is out of bounds or a wall. Otherwise the
    player moves and the dot at the destination, if any, is collected for
    ``reward`` points.

    Returns:
        True if the player moved; False if the request was ignored.
    """
    if state.game_over:
        logger.debug("Ignoring move (%d,%d): session %d is over", dx, dy, state.session_id)
        return False
    if abs(dx) + abs(dy) != 1:
        logger.debug("Ignoring non-cardinal move (%d,%d)", dx, dy)
        return False

    target = state.player.offset(dx, dy)
    if not is_valid_move(state.maze, target.x, target.y):
        logger.debug("Blocked player move to (%d,%d)", target.x, target.y)
        return False

    logger.debug("Player moves from %s to %s", state.player.as_tuple(), target.as_tuple())
    state.player = target
    if state.dots.consume(target.x, target.y):
        state.score += reward
    return True


__all__ = ["DEFAULT_DOT_REWARD", "is_valid_move", "move_player"]
