from __future__ import annotations

from typing import List

from .engine.state import Snapshot
from .maze import Tile

WALL = "#"
DOT = "."
EMPTY = " "
PLAYER = "P"
ADVERSARY = "G"
CAUGHT = "X"


def render_lines(snapshot: Snapshot) -> List[str]:
    """ASCII picture of a snapshot, one string per maze row."""
    adversary_cells = {a.position.as_tuple() for a in snapshot.adversaries}
    player = snapshot.player.as_tuple()
    lines: List[str] = []
    for y, row in enumerate(snapshot.maze.rows):
        chars: List[str] = []
        for x, tile in enumerate(row):
            cell = (x, y)
            if cell == player:
                chars.append(CAUGHT if cell in adversary_cells else PLAYER)
            elif cell in adversary_cells:
                chars.append(ADVERSARY)
            elif tile is Tile.WALL:
                chars.append(WALL)
            else:
                chars.append(DOT if snapshot.dots[y][x] else EMPTY)
        lines.append("".join(chars))
    return lines


def render_status(snapshot: Snapshot) -> str:
    status = f"Score: {snapshot.score}  Dots left: {snapshot.dots_remaining}"
    if snapshot.game_over:
        status += "  GAME OVER"
    return status
