from __future__ import annotations

from collections import deque
from typing import Deque, Set, Tuple

from .grid import Maze
from .tiles import Tile


def reachable_cells(maze: Maze, start: Tuple[int, int]) -> Set[Tuple[int, int]]:
    """Floor cells reachable from ``start`` by cardinal steps (BFS).

    Returns an empty set when ``start`` itself is not walkable.
    """
    if not maze.is_walkable(*start):
        return set()
    seen: Set[Tuple[int, int]] = {start}
    queue: Deque[Tuple[int, int]] = deque([start])
    while queue:
        x, y = queue.popleft()
        for n in maze.neighbors(x, y):
            if n in seen or not maze.is_walkable(*n):
                continue
            seen.add(n)
            queue.append(n)
    return seen


def unreachable_floor(maze: Maze, start: Tuple[int, int]) -> Set[Tuple[int, int]]:
    """Floor cells that can never be visited from ``start``."""
    return set(maze.cells(Tile.FLOOR)) - reachable_cells(maze, start)
