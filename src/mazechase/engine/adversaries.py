from __future__ import annotations

import dataclasses
import logging
from typing import List

from ..rng import RandomSource
from .movement import is_valid_move
from .state import Adversary, Direction, SessionState

logger = logging.getLogger(__name__)

# Enumeration order matters for reproducibility under a seeded source.
CANDIDATE_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def step_adversary(state: SessionState, adversary: Adversary, rng: RandomSource) -> Adversary:
    """Pick a uniformly random open neighbour and step there.

    Only maze walls are obstacles; other adversaries are ignored. With no open
    neighbour the adversary is returned unchanged, facing included.
    """
    pos = adversary.position
    options: List[Direction] = [
        d for d in CANDIDATE_DIRECTIONS if is_valid_move(state.maze, pos.x + d.offset[0], pos.y + d.offset[1])
    ]
    if not options:
        logger.debug("Adversary %d at %s has no open neighbour; staying", adversary.id, pos.as_tuple())
        return adversary
    chosen = rng.choice(options)
    moved = dataclasses.replace(adversary, position=pos.offset(*chosen.offset), facing=chosen)
    logger.debug("Adversary %d moves %s to %s", adversary.id, chosen.value, moved.position.as_tuple())
    return moved


def tick_adversaries(state: SessionState, rng: RandomSource) -> None:
    """Advance every adversary one cell, in roster order."""
    if state.game_over:
        return
    state.adversaries = [step_adversary(state, adversary, rng) for adversary in state.adversaries]


__all__ = ["CANDIDATE_DIRECTIONS", "step_adversary", "tick_adversaries"]
