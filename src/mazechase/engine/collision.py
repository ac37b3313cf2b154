from __future__ import annotations

import logging

from .state import SessionState

logger = logging.getLogger(__name__)


def check_collisions(state: SessionState) -> bool:
    """End the session if any adversary shares the player's cell.

    Returns the resulting game-over flag.
    """
    for adversary in state.adversaries:
        if adversary.position == state.player:
            if not state.game_over:
                logger.info(
                    "Adversary %d caught the player at %s (score=%d)",
                    adversary.id,
                    state.player.as_tuple(),
                    state.score,
                )
            state.game_over = True
            break
    return state.game_over
