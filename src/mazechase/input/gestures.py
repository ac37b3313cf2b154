from __future__ import annotations

from typing import Optional

from ..engine.state import Direction

DEFAULT_SWIPE_THRESHOLD = 30.0


def swipe_to_direction(
    translation_x: float,
    translation_y: float,
    threshold: float = DEFAULT_SWIPE_THRESHOLD,
) -> Optional[Direction]:
    """Translate a drag into a cardinal intent.

    The axis with the larger absolute travel wins, and it must travel more
    than ``threshold`` pixels. Screen coordinates are assumed to grow
    downward, so a positive ``translation_y`` means DOWN.
    """
    if abs(translation_x) > abs(translation_y):
        if translation_x > threshold:
            return Direction.RIGHT
        if translation_x < -threshold:
            return Direction.LEFT
        return None
    if translation_y > threshold:
        return Direction.DOWN
    if translation_y < -threshold:
        return Direction.UP
    return None
