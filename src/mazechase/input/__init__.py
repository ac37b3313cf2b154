from .gestures import DEFAULT_SWIPE_THRESHOLD, swipe_to_direction
from .mapping import KeyMapper

__all__ = ["DEFAULT_SWIPE_THRESHOLD", "KeyMapper", "swipe_to_direction"]
