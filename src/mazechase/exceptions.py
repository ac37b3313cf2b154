class MazeChaseError(Exception):
    """Base exception for the mazechase project."""


class ConfigurationError(MazeChaseError):
    """Raised when a game configuration cannot produce a playable session."""
