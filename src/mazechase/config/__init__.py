from .loader import GameConfig, board_size_for_window, load_config

__all__ = ["GameConfig", "board_size_for_window", "load_config"]
