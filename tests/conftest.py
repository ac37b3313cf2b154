import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from mazechase.config import GameConfig  # noqa: E402
from mazechase.maze import Maze  # noqa: E402


class FixedMazeGenerator:
    """Hands out the same hand-drawn maze for every session."""

    def __init__(self, lines: Sequence[str]) -> None:
        self.maze = Maze.from_lines(lines)
        self.calls: List[Tuple[int, int]] = []

    def generate(self, width: int, height: int, reserved: Iterable[Tuple[int, int]] = ()) -> Maze:
        self.calls.append((width, height))
        return self.maze


class ScriptedRandom:
    """Random source stub: scripted floats, and choice() picks by scripted index (default first)."""

    def __init__(self, floats: Optional[List[float]] = None, picks: Optional[List[int]] = None) -> None:
        self.floats = list(floats or [])
        self.picks = list(picks or [])
        self.choices_seen: List[list] = []

    def random(self) -> float:
        return self.floats.pop(0) if self.floats else 0.99

    def choice(self, seq):
        self.choices_seen.append(list(seq))
        index = self.picks.pop(0) if self.picks else 0
        return seq[index]


OPEN_5X5 = [
    "#####",
    "#...#",
    "#...#",
    "#...#",
    "#####",
]

OPEN_7X7 = [
    "#######",
    "#.....#",
    "#.....#",
    "#.....#",
    "#.....#",
    "#.....#",
    "#######",
]

CORRIDOR_5X3 = [
    "#####",
    "#...#",
    "#####",
]


def config_for(lines: Sequence[str], **changes) -> GameConfig:
    return GameConfig(width=len(lines[0]), height=len(lines), **changes).validate()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for key in ("MAZECHASE_CONFIG", "MAZECHASE_WIDTH", "MAZECHASE_HEIGHT", "MAZECHASE_SEED",
                "MAZECHASE_HEADLESS", "MAZECHASE_GUI", "MAZECHASE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
