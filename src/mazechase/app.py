from __future__ import annotations

import logging
import os
from typing import Optional, Tuple

try:
    import arcade  # type: ignore
except Exception:  # pragma: no cover - optional for headless environments
    arcade = None

from .config import GameConfig
from .config.loader import HEADER_HEIGHT_PX
from .engine import Direction, Game, GameEvent, ManualClock, Snapshot
from .engine.scheduler import IntervalCallback
from .input import KeyMapper, swipe_to_direction
from .maze import Tile
from .render import render_lines, render_status
from .rng import RNG

logger = logging.getLogger(__name__)

TITLE = "Maze Chase"
BACKGROUND = (0, 0, 0)
WALL_COLOR = (0, 0, 255)
DOT_COLOR = (255, 255, 255)
PLAYER_COLOR = (255, 221, 0)
SCORE_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
DOT_RADIUS = 2


def hex_to_rgb(tag: str) -> Tuple[int, int, int]:
    """'#ff0000' -> (255, 0, 0)."""
    value = tag.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #rrggbb colour tag, got {tag!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


class ArcadeTimerHost:
    """TimerHost backed by the arcade (pyglet) clock."""

    def schedule_interval(self, callback: IntervalCallback, interval: float) -> None:
        arcade.schedule(callback, interval)

    def unschedule(self, callback: IntervalCallback) -> None:
        arcade.unschedule(callback)


def _arcade_key_names() -> dict:
    names = {}
    for name in ("UP", "DOWN", "LEFT", "RIGHT", "W", "A", "S", "D", "R", "ENTER", "RETURN", "ESCAPE"):
        code = getattr(arcade.key, name, None)
        if code is not None:
            names[code] = name
    return names


class MazeChaseWindow:
    """Arcade window showing the board and feeding keys and swipes to a Game.

    Only created when arcade is installed; the engine never depends on it.
    """

    def __init__(self, game: Game, keys: Optional[KeyMapper] = None):
        if arcade is None:
            raise RuntimeError("Arcade package is not installed; cannot create window")
        self.game = game
        self.keys = keys or KeyMapper.default()
        self._key_names = _arcade_key_names()
        self._press: Optional[Tuple[float, float]] = None
        self._snapshot: Snapshot = game.get_snapshot()
        cell = game.config.cell_size
        width = self._snapshot.maze.width * cell
        height = self._snapshot.maze.height * cell + HEADER_HEIGHT_PX
        self._window = arcade.Window(width, height, title=TITLE)
        self._window.background_color = BACKGROUND
        self._window.on_draw = self.on_draw
        self._window.on_key_press = self.on_key_press
        self._window.on_mouse_press = self.on_mouse_press
        self._window.on_mouse_release = self.on_mouse_release
        game.add_listener(self._on_event)
        logger.info("Arcade window initialized (%dx%d)", width, height)

    def _on_event(self, event: GameEvent, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        if event is GameEvent.GAME_OVER:
            logger.info("Game over with score %d", snapshot.score)

    def run(self) -> None:
        self.game.start()
        arcade.run()

    def close(self) -> None:
        self.game.shutdown()
        self._window.close()

    # ---- Drawing ---------------------------------------------------------
    def on_draw(self) -> None:
        self._window.clear()
        snap = self._snapshot
        cell = self.game.config.cell_size
        rows = snap.maze.height

        def cell_box(x: int, y: int) -> Tuple[float, float, float, float]:
            left = x * cell
            bottom = (rows - 1 - y) * cell
            return left, left + cell, bottom, bottom + cell

        for y, row in enumerate(snap.maze.rows):
            for x, tile in enumerate(row):
                left, right, bottom, top = cell_box(x, y)
                if tile is Tile.WALL:
                    arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, WALL_COLOR)
                elif snap.dots[y][x]:
                    arcade.draw_circle_filled(left + cell / 2, bottom + cell / 2, DOT_RADIUS, DOT_COLOR)

        left, _, bottom, _ = cell_box(snap.player.x, snap.player.y)
        arcade.draw_circle_filled(left + cell / 2, bottom + cell / 2, cell * 0.4, PLAYER_COLOR)
        for adversary in snap.adversaries:
            left, _, bottom, _ = cell_box(adversary.position.x, adversary.position.y)
            arcade.draw_circle_filled(left + cell / 2, bottom + cell / 2, cell * 0.4, hex_to_rgb(adversary.color))

        header_y = rows * cell + HEADER_HEIGHT_PX / 2
        arcade.draw_text(f"Score: {snap.score}", 20, header_y + 20, SCORE_COLOR, 20, bold=True)
        if snap.game_over:
            arcade.draw_text("GAME OVER - Tap to restart", 20, header_y - 20, GAME_OVER_COLOR, 18, bold=True)

    # ---- Input -----------------------------------------------------------
    def on_key_press(self, symbol: int, modifiers: int) -> None:
        name = self._key_names.get(symbol)
        if name == "ESCAPE":
            self.close()
            return
        if self._snapshot.game_over and name in ("R", "ENTER", "RETURN"):
            self.game.restart()
            return
        direction = self.keys.direction_for_key(name)
        if direction is not None:
            self.game.apply_directional_intent(direction)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int) -> None:
        self._press = (x, y)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int) -> None:
        if self._press is None:
            return
        px, py = self._press
        self._press = None
        # arcade's y axis points up; gestures are measured with y pointing down
        direction = swipe_to_direction(x - px, py - y, self.game.config.swipe_threshold)
        if direction is not None:
            self.game.apply_directional_intent(direction)
        elif self._snapshot.game_over:
            self.game.restart()


def run_gui(config: GameConfig) -> int:
    """Run with an arcade window if available, otherwise fall back to headless."""
    if arcade is None:
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(config)

    game = Game(config, timer_host=ArcadeTimerHost())
    window = MazeChaseWindow(game)
    try:
        logger.info("Launching Arcade window")
        window.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
    finally:
        game.shutdown()


def run_headless(config: GameConfig, max_ticks: Optional[int] = 60) -> int:
    """Play a session without a window: a seeded autopilot picks a direction before every tick."""
    if max_ticks is None:
        # Always bound the loop when nobody is watching
        max_ticks = 60

    print(f"{TITLE} (headless)")
    clock = ManualClock()
    game = Game(config, timer_host=clock)
    autopilot = RNG(None if config.seed is None else config.seed + 1)
    ticks = 0

    def count(event: GameEvent, snapshot: Snapshot) -> None:
        nonlocal ticks
        if event is GameEvent.TICK_FIRED:
            ticks += 1

    game.add_listener(count)
    directions = list(Direction)
    try:
        game.start()
        while ticks < max_ticks and not game.state.game_over:
            game.apply_directional_intent(autopilot.choice(directions))
            clock.advance(config.tick_interval)
    except KeyboardInterrupt:
        print("Interrupted by user")
        return 130
    finally:
        game.shutdown()

    snapshot = game.get_snapshot()
    print("\n".join(render_lines(snapshot)))
    print(render_status(snapshot))
    print(f"Loop complete (ticks={ticks})")
    return 0


def run_auto(config: GameConfig, max_ticks: Optional[int] = None) -> int:
    """Run GUI unless MAZECHASE_HEADLESS=1 forces headless."""
    if os.getenv("MAZECHASE_HEADLESS") == "1":
        return run_headless(config, max_ticks=max_ticks)
    return run_gui(config)
