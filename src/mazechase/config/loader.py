from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

from ..exceptions import ConfigurationError
from ..maze.generator import is_structural

logger = logging.getLogger(__name__)

ENV_PREFIX = "MAZECHASE_"
CONFIG_FILE_ENV = "MAZECHASE_CONFIG"

# Vertical space the original layout reserves for the score header.
HEADER_HEIGHT_PX = 200


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey values into a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
    raise ValueError(f"Not a boolean value: {value!r}")


def _as_point(value: Any) -> Tuple[int, int]:
    if isinstance(value, str):
        value = [part for part in value.replace(";", ",").split(",") if part.strip()]
    x, y = value
    return int(x), int(y)


def _as_seed(value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and value.strip().lower() in {"", "none", "random"}):
        return None
    return int(value)


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of a session.

    Board and rule values shape the engine; ``cell_size`` and
    ``swipe_threshold`` are only read by the presentation layer.
    """

    width: int = 28
    height: int = 24
    wall_probability: float = 0.15
    pillar_spacing: int = 4
    player_start: Tuple[int, int] = (1, 1)
    dot_reward: int = 10
    tick_interval: float = 0.5
    rearm_on_move: bool = True
    seed: Optional[int] = None
    cell_size: int = 20
    swipe_threshold: float = 30.0

    def validate(self) -> "GameConfig":
        """Fail fast on values that cannot produce a playable maze."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if self.width < 3 or self.height < 3:
            raise ConfigurationError(
                f"Grid must be at least 3x3 to keep a wall border around an interior, got {self.width}x{self.height}"
            )
        if not 0.0 <= self.wall_probability <= 1.0:
            raise ConfigurationError(f"wall_probability must be within [0, 1], got {self.wall_probability}")
        if self.pillar_spacing <= 0:
            raise ConfigurationError(f"pillar_spacing must be positive, got {self.pillar_spacing}")
        if self.dot_reward <= 0:
            raise ConfigurationError(f"dot_reward must be positive, got {self.dot_reward}")
        if self.tick_interval <= 0:
            raise ConfigurationError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.cell_size <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {self.cell_size}")
        if self.swipe_threshold < 0:
            raise ConfigurationError(f"swipe_threshold must not be negative, got {self.swipe_threshold}")
        px, py = self.player_start
        if not (0 < px < self.width - 1 and 0 < py < self.height - 1):
            raise ConfigurationError(f"player_start {self.player_start} must be an interior cell")
        if is_structural(px, py, self.width, self.height, self.pillar_spacing):
            raise ConfigurationError(f"player_start {self.player_start} lies on a structural pillar")
        # Adversaries start in the other three corners of the interior
        corners = ((self.width - 2, 1), (1, self.height - 2), (self.width - 2, self.height - 2))
        for cx, cy in corners:
            if is_structural(cx, cy, self.width, self.height, self.pillar_spacing):
                raise ConfigurationError(
                    f"Adversary start ({cx}, {cy}) lies on a structural pillar of a {self.width}x{self.height} board"
                )
        return self

    def replace(self, **changes: Any) -> "GameConfig":
        """Return a validated copy with ``changes`` applied; None values are ignored."""
        applied = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, **applied).validate()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        """Build from a flat or sectioned (board/rules/display) mapping."""
        flat = _flatten(data)
        allowed = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(flat) - set(allowed))
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        values: Dict[str, Any] = {}
        for key, raw in flat.items():
            if key not in allowed:
                continue
            try:
                values[key] = _CASTERS[key](raw)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid value for {key}: {raw!r} ({exc})") from exc
        return cls(**values).validate()

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """Collect MAZECHASE_* overrides, e.g. MAZECHASE_WIDTH=40."""
        env = os.environ if env is None else env
        out: Dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_key = ENV_PREFIX + field.name.upper()
            if env_key in env and env[env_key] != "":
                out[field.name] = env[env_key]
        return out


_CASTERS: Dict[str, Callable[[Any], Any]] = {
    "width": int,
    "height": int,
    "wall_probability": float,
    "pillar_spacing": int,
    "player_start": _as_point,
    "dot_reward": int,
    "tick_interval": float,
    "rearm_on_move": _as_bool,
    "seed": _as_seed,
    "cell_size": int,
    "swipe_threshold": float,
}


def _flatten(data: Mapping[str, Any]) -> Dict[str, Any]:
    # Accept either top-level keys or keys grouped under [board]/[rules]/[display]
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            flat.update(value)
        else:
            flat[key] = value
    return flat


def _read_yaml(text: str, origin: str) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed YAML in {origin}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Top level of {origin} must be a mapping")
    return _flatten(raw)


def load_config(
    path: Optional[Path | str] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> GameConfig:
    """Load configuration from all sources.

    Order of precedence (lowest to highest): packaged defaults.yaml < user
    YAML file (``path`` or MAZECHASE_CONFIG) < MAZECHASE_* env < ``overrides``.
    Overrides set to None are ignored so CLI flags can be passed through as-is.
    """
    env = os.environ if env is None else env
    data = _read_yaml(
        resource_files("mazechase.config").joinpath("defaults.yaml").read_text(encoding="utf-8"),
        "embedded defaults",
    )
    logger.debug("Loaded embedded default config resource")

    chosen = path if path is not None else env.get(CONFIG_FILE_ENV) or None
    if chosen is not None:
        file_path = Path(chosen).expanduser()
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {file_path}: {exc}") from exc
        data.update(_read_yaml(text, str(file_path)))
        logger.debug("Loaded config from path: %s", file_path)

    data.update(GameConfig.from_env(env))
    data.update({k: v for k, v in overrides.items() if v is not None})
    config = GameConfig.from_dict(data)
    logger.info(
        "Config: %dx%d wall_probability=%.2f tick_interval=%.2fs seed=%s",
        config.width,
        config.height,
        config.wall_probability,
        config.tick_interval,
        config.seed,
    )
    return config


def board_size_for_window(window_width: int, window_height: int, cell_size: int) -> Tuple[int, int]:
    """Columns and rows that fit a window below the score header."""
    if cell_size <= 0:
        raise ConfigurationError(f"cell_size must be positive, got {cell_size}")
    return window_width // cell_size, (window_height - HEADER_HEIGHT_PX) // cell_size


__all__ = ["GameConfig", "load_config", "board_size_for_window", "ENV_PREFIX", "CONFIG_FILE_ENV"]
