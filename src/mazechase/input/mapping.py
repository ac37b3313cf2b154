from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from ..engine.state import Direction

logger = logging.getLogger(__name__)


class KeyMapper:
    """Rebindable mapping from key names to directional intents.

    Keys are plain strings normalized to upper case, so any backend can be
    plugged in by translating its key constants to names first.
    """

    def __init__(self, bindings: Optional[Dict[str, Direction]] = None) -> None:
        self._bindings: Dict[str, Direction] = {}
        for key, direction in (bindings or {}).items():
            self.bind(key, direction)

    @staticmethod
    def _normalize(key: object) -> Optional[str]:
        if not isinstance(key, str):
            return None
        k = key.strip()
        return k.upper() if k else None

    def bind(self, key: str, direction: Direction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = direction

    def bind_many(self, keys: Iterable[str], direction: Direction) -> None:
        for k in keys:
            self.bind(k, direction)

    def unbind(self, key: str) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def direction_for_key(self, key: object) -> Optional[Direction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        return self._bindings.get(nk)

    @classmethod
    def default(cls) -> "KeyMapper":
        """Arrow keys and WASD."""
        mapper = cls()
        mapper.bind_many(["UP", "W"], Direction.UP)
        mapper.bind_many(["DOWN", "S"], Direction.DOWN)
        mapper.bind_many(["LEFT", "A"], Direction.LEFT)
        mapper.bind_many(["RIGHT", "D"], Direction.RIGHT)
        return mapper


__all__ = ["KeyMapper"]
