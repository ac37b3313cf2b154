from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Minimal random interface consumed by maze generation and adversary motion."""

    def random(self) -> float: ...
    def choice(self, seq: Sequence[T]) -> T: ...


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Pass a fixed seed for reproducible tests; ``None`` seeds from OS entropy.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self._rng.randrange(len(seq))]

    def state(self) -> Any:
        """Return the internal PRNG state for debugging or replay."""
        return self._rng.getstate()

    def set_state(self, state: Any) -> None:
        """Restore the internal PRNG state."""
        self._rng.setstate(state)


__all__ = ["RandomSource", "RNG"]
