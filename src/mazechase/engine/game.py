from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..config import GameConfig
from ..maze import MazeGenerator
from ..rng import RNG, RandomSource
from .adversaries import tick_adversaries
from .collision import check_collisions
from .events import GameEvent
from .movement import move_player
from .scheduler import ManualClock, SchedulerEvent, TickScheduler, TimerHandle, TimerHost
from .state import Direction, SessionState, Snapshot, new_session, snapshot_of

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, Snapshot], None]


class Game:
    """One player's game: session state, tick scheduling and listeners.

    All entry points are meant to be called from the host's event-loop thread;
    each one finishes its state mutation before any listener is notified, so
    observers never see a half-applied move or tick.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        timer_host: Optional[TimerHost] = None,
        generator: Optional[MazeGenerator] = None,
    ) -> None:
        self.config = (config or GameConfig()).validate()
        self._rng = rng if rng is not None else RNG(self.config.seed)
        self._generator = generator
        self.timer_host = timer_host if timer_host is not None else ManualClock()
        self._listeners: List[Listener] = []
        self._scheduler = TickScheduler(
            self.timer_host,
            self.config.tick_interval,
            self._on_tick,
            rearm_on_move=self.config.rearm_on_move,
        )
        self._session_counter = 0
        self.state: SessionState = self._build_session()

    def _build_session(self) -> SessionState:
        self._session_counter += 1
        return new_session(self.config, self._rng, self._generator, session_id=self._session_counter)

    # ---- Listeners -------------------------------------------------------
    def add_listener(self, listener: Listener) -> None:
        """Subscribe to state changes; called with the event and a fresh snapshot."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        if not self._listeners:
            return
        snapshot = snapshot_of(self.state)
        for listener in list(self._listeners):
            try:
                listener(event, snapshot)
            except Exception as ex:  # listeners must not crash the engine
                logger.exception("Listener errored on %s: %s", event, ex)

    # ---- Lifecycle -------------------------------------------------------
    @property
    def scheduler(self) -> TickScheduler:
        return self._scheduler

    def start(self) -> Optional[TimerHandle]:
        """Arm the tick interval for the current session unless it is already over."""
        if self.state.game_over:
            logger.debug("start() ignored: session %d is over", self.state.session_id)
            return self._scheduler.handle
        return self._scheduler.start(tag=self.state.session_id)

    def restart(self) -> Optional[TimerHandle]:
        """Throw the session away and begin a new one with a freshly generated maze."""
        self.state = self._build_session()
        handle = self._scheduler.dispatch(SchedulerEvent.RESTART_REQUESTED, tag=self.state.session_id)
        logger.info("Restarted as session %d", self.state.session_id)
        self._emit(GameEvent.RESTARTED)
        return handle

    def shutdown(self) -> None:
        """Cancel any pending tick; the state stays readable but no longer advances."""
        self._scheduler.dispatch(SchedulerEvent.SHUTDOWN_REQUESTED)

    # ---- Operations ------------------------------------------------------
    def apply_directional_intent(self, direction: Direction | str) -> bool:
        """Move the player one cell in ``direction``; returns whether it moved."""
        dx, dy = Direction.parse(direction).offset
        return self.move(dx, dy)

    def move(self, dx: int, dy: int) -> bool:
        moved = move_player(self.state, dx, dy, reward=self.config.dot_reward)
        if moved:
            self._scheduler.dispatch(SchedulerEvent.MOVE_APPLIED)
            self._emit(GameEvent.MOVE_APPLIED)
        return moved

    def tick(self) -> bool:
        """Advance adversaries then check for collisions, as one step.

        Returns True if the step ran, False if the session was already over.
        """
        if self.state.game_over:
            return False
        tick_adversaries(self.state, self._rng)
        check_collisions(self.state)
        self._scheduler.dispatch(SchedulerEvent.TICK_FIRED)
        if self.state.game_over:
            self._scheduler.dispatch(SchedulerEvent.GAME_OVER_REACHED)
            self._emit(GameEvent.TICK_FIRED)
            self._emit(GameEvent.GAME_OVER)
        else:
            self._emit(GameEvent.TICK_FIRED)
        return True

    def _on_tick(self, handle: TimerHandle) -> None:
        if handle.tag != self.state.session_id or handle is not self._scheduler.handle:
            logger.debug("Dropping tick from superseded %r", handle)
            handle.cancel()
            return
        self.tick()

    def get_snapshot(self) -> Snapshot:
        return snapshot_of(self.state)


__all__ = ["Game", "Listener"]
