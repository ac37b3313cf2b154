from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

IntervalCallback = Callable[[float], None]


class TimerHost(Protocol):
    """Clock contract of the host event loop (pyglet/arcade style).

    Callbacks receive the elapsed time in seconds. ``unschedule`` removes every
    pending interval registered for ``callback``.
    """

    def schedule_interval(self, callback: IntervalCallback, interval: float) -> None: ...
    def unschedule(self, callback: IntervalCallback) -> None: ...


@dataclass
class _Entry:
    callback: IntervalCallback
    interval: float
    next_due: float
    order: int


class ManualClock:
    """A TimerHost whose time only moves when :meth:`advance` is called.

    Used for headless runs and tests; callbacks fire in due-time order and may
    schedule or unschedule other callbacks while firing.
    """

    def __init__(self) -> None:
        self._now = 0.0
        self._entries: List[_Entry] = []
        self._counter = 0

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._entries)

    def schedule_interval(self, callback: IntervalCallback, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._counter += 1
        self._entries.append(_Entry(callback, interval, self._now + interval, self._counter))

    def unschedule(self, callback: IntervalCallback) -> None:
        self._entries = [e for e in self._entries if e.callback != callback]

    def advance(self, seconds: float) -> None:
        target = self._now + seconds
        while True:
            due = [e for e in self._entries if e.next_due <= target + 1e-9]
            if not due:
                break
            entry = min(due, key=lambda e: (e.next_due, e.order))
            self._now = entry.next_due
            entry.next_due += entry.interval
            entry.callback(entry.interval)
        self._now = target


class TimerHandle:
    """Cancellation token for one armed interval.

    Once canceled, the handle never invokes its tick callback again, even if
    the host still delivers a pending fire.
    """

    def __init__(self, host: TimerHost, interval: float, on_tick: Callable[["TimerHandle"], None], tag: int) -> None:
        self._host = host
        self._on_tick = on_tick
        self.interval = interval
        self.tag = tag
        self._active = True
        host.schedule_interval(self._fire, interval)

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._host.unschedule(self._fire)

    def _fire(self, delta_time: float) -> None:
        if not self._active:
            return
        self._on_tick(self)

    def __repr__(self) -> str:
        return f"TimerHandle(tag={self.tag}, interval={self.interval}, active={self._active})"


class SchedulerState(Enum):
    RUNNING = auto()
    STOPPED = auto()


class SchedulerEvent(Enum):
    SESSION_STARTED = auto()
    MOVE_APPLIED = auto()
    TICK_FIRED = auto()
    GAME_OVER_REACHED = auto()
    RESTART_REQUESTED = auto()
    SHUTDOWN_REQUESTED = auto()


class _Action(Enum):
    NONE = auto()
    ARM = auto()
    REARM = auto()
    CANCEL = auto()


_S = SchedulerState
_E = SchedulerEvent

# (state, event) -> (next state, action). Pairs not listed leave the scheduler untouched.
TRANSITIONS: Dict[Tuple[SchedulerState, SchedulerEvent], Tuple[SchedulerState, _Action]] = {
    (_S.STOPPED, _E.SESSION_STARTED): (_S.RUNNING, _Action.ARM),
    (_S.RUNNING, _E.SESSION_STARTED): (_S.RUNNING, _Action.NONE),
    (_S.RUNNING, _E.MOVE_APPLIED): (_S.RUNNING, _Action.REARM),
    (_S.RUNNING, _E.TICK_FIRED): (_S.RUNNING, _Action.NONE),
    (_S.RUNNING, _E.GAME_OVER_REACHED): (_S.STOPPED, _Action.CANCEL),
    (_S.RUNNING, _E.RESTART_REQUESTED): (_S.RUNNING, _Action.REARM),
    (_S.STOPPED, _E.RESTART_REQUESTED): (_S.RUNNING, _Action.ARM),
    (_S.RUNNING, _E.SHUTDOWN_REQUESTED): (_S.STOPPED, _Action.CANCEL),
}


class TickScheduler:
    """Drives the periodic world step through a TimerHost.

    At most one interval is armed at any time: every (re)arm cancels the
    previous handle before creating the next one.
    """

    def __init__(
        self,
        host: TimerHost,
        interval: float,
        on_tick: Callable[[TimerHandle], None],
        *,
        rearm_on_move: bool = True,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._host = host
        self.interval = interval
        self._on_tick = on_tick
        self.rearm_on_move = rearm_on_move
        self._state = SchedulerState.STOPPED
        self._handle: Optional[TimerHandle] = None
        self._tag = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is SchedulerState.RUNNING

    @property
    def handle(self) -> Optional[TimerHandle]:
        return self._handle

    def start(self, tag: int = 0) -> Optional[TimerHandle]:
        """Enter RUNNING for session ``tag`` and return the active handle."""
        self._tag = tag
        return self.dispatch(SchedulerEvent.SESSION_STARTED)

    def dispatch(self, event: SchedulerEvent, tag: Optional[int] = None) -> Optional[TimerHandle]:
        """Apply one transition and return the handle that is active afterwards."""
        if tag is not None:
            self._tag = tag
        next_state, action = TRANSITIONS.get((self._state, event), (self._state, _Action.NONE))
        if action is _Action.REARM and event is SchedulerEvent.MOVE_APPLIED and not self.rearm_on_move:
            action = _Action.NONE

        if action is _Action.ARM or action is _Action.REARM:
            self._arm()
        elif action is _Action.CANCEL:
            self._cancel()

        if next_state is not self._state:
            logger.info("Scheduler %s -> %s on %s", self._state.name, next_state.name, event.name)
        self._state = next_state
        return self._handle

    def _arm(self) -> None:
        self._cancel()
        self._handle = TimerHandle(self._host, self.interval, self._on_tick, self._tag)
        logger.debug("Armed %r", self._handle)

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Canceled %r", self._handle)
            self._handle = None


__all__ = [
    "IntervalCallback",
    "ManualClock",
    "SchedulerEvent",
    "SchedulerState",
    "TRANSITIONS",
    "TickScheduler",
    "TimerHandle",
    "TimerHost",
]
