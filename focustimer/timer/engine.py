"""Timer state machine for Focus Timer.

Modes
-----
WORK          Focus session (25 min by default).
SHORT_BREAK   Break after most work sessions (5 min).
LONG_BREAK    Break after every 4th completed work session (15 min).

Cadence
-------
work → short → work → short → work → short → work → LONG → work → ...

The next mode is decided from the persisted ``sessions_completed``
count, so the cadence survives restarts.  The engine never auto-starts
after a transition; the user starts every session.

Running
-------
``running`` is literally ``QTimer.isActive()``.  ``start`` is the only
place the timer is started; ``pause`` is the only place it is stopped,
and ``reset`` / ``switch_mode`` / ``complete_session`` all go through
``pause`` first.  One engine therefore never has two tick sources.

Halfway point
-------------
The threshold ``floor(full / 2)`` is armed when ``start`` opens a new
session and is checked on every tick.  A session stays open until the
clock is refilled, so it fires once per session.  Pausing and resuming
neither re-arms nor loses it; ``reset``, ``switch_mode`` and an idle
``apply_settings`` disarm it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .config import (
    TimerMode,
    TimerConfig,
    InvalidConfig,
    SESSIONS_PER_LONG_BREAK,
)

if TYPE_CHECKING:
    from ..storage import KeyValueStore

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TimerEngine(QObject):
    """Qt-driven Pomodoro state machine.

    Signals
    -------
    ticked(remaining_seconds: int)
        After every one-second decrement.
    running_changed(running: bool)
        When the tick source is acquired or released.
    mode_changed(mode: TimerMode)
        After every ``switch_mode`` (manual or automatic).
    session_started(mode: TimerMode)
        When ``start`` opens a session that has not run since its last refill.
    session_completed(mode: TimerMode, sessions_completed: int)
        After a session reaches zero.  ``mode`` is the mode that just
        finished; the engine has already switched to the next one.
    halfway_point(mode: TimerMode)
        Once per session, on the tick that crosses the halfway mark.
    timer_reset(remaining_seconds: int)
        When remaining time is refilled without a mode change.
    """

    ticked = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    mode_changed = pyqtSignal(object)
    session_started = pyqtSignal(object)
    session_completed = pyqtSignal(object, int)
    halfway_point = pyqtSignal(object)
    timer_reset = pyqtSignal(int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        store: KeyValueStore | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store

        # ── configuration & persisted count ───────────────────────────
        self._config = TimerConfig()
        self._sessions_completed = 0
        if store is not None:
            self._load_persisted()

        # ── countdown state ───────────────────────────────────────────
        self._mode = TimerMode.WORK
        self._remaining = self._config.seconds_for(self._mode)
        self._halfway_at: int | None = None
        self._halfway_fired = False
        self._session_open = False

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self.tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> TimerMode:
        return self._mode

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def sessions_completed(self) -> int:
        return self._sessions_completed

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def full_duration(self) -> int:
        """Seconds in a full session of the current mode."""
        return self._config.seconds_for(self._mode)

    def progress_fraction(self) -> float:
        """0.0 → 1.0 progress through the current session."""
        total = self.full_duration
        elapsed = total - self._remaining
        return max(0.0, min(1.0, elapsed / total))

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        if self.running:
            return
        fresh = not self._session_open
        if fresh:
            self._session_open = True
            self._halfway_at = self._remaining // 2
            self._halfway_fired = False
        self._qt_timer.start()
        self.running_changed.emit(True)
        if fresh:
            self.session_started.emit(self._mode)

    def pause(self) -> None:
        if not self.running:
            return
        self._qt_timer.stop()
        self.running_changed.emit(False)

    def toggle(self) -> None:
        if self.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and refill the current mode.  Count and mode are kept."""
        self.pause()
        self._refill()
        self.timer_reset.emit(self._remaining)

    def switch_mode(self, mode: TimerMode | str) -> None:
        """Jump to *mode* with a full, paused clock.

        Accepts the enum or its wire name (``"shortBreak"``).  Manual
        switches never touch ``sessions_completed``.
        """
        mode = TimerMode(mode)
        self.pause()
        self._mode = mode
        self._refill()
        self.mode_changed.emit(mode)

    def apply_settings(self, config: TimerConfig | Mapping[str, Any]) -> None:
        """Replace all durations at once.

        Raises :class:`InvalidConfig` (and changes nothing) when any
        duration is missing, fractional or not positive.  An idle clock
        is refilled to the new duration; a running session keeps its
        remaining time.
        """
        if not isinstance(config, TimerConfig):
            if not isinstance(config, Mapping):
                raise InvalidConfig(f"expected a mapping, got {config!r}")
            config = TimerConfig.from_mapping(config)

        self._config = config
        logger.info("Durations set to %s", config.to_dict())
        if self._store is not None:
            self._persist("settings", self._save_config)

        if not self.running:
            self._refill()
            self.timer_reset.emit(self._remaining)

    def flush(self) -> None:
        """Write the session count to the store (best effort)."""
        if self._store is not None:
            self._persist("session count", self._save_session_count)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def tick(self) -> None:
        """Advance one second.  Driven by the QTimer while running."""
        if not self.running:
            return
        self._remaining = max(0, self._remaining - 1)
        self.ticked.emit(self._remaining)

        if (
            self._halfway_at is not None
            and not self._halfway_fired
            and self._remaining <= self._halfway_at
        ):
            self._halfway_fired = True
            self.halfway_point.emit(self._mode)

        if self._remaining <= 0:
            self.complete_session()

    def complete_session(self) -> None:
        """Finish the current session and move to the next mode."""
        self.pause()
        completed = self._mode

        if completed == TimerMode.WORK:
            self._sessions_completed += 1
            if self._sessions_completed % SESSIONS_PER_LONG_BREAK == 0:
                next_mode = TimerMode.LONG_BREAK
            else:
                next_mode = TimerMode.SHORT_BREAK
        else:
            next_mode = TimerMode.WORK

        logger.info(
            "%s session complete (%d total), next: %s",
            completed.value, self._sessions_completed, next_mode.value,
        )
        self.switch_mode(next_mode)
        self.session_completed.emit(completed, self._sessions_completed)

    def _refill(self) -> None:
        self._remaining = self.full_duration
        self._halfway_at = None
        self._halfway_fired = False
        self._session_open = False

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — persistence
    # ══════════════════════════════════════════════════════════════════

    def _load_persisted(self) -> None:
        from ..storage import StoreError, load_config, load_session_count

        try:
            self._config = load_config(self._store)
            self._sessions_completed = load_session_count(self._store)
        except StoreError:
            logger.warning("Could not read saved state; using defaults", exc_info=True)

    def _save_config(self) -> None:
        from ..storage import save_config

        save_config(self._store, self._config)

    def _save_session_count(self) -> None:
        from ..storage import save_session_count

        save_session_count(self._store, self._sessions_completed)

    def _persist(self, what: str, write: Callable[[], None]) -> None:
        from ..storage import StoreError

        try:
            write()
        except StoreError:
            logger.warning("Could not save %s", what, exc_info=True)
