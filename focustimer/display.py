"""Text shown by the display collaborators: clock, titles, session info.

Everything here derives from engine queries and signals; nothing holds
timer state of its own.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from .timer.config import TimerMode, SESSIONS_PER_LONG_BREAK
from .timer.engine import TimerEngine

APP_TITLE = "Focus Timer"
PAUSED_TITLE = f"{APP_TITLE} - Paused"

MODE_LABELS: dict[TimerMode, str] = {
    TimerMode.WORK:        "Focus Time",
    TimerMode.SHORT_BREAK: "Short Break",
    TimerMode.LONG_BREAK:  "Long Break",
}


def format_clock(seconds: int) -> str:
    """``MM:SS``, both fields zero-padded."""
    m, s = divmod(max(0, seconds), 60)
    return f"{m:02d}:{s:02d}"


def running_title(seconds: int) -> str:
    m, s = divmod(max(0, seconds), 60)
    return f"{m}:{s:02d} - {APP_TITLE}"


def mode_title(mode: TimerMode) -> str:
    return f"{APP_TITLE} - {MODE_LABELS[mode]}"


def sessions_until_long_break(sessions_completed: int) -> int:
    """Work sessions left before the next long break (1-4)."""
    return SESSIONS_PER_LONG_BREAK - (sessions_completed % SESSIONS_PER_LONG_BREAK)


def long_break_countdown_text(sessions_completed: int) -> str:
    if sessions_completed > 0 and sessions_completed % SESSIONS_PER_LONG_BREAK == 0:
        return "Long break time!"
    left = sessions_until_long_break(sessions_completed)
    return f"{left} session{'s' if left != 1 else ''}"


class TitleTracker(QObject):
    """Keeps a window title in step with the engine.

    - ``"M:SS - Focus Timer"`` on every tick while running
    - ``"Focus Timer - Paused"`` when the clock stops
    - ``"Focus Timer - <Mode>"`` after a mode switch
    - ``"Focus Timer"`` after a reset
    """

    title_changed = pyqtSignal(str)

    def __init__(self, engine: TimerEngine, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._title = APP_TITLE
        engine.ticked.connect(self._on_ticked)
        engine.running_changed.connect(self._on_running_changed)
        engine.mode_changed.connect(self._on_mode_changed)
        engine.timer_reset.connect(self._on_reset)

    @property
    def title(self) -> str:
        return self._title

    def _set(self, title: str) -> None:
        self._title = title
        self.title_changed.emit(title)

    def _on_ticked(self, remaining: int) -> None:
        if self._engine.running:
            self._set(running_title(remaining))

    def _on_running_changed(self, running: bool) -> None:
        if not running:
            self._set(PAUSED_TITLE)

    def _on_mode_changed(self, mode: TimerMode) -> None:
        self._set(mode_title(mode))

    def _on_reset(self, _remaining: int) -> None:
        self._set(APP_TITLE)
