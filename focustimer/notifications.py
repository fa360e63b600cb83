"""Completion alerts: a one-shot sound and a background notification."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject

from .preferences import Preferences
from .timer.config import TimerMode
from .timer.engine import TimerEngine

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "Focus Timer"

COMPLETION_MESSAGES: dict[TimerMode, str] = {
    TimerMode.WORK:        "Work session completed! Time for a break.",
    TimerMode.SHORT_BREAK: "Break over! Ready to focus?",
    TimerMode.LONG_BREAK:  "Long break finished! Let's get back to work.",
}


class SoundPlayer(Protocol):
    def play(self, name: str) -> None: ...


class SessionNotifier(QObject):
    """Reacts to ``session_completed``.

    ``show_message(title, body)`` surfaces an OS notification (the tray
    icon in the app); ``is_foreground()`` reports whether the window is
    the active one.  Notifications are only shown in the background.
    """

    def __init__(
        self,
        engine: TimerEngine,
        prefs: Preferences,
        *,
        sounds: SoundPlayer | None,
        show_message: Callable[[str, str], None],
        is_foreground: Callable[[], bool],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._prefs = prefs
        self._sounds = sounds
        self._show_message = show_message
        self._is_foreground = is_foreground
        engine.session_completed.connect(self.on_session_completed)

    def on_session_completed(self, mode: TimerMode, sessions_completed: int) -> None:
        if self._prefs.sound_enabled and self._sounds is not None:
            self._sounds.play("session_complete")

        if not self._prefs.notifications_enabled or self._is_foreground():
            return
        logger.debug("Notifying %s completion in background", mode.value)
        self._show_message(NOTIFICATION_TITLE, COMPLETION_MESSAGES[mode])
