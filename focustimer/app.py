"""Main application window for Focus Timer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QColor, QIcon, QPainter, QPixmap
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSystemTrayIcon,
)

from .audio.sounds import SoundManager
from .coach.adapter import CoachAdapter
from .commands import command_for_key, run_command
from .display import APP_TITLE, TitleTracker
from .notifications import SessionNotifier
from .preferences import Preferences, load_preferences, save_preferences
from .storage import KeyValueStore
from .timer.engine import TimerEngine
from .ui.chat_panel import ChatPanel
from .ui.settings_panel import SettingsPanel
from .ui.styles import MODE_COLORS, build_stylesheet
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)

FLUSH_INTERVAL_MS = 30_000


def _make_icon(color: str) -> QIcon:
    """Plain filled circle in the current mode colour."""
    pixmap = QPixmap(64, 64)
    pixmap.fill(QColor(0, 0, 0, 0))
    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setBrush(QColor(color))
    p.setPen(QColor(color).darker(120))
    p.drawEllipse(4, 4, 56, 56)
    p.end()
    return QIcon(pixmap)


class FocusTimerApp(QMainWindow):
    """Wires the engine to its collaborators.

    Every collaborator subscribes to engine signals on construction;
    the engine knows nothing about any of them.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        *,
        prefs: Preferences | None = None,
        sounds: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(420, 640)
        self.setStyleSheet(build_stylesheet())

        self._prefs = prefs if prefs is not None else load_preferences()

        # ── engine + collaborators ────────────────────────────────────
        self._engine = TimerEngine(self, store=store)
        self._titles = TitleTracker(self._engine, self)
        self._titles.title_changed.connect(self.setWindowTitle)
        self._coach = CoachAdapter(self._engine, self)

        self._sounds = sounds if sounds is not None else SoundManager(parent=self)
        self._sounds.set_volume(self._prefs.sound_volume)

        self._tray_icon = QSystemTrayIcon(_make_icon(MODE_COLORS[self._engine.mode]), self)
        self._tray_icon.setToolTip(APP_TITLE)
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon.show()

        self._notifier = SessionNotifier(
            self._engine,
            self._prefs,
            sounds=self._sounds,
            show_message=self._tray_icon.showMessage,
            is_foreground=self.isActiveWindow,
            parent=self,
        )
        self._engine.mode_changed.connect(
            lambda mode: self._tray_icon.setIcon(_make_icon(MODE_COLORS[mode]))
        )

        # ── widgets ───────────────────────────────────────────────────
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        self._timer_widget = TimerWidget(self._engine, central)
        layout.addWidget(self._timer_widget)

        self._settings_panel = SettingsPanel(self._engine, self._prefs, central)
        layout.addWidget(self._settings_panel)

        self._chat_panel = ChatPanel(
            self._coach, central, open_initially=self._prefs.chat_open,
        )
        self._chat_panel.open_changed.connect(self._on_chat_toggled)
        layout.addWidget(self._chat_panel)
        layout.addStretch()

        # ── periodic session-count flush ──────────────────────────────
        self._flush_timer = QTimer(self)
        self._flush_timer.setInterval(FLUSH_INTERVAL_MS)
        self._flush_timer.timeout.connect(self._engine.flush)
        self._flush_timer.start()

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def coach(self) -> CoachAdapter:
        return self._coach

    # ══════════════════════════════════════════════════════════════════
    #  HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_chat_toggled(self, open_: bool) -> None:
        self._prefs.chat_open = open_
        save_preferences(self._prefs)

    def handle_key(self, key: int) -> bool:
        """Run the command bound to *key*.  Returns True if handled."""
        if self._chat_panel.input_has_focus:
            return False
        binding = command_for_key(key)
        if binding is None:
            return False
        command, mode = binding
        run_command(self._engine, command, mode)
        return True

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if not event.modifiers() and self.handle_key(event.key()):
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Best-effort flush before the window goes away."""
        self._flush_timer.stop()
        self._engine.pause()
        self._engine.flush()
        self._tray_icon.hide()
        logger.info("Saved %d completed sessions", self._engine.sessions_completed)
        event.accept()
