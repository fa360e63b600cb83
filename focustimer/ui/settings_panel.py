"""Inline settings: durations, sound and notifications.

Duration edits go straight to ``TimerEngine.apply_settings``; a rejected
config leaves the engine untouched and shows the reason under the form.
"""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QLabel, QSpinBox, QCheckBox, QFrame,
)

from ..preferences import Preferences, save_preferences
from ..timer.config import TimerMode, TimerConfig, InvalidConfig
from ..timer.engine import TimerEngine


class SettingsPanel(QWidget):
    def __init__(
        self,
        engine: TimerEngine,
        prefs: Preferences,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._prefs = prefs
        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 16, 24, 16)

        form = QFormLayout()
        form.setHorizontalSpacing(20)
        self._spins: dict[TimerMode, QSpinBox] = {}
        for mode, label in (
            (TimerMode.WORK, "Focus"),
            (TimerMode.SHORT_BREAK, "Short break"),
            (TimerMode.LONG_BREAK, "Long break"),
        ):
            spin = QSpinBox(card)
            spin.setRange(1, 120)
            spin.setSuffix(" min")
            self._spins[mode] = spin
            form.addRow(label, spin)

        self._sound_check = QCheckBox("Play a sound when a session ends", card)
        self._notify_check = QCheckBox("Notify me when the window is in the background", card)
        form.addRow(self._sound_check)
        form.addRow(self._notify_check)
        layout.addLayout(form)

        self._error_label = QLabel(card)
        self._error_label.setObjectName("errorLabel")
        self._error_label.setWordWrap(True)
        self._error_label.hide()
        layout.addWidget(self._error_label)

    def _populate(self) -> None:
        """Load current values without triggering change handlers."""
        config = self._engine.config
        for mode, spin in self._spins.items():
            spin.blockSignals(True)
            spin.setValue(config.minutes_for(mode))
            spin.blockSignals(False)
            spin.valueChanged.connect(self._on_duration_changed)

        self._sound_check.setChecked(self._prefs.sound_enabled)
        self._notify_check.setChecked(self._prefs.notifications_enabled)
        self._sound_check.toggled.connect(self._on_prefs_toggled)
        self._notify_check.toggled.connect(self._on_prefs_toggled)

    # ══════════════════════════════════════════════════════════════════
    #  HANDLERS
    # ══════════════════════════════════════════════════════════════════

    def _on_duration_changed(self, _value: int) -> None:
        try:
            self._engine.apply_settings(TimerConfig(
                work=self._spins[TimerMode.WORK].value(),
                short_break=self._spins[TimerMode.SHORT_BREAK].value(),
                long_break=self._spins[TimerMode.LONG_BREAK].value(),
            ))
        except InvalidConfig as exc:
            self._error_label.setText(str(exc))
            self._error_label.show()
            return
        self._error_label.hide()

    def _on_prefs_toggled(self, _checked: bool) -> None:
        self._prefs.sound_enabled = self._sound_check.isChecked()
        self._prefs.notifications_enabled = self._notify_check.isChecked()
        save_preferences(self._prefs)
