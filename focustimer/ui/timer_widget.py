"""Main timer card.

Layout (top → bottom):
    - Mode buttons (Focus / Short Break / Long Break)
    - ProgressRing with MM:SS and the mode label
    - Reset + Start/Pause buttons
    - Session count and sessions left until the long break
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QButtonGroup,
)

from ..display import MODE_LABELS, format_clock, long_break_countdown_text
from ..timer.config import TimerMode
from ..timer.engine import TimerEngine
from .progress_ring import ProgressRing
from .styles import MODE_COLORS


class TimerWidget(QWidget):
    """Pulls everything it shows from the engine; owns no timer state."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._refresh_mode(engine.mode)
        self._refresh_sessions()

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(16)

        mode_row = QHBoxLayout()
        self._mode_group = QButtonGroup(self)
        self._mode_buttons: dict[TimerMode, QPushButton] = {}
        for mode in TimerMode:
            btn = QPushButton(MODE_LABELS[mode], card)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked, m=mode: self._engine.switch_mode(m))
            self._mode_group.addButton(btn)
            self._mode_buttons[mode] = btn
            mode_row.addWidget(btn)
        layout.addLayout(mode_row)

        self._ring = ProgressRing(card)
        self._ring.setFixedSize(300, 300)
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        btn_row = QHBoxLayout()
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        layout.addLayout(btn_row)

        info_row = QHBoxLayout()
        self._session_count_label = QLabel(card)
        caption = QLabel("Until long break:", card)
        caption.setObjectName("dimLabel")
        self._long_break_label = QLabel(card)
        info_row.addWidget(self._session_count_label)
        info_row.addStretch()
        info_row.addWidget(caption)
        info_row.addWidget(self._long_break_label)
        layout.addLayout(info_row)

    def _connect_signals(self) -> None:
        e = self._engine
        e.ticked.connect(self._refresh_clock)
        e.timer_reset.connect(self._refresh_clock)
        e.mode_changed.connect(self._refresh_mode)
        e.running_changed.connect(self._refresh_running)
        e.session_completed.connect(lambda *_: self._refresh_sessions())

    # ── refresh ───────────────────────────────────────────────────────

    def _refresh_clock(self, remaining: int) -> None:
        self._ring.set_time_text(format_clock(remaining))
        self._ring.set_progress(self._engine.progress_fraction())

    def _refresh_mode(self, mode: TimerMode) -> None:
        self._mode_buttons[mode].setChecked(True)
        self._ring.set_label(MODE_LABELS[mode])
        self._ring.set_color(MODE_COLORS[mode])
        self._refresh_clock(self._engine.remaining_seconds)

    def _refresh_running(self, running: bool) -> None:
        self._start_pause_btn.setText("Pause" if running else "Start")

    def _refresh_sessions(self) -> None:
        count = self._engine.sessions_completed
        self._session_count_label.setText(f"Sessions: {count}")
        self._long_break_label.setText(long_break_countdown_text(count))
