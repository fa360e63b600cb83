"""Collapsible chat with the Focus Coach."""

from __future__ import annotations

import html

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit, QTextBrowser,
    QFrame,
)

from ..coach.adapter import CoachAdapter

REPLY_DELAY_MS = 500
EVENT_DELAY_MS = 1000

GREETING = (
    "Hi! I'm your Focus Coach. Ask me about focus tips, break ideas, "
    "timer settings or keyboard shortcuts."
)


class ChatPanel(QWidget):
    """Transcript plus input line.  Opening the panel activates the coach."""

    open_changed = pyqtSignal(bool)

    def __init__(
        self,
        coach: CoachAdapter,
        parent: QWidget | None = None,
        *,
        open_initially: bool = False,
    ) -> None:
        super().__init__(parent)
        self._coach = coach
        self._messages: list[tuple[str, str]] = []
        self._build_ui()
        coach.message.connect(
            lambda text: QTimer.singleShot(EVENT_DELAY_MS, lambda: self.add_message(text, "bot"))
        )
        self.add_message(GREETING, "bot")
        self.set_open(open_initially)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self._toggle_btn = QPushButton("Focus Coach", self)
        self._toggle_btn.setCheckable(True)
        self._toggle_btn.toggled.connect(self.set_open)
        root.addWidget(self._toggle_btn)

        self._window = QFrame(self)
        self._window.setObjectName("card")
        layout = QVBoxLayout(self._window)
        layout.setContentsMargins(12, 12, 12, 12)

        self._transcript = QTextBrowser(self._window)
        self._transcript.setMinimumHeight(160)
        layout.addWidget(self._transcript)

        input_row = QHBoxLayout()
        self._input = QLineEdit(self._window)
        self._input.setPlaceholderText("Ask the coach...")
        self._input.returnPressed.connect(self.send)
        send_btn = QPushButton("Send", self._window)
        send_btn.clicked.connect(self.send)
        input_row.addWidget(self._input)
        input_row.addWidget(send_btn)
        layout.addLayout(input_row)

        root.addWidget(self._window)

    # ── public API ────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self._coach.active

    @property
    def input_has_focus(self) -> bool:
        return self._input.hasFocus()

    @property
    def messages(self) -> list[tuple[str, str]]:
        return list(self._messages)

    def set_open(self, open_: bool) -> None:
        self._coach.active = open_
        self._window.setVisible(open_)
        self._toggle_btn.blockSignals(True)
        self._toggle_btn.setChecked(open_)
        self._toggle_btn.blockSignals(False)
        if open_:
            self._input.setFocus()
        self.open_changed.emit(open_)

    def send(self) -> None:
        text = self._input.text().strip()
        if not text:
            return
        self.add_message(text, "user")
        self._input.clear()
        reply = self._coach.respond(text)
        QTimer.singleShot(REPLY_DELAY_MS, lambda: self.add_message(reply, "bot"))

    def add_message(self, text: str, sender: str) -> None:
        self._messages.append((sender, text))
        who = "You" if sender == "user" else "Coach"
        paragraphs = "".join(
            f"<p>{html.escape(p)}</p>" for p in text.split("\n") if p.strip()
        )
        self._transcript.append(f"<b>{who}</b>{paragraphs}")
