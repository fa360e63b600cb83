"""Circular progress ring rendered with QPainter.

The coloured arc shrinks clockwise from 12 o'clock as the session
progresses; the clock text and the mode label sit in the centre.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from .styles import PALETTE

RING_WIDTH = 12


class ProgressRing(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._progress = 0.0
        self._time_text = "25:00"
        self._label = ""
        self._color = QColor("#ff6b6b")
        self.setMinimumSize(240, 240)

    # ── state setters ─────────────────────────────────────────────────

    def set_progress(self, fraction: float) -> None:
        self._progress = max(0.0, min(1.0, fraction))
        self.update()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_label(self, text: str) -> None:
        self._label = text
        self.update()

    def set_color(self, color: str) -> None:
        self._color = QColor(color)
        self.update()

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def time_text(self) -> str:
        return self._time_text

    # ── painting ──────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        side = min(self.width(), self.height()) - RING_WIDTH * 2
        rect = QRectF(
            (self.width() - side) / 2, (self.height() - side) / 2, side, side,
        )

        track = QPen(QColor(PALETTE["track"]), RING_WIDTH)
        painter.setPen(track)
        painter.drawEllipse(rect)

        # Qt angles are 1/16 degree, counter-clockwise from 3 o'clock
        remaining_span = int((1.0 - self._progress) * 360 * 16)
        if remaining_span > 0:
            arc = QPen(self._color, RING_WIDTH)
            arc.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc)
            painter.drawArc(rect, 90 * 16, -remaining_span)

        painter.setPen(QColor(PALETTE["text"]))
        time_font = QFont(self.font())
        time_font.setPointSize(max(12, int(side / 6)))
        time_font.setBold(True)
        painter.setFont(time_font)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        if self._label:
            label_font = QFont(self.font())
            label_font.setPointSize(max(8, int(side / 18)))
            painter.setFont(label_font)
            painter.setPen(QColor(PALETTE["text_dim"]))
            label_rect = QRectF(rect.left(), rect.center().y() + side / 8, rect.width(), side / 6)
            painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._label.upper())

        painter.end()
