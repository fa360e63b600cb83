"""Colours and the application stylesheet."""

from __future__ import annotations

from ..timer.config import TimerMode

MODE_COLORS: dict[TimerMode, str] = {
    TimerMode.WORK:        "#ff6b6b",
    TimerMode.SHORT_BREAK: "#4ade80",
    TimerMode.LONG_BREAK:  "#6b8bff",
}

PALETTE: dict[str, str] = {
    "bg":        "#1e1e2e",
    "surface":   "#2a2a3c",
    "track":     "#3a3a4f",
    "text":      "#f5f5f7",
    "text_dim":  "#a0a0b8",
    "error":     "#ff8a80",
}


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    return f"""
    QWidget {{
        background-color: {palette['bg']};
        color: {palette['text']};
        font-size: 14px;
    }}
    QFrame#card {{
        background-color: {palette['surface']};
        border-radius: 16px;
    }}
    QPushButton {{
        background-color: {palette['surface']};
        border: 1px solid {palette['track']};
        border-radius: 10px;
        padding: 8px 16px;
    }}
    QPushButton:checked {{
        background-color: {palette['track']};
        font-weight: bold;
    }}
    QLabel#dimLabel {{
        color: {palette['text_dim']};
    }}
    QLabel#errorLabel {{
        color: {palette['error']};
    }}
    QLineEdit, QSpinBox, QTextBrowser {{
        background-color: {palette['surface']};
        border: 1px solid {palette['track']};
        border-radius: 8px;
        padding: 6px;
    }}
    """
