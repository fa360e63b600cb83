"""Keyboard command surface.

Keys map to named commands; commands map to engine operations::

    Space  → toggle
    R      → reset
    1/2/3  → switch work / shortBreak / longBreak
"""

from __future__ import annotations

from PyQt6.QtCore import Qt

from .timer.config import TimerMode
from .timer.engine import TimerEngine

KEY_BINDINGS: dict[Qt.Key, tuple[str, TimerMode | None]] = {
    Qt.Key.Key_Space: ("toggle", None),
    Qt.Key.Key_R:     ("reset", None),
    Qt.Key.Key_1:     ("switch", TimerMode.WORK),
    Qt.Key.Key_2:     ("switch", TimerMode.SHORT_BREAK),
    Qt.Key.Key_3:     ("switch", TimerMode.LONG_BREAK),
}


def run_command(
    engine: TimerEngine,
    command: str,
    mode: TimerMode | str | None = None,
) -> None:
    """Dispatch *command* to *engine*.  Raises ValueError if unknown."""
    if command == "toggle":
        engine.toggle()
    elif command == "reset":
        engine.reset()
    elif command == "switch":
        if mode is None:
            raise ValueError("switch needs a mode")
        engine.switch_mode(mode)
    else:
        raise ValueError(f"unknown command {command!r}")


def command_for_key(key: int | Qt.Key) -> tuple[str, TimerMode | None] | None:
    """Binding for a key code from ``QKeyEvent.key()``, if any."""
    try:
        return KEY_BINDINGS.get(Qt.Key(key))
    except ValueError:
        return None
