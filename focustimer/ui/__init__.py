"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing
from .settings_panel import SettingsPanel
from .chat_panel import ChatPanel

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "SettingsPanel",
    "ChatPanel",
]
