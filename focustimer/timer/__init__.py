"""Timer package."""

from .config import (
    TimerMode,
    TimerConfig,
    InvalidConfig,
    DEFAULT_MINUTES,
    SESSIONS_PER_LONG_BREAK,
)
from .engine import TimerEngine, TICK_INTERVAL_MS

__all__ = [
    "TimerEngine",
    "TimerMode",
    "TimerConfig",
    "InvalidConfig",
    "DEFAULT_MINUTES",
    "SESSIONS_PER_LONG_BREAK",
    "TICK_INTERVAL_MS",
]
