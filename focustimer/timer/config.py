"""Timer modes and duration configuration.

Durations are whole minutes.  The persisted form uses the wire names
``work`` / ``shortBreak`` / ``longBreak``::

    {"work": 25, "shortBreak": 5, "longBreak": 15}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class TimerMode(Enum):
    WORK = "work"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"


class InvalidConfig(ValueError):
    """A duration is missing, not an integer, or not positive."""


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_MINUTES: dict[TimerMode, int] = {
    TimerMode.WORK: 25,
    TimerMode.SHORT_BREAK: 5,
    TimerMode.LONG_BREAK: 15,
}

SESSIONS_PER_LONG_BREAK = 4


def _is_valid_minutes(value: Any) -> bool:
    # bool is an int subclass; True must not pass as "1 minute"
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class TimerConfig:
    """Minutes per mode.  Construction validates every field."""

    work: int = DEFAULT_MINUTES[TimerMode.WORK]
    short_break: int = DEFAULT_MINUTES[TimerMode.SHORT_BREAK]
    long_break: int = DEFAULT_MINUTES[TimerMode.LONG_BREAK]

    def __post_init__(self) -> None:
        for mode in TimerMode:
            value = self.minutes_for(mode)
            if not _is_valid_minutes(value):
                raise InvalidConfig(
                    f"{mode.value} duration must be a positive whole number "
                    f"of minutes, got {value!r}"
                )

    def minutes_for(self, mode: TimerMode) -> int:
        if mode == TimerMode.WORK:
            return self.work
        if mode == TimerMode.SHORT_BREAK:
            return self.short_break
        return self.long_break

    def seconds_for(self, mode: TimerMode) -> int:
        return self.minutes_for(mode) * 60

    def to_dict(self) -> dict[str, int]:
        """Wire form, keyed by mode value."""
        return {mode.value: self.minutes_for(mode) for mode in TimerMode}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TimerConfig:
        """Strict parse: every mode key must be present and valid."""
        missing = [m.value for m in TimerMode if m.value not in data]
        if missing:
            raise InvalidConfig(f"missing duration(s): {', '.join(missing)}")
        return cls(
            work=data[TimerMode.WORK.value],
            short_break=data[TimerMode.SHORT_BREAK.value],
            long_break=data[TimerMode.LONG_BREAK.value],
        )

    @classmethod
    def from_persisted(cls, data: Mapping[str, Any]) -> TimerConfig:
        """Lenient parse for stored data.  Bad fields fall back one by one."""
        values: dict[TimerMode, int] = {}
        for mode in TimerMode:
            raw = data.get(mode.value)
            if _is_valid_minutes(raw):
                values[mode] = raw
            else:
                if raw is not None:
                    logger.debug("Ignoring stored %s=%r", mode.value, raw)
                values[mode] = DEFAULT_MINUTES[mode]
        return cls(
            work=values[TimerMode.WORK],
            short_break=values[TimerMode.SHORT_BREAK],
            long_break=values[TimerMode.LONG_BREAK],
        )
