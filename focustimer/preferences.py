"""UI preferences with JSON persistence.

Timer durations are not stored here; they live in the key-value store
next to the session count (see :mod:`focustimer.storage`).

Preferences are stored at:
    ~/.focustimer/preferences.json

Usage::

    prefs = load_preferences()
    prefs.sound_enabled = False
    save_preferences(prefs)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

APP_DATA_DIR = Path.home() / ".focustimer"
PREFERENCES_PATH = APP_DATA_DIR / "preferences.json"


@dataclass
class Preferences:
    """User-configurable behaviour that is not part of the timer itself."""

    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100
    notifications_enabled: bool = True
    chat_open: bool = False


def load_preferences() -> Preferences:
    """Load preferences from disk, falling back to defaults."""
    if not PREFERENCES_PATH.exists():
        return Preferences()
    try:
        data = json.loads(PREFERENCES_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.debug("Unreadable preferences at %s", PREFERENCES_PATH)
        return Preferences()
    if not isinstance(data, dict):
        return Preferences()
    valid_keys = {f.name for f in fields(Preferences)}
    return Preferences(**{k: v for k, v in data.items() if k in valid_keys})


def save_preferences(prefs: Preferences) -> None:
    APP_DATA_DIR.mkdir(parents=True, exist_ok=True)
    PREFERENCES_PATH.write_text(
        json.dumps(asdict(prefs), indent=2) + "\n",
        encoding="utf-8",
    )
