"""Key-value persistence for timer durations and the session count.

Two keys are used:

``settings``
    JSON object ``{"work": 25, "shortBreak": 5, "longBreak": 15}``.
``sessionCount``
    Completed work sessions, as a decimal string.

Reads are lenient: anything missing or malformed falls back to the
defaults.  Writes are fire-and-forget from the engine's point of view;
a failing backend raises :class:`StoreError` and the caller logs it.

Usage::

    store = DatabaseStore()
    config = load_config(store)
    save_session_count(store, 7)
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError

from .database.db import get_session
from .database.models import KeyValue
from .timer.config import TimerConfig

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"
SESSION_COUNT_KEY = "sessionCount"


class StoreError(Exception):
    """The persistence backend could not complete a read or write."""


# ══════════════════════════════════════════════════════════════════════════
#  STORES
# ══════════════════════════════════════════════════════════════════════════


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""


class MemoryStore(KeyValueStore):
    """Dict-backed store for tests and throwaway runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class DatabaseStore(KeyValueStore):
    """Store backed by the ``kv_store`` table.  Call ``init_db()`` first."""

    def get(self, key: str) -> str | None:
        try:
            with get_session() as db:
                row = db.query(KeyValue).filter_by(key=key).first()
                return row.value if row else None
        except SQLAlchemyError as exc:
            raise StoreError(f"reading {key!r} failed") from exc

    def set(self, key: str, value: str) -> None:
        try:
            with get_session() as db:
                row = db.query(KeyValue).filter_by(key=key).first()
                if row is None:
                    db.add(KeyValue(key=key, value=value))
                else:
                    row.value = value
        except SQLAlchemyError as exc:
            raise StoreError(f"writing {key!r} failed") from exc


# ══════════════════════════════════════════════════════════════════════════
#  TYPED ACCESSORS
# ══════════════════════════════════════════════════════════════════════════


def load_config(store: KeyValueStore) -> TimerConfig:
    """Durations from the store, defaulting per field."""
    raw = store.get(SETTINGS_KEY)
    if raw is None:
        return TimerConfig()
    try:
        data = json.loads(raw)
    except ValueError:
        logger.debug("Stored settings are not valid JSON: %r", raw)
        return TimerConfig()
    if not isinstance(data, dict):
        return TimerConfig()
    return TimerConfig.from_persisted(data)


def save_config(store: KeyValueStore, config: TimerConfig) -> None:
    store.set(SETTINGS_KEY, json.dumps(config.to_dict()))


def load_session_count(store: KeyValueStore) -> int:
    raw = store.get(SESSION_COUNT_KEY)
    if raw is None:
        return 0
    try:
        count = int(raw.strip())
    except ValueError:
        logger.debug("Stored session count is not an integer: %r", raw)
        return 0
    return max(0, count)


def save_session_count(store: KeyValueStore, count: int) -> None:
    store.set(SESSION_COUNT_KEY, str(count))
