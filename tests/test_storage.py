"""Tests for TimerConfig parsing and the key-value stores."""

import json

import pytest

from focustimer.storage import (
    MemoryStore, DatabaseStore, SETTINGS_KEY, SESSION_COUNT_KEY,
    load_config, save_config, load_session_count, save_session_count,
)
from focustimer.timer.config import TimerConfig, TimerMode, InvalidConfig


# ═══════════════════════════════════════════════════════════════════════
#  TIMER CONFIG
# ═══════════════════════════════════════════════════════════════════════


class TestTimerConfig:
    def test_defaults(self):
        assert TimerConfig().to_dict() == {"work": 25, "shortBreak": 5, "longBreak": 15}

    def test_seconds_for(self):
        c = TimerConfig(work=10, short_break=2, long_break=20)
        assert c.seconds_for(TimerMode.WORK) == 600
        assert c.seconds_for(TimerMode.SHORT_BREAK) == 120
        assert c.seconds_for(TimerMode.LONG_BREAK) == 1200

    def test_invalid_construction(self):
        with pytest.raises(InvalidConfig):
            TimerConfig(work=0)

    def test_invalid_config_is_value_error(self):
        assert issubclass(InvalidConfig, ValueError)

    def test_from_mapping_reports_missing_keys(self):
        with pytest.raises(InvalidConfig, match="longBreak"):
            TimerConfig.from_mapping({"work": 25, "shortBreak": 5})

    def test_from_persisted_falls_back_per_field(self):
        c = TimerConfig.from_persisted({"work": 0, "shortBreak": 7, "longBreak": False})
        assert c.to_dict() == {"work": 25, "shortBreak": 7, "longBreak": 15}


# ═══════════════════════════════════════════════════════════════════════
#  STORES
# ═══════════════════════════════════════════════════════════════════════


class TestMemoryStore:
    def test_missing_key(self):
        assert MemoryStore().get("nope") is None

    def test_set_get(self):
        s = MemoryStore()
        s.set("a", "1")
        assert s.get("a") == "1"


class TestDatabaseStore:
    def test_missing_key(self):
        assert DatabaseStore().get(SETTINGS_KEY) is None

    def test_set_get(self):
        s = DatabaseStore()
        s.set(SESSION_COUNT_KEY, "3")
        assert s.get(SESSION_COUNT_KEY) == "3"

    def test_overwrite(self):
        s = DatabaseStore()
        s.set(SESSION_COUNT_KEY, "3")
        s.set(SESSION_COUNT_KEY, "4")
        assert s.get(SESSION_COUNT_KEY) == "4"

    def test_config_round_trip(self):
        s = DatabaseStore()
        original = TimerConfig(work=10, short_break=2, long_break=20)
        save_config(s, original)
        assert load_config(s) == original


# ═══════════════════════════════════════════════════════════════════════
#  TYPED ACCESSORS
# ═══════════════════════════════════════════════════════════════════════


class TestLoadConfig:
    def test_absent(self):
        assert load_config(MemoryStore()) == TimerConfig()

    def test_written_as_json(self):
        s = MemoryStore()
        save_config(s, TimerConfig(work=50))
        assert json.loads(s.get(SETTINGS_KEY)) == {
            "work": 50, "shortBreak": 5, "longBreak": 15,
        }

    def test_corrupt_json(self):
        s = MemoryStore({SETTINGS_KEY: "{not json"})
        assert load_config(s) == TimerConfig()

    def test_json_but_not_object(self):
        s = MemoryStore({SETTINGS_KEY: "[1, 2, 3]"})
        assert load_config(s) == TimerConfig()


class TestLoadSessionCount:
    @pytest.mark.parametrize("raw, expected", [
        (None, 0),
        ("12", 12),
        (" 12 ", 12),
        ("-3", 0),
        ("12.5", 0),
        ("", 0),
    ])
    def test_parsing(self, raw, expected):
        s = MemoryStore({} if raw is None else {SESSION_COUNT_KEY: raw})
        assert load_session_count(s) == expected

    def test_saved_as_string(self):
        s = MemoryStore()
        save_session_count(s, 9)
        assert s.get(SESSION_COUNT_KEY) == "9"
