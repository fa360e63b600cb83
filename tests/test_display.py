"""Tests for clock formatting, window titles and session info text."""

import pytest

from focustimer.display import (
    APP_TITLE, PAUSED_TITLE, TitleTracker,
    format_clock, running_title, mode_title,
    sessions_until_long_break, long_break_countdown_text,
)
from focustimer.timer.config import TimerMode

from helpers import SignalCollector, run_ticks, finish_session


class TestFormatting:
    @pytest.mark.parametrize("seconds, text", [
        (1500, "25:00"),
        (65, "01:05"),
        (9, "00:09"),
        (0, "00:00"),
        (-4, "00:00"),
        (3600, "60:00"),
    ])
    def test_format_clock(self, seconds, text):
        assert format_clock(seconds) == text

    def test_running_title_has_unpadded_minutes(self):
        assert running_title(65) == "1:05 - Focus Timer"
        assert running_title(1499) == "24:59 - Focus Timer"

    def test_mode_titles(self):
        assert mode_title(TimerMode.WORK) == "Focus Timer - Focus Time"
        assert mode_title(TimerMode.SHORT_BREAK) == "Focus Timer - Short Break"
        assert mode_title(TimerMode.LONG_BREAK) == "Focus Timer - Long Break"


class TestSessionInfo:
    @pytest.mark.parametrize("count, left", [(0, 4), (1, 3), (3, 1), (4, 4), (5, 3)])
    def test_sessions_until_long_break(self, count, left):
        assert sessions_until_long_break(count) == left

    def test_countdown_text(self):
        assert long_break_countdown_text(0) == "4 sessions"
        assert long_break_countdown_text(3) == "1 session"
        assert long_break_countdown_text(4) == "Long break time!"
        assert long_break_countdown_text(6) == "2 sessions"


class TestTitleTracker:
    def test_initial_title(self, engine):
        assert TitleTracker(engine).title == APP_TITLE

    def test_running_title_on_tick(self, engine):
        tracker = TitleTracker(engine)
        engine.start()
        engine.tick()
        assert tracker.title == "24:59 - Focus Timer"

    def test_paused_title(self, engine):
        tracker = TitleTracker(engine)
        engine.start()
        engine.tick()
        engine.pause()
        assert tracker.title == PAUSED_TITLE

    def test_reset_title(self, engine):
        tracker = TitleTracker(engine)
        engine.start()
        engine.reset()
        assert tracker.title == APP_TITLE

    def test_switch_title(self, engine):
        tracker = TitleTracker(engine)
        engine.start()
        engine.switch_mode(TimerMode.LONG_BREAK)
        assert tracker.title == "Focus Timer - Long Break"

    def test_completion_sequence(self, engine):
        tracker = TitleTracker(engine)
        titles = SignalCollector()
        tracker.title_changed.connect(titles)
        engine.apply_settings({"work": 1, "shortBreak": 1, "longBreak": 1})
        titles.clear()
        finish_session(engine)
        assert titles[0] == "0:59 - Focus Timer"
        assert titles.items[-3:] == [
            "0:00 - Focus Timer",
            PAUSED_TITLE,
            "Focus Timer - Short Break",
        ]
