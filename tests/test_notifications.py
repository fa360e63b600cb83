"""Tests for completion sound and background notifications."""

import pytest

from focustimer.notifications import SessionNotifier, COMPLETION_MESSAGES, NOTIFICATION_TITLE
from focustimer.preferences import Preferences
from focustimer.timer.config import TimerMode

from helpers import FakeSounds, finish_session


@pytest.fixture
def setup(engine):
    prefs = Preferences()
    sounds = FakeSounds()
    shown = []
    state = {"foreground": False}
    notifier = SessionNotifier(
        engine,
        prefs,
        sounds=sounds,
        show_message=lambda title, body: shown.append((title, body)),
        is_foreground=lambda: state["foreground"],
    )
    return notifier, prefs, sounds, shown, state


def test_background_completion_notifies(engine, setup):
    _, _, sounds, shown, _ = setup
    finish_session(engine)
    assert sounds.played == ["session_complete"]
    assert shown == [(NOTIFICATION_TITLE, COMPLETION_MESSAGES[TimerMode.WORK])]


def test_foreground_completion_only_plays_sound(engine, setup):
    _, _, sounds, shown, state = setup
    state["foreground"] = True
    finish_session(engine)
    assert sounds.played == ["session_complete"]
    assert shown == []


def test_sound_disabled(engine, setup):
    _, prefs, sounds, shown, _ = setup
    prefs.sound_enabled = False
    finish_session(engine)
    assert sounds.played == []
    assert len(shown) == 1


def test_notifications_disabled(engine, setup):
    _, prefs, _, shown, _ = setup
    prefs.notifications_enabled = False
    finish_session(engine)
    assert shown == []


def test_break_message_uses_finished_mode(engine, setup):
    _, _, _, shown, _ = setup
    finish_session(engine)
    finish_session(engine)
    assert shown[-1][1] == "Break over! Ready to focus?"


def test_long_break_message(engine, setup):
    _, _, _, shown, _ = setup
    engine.switch_mode(TimerMode.LONG_BREAK)
    finish_session(engine)
    assert shown[-1][1] == "Long break finished! Let's get back to work."


def test_no_sound_player(engine):
    shown = []
    notifier = SessionNotifier(
        engine, Preferences(), sounds=None,
        show_message=lambda t, b: shown.append(b),
        is_foreground=lambda: False,
    )
    finish_session(engine)
    assert len(shown) == 1
    assert notifier is not None
