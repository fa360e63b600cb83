"""Tests for the Focus Coach: keyword rules and timer reactions."""

import pytest

from focustimer.coach.adapter import CoachAdapter
from focustimer.coach.responses import (
    KEYWORD_RULES, DEFAULT_RESPONSES, Rule,
    LONG_BREAK_EARNED, SHORT_BREAK_EARNED, BREAK_OVER,
    HALFWAY_ENCOURAGEMENTS, SESSION_START_TIPS,
)
from focustimer.timer.config import TimerMode

from helpers import SignalCollector, run_ticks, finish_session


def first(pool):
    return pool[0]


@pytest.fixture
def coach(qapp):
    return CoachAdapter(choice=first)


@pytest.fixture
def attached(engine):
    coach = CoachAdapter(engine, choice=first)
    messages = SignalCollector()
    coach.message.connect(messages)
    return coach, messages


class TestRespond:
    def test_focus_rule(self, coach):
        assert coach.respond("I'm so distracted today") == KEYWORD_RULES[0].responses[0]

    def test_case_insensitive(self, coach):
        assert coach.respond("WHAT IS POMODORO?") == KEYWORD_RULES[1].responses[0]

    def test_first_rule_wins(self, coach):
        # matches both the focus rule and the break rule
        assert coach.respond("I got distracted on my break") == KEYWORD_RULES[0].responses[0]

    def test_later_rule(self, coach):
        assert coach.respond("Can I change the timer settings?") == KEYWORD_RULES[3].responses[0]

    def test_default_pool(self, coach):
        assert coach.respond("hello there") == DEFAULT_RESPONSES[0]

    def test_choice_is_injected(self, qapp):
        seen = []

        def record(pool):
            seen.append(tuple(pool))
            return pool[-1]

        coach = CoachAdapter(choice=record)
        assert coach.respond("keyboard") == KEYWORD_RULES[7].responses[-1]
        assert seen == [KEYWORD_RULES[7].responses]

    def test_custom_rules(self, qapp):
        coach = CoachAdapter(choice=first, rules=[Rule(("ping",), ("pong",))])
        assert coach.respond("PING!") == "pong"
        assert coach.respond("distracted") == DEFAULT_RESPONSES[0]


class TestTimerReactions:
    def test_session_start_tip(self, engine, attached):
        _, messages = attached
        engine.start()
        assert messages.last == SESSION_START_TIPS[TimerMode.WORK][0]

    def test_halfway_work(self, engine, attached):
        _, messages = attached
        engine.start()
        run_ticks(engine, 750)
        assert messages.last == HALFWAY_ENCOURAGEMENTS[0]

    def test_halfway_break_is_quiet(self, engine, attached):
        _, messages = attached
        engine.switch_mode(TimerMode.SHORT_BREAK)
        engine.start()
        messages.clear()
        run_ticks(engine, 150)
        assert len(messages) == 0

    def test_short_break_earned(self, engine, attached):
        _, messages = attached
        finish_session(engine)
        assert messages.last == SHORT_BREAK_EARNED[0]

    def test_long_break_earned_mentions_count(self, engine, attached):
        _, messages = attached
        engine.apply_settings({"work": 1, "shortBreak": 1, "longBreak": 1})
        for _ in range(3):
            finish_session(engine)
            finish_session(engine)
        finish_session(engine)
        assert messages.last == LONG_BREAK_EARNED[0].format(sessions=4)
        assert "4 sessions" in messages.last

    def test_break_over(self, engine, attached):
        _, messages = attached
        finish_session(engine)
        finish_session(engine)
        assert messages.last == BREAK_OVER[0]

    def test_inactive_coach_stays_quiet(self, engine, attached):
        coach, messages = attached
        coach.active = False
        finish_session(engine)
        assert len(messages) == 0
        assert coach.respond("tired") == KEYWORD_RULES[6].responses[0]
