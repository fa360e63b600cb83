"""Focus Coach: canned chat replies and reactions to timer events.

There is no language understanding here.  Free text is lowercased and
matched by substring against :data:`KEYWORD_RULES` in order; timer
events pick from fixed pools.  ``choice`` is injectable so tests can
make selection deterministic.
"""

from __future__ import annotations

import random
from typing import Callable, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from ..timer.config import TimerMode, SESSIONS_PER_LONG_BREAK
from ..timer.engine import TimerEngine
from .responses import (
    KEYWORD_RULES,
    DEFAULT_RESPONSES,
    LONG_BREAK_EARNED,
    SHORT_BREAK_EARNED,
    BREAK_OVER,
    HALFWAY_ENCOURAGEMENTS,
    SESSION_START_TIPS,
    Rule,
)

ChoiceFn = Callable[[Sequence[str]], str]


class CoachAdapter(QObject):
    """Listens to a :class:`TimerEngine` and answers chat input.

    Event reactions go out through ``message`` and only while
    ``active`` is True (the chat window is open).  ``respond`` always
    answers.
    """

    message = pyqtSignal(str)

    def __init__(
        self,
        engine: TimerEngine | None = None,
        parent: QObject | None = None,
        *,
        choice: ChoiceFn = random.choice,
        rules: Sequence[Rule] = KEYWORD_RULES,
        active: bool = True,
    ) -> None:
        super().__init__(parent)
        self._choice = choice
        self._rules = tuple(rules)
        self.active = active
        if engine is not None:
            self.attach(engine)

    def attach(self, engine: TimerEngine) -> None:
        engine.session_completed.connect(self.on_session_completed)
        engine.halfway_point.connect(self.on_halfway_point)
        engine.session_started.connect(self.on_session_started)

    # ── free text ────────────────────────────────────────────────────

    def respond(self, text: str) -> str:
        lowered = text.lower()
        for rule in self._rules:
            if any(keyword in lowered for keyword in rule.keywords):
                return self._choice(rule.responses)
        return self._choice(DEFAULT_RESPONSES)

    # ── timer events ─────────────────────────────────────────────────

    def completion_message(self, mode: TimerMode, sessions_completed: int) -> str:
        if mode != TimerMode.WORK:
            return self._choice(BREAK_OVER)
        if sessions_completed % SESSIONS_PER_LONG_BREAK == 0:
            return self._choice(LONG_BREAK_EARNED).format(sessions=sessions_completed)
        return self._choice(SHORT_BREAK_EARNED)

    def halfway_message(self, mode: TimerMode) -> str | None:
        """Encouragement for work sessions; breaks stay quiet."""
        if mode != TimerMode.WORK:
            return None
        return self._choice(HALFWAY_ENCOURAGEMENTS)

    def on_session_completed(self, mode: TimerMode, sessions_completed: int) -> None:
        self._say(self.completion_message(mode, sessions_completed))

    def on_halfway_point(self, mode: TimerMode) -> None:
        self._say(self.halfway_message(mode))

    def on_session_started(self, mode: TimerMode) -> None:
        self._say(self._choice(SESSION_START_TIPS[mode]))

    def _say(self, text: str | None) -> None:
        if text and self.active:
            self.message.emit(text)
