"""Canned text for the Focus Coach.

Rule order matters: the first rule with a matching keyword wins, so the
more specific phrases sit above the catch-all words like ``timer`` and
``done``.
"""

from __future__ import annotations

from typing import NamedTuple

from ..timer.config import TimerMode


class Rule(NamedTuple):
    keywords: tuple[str, ...]
    responses: tuple[str, ...]


KEYWORD_RULES: tuple[Rule, ...] = (
    Rule(
        ("losing focus", "distracted", "can't focus", "help focus"),
        (
            "Take a deep breath ✨ Let's get through this session together. You've got this!",
            "Try the 2-minute rule: commit to just 2 more minutes of focus. "
            "Often that's all you need to get back in the zone! 🌟",
            "Remove distractions around you. Put your phone away, close extra "
            "tabs, and return to your one important task. 💪",
        ),
    ),
    Rule(
        ("pomodoro technique", "how does it work", "what is pomodoro"),
        (
            "The Pomodoro Technique is simple: 25 minutes of focused work, followed "
            "by a 5-minute break. After 4 rounds, you take a longer 15-minute break! 🍅",
            "It's a time management method that breaks work into focused intervals. "
            "The magic is in the rhythm: work, rest, repeat! ⏰",
        ),
    ),
    Rule(
        ("break", "what to do", "break ideas", "break time"),
        (
            "Step away from your screen 🌱 Stretch, drink water, or take a short walk. "
            "Avoid checking social media, it can drag you in!",
            "Perfect break activities: light stretching, deep breathing, getting some "
            "fresh air, or just looking out the window 🌿",
            "Use your break to move your body! Do some jumping jacks, stretch your neck, "
            "or walk around your space. Your brain needs the reset! 💫",
        ),
    ),
    Rule(
        ("settings", "customize", "timer", "duration", "change time"),
        (
            "You can customize your timer durations in the settings panel! 25 minutes "
            "is the sweet spot for most people, but feel free to adjust. ⚙️",
            "If you're just starting, try 15-20 minutes. Once you build the habit, "
            "you can extend to the full 25 minutes! 📈",
            "Your custom settings are saved automatically, so I'll remember your "
            "preferred rhythm! 💾",
        ),
    ),
    Rule(
        ("motivated", "motivation", "encourage", "support"),
        (
            "You're building something amazing, one focused session at a time! 🚀 "
            "Every minute of focused work counts.",
            "Remember why you started. Each Pomodoro session is a step toward your goals! 🎯",
            "Progress over perfection! You're already ahead of everyone who didn't start. "
            "Keep going! 💪",
        ),
    ),
    Rule(
        ("completed", "finished", "done", "sessions"),
        (
            "Fantastic! 🎉 Each completed session builds your focus muscle. "
            "You're developing a superpower!",
            "Look at you go! 🌟 Consistency is key, and you're proving you can stick with it.",
        ),
    ),
    Rule(
        ("tired", "exhausted", "can't continue"),
        (
            "It's okay to feel tired! 😌 Consider taking a longer break or switching "
            "to lighter tasks. Listen to your body.",
            "Mental fatigue is real. Maybe it's time for that long break, some water, "
            "or even calling it a productive day! 🌙",
        ),
    ),
    Rule(
        ("shortcuts", "keyboard", "controls"),
        (
            "Great question! ⌨️ Press Space to start or pause the timer, R to reset, "
            "and 1/2/3 to switch modes. These shortcuts help you stay in flow!",
            "Keyboard shortcuts: Space (play/pause), R (reset), 1/2/3 (focus, short "
            "break, long break). No need to reach for the mouse! 🎯",
        ),
    ),
    Rule(
        ("notifications", "sound", "alerts"),
        (
            "I'll pop up a desktop notification when a session ends while the window "
            "is in the background. 🔔",
            "You can toggle the completion sound in the settings panel. The window "
            "title also shows the countdown! 📢",
        ),
    ),
)

DEFAULT_RESPONSES: tuple[str, ...] = (
    "That's a great question! ✨ Remember, the Pomodoro Technique is all about "
    "focused work sessions followed by short breaks.",
    "I'm here to help you stay productive! 🌟 Try asking me about focus tips, "
    "break ideas, or timer settings.",
    "Every small step counts toward your goals! 💪 What specific area of "
    "productivity would you like to improve?",
)


# ── timer event pools ────────────────────────────────────────────────────

# Formatted with ``sessions=<count>``.
LONG_BREAK_EARNED: tuple[str, ...] = (
    "Amazing work! 🎉 You've completed {sessions} sessions. Time for your "
    "well-deserved long break!",
    "{sessions} sessions done! 🏆 Step away properly this time, you've earned a long break.",
)

SHORT_BREAK_EARNED: tuple[str, ...] = (
    "Great job finishing that focus session! 🌟 Take a short break and come back refreshed.",
    "Session complete! 🌿 Stretch, sip some water, and let your mind wander for a bit.",
)

BREAK_OVER: tuple[str, ...] = (
    "Break's over! 💪 Ready to dive into another productive focus session?",
    "Welcome back! 🎯 Pick one task and let's get going.",
)

HALFWAY_ENCOURAGEMENTS: tuple[str, ...] = (
    "You're halfway through! 🔥 Keep that momentum going!",
    "Great progress! ⚡ You've got this, stay focused!",
    "Halfway there! 🌟 Your brain is in the flow zone now.",
)

SESSION_START_TIPS: dict[TimerMode, tuple[str, ...]] = {
    TimerMode.WORK: (
        "Let's focus! 🎯 Remove distractions and tackle your most important task first.",
        "What's the one thing you want to accomplish this session? 💪",
        "New session, fresh start! 🌟 Set a clear intention before you dive in.",
    ),
    TimerMode.SHORT_BREAK: (
        "Break time! 🌿 Step away from the screen and let your mind reset.",
        "Perfect timing for a break! Get some water, stretch, or take a few deep breaths. 💧",
        "Your brain earned this rest! Use these few minutes to recharge fully. ✨",
    ),
    TimerMode.LONG_BREAK: (
        "Time for your long break! 🎉 Truly disconnect and recharge.",
        "Excellent work! This longer break matters: step outside, have a snack, or just relax. 🌞",
        "Four sessions complete! 🏆 Celebrate your progress and reset completely.",
    ),
}
