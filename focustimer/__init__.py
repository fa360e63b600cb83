"""Focus Timer: a Pomodoro timer with a canned-response focus coach."""

__version__ = "0.1.0"
