"""Focus Coach package."""

from .adapter import CoachAdapter
from .responses import KEYWORD_RULES, DEFAULT_RESPONSES, Rule

__all__ = ["CoachAdapter", "KEYWORD_RULES", "DEFAULT_RESPONSES", "Rule"]
