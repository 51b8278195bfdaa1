"""Narrative pattern similarity."""

from typing import Sequence, Tuple

from .constants import MessageConstants

# First match wins; the community statement is the fallback.
PATTERN_RULES: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("meme", "moon"), MessageConstants.PATTERN_MEME),
    (("utility", "product"), MessageConstants.PATTERN_UTILITY),
)


class PatternSimilarityClassifier:
    """Picks one of three fixed narrative statements."""

    def __init__(self, rules: Sequence[Tuple[Sequence[str], str]] = PATTERN_RULES,
                 default: str = MessageConstants.PATTERN_COMMUNITY):
        self.rules = [(tuple(c.lower() for c in cues), statement) for cues, statement in rules]
        self.default = default

    def classify(self, text: str) -> str:
        lower = (text or "").lower()
        for cues, statement in self.rules:
            if any(c in lower for c in cues):
                return statement
        return self.default
