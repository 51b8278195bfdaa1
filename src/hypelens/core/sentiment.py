"""Keyword sentiment and hype scoring."""

import logging
from typing import Optional

from .constants import MessageConstants, ScoringConstants
from .keywords import KeywordBank, KeywordBanks
from .models import HypeLevel, SentimentResult

logger = logging.getLogger(__name__)


def clamp_score(score: int, lo: int = ScoringConstants.MIN_SCORE, hi: int = ScoringConstants.MAX_SCORE) -> int:
    """Clamp score to range [lo, hi]."""
    return max(lo, min(hi, int(score)))


def hype_level_for(hype_count: int) -> HypeLevel:
    if hype_count > ScoringConstants.HIGH_HYPE_ABOVE:
        return HypeLevel.HIGH
    if hype_count > ScoringConstants.MEDIUM_HYPE_ABOVE:
        return HypeLevel.MEDIUM
    return HypeLevel.LOW


class SentimentHypeClassifier:
    """Scores positive/negative cue presence and grades hype density.

    Each phrase counts once if it appears anywhere in the text, no matter
    how often it repeats.
    """

    def __init__(
        self,
        positive: Optional[KeywordBank] = None,
        negative: Optional[KeywordBank] = None,
        hype: Optional[KeywordBank] = None,
    ):
        defaults = KeywordBanks()
        self.positive = positive if positive is not None else defaults.positive
        self.negative = negative if negative is not None else defaults.negative
        self.hype = hype if hype is not None else defaults.hype

    @classmethod
    def from_banks(cls, banks: KeywordBanks) -> "SentimentHypeClassifier":
        return cls(positive=banks.positive, negative=banks.negative, hype=banks.hype)

    def classify(self, text: str) -> SentimentResult:
        pos_hits = self.positive.count(text)
        neg_hits = self.negative.count(text)
        hype_count = self.hype.count(text)

        score = ScoringConstants.BASE_SENTIMENT_SCORE
        score += pos_hits * ScoringConstants.POSITIVE_CUE_WEIGHT
        score -= neg_hits * ScoringConstants.NEGATIVE_CUE_WEIGHT
        score = clamp_score(score)

        notes = MessageConstants.SENTIMENT_NOTES.format(
            positive=pos_hits, negative=neg_hits, hype=hype_count
        )
        logger.debug(f"Sentiment cues: pos={pos_hits} neg={neg_hits} hype={hype_count} score={score}")

        return SentimentResult(
            score=score,
            hype_level=hype_level_for(hype_count),
            notes=notes,
            positive_hits=pos_hits,
            negative_hits=neg_hits,
            hype_hits=hype_count,
        )
