"""Qualitative momentum from hype and information density."""

import logging
from typing import Callable, List, Optional, Tuple

from .constants import MessageConstants, ScoringConstants
from .keywords import KeywordBank, KeywordBanks
from .models import MomentumTier

logger = logging.getLogger(__name__)

# (hype_count, info_density) -> matched?
MomentumRule = Tuple[Callable[[int, int], bool], MomentumTier]

# First match wins; order matters.
MOMENTUM_RULES: List[MomentumRule] = [
    (lambda hype, info: hype >= ScoringConstants.STRONG_MIN_HYPE and info <= ScoringConstants.STRONG_MAX_INFO,
     MomentumTier.STRONG),
    (lambda hype, info: hype >= ScoringConstants.MODERATE_MIN_HYPE, MomentumTier.MODERATE),
    (lambda hype, info: hype == 0 and info > 0, MomentumTier.WEAK),
]


def momentum_tier_for(hype_count: int, info_density: int) -> MomentumTier:
    for matches, tier in MOMENTUM_RULES:
        if matches(hype_count, info_density):
            return tier
    return MomentumTier.NEUTRAL


class MomentumClassifier:
    """Blends hype cues against utility cues into a momentum label."""

    def __init__(self, hype: Optional[KeywordBank] = None, utility: Optional[KeywordBank] = None):
        defaults = KeywordBanks()
        self.hype = hype if hype is not None else defaults.hype
        self.utility = utility if utility is not None else defaults.utility

    @classmethod
    def from_banks(cls, banks: KeywordBanks) -> "MomentumClassifier":
        return cls(hype=banks.hype, utility=banks.utility)

    def tier(self, text: str) -> MomentumTier:
        hype_count = self.hype.count(text)
        info_density = self.utility.count(text)
        tier = momentum_tier_for(hype_count, info_density)
        logger.debug(f"Momentum: hype={hype_count} info={info_density} -> {tier.value}")
        return tier

    def classify(self, text: str) -> str:
        return MessageConstants.MOMENTUM_CONTEXT.format(tier=self.tier(text).value.lower())
