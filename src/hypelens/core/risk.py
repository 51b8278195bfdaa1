"""Risk cue detection."""

import logging
from typing import Optional, Sequence, Tuple

from .constants import MessageConstants
from .keywords import KeywordBank, KeywordBanks

logger = logging.getLogger(__name__)

UTILITY_MENTIONS = ("utility", "product", "roadmap")
ANONYMOUS_MENTIONS = ("anonymous", "anon")


class RiskSignalDetector:
    """Lists promotional or low-transparency cues found in the text.

    Output is never empty: when nothing matches a single placeholder entry
    is returned. Empty text carries no description to check for utility
    mentions, so it gets the placeholder too.
    """

    def __init__(
        self,
        risk: Optional[KeywordBank] = None,
        utility_mentions: Sequence[str] = UTILITY_MENTIONS,
        anonymous_mentions: Sequence[str] = ANONYMOUS_MENTIONS,
    ):
        self.risk = risk if risk is not None else KeywordBanks().risk
        self.utility_mentions = tuple(m.lower() for m in utility_mentions)
        self.anonymous_mentions = tuple(m.lower() for m in anonymous_mentions)

    @classmethod
    def from_banks(cls, banks: KeywordBanks) -> "RiskSignalDetector":
        return cls(risk=banks.risk)

    def detect(self, text: str) -> Tuple[str, ...]:
        lower = (text or "").lower()
        signals = [MessageConstants.RISK_CUE.format(phrase=p) for p in self.risk.matches(lower)]

        if lower and not any(m in lower for m in self.utility_mentions):
            signals.append(MessageConstants.RISK_NO_UTILITY)

        if any(m in lower for m in self.anonymous_mentions):
            signals.append(MessageConstants.RISK_ANONYMOUS_TEAM)

        logger.debug(f"Risk signals found: {len(signals)}")
        return tuple(signals) if signals else (MessageConstants.RISK_PLACEHOLDER,)
