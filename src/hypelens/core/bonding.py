"""Bonding-curve lifecycle stage estimation."""

import logging
from typing import List, Optional, Tuple

from .constants import MessageConstants
from .keywords import KeywordBank, KeywordBanks
from .models import BondingStage, StageEstimate

logger = logging.getLogger(__name__)


class BondingStageEstimator:
    """Labels promotional narrative maturity as Early, Mid or Late.

    Rules are checked in order and the first bank with a matching phrase
    decides: early, then late, then mid. Early therefore wins when early
    and late cues both appear. Mid is also the default, so a mid match only
    swaps the generic explanation for a specific one.
    """

    def __init__(
        self,
        early: Optional[KeywordBank] = None,
        mid: Optional[KeywordBank] = None,
        late: Optional[KeywordBank] = None,
    ):
        defaults = KeywordBanks()
        early = early if early is not None else defaults.bonding_early
        mid = mid if mid is not None else defaults.bonding_mid
        late = late if late is not None else defaults.bonding_late

        self.rules: List[Tuple[KeywordBank, StageEstimate]] = [
            (early, StageEstimate(BondingStage.EARLY, MessageConstants.BONDING_EARLY)),
            (late, StageEstimate(BondingStage.LATE, MessageConstants.BONDING_LATE)),
            (mid, StageEstimate(BondingStage.MID, MessageConstants.BONDING_MID)),
        ]
        self.default = StageEstimate(BondingStage.MID, MessageConstants.BONDING_DEFAULT)

    @classmethod
    def from_banks(cls, banks: KeywordBanks) -> "BondingStageEstimator":
        return cls(early=banks.bonding_early, mid=banks.bonding_mid, late=banks.bonding_late)

    def estimate(self, text: str) -> StageEstimate:
        for bank, estimate in self.rules:
            if bank.any_present(text):
                logger.debug(f"Bonding stage from '{bank.name}' cues: {estimate.stage.value}")
                return estimate
        return self.default
