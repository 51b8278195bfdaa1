"""Data models for HypeLens."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Dict, Any

from .constants import ErrorConstants

__all__ = [
    "HypeLevel",
    "MomentumTier",
    "BondingStage",
    "SentimentResult",
    "StageEstimate",
    "AnalysisReport",
    "fallback_report",
]


class HypeLevel(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class MomentumTier(Enum):
    STRONG = "Strong"
    MODERATE = "Moderate"
    WEAK = "Weak"
    NEUTRAL = "Neutral"


class BondingStage(Enum):
    EARLY = "Early"
    MID = "Mid"
    LATE = "Late"


@dataclass(frozen=True)
class SentimentResult:
    """Output of the sentiment and hype classifier."""
    score: int
    hype_level: HypeLevel
    notes: str
    positive_hits: int = 0
    negative_hits: int = 0
    hype_hits: int = 0


@dataclass(frozen=True)
class StageEstimate:
    """Estimated bonding-curve stage with its explanation."""
    stage: BondingStage
    explanation: str


@dataclass(frozen=True)
class AnalysisReport:
    """Immutable result of one analysis request."""
    cleaned_text: str
    sentiment_score: int
    hype_level: Optional[HypeLevel]
    sentiment_notes: str
    momentum_context: str
    bonding_stage: Optional[BondingStage]
    bonding_explanation: str
    risk_signals: Tuple[str, ...]
    pattern_similarity: str
    is_fallback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view, enums rendered as display strings."""
        placeholder = ErrorConstants.PLACEHOLDER_FIELD
        return {
            "cleaned_text": self.cleaned_text,
            "sentiment_score": self.sentiment_score,
            "hype_level": self.hype_level.value if self.hype_level else placeholder,
            "sentiment_notes": self.sentiment_notes,
            "momentum_context": self.momentum_context,
            "bonding_stage": self.bonding_stage.value if self.bonding_stage else placeholder,
            "bonding_explanation": self.bonding_explanation,
            "risk_signals": list(self.risk_signals),
            "pattern_similarity": self.pattern_similarity,
            "is_fallback": self.is_fallback,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisReport":
        """Rebuild a report from the output of to_dict()."""
        hype = data.get("hype_level")
        stage = data.get("bonding_stage")
        return cls(
            cleaned_text=data.get("cleaned_text", ""),
            sentiment_score=int(data.get("sentiment_score", 0)),
            hype_level=HypeLevel(hype) if hype and hype != ErrorConstants.PLACEHOLDER_FIELD else None,
            sentiment_notes=data.get("sentiment_notes", ""),
            momentum_context=data.get("momentum_context", ""),
            bonding_stage=BondingStage(stage) if stage and stage != ErrorConstants.PLACEHOLDER_FIELD else None,
            bonding_explanation=data.get("bonding_explanation", ""),
            risk_signals=tuple(data.get("risk_signals") or ()),
            pattern_similarity=data.get("pattern_similarity", ""),
            is_fallback=bool(data.get("is_fallback", False)),
        )


def fallback_report() -> AnalysisReport:
    """Neutral report shown when no analysis could be completed."""
    return AnalysisReport(
        cleaned_text="",
        sentiment_score=0,
        hype_level=None,
        sentiment_notes=ErrorConstants.FALLBACK_NOTES,
        momentum_context=ErrorConstants.FALLBACK_MOMENTUM,
        bonding_stage=None,
        bonding_explanation=ErrorConstants.FALLBACK_BONDING,
        risk_signals=(ErrorConstants.FALLBACK_RISK,),
        pattern_similarity=ErrorConstants.FALLBACK_PATTERN,
        is_fallback=True,
    )
