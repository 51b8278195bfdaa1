"""Report assembly: runs every classifier over one normalized text."""

import logging
from typing import Optional

from .bonding import BondingStageEstimator
from .config import settings
from .errors import AnalysisFailure
from .keywords import KeywordBanks, load_keyword_banks
from .models import AnalysisReport
from .momentum import MomentumClassifier
from .normalizer import normalize
from .pattern import PatternSimilarityClassifier
from .risk import RiskSignalDetector
from .sentiment import SentimentHypeClassifier

logger = logging.getLogger(__name__)


class ReportAssembler:
    """Builds an AnalysisReport from raw text.

    The classifiers share nothing but the read-only keyword banks, so one
    assembler can serve concurrent callers.
    """

    def __init__(
        self,
        banks: Optional[KeywordBanks] = None,
        sentiment: Optional[SentimentHypeClassifier] = None,
        momentum: Optional[MomentumClassifier] = None,
        bonding: Optional[BondingStageEstimator] = None,
        risk: Optional[RiskSignalDetector] = None,
        pattern: Optional[PatternSimilarityClassifier] = None,
    ):
        banks = banks or KeywordBanks()
        self.sentiment = sentiment or SentimentHypeClassifier.from_banks(banks)
        self.momentum = momentum or MomentumClassifier.from_banks(banks)
        self.bonding = bonding or BondingStageEstimator.from_banks(banks)
        self.risk = risk or RiskSignalDetector.from_banks(banks)
        self.pattern = pattern or PatternSimilarityClassifier()

    def analyze(self, raw_text: str) -> AnalysisReport:
        cleaned_text = normalize(raw_text)

        try:
            sentiment = self.sentiment.classify(cleaned_text)
            momentum_context = self.momentum.classify(cleaned_text)
            stage = self.bonding.estimate(cleaned_text)
            risk_signals = self.risk.detect(cleaned_text)
            pattern_similarity = self.pattern.classify(cleaned_text)
        except AnalysisFailure:
            raise
        except Exception as e:
            raise AnalysisFailure(f"Analysis failed: {e}") from e

        logger.info(
            f"Analyzed {len(cleaned_text)} chars: score={sentiment.score} "
            f"hype={sentiment.hype_level.value} stage={stage.stage.value} risks={len(risk_signals)}"
        )

        return AnalysisReport(
            cleaned_text=cleaned_text,
            sentiment_score=sentiment.score,
            hype_level=sentiment.hype_level,
            sentiment_notes=sentiment.notes,
            momentum_context=momentum_context,
            bonding_stage=stage.stage,
            bonding_explanation=stage.explanation,
            risk_signals=risk_signals,
            pattern_similarity=pattern_similarity,
        )


_default_assembler: Optional[ReportAssembler] = None


def get_assembler() -> ReportAssembler:
    """Shared assembler built from the configured keyword banks."""
    global _default_assembler
    if _default_assembler is None:
        _default_assembler = ReportAssembler(load_keyword_banks(settings.keyword_config))
    return _default_assembler


def analyze(raw_text: str) -> AnalysisReport:
    """Analyze text with the default assembler."""
    return get_assembler().analyze(raw_text)
