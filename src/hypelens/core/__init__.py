"""Core analysis modules for HypeLens."""

from .models import *
from .config import settings
from .errors import *
from .keywords import KeywordBank, KeywordBanks, load_keyword_banks
from .report import ReportAssembler, analyze

__all__ = [
    "settings",
    "analyze",
    "ReportAssembler",
    "KeywordBank",
    "KeywordBanks",
    "load_keyword_banks",
    "AnalysisReport",
    "HypeLevel",
    "MomentumTier",
    "BondingStage",
    "fallback_report",
    "HypeLensError",
    "EmptyInputError",
    "OCRFailure",
    "AnalysisFailure",
    "KeywordBankError",
]
