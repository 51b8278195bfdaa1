"""HypeLens - rule-based educational analysis of token promotion text."""

__version__ = "1.0.0"
__author__ = "HypeLens Team"

from .core.models import *
from .core.config import settings
from .core.report import ReportAssembler, analyze
from .services.intake import AnalysisService

__all__ = [
    "settings",
    "analyze",
    "ReportAssembler",
    "AnalysisService",
    "AnalysisReport",
    "HypeLevel",
    "MomentumTier",
    "BondingStage",
]
