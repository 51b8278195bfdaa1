"""Services for HypeLens."""

from .ocr import OCRServiceFactory
from .intake import AnalysisService, AnalysisOutcome, merge_text

__all__ = [
    "OCRServiceFactory",
    "AnalysisService",
    "AnalysisOutcome",
    "merge_text",
]
