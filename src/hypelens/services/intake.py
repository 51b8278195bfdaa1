"""Caller-facing analysis service.

Merges OCR output with pasted text, decides what to do when either source
is missing or fails, and never lets a half-built report escape: callers get
either a real report or the fallback report plus an error status.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.constants import ErrorConstants, OCRConstants
from ..core.errors import AnalysisFailure, EmptyInputError, OCRFailure
from ..core.models import AnalysisReport, fallback_report
from ..core.report import ReportAssembler, get_assembler
from .ocr import OCRServiceFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisOutcome:
    """Report plus the status line to show alongside it."""
    report: AnalysisReport
    status: str
    is_error: bool = False
    ocr_failed: bool = False


def merge_text(ocr_text: Optional[str], manual_text: Optional[str]) -> str:
    """OCR text first, then manual text, separated by a line break."""
    manual = (manual_text or "").strip()
    combined = f"{ocr_text or ''}\n{manual}".strip()
    return combined or manual


class AnalysisService:
    """Runs one analysis request end to end."""

    def __init__(self, assembler: Optional[ReportAssembler] = None, ocr_service=None):
        self._assembler = assembler
        self._ocr_service = ocr_service

    @property
    def assembler(self) -> ReportAssembler:
        if self._assembler is None:
            self._assembler = get_assembler()
        return self._assembler

    @property
    def ocr_service(self):
        if self._ocr_service is None:
            self._ocr_service = OCRServiceFactory.create()
        return self._ocr_service

    def run(
        self,
        manual_text: Optional[str] = None,
        image: Optional[bytes] = None,
        mime_type: str = OCRConstants.DEFAULT_MIME_TYPE,
    ) -> AnalysisOutcome:
        """Analyze pasted text and/or an image.

        Raises:
            EmptyInputError: nothing was supplied, or the supplied inputs
                produced no text.
        """
        manual = (manual_text or "").strip()
        if not image and not manual:
            raise EmptyInputError(ErrorConstants.STATUS_NO_INPUT)

        ocr_failed = False
        if image:
            try:
                ocr_text = self.ocr_service.extract_text(image, mime_type)
                text = merge_text(ocr_text, manual)
            except OCRFailure as e:
                logger.warning(f"OCR failed, falling back to pasted text: {e}")
                ocr_failed = True
                text = manual
        else:
            text = manual

        if not text:
            raise EmptyInputError(ErrorConstants.STATUS_NO_TEXT)

        try:
            report = self.assembler.analyze(text)
        except AnalysisFailure:
            logger.exception("Analysis error")
            return AnalysisOutcome(
                report=fallback_report(),
                status=ErrorConstants.STATUS_ANALYSIS_FAILED,
                is_error=True,
                ocr_failed=ocr_failed,
            )

        if ocr_failed:
            return AnalysisOutcome(report, ErrorConstants.STATUS_OCR_FAILED, is_error=True, ocr_failed=True)
        return AnalysisOutcome(report, ErrorConstants.STATUS_COMPLETE)
