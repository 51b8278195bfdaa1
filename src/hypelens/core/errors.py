"""Exception types for HypeLens."""


class HypeLensError(Exception):
    """Base class for all HypeLens errors."""


class EmptyInputError(HypeLensError):
    """Neither OCR nor manual input produced any text to analyze."""


class OCRFailure(HypeLensError):
    """Text could not be extracted from an image."""


class AnalysisFailure(HypeLensError):
    """The analysis pipeline failed and no report could be built."""


class KeywordBankError(AnalysisFailure):
    """A keyword bank is malformed or unknown."""
