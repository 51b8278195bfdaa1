"""Input normalization shared by all classifiers."""

from typing import Optional


def normalize(raw: Optional[str]) -> str:
    """Trim surrounding whitespace; case is kept for display."""
    return (raw or "").strip()
