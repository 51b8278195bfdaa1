"""Pytest configuration and fixtures."""

import pytest

from hypelens.core.keywords import KeywordBanks
from hypelens.core.report import ReportAssembler


@pytest.fixture
def banks() -> KeywordBanks:
    """Default keyword banks."""
    return KeywordBanks()


@pytest.fixture
def assembler(banks) -> ReportAssembler:
    """Assembler built from the default banks."""
    return ReportAssembler(banks)


@pytest.fixture
def demo_text() -> str:
    from hypelens.core.constants import DemoConstants
    return DemoConstants.DEMO_TEXT
