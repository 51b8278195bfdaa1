"""Keyword banks used by the classifiers.

Matching is plain case-insensitive substring containment, not word-boundary
matching: "anon" matches inside "canon" and "ape" inside "grape". Callers
rely on this exact behaviour, so keep it.
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import yaml

from .errors import KeywordBankError

logger = logging.getLogger(__name__)


# Default keyword banks, editable through keywords.yaml
POSITIVE_WORDS = ["strong", "excited", "bullish", "community", "growth", "energy", "momentum", "great"]
NEGATIVE_WORDS = ["rug", "scam", "concern", "dump", "fear", "worry", "sell"]
HYPE_WORDS = ["moon", "rocket", "to the moon", "1000x", "ape", "next bitcoin", "pump", "lambo", "massive", "explode"]
RISK_WORDS = [
    "anonymous", "anon team", "no utility", "no product", "guaranteed", "risk-free",
    "renounce later", "locked soon", "ape now", "zero risk", "don't miss",
]
UTILITY_CUES = ["utility", "product", "roadmap", "partnership", "audit", "verified", "liquidity locked"]

BONDING_EARLY_KEYWORDS = ["early bonding curve", "early stage", "just launched", "first buyers", "new listing"]
BONDING_MID_KEYWORDS = ["mid curve", "gaining traction", "momentum building", "mid-stage", "hundreds of holders"]
BONDING_LATE_KEYWORDS = ["late curve", "near completion", "closing soon", "thousands of holders", "final stage"]

DEFAULT_BANKS: Dict[str, List[str]] = {
    "positive": POSITIVE_WORDS,
    "negative": NEGATIVE_WORDS,
    "hype": HYPE_WORDS,
    "risk": RISK_WORDS,
    "utility": UTILITY_CUES,
    "bonding_early": BONDING_EARLY_KEYWORDS,
    "bonding_mid": BONDING_MID_KEYWORDS,
    "bonding_late": BONDING_LATE_KEYWORDS,
}


def _clean_phrases(name: str, phrases: Iterable) -> Tuple[str, ...]:
    if isinstance(phrases, str) or phrases is None:
        raise KeywordBankError(f"Keyword bank '{name}' must be a list of phrases, got {type(phrases).__name__}")

    seen = []
    for phrase in phrases:
        if not isinstance(phrase, str) or not phrase.strip():
            raise KeywordBankError(f"Keyword bank '{name}' contains an invalid phrase: {phrase!r}")
        cleaned = phrase.strip().lower()
        if cleaned not in seen:
            seen.append(cleaned)
    return tuple(seen)


@dataclass(frozen=True)
class KeywordBank:
    """Ordered, de-duplicated set of lowercase phrases."""
    name: str
    phrases: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "phrases", _clean_phrases(self.name, self.phrases))

    def matches(self, text: str) -> List[str]:
        """Phrases present in text, in bank order."""
        lower = (text or "").lower()
        return [p for p in self.phrases if p in lower]

    def count(self, text: str) -> int:
        """Number of distinct phrases present; repeats count once."""
        return len(self.matches(text))

    def any_present(self, text: str) -> bool:
        lower = (text or "").lower()
        return any(p in lower for p in self.phrases)

    def __len__(self) -> int:
        return len(self.phrases)

    def __iter__(self):
        return iter(self.phrases)


def _bank(name: str):
    return field(default_factory=lambda: KeywordBank(name, DEFAULT_BANKS[name]))


@dataclass(frozen=True)
class KeywordBanks:
    """The eight banks the classifiers draw on."""
    positive: KeywordBank = _bank("positive")
    negative: KeywordBank = _bank("negative")
    hype: KeywordBank = _bank("hype")
    risk: KeywordBank = _bank("risk")
    utility: KeywordBank = _bank("utility")
    bonding_early: KeywordBank = _bank("bonding_early")
    bonding_mid: KeywordBank = _bank("bonding_mid")
    bonding_late: KeywordBank = _bank("bonding_late")

    @classmethod
    def bank_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Iterable[str]]]) -> "KeywordBanks":
        """Defaults with any subset of banks replaced by the given phrases."""
        if overrides is None:
            return cls()
        if not isinstance(overrides, Mapping):
            raise KeywordBankError(f"Keyword configuration must be a mapping, got {type(overrides).__name__}")

        known = cls.bank_names()
        unknown = sorted(str(k) for k in overrides if k not in known)
        if unknown:
            raise KeywordBankError(f"Unknown keyword banks: {', '.join(unknown)}")

        banks = {name: KeywordBank(name, phrases) for name, phrases in overrides.items()}
        logger.debug(f"Overriding keyword banks: {sorted(banks)}")
        return cls(**banks)

    def to_mapping(self) -> Dict[str, List[str]]:
        return {name: list(getattr(self, name).phrases) for name in self.bank_names()}


def load_keyword_banks(path: Optional[Union[str, Path]] = None) -> KeywordBanks:
    """Load banks from a YAML file, falling back to the defaults."""
    if not path:
        return KeywordBanks()

    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise KeywordBankError(f"Keyword config not found: {config_path}")
    except OSError as e:
        raise KeywordBankError(f"Cannot read keyword config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise KeywordBankError(f"Invalid YAML in keyword config {config_path}: {e}") from e

    logger.info(f"Loaded keyword banks from {config_path}")
    return KeywordBanks.from_mapping(data or {})
