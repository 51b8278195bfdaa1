"""Tests for keyword banks."""

import dataclasses

import pytest

from hypelens.core.errors import AnalysisFailure, KeywordBankError
from hypelens.core.keywords import (
    DEFAULT_BANKS,
    KeywordBank,
    KeywordBanks,
    load_keyword_banks,
)


class TestKeywordBank:
    """Test single-bank construction and matching."""

    def test_phrases_are_normalized(self):
        """Phrases are stripped, lowercased and de-duplicated in order."""
        bank = KeywordBank("hype", ["  Moon ", "ROCKET", "moon", "Lambo"])
        assert bank.phrases == ("moon", "rocket", "lambo")
        assert len(bank) == 3

    def test_invalid_phrases_rejected(self):
        with pytest.raises(KeywordBankError):
            KeywordBank("hype", ["moon", ""])
        with pytest.raises(KeywordBankError):
            KeywordBank("hype", ["moon", None])
        with pytest.raises(KeywordBankError):
            KeywordBank("hype", ["moon", 42])

    def test_bare_string_rejected(self):
        """A single string is not a list of phrases."""
        with pytest.raises(KeywordBankError):
            KeywordBank("hype", "moon")

    def test_keyword_bank_error_is_analysis_failure(self):
        assert issubclass(KeywordBankError, AnalysisFailure)

    def test_presence_not_frequency(self):
        """A phrase repeated many times counts once."""
        bank = KeywordBank("negative", ["rug", "scam"])
        assert bank.count("rug rug rug rug") == 1
        assert bank.count("RUG and Scam") == 2

    def test_matches_in_bank_order(self):
        bank = KeywordBank("risk", ["guaranteed", "zero risk"])
        assert bank.matches("Zero risk and guaranteed!") == ["guaranteed", "zero risk"]

    def test_substring_matching_is_not_word_bounded(self):
        """Known approximation: 'ape' matches inside 'grape'."""
        bank = KeywordBank("hype", ["ape"])
        assert bank.any_present("grape juice")
        assert not bank.any_present("")

    def test_bank_is_frozen(self):
        bank = KeywordBank("hype", ["moon"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            bank.phrases = ("rocket",)


class TestKeywordBanks:
    """Test the grouped banks and their configuration."""

    def test_defaults_cover_every_bank(self):
        banks = KeywordBanks()
        assert set(KeywordBanks.bank_names()) == set(DEFAULT_BANKS)
        assert banks.hype.phrases[0] == "moon"
        assert "liquidity locked" in banks.utility.phrases

    def test_partial_override_keeps_defaults(self):
        banks = KeywordBanks.from_mapping({"positive": ["wagmi"]})
        assert banks.positive.phrases == ("wagmi",)
        assert banks.negative == KeywordBanks().negative

    def test_unknown_bank_rejected(self):
        with pytest.raises(KeywordBankError, match="sentiment"):
            KeywordBanks.from_mapping({"sentiment": ["good"]})

    def test_non_mapping_rejected(self):
        with pytest.raises(KeywordBankError):
            KeywordBanks.from_mapping(["moon"])

    def test_to_mapping(self):
        mapping = KeywordBanks().to_mapping()
        assert mapping["bonding_late"] == DEFAULT_BANKS["bonding_late"]


class TestLoadKeywordBanks:
    """Test loading banks from YAML files."""

    def test_no_path_returns_defaults(self):
        assert load_keyword_banks(None) == KeywordBanks()
        assert load_keyword_banks("") == KeywordBanks()

    def test_yaml_override(self, tmp_path):
        path = tmp_path / "keywords.yaml"
        path.write_text("hype:\n  - wen lambo\n  - gm\n", encoding="utf-8")

        banks = load_keyword_banks(path)
        assert banks.hype.phrases == ("wen lambo", "gm")
        assert banks.risk == KeywordBanks().risk

    def test_empty_yaml_returns_defaults(self, tmp_path):
        path = tmp_path / "keywords.yaml"
        path.write_text("", encoding="utf-8")
        assert load_keyword_banks(path) == KeywordBanks()

    def test_missing_file(self, tmp_path):
        with pytest.raises(KeywordBankError, match="not found"):
            load_keyword_banks(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "keywords.yaml"
        path.write_text("hype: [moon, rocket\n", encoding="utf-8")
        with pytest.raises(KeywordBankError):
            load_keyword_banks(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(KeywordBankError, match="Cannot read") as excinfo:
            load_keyword_banks(tmp_path)
        assert isinstance(excinfo.value.__cause__, OSError)


if __name__ == "__main__":
    pytest.main([__file__])
