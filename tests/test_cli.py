"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest

from hypelens.cli import build_parser, main
from hypelens.core import report as report_module
from hypelens.core.constants import ErrorConstants


@pytest.fixture(autouse=True)
def default_banks():
    """Run every command against the built-in keyword banks."""
    report_module._default_assembler = None
    with patch.object(report_module.settings, "keyword_config", ""):
        yield
    report_module._default_assembler = None


class TestParser:

    def test_subcommands(self):
        parser = build_parser()
        args = parser.parse_args(["analyze", "to", "the", "moon", "--json"])
        assert args.command == "analyze"
        assert args.text == ["to", "the", "moon"]
        assert args.json

        args = parser.parse_args(["export", "--in", "r.json", "--pretty"])
        assert args.input_file == "r.json"
        assert args.pretty

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "analyze" in capsys.readouterr().out


class TestAnalyzeCommand:

    def test_text(self, capsys):
        assert main(["analyze", "This looks like a rug and maybe a scam"]) == 0
        out = capsys.readouterr().out
        assert "Sentiment score: 26" in out
        assert ErrorConstants.STATUS_COMPLETE in out

    def test_json(self, capsys):
        assert main(["analyze", "--json", "moon", "rocket", "lambo", "pump", "massive"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["hype_level"] == "High"
        assert data["momentum_context"].startswith("Momentum conditions appear strong.")

    def test_file(self, tmp_path, capsys):
        path = tmp_path / "post.txt"
        path.write_text("Just launched! Real product coming.", encoding="utf-8")

        assert main(["analyze", "--json", "--file", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["bonding_stage"] == "Early"
        assert data["cleaned_text"] == "Just launched! Real product coming."

    def test_empty_input(self, capsys):
        assert main(["analyze"]) == 1
        assert ErrorConstants.STATUS_NO_INPUT in capsys.readouterr().err

    def test_out_file(self, tmp_path, capsys):
        path = tmp_path / "report.json"
        assert main(["analyze", "moon", "--out", str(path)]) == 0

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["report"]["cleaned_text"] == "moon"
        assert data["metadata"]["export_timestamp"]
        assert "Report exported" in capsys.readouterr().err


class TestOtherCommands:

    def test_demo(self, capsys):
        assert main(["demo", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["bonding_stage"] == "Mid"
        assert data["sentiment_score"] == 74

    def test_export_pretty(self, tmp_path, capsys):
        path = tmp_path / "report.json"
        main(["demo", "--out", str(path)])
        capsys.readouterr()

        assert main(["export", "--in", str(path), "--pretty"]) == 0
        assert "Sentiment score: 74" in capsys.readouterr().out

    def test_export_rewrite(self, tmp_path):
        path = tmp_path / "report.json"
        main(["demo", "--out", str(path)])

        assert main(["export", "--in", str(path)]) == 0
        assert (tmp_path / "report_export.json").exists()

    def test_export_without_json_suffix_keeps_input(self, tmp_path):
        path = tmp_path / "report.txt"
        main(["demo", "--out", str(path)])
        original = path.read_text(encoding="utf-8")

        assert main(["export", "--in", str(path)]) == 0
        assert path.read_text(encoding="utf-8") == original
        assert (tmp_path / "report_export.json").exists()

    def test_export_missing_file(self, tmp_path, capsys):
        assert main(["export", "--in", str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_init_config(self, tmp_path, capsys):
        config_dir = tmp_path / "config"
        assert main(["init-config", "--dir", str(config_dir)]) == 0
        assert (config_dir / "keywords.yaml").exists()
        assert "KEYWORD_CONFIG=" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__])
