"""Report export and rendering."""

import datetime
import json
from typing import Dict, Any, List

from ..core.constants import DemoConstants, FileConstants, MessageConstants
from ..core.models import AnalysisReport


def prepare_export(report: AnalysisReport) -> Dict[str, Any]:
    """Prepare a report for JSON export."""
    return {
        "report": report.to_dict(),
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": FileConstants.EXPORT_VERSION,
            "disclaimer": MessageConstants.DISCLAIMER,
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_export(filename: str) -> AnalysisReport:
    """Read a report written by export_to_json."""
    with open(filename, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return AnalysisReport.from_dict(data.get("report", data))


def with_disclaimer(text: str) -> str:
    return f"{text} {MessageConstants.DISCLAIMER}"


def format_report(report: AnalysisReport, include_questions: bool = True) -> str:
    """Human-readable report; every narrative field carries the disclaimer."""
    fields = report.to_dict()
    lines: List[str] = [
        "Extracted text:",
        f"  {report.cleaned_text or 'No text detected.'}",
        "",
        f"Sentiment score: {fields['sentiment_score']}",
        f"Hype level: {fields['hype_level']}",
        f"Notes: {with_disclaimer(report.sentiment_notes)}",
        "",
        f"Momentum: {with_disclaimer(report.momentum_context)}",
        "",
        f"Bonding curve stage: {fields['bonding_stage']}",
        f"  {with_disclaimer(report.bonding_explanation)}",
        "",
        "Risk signals:",
    ]
    lines.extend(f"  - {signal}" for signal in report.risk_signals)
    lines.extend([
        "",
        f"Pattern similarity: {with_disclaimer(report.pattern_similarity)}",
    ])

    if include_questions:
        lines.extend(["", "Questions to research:"])
        lines.extend(f"  - {q}" for q in DemoConstants.RESEARCH_QUESTIONS)

    return "\n".join(lines)
