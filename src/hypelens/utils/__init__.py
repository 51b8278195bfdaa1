"""Utility modules for HypeLens."""

from .data_prep import export_to_json, format_report, load_export, prepare_export

__all__ = [
    "export_to_json",
    "format_report",
    "load_export",
    "prepare_export",
]
