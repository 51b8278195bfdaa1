"""Command-line interface for HypeLens."""

import argparse
import json
import logging
import mimetypes
import subprocess
import sys
from pathlib import Path

from .core.config import settings, ensure_config_files
from .core.constants import DemoConstants, FileConstants, OCRConstants
from .core.errors import EmptyInputError, HypeLensError
from .services.intake import AnalysisService
from .utils.data_prep import export_to_json, format_report, load_export, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _print_outcome(outcome, args):
    if args.json:
        print(json.dumps(outcome.report.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_report(outcome.report))
        print()
        print(outcome.status)

    if getattr(args, "out", None):
        export_to_json(prepare_export(outcome.report), args.out)
        print(f"Report exported to {args.out}", file=sys.stderr)


def cmd_analyze(args):
    """Analyze command."""
    parts = []
    if args.text:
        parts.append(" ".join(args.text))
    if args.file:
        parts.append(Path(args.file).read_text(encoding="utf-8"))
    manual_text = "\n".join(parts)

    image = None
    mime_type = OCRConstants.DEFAULT_MIME_TYPE
    if args.image:
        image = Path(args.image).read_bytes()
        mime_type = mimetypes.guess_type(args.image)[0] or mime_type

    service = AnalysisService()
    outcome = service.run(manual_text=manual_text, image=image, mime_type=mime_type)
    _print_outcome(outcome, args)
    return 1 if outcome.is_error and outcome.report.is_fallback else 0


def cmd_demo(args):
    """Demo command."""
    service = AnalysisService()
    outcome = service.run(manual_text=DemoConstants.DEMO_TEXT)
    _print_outcome(outcome, args)
    return 0


def cmd_export(args):
    """Export command."""
    try:
        report = load_export(args.input_file)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return 1

    if args.pretty:
        print(format_report(report))
    else:
        input_path = Path(args.input_file)
        output_file = args.output or str(input_path.with_name(f"{input_path.stem}_export.json"))
        export_to_json(prepare_export(report), output_file)
        print(f"Exported to {output_file}")
    return 0


def cmd_init_config(args):
    """Write an editable keywords.yaml."""
    path = ensure_config_files(args.dir)
    print(f"Keyword banks: {path}")
    print(f"Set KEYWORD_CONFIG={path} to use them.")
    return 0


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return 1

    print("Launching HypeLens UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="HypeLens - educational heuristics for token promotion text (not financial advice)"
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze promotion text')
    analyze_parser.add_argument('text', nargs='*', help='Text to analyze')
    analyze_parser.add_argument('--file', help='Read text from a file')
    analyze_parser.add_argument('--image', help='Screenshot to read with OCR')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--json', action='store_true', help='Print the report as JSON')

    # Demo command
    demo_parser = subparsers.add_parser('demo', help='Analyze the built-in demo text')
    demo_parser.add_argument('--out', help='Output JSON file')
    demo_parser.add_argument('--json', action='store_true', help='Print the report as JSON')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export a saved report')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Render the report to stdout')

    # Config command
    config_parser = subparsers.add_parser('init-config', help='Write default keyword banks to YAML')
    config_parser.add_argument('--dir', default=FileConstants.CONFIG_DIR, help='Config directory')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


COMMANDS = {
    'analyze': cmd_analyze,
    'demo': cmd_demo,
    'export': cmd_export,
    'init-config': cmd_init_config,
    'ui': cmd_ui,
}


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging()

    try:
        return COMMANDS[args.command](args)
    except EmptyInputError as e:
        print(str(e), file=sys.stderr)
        return 1
    except HypeLensError as e:
        logger.error(f"Command failed: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
