# ============================================================================
# src/health_insights/cli.py
# ============================================================================
"""
Command-line entry point.

    python -m health_insights report.pdf
    python -m health_insights scan.jpg --media-type image/jpeg --indent 0

Prints the analysis as JSON on stdout; logs go to stderr.
Exit codes: 0 success, 1 extraction failure / empty transcript / unreadable
file, 2 unsupported media type.
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from .config import logging_settings
from .core.orchestrator import ReportOrchestrator
from .processors.report.health_summary import summarize_health
from .utils.exceptions import DocumentProcessingError, UnsupportedMediaTypeError
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="health_insights",
        description="Extract health metrics and recommendations from a medical report",
    )
    parser.add_argument("report", help="Path to a PDF or image of the report")
    parser.add_argument(
        "--media-type",
        help="Declared media type (default: guessed from the file name)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=logging_settings.LOG_LEVEL,
        help=f"Logging level (default: {logging_settings.LOG_LEVEL})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=logging_settings.LOG_FILE,
        format_json=logging_settings.LOG_JSON,
    )

    orchestrator = ReportOrchestrator()

    try:
        result = asyncio.run(orchestrator.analyze_file(args.report, args.media_type))
    except UnsupportedMediaTypeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except (DocumentProcessingError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    output = result.to_dict()
    output["analysis"] = summarize_health(result.metrics).to_dict()

    print(json.dumps(output, indent=args.indent or None, ensure_ascii=False))
    return 0
