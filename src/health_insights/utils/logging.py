# ============================================================================
# src/health_insights/utils/logging.py
# ============================================================================
"""
Logging setup for report analysis.

Logs go to stderr (and optionally a file) so that the CLI can keep stdout
for the JSON result. Stage timings and per-document context travel as
record attributes, which JsonFormatter emits as top-level keys.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

# Record attributes copied into JSON output when a log call sets them via extra=
CONTEXT_FIELDS = ("stage", "duration_ms", "media_type", "metrics_found")

# Chatty below WARNING; only let them through when debugging
THIRD_PARTY_LOGGERS = ("PIL", "pypdfium2", "PyPDF2", "pytesseract")

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_json: bool = False
) -> None:
    """
    Configure the root logger.

    Replaces any handlers installed earlier, so calling it twice is safe.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file; parent directories are created
        format_json: Emit one JSON object per line instead of plain text
    """
    log_level = getattr(logging, level.upper())
    formatter = JsonFormatter() if format_json else logging.Formatter(
        TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    )

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)

    library_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with analysis context fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator timing one analysis stage.

    Success is logged at DEBUG and failure at ERROR; both carry the stage
    name and its duration in milliseconds. Exceptions are re-raised unchanged.

    Args:
        logger: Logger to report to
        operation: Stage name, e.g. "Transcript analysis"
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = round((time.perf_counter() - start) * 1000, 1)
                logger.error(
                    f"{operation} failed after {duration_ms}ms: {e}",
                    extra={"stage": operation, "duration_ms": duration_ms},
                )
                raise

            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            logger.debug(
                f"{operation} completed in {duration_ms}ms",
                extra={"stage": operation, "duration_ms": duration_ms},
            )
            return result

        return wrapper
    return decorator
