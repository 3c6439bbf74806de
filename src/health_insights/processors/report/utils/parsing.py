# src/health_insights/processors/report/utils/parsing.py
"""
Parsing utilities for metric value extraction.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union


def parse_number(value_str: Optional[str]) -> Optional[float]:
    """
    Parse a captured numeric group.

    Handles values like:
    - "175"
    - "72.5"
    - "5." (OCR often leaves a trailing dot)

    Returns None for missing or non-numeric captures.
    """
    if value_str is None:
        return None

    value_str = value_str.strip().rstrip(".")
    if not value_str:
        return None

    try:
        return float(value_str)
    except ValueError:
        return None


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with halves going away from zero (2.5 -> 3, 24.45 -> 24.5).

    Python's round() uses banker's rounding, which would turn a
    measured 72.5 kg into 72.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def to_int(value: float) -> int:
    """Half-up round to an int."""
    return int(round_half_up(value))


def compact_number(value: float) -> Union[int, float]:
    """Return an int for whole numbers so 180.0 renders as 180."""
    if float(value).is_integer():
        return int(value)
    return value
