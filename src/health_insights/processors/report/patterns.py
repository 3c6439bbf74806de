# ============================================================================
# src/health_insights/processors/report/patterns.py
# ============================================================================
"""
Metric Pattern Tables

Each metric kind has an ORDERED tuple of candidate patterns. The extractor
takes the first pattern whose first match normalises to a plausible value.
Labelled forms ("Height: 175cm") come before bare forms ("175 cm") so an
explicit label always beats an incidental number elsewhere in the text.
Reordering rows changes results on ambiguous reports.

A row is (regex, normalize, plausible):
- regex:     compiled, case-insensitive
- normalize: match -> value in canonical units, or None if unusable
- plausible: canonical value -> bool

New report formats are supported by adding rows, not control flow.
"""

import re
from re import Match, Pattern
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from ...constants import (
    CM_PER_FOOT,
    CM_PER_INCH,
    KG_PER_POUND,
    GLUCOSE_MGDL_PER_MMOLL,
)
from ...validators.plausibility import PlausibilityChecker
from .utils.parsing import parse_number


class MetricPattern(NamedTuple):
    regex: Pattern[str]
    normalize: Callable[[Match[str]], Optional[Any]]
    plausible: Callable[[Any], bool]


_checker = PlausibilityChecker()

# Shared fragments. Adjacent quantifiers must not overlap (e.g. \s* then
# [:\s]+), or long whitespace runs after a label backtrack without bound.
_NUM = r"(\d+(?:\.\d*)?)"
_SEP = r"[:\s]+"


def _rx(pattern: str) -> Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def _within_band(metric: str) -> Callable[[Any], bool]:
    return lambda value: _checker.is_plausible(metric, value)


def _any_value(value: Any) -> bool:
    return True


# ============================================================================
# NORMALISERS
# ============================================================================

def _first_number(match: Match[str]) -> Optional[float]:
    return parse_number(match.group(1))


def _feet_inches_to_cm(match: Match[str]) -> Optional[float]:
    feet = parse_number(match.group(1))
    if feet is None:
        return None
    inches = parse_number(match.group(2)) or 0.0
    return feet * CM_PER_FOOT + inches * CM_PER_INCH


def _weight_to_kg(match: Match[str]) -> Optional[float]:
    value = parse_number(match.group(1))
    if value is None:
        return None
    unit = match.group(2).lower()
    if unit in ("lb", "lbs", "pounds"):
        return value * KG_PER_POUND
    return value


def _glucose_to_mgdl(match: Match[str]) -> Optional[float]:
    value = parse_number(match.group(1))
    if value is None:
        return None
    unit = (match.group(2) or "mg/dl").lower()
    if unit == "mmol/l":
        return value * GLUCOSE_MGDL_PER_MMOLL
    return value


def _pressure_pair(match: Match[str]) -> Tuple[int, int]:
    return int(match.group(1)), int(match.group(2))


# ============================================================================
# PATTERN TABLES
# ============================================================================

HEIGHT_PATTERNS = (
    MetricPattern(
        _rx(r"height" + _SEP + _NUM + r"\s*(?:cm|centimeter)"),
        _first_number,
        _within_band("height"),
    ),
    # 5'9" / 5′ 9″
    MetricPattern(
        _rx(r"height" + _SEP + r"(\d+)\s*['′]\s*(\d+)?\s*[\"″]?"),
        _feet_inches_to_cm,
        _within_band("height"),
    ),
    # Bare "175 cm", unless cholesterol is mentioned later on the line
    MetricPattern(
        _rx(_NUM + r"\s*(?:cm|centimeter)(?!.*cholesterol)"),
        _first_number,
        _within_band("height"),
    ),
)

WEIGHT_PATTERNS = (
    MetricPattern(
        _rx(r"weight" + _SEP + _NUM + r"\s*(kg|kilogram|lbs|lb|pounds)"),
        _weight_to_kg,
        _within_band("weight"),
    ),
    # Bare "75 kg" with no other number after it on the line
    MetricPattern(
        _rx(_NUM + r"\s*(kg|kilogram)(?!.*\d)"),
        _weight_to_kg,
        _within_band("weight"),
    ),
)

BLOOD_PRESSURE_PATTERNS = (
    MetricPattern(
        _rx(r"blood\s*pressure[:\s]+(\d+)\s*/\s*(\d+)"),
        _pressure_pair,
        _any_value,
    ),
    MetricPattern(
        _rx(r"\bbp[:\s]+(\d+)\s*/\s*(\d+)"),
        _pressure_pair,
        _any_value,
    ),
    MetricPattern(
        _rx(r"(\d+)\s*/\s*(\d+)\s*mmhg"),
        _pressure_pair,
        _any_value,
    ),
)

_GLUCOSE_UNIT = r"\s*(mg/dl|mmol/l)?"

SUGAR_LEVEL_PATTERNS = (
    MetricPattern(
        _rx(r"blood\s*sugar\s*(?:\(\s*)?fasting(?:\s*\))?" + _SEP + _NUM + _GLUCOSE_UNIT),
        _glucose_to_mgdl,
        _within_band("sugarLevel"),
    ),
    # "Blood Sugar: 95", "Sugar Level (PP): 140 mg/dL"
    MetricPattern(
        _rx(r"(?:blood\s*sugar|sugar\s*level)(?:\s*\([^)\n]*\))?" + _SEP + _NUM + _GLUCOSE_UNIT),
        _glucose_to_mgdl,
        _within_band("sugarLevel"),
    ),
    MetricPattern(
        _rx(r"fasting\s*(?:blood\s*)?glucose" + _SEP + _NUM + _GLUCOSE_UNIT),
        _glucose_to_mgdl,
        _within_band("sugarLevel"),
    ),
    MetricPattern(
        _rx(r"glucose" + _SEP + _NUM + _GLUCOSE_UNIT),
        _glucose_to_mgdl,
        _within_band("sugarLevel"),
    ),
    MetricPattern(
        _rx(_NUM + r"\s*mg/dl\s*(?:glucose|sugar)"),
        _first_number,
        _within_band("sugarLevel"),
    ),
)

CHOLESTEROL_PATTERNS = (
    MetricPattern(
        _rx(r"cholesterol\s*(?:\(\s*)?total(?:\s*\))?" + _SEP + _NUM),
        _first_number,
        _within_band("cholesterol"),
    ),
    MetricPattern(
        _rx(r"total\s*cholesterol" + _SEP + _NUM),
        _first_number,
        _within_band("cholesterol"),
    ),
    MetricPattern(
        _rx(r"cholesterol" + _SEP + _NUM),
        _first_number,
        _within_band("cholesterol"),
    ),
    MetricPattern(
        _rx(_NUM + r"\s*mg/dl\s*cholesterol"),
        _first_number,
        _within_band("cholesterol"),
    ),
)

HEART_RATE_PATTERNS = (
    MetricPattern(
        _rx(r"heart\s*rate" + _SEP + r"(\d+)"),
        _first_number,
        _within_band("heartRate"),
    ),
    MetricPattern(
        _rx(r"pulse" + _SEP + r"(\d+)"),
        _first_number,
        _within_band("heartRate"),
    ),
    MetricPattern(
        _rx(r"(\d+)\s*beats?\s*per\s*minute"),
        _first_number,
        _within_band("heartRate"),
    ),
    MetricPattern(
        _rx(r"(\d+)\s*bpm"),
        _first_number,
        _within_band("heartRate"),
    ),
)

# Extraction order; bmi is derived and has no patterns
METRIC_PATTERNS: Dict[str, Tuple[MetricPattern, ...]] = {
    "height": HEIGHT_PATTERNS,
    "weight": WEIGHT_PATTERNS,
    "bloodPressure": BLOOD_PRESSURE_PATTERNS,
    "sugarLevel": SUGAR_LEVEL_PATTERNS,
    "cholesterol": CHOLESTEROL_PATTERNS,
    "heartRate": HEART_RATE_PATTERNS,
}
