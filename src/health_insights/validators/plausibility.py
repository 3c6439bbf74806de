# ============================================================================
# src/health_insights/validators/plausibility.py
# ============================================================================
"""
Plausibility Checks

Catches OCR noise and incidental numbers that happen to sit next to a unit.
These are "physically possible" boundaries, not clinical reference ranges.

Example:
- Height 400 cm → FAIL (no such person, probably a misread)
- Height 175 cm → PASS
"""

from typing import Optional, Tuple
import logging

from ..constants import PLAUSIBILITY_RANGES


logger = logging.getLogger(__name__)


class PlausibilityChecker:
    """
    Check if extracted metric values are within plausible ranges.

    Values are expected in canonical units (cm, kg, mg/dL, bpm);
    unit normalisation happens before the check.
    """

    def __init__(self):
        self.ranges = PLAUSIBILITY_RANGES

    def check(
        self,
        metric: str,
        value: float,
        unit: Optional[str] = None
    ) -> Tuple[bool, Optional[str]]:
        """
        Check if value is plausible.

        Args:
            metric: Metric key (e.g. "height", "sugarLevel")
            value: Numeric value in canonical units
            unit: Unit of the value; checked against the canonical unit when given

        Returns:
            (is_plausible, reason_if_not)
        """
        # Metrics without a band (blood pressure) are always plausible
        if metric not in self.ranges:
            return True, None

        min_val, max_val, expected_unit = self.ranges[metric]

        if unit is not None and unit != expected_unit:
            reason = f"Unit mismatch: expected {expected_unit}, got {unit}"
            logger.warning(f"{metric}: {reason}")
            return False, reason

        if value < min_val:
            reason = f"Value {value} below plausible minimum {min_val} {expected_unit}"
            logger.warning(f"{metric}: {reason}")
            return False, reason

        if value > max_val:
            reason = f"Value {value} above plausible maximum {max_val} {expected_unit}"
            logger.warning(f"{metric}: {reason}")
            return False, reason

        return True, None

    def is_plausible(self, metric: str, value: float) -> bool:
        """Predicate form of check(), used by the metric pattern tables."""
        is_plausible, _ = self.check(metric, value)
        return is_plausible

    def get_range(self, metric: str) -> Optional[Tuple[float, float, str]]:
        """
        Get plausibility range for a metric.

        Returns:
            (min, max, unit) or None if the metric has no band
        """
        return self.ranges.get(metric)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def check_plausibility(metric: str, value: float) -> bool:
    """
    Quick plausibility check.

    Returns:
        True if plausible, False otherwise
    """
    return PlausibilityChecker().is_plausible(metric, value)


def get_plausibility_range(metric: str) -> Optional[Tuple[float, float, str]]:
    """
    Get plausibility range for a metric.

    Returns:
        (min, max, unit) or None
    """
    return PlausibilityChecker().get_range(metric)
