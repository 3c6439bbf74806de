# ============================================================================
# src/health_insights/processors/report/metric_extractor.py
# ============================================================================
"""
Metric Extraction

Recovers the fixed set of clinical measurements from an OCR transcript:
height, weight, blood pressure, blood sugar, cholesterol, heart rate,
plus BMI derived from height and weight.

Strategy: first valid match wins.
For each metric the ordered pattern table (see patterns.py) is walked; the
first pattern whose first match normalises to a plausible value is used and
nothing later is consulted. When a report contains two differently labelled
values for the same metric, pattern priority decides, not position in the
text.

Extraction never fails. No match means the metric is absent.
"""

import logging
from typing import Any, Optional, Tuple

from ...core.models import BloodPressure, HealthMetrics, Metric
from .patterns import METRIC_PATTERNS, MetricPattern
from .status import bmi_status, bp_status, compute_bmi, sugar_status
from .utils.parsing import compact_number, to_int


class MetricExtractor:
    """
    Pattern-table driven metric extraction.

    Holds no per-call state, so the same transcript always yields an
    identical HealthMetrics.
    """

    def __init__(self, patterns=None):
        self.patterns = patterns or METRIC_PATTERNS
        self.logger = logging.getLogger(__name__)

    def extract(self, text: str) -> HealthMetrics:
        """
        Extract all metrics from a transcript.

        Args:
            text: Raw transcript

        Returns:
            HealthMetrics with absent metrics left as None
        """
        height = self._height(text)
        weight = self._weight(text)

        bmi = None
        if height is not None and weight is not None:
            bmi = self._bmi(height, weight)

        metrics = HealthMetrics(
            height=height,
            weight=weight,
            blood_pressure=self._blood_pressure(text),
            sugar_level=self._sugar_level(text),
            cholesterol=self._cholesterol(text),
            heart_rate=self._heart_rate(text),
            bmi=bmi,
        )

        self.logger.info(
            f"Extracted {len(metrics)} metrics: {', '.join(metrics.present()) or 'none'}"
        )
        return metrics

    # ========================================================================
    # MATCHING
    # ========================================================================

    def first_valid_match(self, metric: str, text: str) -> Optional[Any]:
        """
        Walk the pattern table for a metric.

        Returns:
            The first plausible normalised value, or None
        """
        rows: Tuple[MetricPattern, ...] = self.patterns.get(metric, ())

        for index, row in enumerate(rows):
            match = row.regex.search(text)
            if not match:
                continue

            value = row.normalize(match)
            if value is None:
                continue

            if row.plausible(value):
                self.logger.debug(f"{metric}: pattern #{index} matched {match.group(0)!r}")
                return value

            self.logger.debug(f"{metric}: pattern #{index} value {value} rejected as implausible")

        return None

    # ========================================================================
    # PER-METRIC BUILDERS
    # ========================================================================

    def _height(self, text: str) -> Optional[Metric]:
        value = self.first_valid_match("height", text)
        if value is None:
            return None
        return Metric(value=to_int(value), unit="cm")

    def _weight(self, text: str) -> Optional[Metric]:
        value = self.first_valid_match("weight", text)
        if value is None:
            return None
        return Metric(value=to_int(value), unit="kg")

    def _blood_pressure(self, text: str) -> Optional[BloodPressure]:
        pair = self.first_valid_match("bloodPressure", text)
        if pair is None:
            return None
        systolic, diastolic = pair
        return BloodPressure(
            systolic=systolic,
            diastolic=diastolic,
            status=bp_status(systolic, diastolic),
        )

    def _sugar_level(self, text: str) -> Optional[Metric]:
        value = self.first_valid_match("sugarLevel", text)
        if value is None:
            return None
        # Classified on the reported (rounded) value so status and conditions
        # agree with the number shown: 99.6 reports as 100, Pre-diabetes
        value = to_int(value)
        return Metric(value=value, unit="mg/dL", status=sugar_status(value))

    def _cholesterol(self, text: str) -> Optional[Metric]:
        value = self.first_valid_match("cholesterol", text)
        if value is None:
            return None
        return Metric(value=compact_number(value), unit="mg/dL")

    def _heart_rate(self, text: str) -> Optional[Metric]:
        value = self.first_valid_match("heartRate", text)
        if value is None:
            return None
        return Metric(value=int(value), unit="bpm")

    def _bmi(self, height: Metric, weight: Metric) -> Optional[Metric]:
        bmi = compute_bmi(height.value, weight.value)
        if bmi is None:
            return None
        return Metric(value=bmi, unit="kg/m²", status=bmi_status(bmi))
