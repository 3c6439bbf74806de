# ============================================================================
# src/health_insights/core/confidence.py
# ============================================================================
"""
Confidence Scoring

Single scalar reliability for one analysis: the mean of
- a fixed weight for every present metric
- the stored confidence of every condition

0.0 when nothing was extracted. Rounded half-up to two decimals.
"""

import statistics
from typing import List

from ..constants import DEFAULT_CONDITION_CONFIDENCE, METRIC_CONFIDENCE
from ..processors.report.utils.parsing import round_half_up
from .models import HealthMetrics, RelationBundle


class ConfidenceScorer:
    """
    Aggregates per-metric and per-condition confidences.
    """

    def __init__(self, metric_weight: float = METRIC_CONFIDENCE):
        self.metric_weight = metric_weight

    def score(self, metrics: HealthMetrics, relations: RelationBundle) -> float:
        """
        Calculate overall confidence.

        Args:
            metrics: Extracted metrics (bmi counts as a metric)
            relations: Relation bundle; only conditions contribute

        Returns:
            Confidence in [0.0, 1.0]
        """
        scores = self.collect_scores(metrics, relations)
        if not scores:
            return 0.0
        return round_half_up(statistics.mean(scores), 2)

    def collect_scores(self, metrics: HealthMetrics, relations: RelationBundle) -> List[float]:
        scores = [self.metric_weight] * len(metrics)
        for condition in relations.conditions:
            confidence = condition.confidence
            if confidence is None:
                confidence = DEFAULT_CONDITION_CONFIDENCE
            scores.append(confidence)
        return scores
