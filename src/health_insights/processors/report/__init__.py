# ============================================================================
# src/health_insights/processors/report/__init__.py
# ============================================================================
"""
Health Report Processor

Stages (each a pure function of its inputs):
- MetricExtractor: pattern tables -> HealthMetrics
- RelationExtractor: conditions, medications, symptoms, notes, trends
- RecommendationEngine: rule cascade -> RecommendationSet
- summarize_health: plain-language summary of stored metrics
"""

from .metric_extractor import MetricExtractor
from .relation_extractor import RelationExtractor
from .recommendation_engine import RecommendationEngine
from .health_summary import HealthSummary, summarize_health
from .status import bp_status, sugar_status, bmi_status, compute_bmi

__all__ = [
    "MetricExtractor",
    "RelationExtractor",
    "RecommendationEngine",
    "HealthSummary",
    "summarize_health",
    "bp_status",
    "sugar_status",
    "bmi_status",
    "compute_bmi",
]
