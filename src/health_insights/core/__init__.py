# ============================================================================
# src/health_insights/core/__init__.py
# ============================================================================
"""
Core components for the health report analyzer.
"""

from .models import (
    Metric,
    BloodPressure,
    HealthMetrics,
    Condition,
    Medication,
    Symptom,
    RelationBundle,
    WalkingGoal,
    RecommendationSet,
    AnalysisResult,
)
from .confidence import ConfidenceScorer
