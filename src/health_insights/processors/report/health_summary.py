# ============================================================================
# src/health_insights/processors/report/health_summary.py
# ============================================================================
"""
Plain-language summary of a metric set: one summary line per metric,
a warning for anything outside the normal tier, and generic follow-up
advice. Works on stored metrics, so it can be re-run without the transcript.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ...core.models import HealthMetrics


@dataclass
class HealthSummary:
    summary: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": list(self.summary),
            "warnings": list(self.warnings),
            "recommendations": list(self.recommendations),
        }


def summarize_health(metrics: HealthMetrics) -> HealthSummary:
    """Summarise BMI, blood pressure and blood sugar."""
    result = HealthSummary()

    bmi = metrics.bmi
    if bmi is not None:
        result.summary.append(f"Your BMI is {bmi.value}, which is considered {bmi.status}")
        if bmi.status != "Normal":
            result.warnings.append(f"BMI is {bmi.status.lower()}")
            if bmi.status in ("Overweight", "Obese"):
                result.recommendations.append(
                    "Consider a balanced diet and regular exercise to achieve a healthy weight"
                )

    bp = metrics.blood_pressure
    if bp is not None:
        result.summary.append(f"Blood pressure: {bp.systolic}/{bp.diastolic} {bp.unit} ({bp.status})")
        if bp.status != "Normal":
            result.warnings.append(f"Blood pressure is {bp.status}")
            result.recommendations.append("Monitor blood pressure regularly and consult a cardiologist")
            result.recommendations.append("Reduce salt intake and manage stress levels")

    sugar = metrics.sugar_level
    if sugar is not None:
        result.summary.append(f"Blood sugar: {sugar.value} {sugar.unit} ({sugar.status})")
        if sugar.status != "Normal":
            result.warnings.append(f"Blood sugar is {sugar.status}")
            result.recommendations.append("Consult an endocrinologist for proper diabetes management")
            result.recommendations.append("Monitor carbohydrate intake and maintain regular meal times")

    return result
