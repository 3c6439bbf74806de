# ============================================================================
# FILE: tests/unit/test_health_summary.py
# ============================================================================
"""
Unit tests for the plain-language health summary
"""

from health_insights.core.models import BloodPressure, HealthMetrics, Metric
from health_insights.processors.report.health_summary import summarize_health


def test_summary_for_normal_metrics():
    """Test normal metrics give summaries and no warnings"""
    metrics = HealthMetrics(
        bmi=Metric(22.1, "kg/m²", "Normal"),
        blood_pressure=BloodPressure(115, 75, "Normal"),
        sugar_level=Metric(90, "mg/dL", "Normal"),
    )

    summary = summarize_health(metrics)

    assert summary.summary == [
        "Your BMI is 22.1, which is considered Normal",
        "Blood pressure: 115/75 mmHg (Normal)",
        "Blood sugar: 90 mg/dL (Normal)",
    ]
    assert summary.warnings == []
    assert summary.recommendations == []


def test_summary_warnings():
    """Test abnormal metrics add warnings and advice"""
    metrics = HealthMetrics(
        bmi=Metric(31.0, "kg/m²", "Obese"),
        blood_pressure=BloodPressure(150, 95, "High BP Stage 2"),
        sugar_level=Metric(130, "mg/dL", "Diabetes"),
    )

    summary = summarize_health(metrics)

    assert summary.warnings == [
        "BMI is obese",
        "Blood pressure is High BP Stage 2",
        "Blood sugar is Diabetes",
    ]
    assert len(summary.recommendations) == 5


def test_underweight_has_no_weight_advice():
    """Test only overweight and obese get the weight recommendation"""
    summary = summarize_health(HealthMetrics(bmi=Metric(17.0, "kg/m²", "Underweight")))

    assert summary.warnings == ["BMI is underweight"]
    assert summary.recommendations == []


def test_summary_empty_metrics():
    """Test nothing to summarise"""
    assert summarize_health(HealthMetrics()).to_dict() == {
        "summary": [],
        "warnings": [],
        "recommendations": [],
    }
