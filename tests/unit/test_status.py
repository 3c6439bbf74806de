# ============================================================================
# FILE: tests/unit/test_status.py
# ============================================================================
"""
Unit tests for clinical status tiers and BMI
"""

import pytest

from health_insights.processors.report.status import (
    bmi_status,
    bp_status,
    compute_bmi,
    sugar_status,
)


@pytest.mark.parametrize("systolic,diastolic,expected", [
    (119, 79, "Normal"),
    (120, 79, "Elevated"),
    (129, 79, "Elevated"),
    (130, 79, "High BP Stage 1"),
    (120, 80, "High BP Stage 1"),
    (139, 89, "High BP Stage 1"),
    (140, 90, "High BP Stage 2"),
    (179, 119, "High BP Stage 2"),
    (180, 120, "Hypertensive Crisis"),
])
def test_bp_status_boundaries(systolic, diastolic, expected):
    """Test each blood pressure tier boundary"""
    assert bp_status(systolic, diastolic) == expected


@pytest.mark.parametrize("value,expected", [
    (99, "Normal"),
    (100, "Pre-diabetes"),
    (125, "Pre-diabetes"),
    (126, "Diabetes"),
])
def test_sugar_status_boundaries(value, expected):
    """Test fasting glucose tiers"""
    assert sugar_status(value) == expected


@pytest.mark.parametrize("bmi,expected", [
    (18.4, "Underweight"),
    (18.5, "Normal"),
    (24.9, "Normal"),
    (25.0, "Overweight"),
    (29.9, "Overweight"),
    (30.0, "Obese"),
])
def test_bmi_status_boundaries(bmi, expected):
    """Test BMI tiers"""
    assert bmi_status(bmi) == expected


def test_compute_bmi():
    """Test BMI is weight / height² rounded to one decimal"""
    assert compute_bmi(175, 75) == 24.5
    assert compute_bmi(170, 93) == 32.2


def test_compute_bmi_rounds_half_up():
    """Test BMI halves round up"""
    # 97 / 2.0² = 24.25 exactly
    assert compute_bmi(200, 97) == 24.3


def test_compute_bmi_zero_height():
    """Test non-positive height gives no BMI"""
    assert compute_bmi(0, 70) is None
