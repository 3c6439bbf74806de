# ============================================================================
# src/health_insights/processors/report/status.py
# ============================================================================
"""
Clinical status classification
- Blood pressure (5 tiers)
- Fasting glucose (3 tiers)
- BMI (4 tiers)

Each tier table is checked top to bottom; the first matching row wins.
"""

from typing import Optional

from .utils.parsing import round_half_up

BP_NORMAL = "Normal"
BP_ELEVATED = "Elevated"
BP_STAGE_1 = "High BP Stage 1"
BP_STAGE_2 = "High BP Stage 2"
BP_CRISIS = "Hypertensive Crisis"

SUGAR_NORMAL = "Normal"
SUGAR_PREDIABETES = "Pre-diabetes"
SUGAR_DIABETES = "Diabetes"

BMI_UNDERWEIGHT = "Underweight"
BMI_NORMAL = "Normal"
BMI_OVERWEIGHT = "Overweight"
BMI_OBESE = "Obese"


def bp_status(systolic: int, diastolic: int) -> str:
    """Classify a blood pressure reading (mmHg)."""
    if systolic < 120 and diastolic < 80:
        return BP_NORMAL
    if systolic < 130 and diastolic < 80:
        return BP_ELEVATED
    if systolic < 140 or diastolic < 90:
        return BP_STAGE_1
    if systolic < 180 or diastolic < 120:
        return BP_STAGE_2
    return BP_CRISIS


def sugar_status(value: float) -> str:
    """Classify a blood glucose value (mg/dL)."""
    if value < 100:
        return SUGAR_NORMAL
    if value < 126:
        return SUGAR_PREDIABETES
    return SUGAR_DIABETES


def bmi_status(bmi: float) -> str:
    """Classify a BMI value."""
    if bmi < 18.5:
        return BMI_UNDERWEIGHT
    if bmi < 25:
        return BMI_NORMAL
    if bmi < 30:
        return BMI_OVERWEIGHT
    return BMI_OBESE


def compute_bmi(height_cm: float, weight_kg: float) -> Optional[float]:
    """
    BMI rounded to one decimal place.

    Returns None for a non-positive height.
    """
    if height_cm <= 0:
        return None
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)
