# ============================================================================
# src/health_insights/constants/unit_conversions.py
# ============================================================================
"""
Unit Conversion Factors
- Multiply a value in the source unit to get the canonical unit
"""

CM_PER_FOOT = 30.48
CM_PER_INCH = 2.54

KG_PER_POUND = 0.453592

# Glucose molar mass based factor
GLUCOSE_MGDL_PER_MMOLL = 18.0182
