# ============================================================================
# src/health_insights/constants/plausibility_ranges.py
# ============================================================================
"""
Plausibility Ranges
- Physically possible bounds for each extracted metric, in canonical units
- A matched value outside its band is discarded (never clamped)

Format: metric -> (min, max, canonical unit), both bounds inclusive
"""

PLAUSIBILITY_RANGES = {
    "height": (50, 250, "cm"),
    "weight": (20, 300, "kg"),
    "sugarLevel": (50, 500, "mg/dL"),
    "cholesterol": (100, 400, "mg/dL"),
    "heartRate": (30, 220, "bpm"),
}
