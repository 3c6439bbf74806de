# ============================================================================
# src/health_insights/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .plausibility_ranges import PLAUSIBILITY_RANGES
from .unit_conversions import (
    CM_PER_FOOT,
    CM_PER_INCH,
    KG_PER_POUND,
    GLUCOSE_MGDL_PER_MMOLL,
)
from .clinical_vocabulary import (
    KNOWN_CONDITIONS,
    SYMPTOM_KEYWORDS,
    TEXT_CONDITION_CONFIDENCE,
    MEDICATION_CONFIDENCE,
    SYMPTOM_CONFIDENCE,
    METRIC_CONFIDENCE,
    DEFAULT_CONDITION_CONFIDENCE,
    NOT_SPECIFIED,
)
from .media_types import PDF_MEDIA_TYPE, IMAGE_MEDIA_PREFIX, normalize_media_type
