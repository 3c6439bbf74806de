# ============================================================================
# src/health_insights/constants/clinical_vocabulary.py
# ============================================================================
"""
Clinical Vocabulary
- Condition names recognised in free text
- Symptom keywords
- Per-source confidence for relation entities
"""

# A free-text condition phrase is kept only if it contains one of these
KNOWN_CONDITIONS = (
    "diabetes",
    "hypertension",
    "high blood pressure",
    "obesity",
    "cholesterol",
    "heart disease",
    "asthma",
    "arthritis",
)

SYMPTOM_KEYWORDS = (
    "headache",
    "dizziness",
    "fatigue",
    "pain",
    "nausea",
    "shortness of breath",
    "chest pain",
    "weakness",
    "fever",
)

# Confidence assigned to entities found by text patterns
TEXT_CONDITION_CONFIDENCE = 0.7
MEDICATION_CONFIDENCE = 0.8
SYMPTOM_CONFIDENCE = 0.75

# Weight every extracted metric contributes to overall confidence
METRIC_CONFIDENCE = 0.9
DEFAULT_CONDITION_CONFIDENCE = 0.7

NOT_SPECIFIED = "not specified"
