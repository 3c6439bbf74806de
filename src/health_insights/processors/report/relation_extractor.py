# ============================================================================
# src/health_insights/processors/report/relation_extractor.py
# ============================================================================
"""
Relation Extraction

Derives higher-level medical facts from the transcript and extracted metrics:
- Conditions: threshold rules over metrics + "diagnosed with ..." text rules
- Medications: name, dosage, frequency
- Symptoms: fixed keyword list
- Doctor notes: free-text advice spans
- Trends: "<word> increased / decreased / stable"

The five sub-extractions are independent pure functions of their inputs.
Every search starts fresh (finditer over the whole text); no scanner state
survives between calls.
"""

import logging
import re
from types import MappingProxyType
from typing import Dict, List, Tuple

from ...constants import (
    KNOWN_CONDITIONS,
    SYMPTOM_KEYWORDS,
    TEXT_CONDITION_CONFIDENCE,
    MEDICATION_CONFIDENCE,
    SYMPTOM_CONFIDENCE,
    NOT_SPECIFIED,
)
from ...core.models import Condition, HealthMetrics, Medication, RelationBundle, Symptom


# Phrases stop at punctuation, digits and line breaks
CONDITION_PATTERNS = (
    re.compile(r"\b(?:diagnosed\s+with|suffering\s+from|has)\s+([a-z][a-z \t]*)", re.IGNORECASE),
    re.compile(r"\bcondition[:\s]+([a-z][a-z \t]*)", re.IGNORECASE),
)

# Group 1 name, group 2 dosage, group 3 (first pattern only) frequency
MEDICATION_PATTERNS = (
    re.compile(
        r"\b(?:medication|drug|prescription)[:\s]+([a-z]+)\s+(\d+\s*mg)(?:[ \t]+([^\n]*))?",
        re.IGNORECASE,
    ),
    re.compile(r"\btaking\s+([a-z]+)(?:\s+(\d+\s*mg))?", re.IGNORECASE),
)

DOCTOR_NOTE_PATTERNS = (
    re.compile(r"(?:doctor[’']?s?\s+note|recommendation|advice)[:\s]+([^.!?\n]+)", re.IGNORECASE),
    re.compile(r"(?:suggested|advised|recommended)[:\s]+([^.!?\n]+)", re.IGNORECASE),
)

# Applied in this order; a later assignment for the same token wins
TREND_PATTERNS = (
    ("increasing", re.compile(r"(\w+)\s+(?:increased|risen|went\s+up|higher)", re.IGNORECASE)),
    ("decreasing", re.compile(r"(\w+)\s+(?:decreased|fallen|went\s+down|lower)", re.IGNORECASE)),
    ("stable", re.compile(r"(\w+)\s+(?:stable|unchanged|same)", re.IGNORECASE)),
)


class RelationExtractor:
    """
    Hybrid relation extraction: metric thresholds plus text patterns.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def extract(self, text: str, metrics: HealthMetrics) -> RelationBundle:
        """
        Build the relation bundle for one transcript.

        Args:
            text: Raw transcript
            metrics: Metrics already extracted from the same transcript

        Returns:
            RelationBundle
        """
        bundle = RelationBundle(
            conditions=self.extract_conditions(text, metrics),
            medications=self.extract_medications(text),
            symptoms=self.extract_symptoms(text),
            doctor_notes=self.extract_doctor_notes(text),
            trends=self.extract_trends(text),
        )

        self.logger.info(
            f"Relations: {len(bundle.conditions)} conditions, "
            f"{len(bundle.medications)} medications, {len(bundle.symptoms)} symptoms, "
            f"{len(bundle.doctor_notes)} notes, {len(bundle.trends)} trends"
        )
        return bundle

    # ========================================================================
    # CONDITIONS
    # ========================================================================

    def extract_conditions(self, text: str, metrics: HealthMetrics) -> Tuple[Condition, ...]:
        """Threshold conditions first, then text-derived conditions."""
        conditions = self._conditions_from_metrics(metrics)

        for phrase in self._condition_phrases(text):
            conditions.append(Condition(
                name=phrase,
                source="text",
                confidence=TEXT_CONDITION_CONFIDENCE,
            ))

        return tuple(conditions)

    def _conditions_from_metrics(self, metrics: HealthMetrics) -> List[Condition]:
        conditions = []

        sugar = metrics.sugar_level
        if sugar is not None:
            if sugar.value >= 126:
                conditions.append(Condition(
                    name="Diabetes",
                    related_metric="sugarLevel",
                    severity="high",
                    confidence=0.9,
                ))
            elif sugar.value >= 100:
                conditions.append(Condition(
                    name="Pre-diabetes",
                    related_metric="sugarLevel",
                    severity="medium",
                    confidence=0.85,
                ))

        bp = metrics.blood_pressure
        if bp is not None and (bp.systolic >= 140 or bp.diastolic >= 90):
            conditions.append(Condition(
                name="Hypertension",
                related_metric="bloodPressure",
                severity="high",
                confidence=0.9,
            ))

        bmi = metrics.bmi
        if bmi is not None:
            if bmi.value >= 30:
                conditions.append(Condition(
                    name="Obesity",
                    related_metric="bmi",
                    severity="high",
                    confidence=0.95,
                ))
            elif bmi.value >= 25:
                conditions.append(Condition(
                    name="Overweight",
                    related_metric="bmi",
                    severity="medium",
                    confidence=0.95,
                ))

        return conditions

    def _condition_phrases(self, text: str) -> List[str]:
        """Known-condition phrases in first-seen order, exact duplicates removed."""
        phrases: Dict[str, None] = {}

        for pattern in CONDITION_PATTERNS:
            for match in pattern.finditer(text):
                phrase = match.group(1).strip().lower()
                if any(known in phrase for known in KNOWN_CONDITIONS):
                    phrases.setdefault(phrase, None)

        return list(phrases)

    # ========================================================================
    # MEDICATIONS
    # ========================================================================

    def extract_medications(self, text: str) -> Tuple[Medication, ...]:
        medications = []

        for pattern in MEDICATION_PATTERNS:
            for match in pattern.finditer(text):
                groups = match.groups()
                dosage = groups[1] if len(groups) > 1 else None
                frequency = groups[2] if len(groups) > 2 else None
                frequency = frequency.strip() if frequency else None

                medications.append(Medication(
                    name=match.group(1),
                    dosage=dosage or NOT_SPECIFIED,
                    frequency=frequency or NOT_SPECIFIED,
                    confidence=MEDICATION_CONFIDENCE,
                ))

        return tuple(medications)

    # ========================================================================
    # SYMPTOMS
    # ========================================================================

    def extract_symptoms(self, text: str) -> Tuple[Symptom, ...]:
        lower_text = text.lower()
        return tuple(
            Symptom(name=keyword, confidence=SYMPTOM_CONFIDENCE)
            for keyword in SYMPTOM_KEYWORDS
            if keyword in lower_text
        )

    # ========================================================================
    # DOCTOR NOTES
    # ========================================================================

    def extract_doctor_notes(self, text: str) -> Tuple[str, ...]:
        notes = []

        for pattern in DOCTOR_NOTE_PATTERNS:
            for match in pattern.finditer(text):
                note = match.group(1).strip()
                if note:
                    notes.append(note)

        return tuple(notes)

    # ========================================================================
    # TRENDS
    # ========================================================================

    def extract_trends(self, text: str) -> MappingProxyType:
        trends: Dict[str, str] = {}

        for direction, pattern in TREND_PATTERNS:
            for match in pattern.finditer(text):
                trends[match.group(1)] = direction

        return MappingProxyType(trends)
