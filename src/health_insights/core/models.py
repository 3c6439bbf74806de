# ============================================================================
# src/health_insights/core/models.py
# ============================================================================
"""
Analysis data model
- Metrics (typed, unit-normalised measurements)
- Relation bundle (conditions, medications, symptoms, notes, trends)
- Recommendation set
- Analysis result

Every structure is a frozen dataclass. Stages build new objects and never
mutate what an earlier stage produced. to_dict() renders the wire shape
(camelCase keys, absent values omitted).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Metric:
    """A single numeric measurement, e.g. height 175 cm."""
    value: Union[int, float]
    unit: str
    status: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"value": self.value, "unit": self.unit}
        if self.status is not None:
            data["status"] = self.status
        return data


@dataclass(frozen=True)
class BloodPressure:
    """Systolic/diastolic pair in mmHg."""
    systolic: int
    diastolic: int
    status: str
    unit: str = "mmHg"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "systolic": self.systolic,
            "diastolic": self.diastolic,
            "unit": self.unit,
            "status": self.status,
        }


@dataclass(frozen=True)
class HealthMetrics:
    """
    The fixed metric set for one transcript.

    None means no valid match; it is never confused with a zero value.
    bmi is derived from height and weight, never pattern-matched.
    """
    height: Optional[Metric] = None
    weight: Optional[Metric] = None
    blood_pressure: Optional[BloodPressure] = None
    sugar_level: Optional[Metric] = None
    cholesterol: Optional[Metric] = None
    heart_rate: Optional[Metric] = None
    bmi: Optional[Metric] = None

    # Attribute name -> wire key, in output order
    KEYS = (
        ("height", "height"),
        ("weight", "weight"),
        ("blood_pressure", "bloodPressure"),
        ("sugar_level", "sugarLevel"),
        ("cholesterol", "cholesterol"),
        ("heart_rate", "heartRate"),
        ("bmi", "bmi"),
    )

    def present(self) -> Dict[str, Union[Metric, BloodPressure]]:
        """Present metrics keyed by wire name."""
        found = {}
        for attr, key in self.KEYS:
            value = getattr(self, attr)
            if value is not None:
                found[key] = value
        return found

    def __len__(self) -> int:
        return len(self.present())

    def to_dict(self) -> Dict[str, Any]:
        return {key: metric.to_dict() for key, metric in self.present().items()}


@dataclass(frozen=True)
class Condition:
    """Inferred medical finding, either threshold-derived or found in text."""
    name: str
    confidence: float
    severity: Optional[str] = None
    related_metric: Optional[str] = None
    source: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if self.related_metric is not None:
            data["relatedMetric"] = self.related_metric
        if self.severity is not None:
            data["severity"] = self.severity
        if self.source is not None:
            data["source"] = self.source
        data["confidence"] = self.confidence
        return data


@dataclass(frozen=True)
class Medication:
    name: str
    dosage: str
    frequency: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class Symptom:
    name: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "confidence": self.confidence}


@dataclass(frozen=True)
class RelationBundle:
    conditions: Tuple[Condition, ...] = ()
    medications: Tuple[Medication, ...] = ()
    symptoms: Tuple[Symptom, ...] = ()
    doctor_notes: Tuple[str, ...] = ()
    # token -> "increasing" | "decreasing" | "stable"
    trends: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "conditions": [c.to_dict() for c in self.conditions],
            "medications": [m.to_dict() for m in self.medications],
            "symptoms": [s.to_dict() for s in self.symptoms],
            "doctorNotes": list(self.doctor_notes),
            "trends": dict(self.trends),
        }


@dataclass(frozen=True)
class WalkingGoal:
    steps: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"steps": self.steps, "description": self.description}


@dataclass(frozen=True)
class RecommendationSet:
    """Advice lists are ordered and may contain repeats."""
    exercise: Tuple[str, ...] = ()
    diet: Tuple[str, ...] = ()
    medical: Tuple[str, ...] = ()
    summary: Tuple[str, ...] = ()
    walking_goal: Optional[WalkingGoal] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exercise": list(self.exercise),
            "diet": list(self.diet),
            "walkingGoal": self.walking_goal.to_dict() if self.walking_goal else None,
            "medical": list(self.medical),
            "summary": list(self.summary),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Terminal artifact of one analysis; the caller owns and persists it."""
    raw_text: str
    metrics: HealthMetrics
    relations: RelationBundle
    recommendations: RecommendationSet
    extracted_at: datetime
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        metrics = self.metrics.to_dict()
        return {
            "rawText": self.raw_text,
            "healthMetrics": metrics,
            "relations": self.relations.to_dict(),
            "recommendations": self.recommendations.to_dict(),
            "extractedAt": self.extracted_at.isoformat(),
            # Fraction shown with exactly two decimals, e.g. "0.90"
            "confidence": f"{self.confidence:.2f}",
            "metricsFound": list(metrics),
            "extractedMetrics": len(metrics),
        }
