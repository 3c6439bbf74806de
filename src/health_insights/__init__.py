# ============================================================================
# src/health_insights/__init__.py
# ============================================================================
"""
Health report analysis: OCR text recovery, metric and relation extraction,
personalised recommendations and a confidence score.

Example:
    from health_insights import analyze

    result = analyze(Path("report.pdf").read_bytes(), "application/pdf")
    print(result.to_dict())
"""

__version__ = "0.1.0"

# core must load before processors.report (core.confidence imports report utils)
from .core.orchestrator import ReportOrchestrator, analyze
from .core.models import AnalysisResult, HealthMetrics, RelationBundle, RecommendationSet
from .utils.exceptions import (
    HealthInsightsError,
    DocumentProcessingError,
    UnsupportedMediaTypeError,
    ExtractionFailureError,
    EmptyTranscriptError,
)

__all__ = [
    "ReportOrchestrator",
    "analyze",
    "AnalysisResult",
    "HealthMetrics",
    "RelationBundle",
    "RecommendationSet",
    "HealthInsightsError",
    "DocumentProcessingError",
    "UnsupportedMediaTypeError",
    "ExtractionFailureError",
    "EmptyTranscriptError",
]
