# ============================================================================
# src/health_insights/utils/__init__.py
# ============================================================================
"""
Utility modules for the health report analyzer.
"""

from .exceptions import (
    HealthInsightsError,
    DocumentProcessingError,
    UnsupportedMediaTypeError,
    ExtractionFailureError,
    EmptyTranscriptError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

from .image_utils import load_image_for_ocr

__all__ = [
    # Exceptions
    'HealthInsightsError',
    'DocumentProcessingError',
    'UnsupportedMediaTypeError',
    'ExtractionFailureError',
    'EmptyTranscriptError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
    # Images
    'load_image_for_ocr',
]
