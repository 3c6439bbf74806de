# ============================================================================
# src/health_insights/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the health report analyzer.

Only document-level failures are exceptions. Pattern matching never raises:
an unmatched or implausible value is simply absent from the result.
"""

from typing import Optional


class HealthInsightsError(Exception):
    """Base exception for all health report analysis errors."""
    pass


class DocumentProcessingError(HealthInsightsError):
    """Error turning an uploaded document into an analysis."""
    pass


class UnsupportedMediaTypeError(DocumentProcessingError):
    """Declared media type is neither a PDF nor an image."""
    def __init__(self, media_type: Optional[str]):
        super().__init__(f"Unsupported media type: {media_type!r} (expected application/pdf or image/*)")
        self.media_type = media_type


class ExtractionFailureError(DocumentProcessingError):
    """PDF parsing or OCR raised while recovering text."""
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class EmptyTranscriptError(DocumentProcessingError):
    """Text recovery succeeded but produced no usable text."""
    def __init__(self, message: str = "No text could be extracted from the document"):
        super().__init__(message)
