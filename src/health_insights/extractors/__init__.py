# ============================================================================
# src/health_insights/extractors/__init__.py
# ============================================================================
"""
Text recovery: PDF text layers and OCR.
"""

from .ocr_extractor import OCRExtractor, OCRResult
from .text_extractor import TextExtractor, TextExtractionResult
