# ============================================================================
# src/health_insights/config/analysis_config.py
# ============================================================================
"""
Analysis Settings
- Transcript preview length
- OCR language and rendering resolution
- Scanned-page detection for PDFs

Clinical thresholds and plausibility bands are NOT configurable;
they live in health_insights.constants.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    TRANSCRIPT_PREVIEW_CHARS: int = Field(
        default=500,
        ge=0,
        description="Number of transcript characters kept in the analysis result"
    )
    OCR_LANGUAGE: str = Field(
        default="eng",
        description="Tesseract language code used for image and scanned-page OCR"
    )
    OCR_DPI: int = Field(
        default=200,
        ge=72, le=600,
        description="Resolution for rendering scanned PDF pages before OCR"
    )
    MIN_PDF_TEXT_CHARS: int = Field(
        default=20,
        ge=0,
        description="PDF pages with a shorter text layer are treated as scanned and OCR'd"
    )


analysis_settings = AnalysisSettings()
