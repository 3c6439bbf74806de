# ============================================================================
# src/health_insights/constants/media_types.py
# ============================================================================
"""
Accepted upload media types
"""

from typing import Optional

PDF_MEDIA_TYPE = "application/pdf"
IMAGE_MEDIA_PREFIX = "image/"


def normalize_media_type(media_type: Optional[str]) -> str:
    """Lower-case a media type and drop parameters ("image/PNG; q=1" -> "image/png")."""
    if not media_type:
        return ""
    return media_type.split(";", 1)[0].strip().lower()
