# ============================================================================
# src/health_insights/utils/image_utils.py
# ============================================================================
"""
Image utilities for report OCR.

Provides:
- OCR-ready image loading from uploaded bytes
- EXIF orientation correction (phone photos of paper reports)
- Downscaling of oversized camera images
"""

from io import BytesIO
import logging

from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

# Images larger than this get downscaled; Tesseract gains nothing beyond ~2500px
OCR_MAX_DIMENSION = 2500


def load_image_for_ocr(data: bytes, max_dimension: int = OCR_MAX_DIMENSION) -> Image.Image:
    """
    Load an uploaded image with all corrections needed for reliable OCR.

    The returned image is fully loaded and detached from the input buffer;
    the caller owns it and should close it.

    Args:
        data: Raw image bytes
        max_dimension: Maximum width or height (larger images are downscaled)

    Returns:
        Corrected PIL Image in RGB or L mode
    """
    with Image.open(BytesIO(data)) as source:
        source.load()

        # Phones store portrait photos sideways with a "rotate for display" tag
        try:
            image = ImageOps.exif_transpose(source)
        except Exception as e:
            logger.warning(f"EXIF transpose failed (non-fatal): {e}")
            image = source

        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        elif image is source:
            image = source.copy()

    w, h = image.size
    if max(w, h) > max_dimension:
        scale = max_dimension / max(w, h)
        new_w, new_h = int(w * scale), int(h * scale)
        resized = image.resize((new_w, new_h), Image.LANCZOS)
        image.close()
        image = resized
        logger.info(f"Resized {w}x{h} -> {new_w}x{new_h} for OCR")

    logger.debug(f"Image loaded for OCR: {image.size}, mode={image.mode}")
    return image
