# ============================================================================
# src/health_insights/extractors/ocr_extractor.py
# ============================================================================
"""
OCR Extraction for Photographed Reports and Scanned PDF Pages

Uses Tesseract (via pytesseract) on Pillow images. Scanned PDF pages are
rendered with pypdfium2 first.

Line structure is preserved: Tesseract words are regrouped into their
original lines so that label/value pairs ("Weight: 75 kg") stay together
and separate lines stay separate.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import logging

import numpy as np
import pypdfium2
import pytesseract
from PIL import Image, ImageEnhance, ImageFilter

from ..config import analysis_settings


@dataclass
class OCRResult:
    """Result from OCR of one image or page."""
    text: str
    confidence: float
    method: str = "tesseract"
    enhanced: str = "standard"


class OCRExtractor:
    """
    Tesseract OCR with image enhancement.

    A first pass runs on a standard enhancement; when its confidence is low
    a second pass runs on an aggressive enhancement and the better of the
    two is kept.
    """

    # Below this mean word confidence the aggressive enhancement is tried
    LOW_CONFIDENCE = 0.6

    def __init__(self, language: Optional[str] = None, dpi: Optional[int] = None):
        """
        Initialize OCR extractor.

        Args:
            language: Tesseract language code (defaults to OCR_LANGUAGE)
            dpi: Rendering resolution for PDF pages (defaults to OCR_DPI)
        """
        self.logger = logging.getLogger(__name__)
        self.language = language or analysis_settings.OCR_LANGUAGE
        self.dpi = dpi or analysis_settings.OCR_DPI

    def enhance_image(self, image: Image.Image, aggressive: bool = False) -> Image.Image:
        """
        Enhance image quality for better OCR results.

        Applies grayscale conversion, contrast enhancement and sharpening.
        Aggressive mode adds brightness, unsharp masking, a light threshold
        and a median filter for poor photos.

        Args:
            image: PIL Image to enhance
            aggressive: Apply more aggressive preprocessing

        Returns:
            Enhanced grayscale PIL Image
        """
        gray = image if image.mode == "L" else image.convert("L")

        enhanced = ImageEnhance.Contrast(gray).enhance(1.5)
        enhanced = enhanced.filter(ImageFilter.SHARPEN)

        if aggressive:
            enhanced = ImageEnhance.Contrast(enhanced).enhance(1.3)
            enhanced = ImageEnhance.Brightness(enhanced).enhance(1.1)
            enhanced = enhanced.filter(ImageFilter.UnsharpMask(radius=2, percent=150))

            # Push light background noise to white
            img_array = np.array(enhanced)
            img_array = np.where(img_array > 128, 255, img_array)
            enhanced = Image.fromarray(img_array.astype(np.uint8))
            enhanced = enhanced.filter(ImageFilter.MedianFilter(size=3))

        self.logger.debug(f"Image enhanced (aggressive={aggressive}): {image.size}")
        return enhanced

    def ocr_image(self, image: Image.Image) -> OCRResult:
        """
        OCR a loaded image.

        Args:
            image: PIL Image (already orientation-corrected)

        Returns:
            OCRResult for the better of the standard and aggressive passes
        """
        text, confidence = self._ocr_with_tesseract(self.enhance_image(image))
        result = OCRResult(text=text, confidence=confidence)

        if confidence < self.LOW_CONFIDENCE:
            self.logger.info(
                f"Low OCR confidence ({confidence:.2f}), retrying with aggressive enhancement"
            )
            retry_text, retry_confidence = self._ocr_with_tesseract(
                self.enhance_image(image, aggressive=True)
            )
            if retry_confidence > confidence:
                result = OCRResult(
                    text=retry_text,
                    confidence=retry_confidence,
                    enhanced="aggressive",
                )

        self.logger.info(f"OCR extracted {len(result.text)} chars (confidence {result.confidence:.2f})")
        return result

    def ocr_pdf_page(self, pdf: pypdfium2.PdfDocument, page_number: int) -> OCRResult:
        """
        Render one PDF page and OCR it.

        Args:
            pdf: Open pypdfium2 document (caller closes it)
            page_number: Page to OCR (0-indexed)

        Returns:
            OCRResult for the page
        """
        page = pdf[page_number]
        try:
            bitmap = page.render(scale=self.dpi / 72.0)  # PDF points to pixels
            image = bitmap.to_pil()
            try:
                return self.ocr_image(image)
            finally:
                image.close()
        finally:
            page.close()

    def _ocr_with_tesseract(self, image: Image.Image) -> Tuple[str, float]:
        """
        OCR using Tesseract.

        Returns:
            (extracted_text, mean word confidence in 0-1)
        """
        data = pytesseract.image_to_data(
            image,
            lang=self.language,
            output_type=pytesseract.Output.DICT,
        )

        lines: Dict[Tuple[int, int, int], List[str]] = {}
        confidences = []

        for i, conf in enumerate(data["conf"]):
            conf = float(conf)
            if conf <= 0:
                continue
            word = data["text"][i].strip()
            if not word:
                continue

            key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
            lines.setdefault(key, []).append(word)
            confidences.append(conf / 100.0)

        full_text = "\n".join(" ".join(words) for words in lines.values())
        avg_confidence = sum(confidences) / len(confidences) if confidences else 0.0

        return full_text, avg_confidence
