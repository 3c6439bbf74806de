# ============================================================================
# src/health_insights/extractors/text_extractor.py
# ============================================================================
"""
Text recovery from uploaded PDFs and images.

Extraction cascade:
1. pypdfium2: PDF text layer (fast, best Unicode)
2. PyPDF2: fallback PDF parser when pypdfium2 cannot open the document
3. OCR: image uploads, and PDF pages whose text layer is (nearly) empty

Routing is by declared media type:
- application/pdf → PDF cascade
- image/*         → OCR
- anything else   → UnsupportedMediaTypeError

Any parser or OCR engine exception is wrapped in ExtractionFailureError.
"""

from dataclasses import dataclass, field
from io import BytesIO
from typing import List, Optional
import logging
import statistics

import pypdfium2
import PyPDF2

from ..config import AnalysisSettings, analysis_settings
from ..constants import IMAGE_MEDIA_PREFIX, PDF_MEDIA_TYPE, normalize_media_type
from ..utils.exceptions import ExtractionFailureError, UnsupportedMediaTypeError
from ..utils.image_utils import load_image_for_ocr
from .ocr_extractor import OCRExtractor


@dataclass
class TextExtractionResult:
    """Recovered transcript with metadata."""
    text: str
    method: str = "unknown"
    page_count: int = 0
    confidence: float = 0.0
    warnings: List[str] = field(default_factory=list)


class TextExtractor:
    """
    Turns document bytes into a transcript.

    Detects scanned PDF pages (short text layer) and OCRs them.
    """

    # Text-layer reliability by parser
    METHOD_CONFIDENCE = {
        "pypdfium2": 0.95,
        "pypdf2": 0.90,
    }

    def __init__(
        self,
        ocr: Optional[OCRExtractor] = None,
        settings: Optional[AnalysisSettings] = None,
    ):
        self.settings = settings or analysis_settings
        self.ocr = ocr or OCRExtractor(
            language=self.settings.OCR_LANGUAGE,
            dpi=self.settings.OCR_DPI,
        )
        self.logger = logging.getLogger(__name__)

    def extract(self, data: bytes, media_type: str) -> TextExtractionResult:
        """
        Recover text from a document.

        Args:
            data: Raw document bytes
            media_type: Declared media type, e.g. "application/pdf", "image/png"

        Returns:
            TextExtractionResult (text may be empty; emptiness is the caller's concern)

        Raises:
            UnsupportedMediaTypeError: media type is neither PDF nor image
            ExtractionFailureError: parser or OCR engine failed
        """
        kind = normalize_media_type(media_type)

        if kind == PDF_MEDIA_TYPE:
            handler = self._extract_pdf
        elif kind.startswith(IMAGE_MEDIA_PREFIX):
            handler = self._extract_image
        else:
            raise UnsupportedMediaTypeError(media_type)

        self.logger.debug(f"Extracting text from {len(data)} bytes of {kind}")

        try:
            result = handler(data)
        except ExtractionFailureError:
            raise
        except Exception as e:
            self.logger.error(f"Text extraction failed for {kind}: {e}")
            raise ExtractionFailureError(f"Text extraction failed for {kind}", cause=e) from e

        self.logger.info(
            f"Recovered {len(result.text)} chars from {result.page_count} page(s) via {result.method}"
        )
        return result

    # ========================================================================
    # IMAGES
    # ========================================================================

    def _extract_image(self, data: bytes) -> TextExtractionResult:
        image = load_image_for_ocr(data)
        try:
            ocr_result = self.ocr.ocr_image(image)
        finally:
            image.close()

        result = TextExtractionResult(
            text=ocr_result.text,
            method=f"ocr_{ocr_result.method}",
            page_count=1,
            confidence=ocr_result.confidence,
        )
        if ocr_result.enhanced == "aggressive":
            result.warnings.append("Low quality image - aggressive enhancement used")
        return result

    # ========================================================================
    # PDFS
    # ========================================================================

    def _extract_pdf(self, data: bytes) -> TextExtractionResult:
        warnings = []
        try:
            page_texts = self._read_with_pypdfium2(data)
            method = "pypdfium2"
        except Exception as e:
            self.logger.warning(f"pypdfium2 failed, trying PyPDF2: {e}")
            warnings.append(f"pypdfium2 failed: {e}")
            try:
                page_texts = self._read_with_pypdf2(data)
            except Exception as e2:
                self.logger.error(f"PyPDF2 also failed: {e2}")
                raise ExtractionFailureError(
                    f"All PDF parsers failed (pypdfium2: {e}; PyPDF2)", cause=e2
                ) from e2
            method = "pypdf2"

        result = TextExtractionResult(
            text="",
            method=method,
            page_count=len(page_texts),
            warnings=warnings,
        )
        base_confidence = self.METHOD_CONFIDENCE.get(method, 0.8)
        texts = list(page_texts)
        confidences = [base_confidence] * len(texts)

        scanned = [
            page_num for page_num, text in enumerate(texts)
            if len(text) < self.settings.MIN_PDF_TEXT_CHARS
        ]

        if scanned and method != "pypdfium2":
            # Rendering needs pypdfium2, which could not open this document
            result.warnings.append(
                f"{len(scanned)}/{len(texts)} pages have no text layer and could not be OCR'd"
            )
        elif scanned:
            self.logger.info(f"{len(scanned)}/{len(texts)} pages appear scanned, running OCR")
            self._ocr_scanned_pages(data, scanned, texts, confidences)
            result.method = f"{method}+ocr"
            result.warnings.append(f"{len(scanned)}/{len(texts)} pages OCR'd")

        result.text = "\n\n".join(text for text in texts if text)
        result.confidence = statistics.mean(confidences) if confidences else 0.0
        return result

    def _read_with_pypdfium2(self, data: bytes) -> List[str]:
        """Text layer per page via pypdfium2."""
        pdf = pypdfium2.PdfDocument(data)
        try:
            page_texts = []
            for page_num in range(len(pdf)):
                page = pdf[page_num]
                try:
                    textpage = page.get_textpage()
                    try:
                        text = textpage.get_text_range() or ""
                    finally:
                        textpage.close()
                finally:
                    page.close()
                page_texts.append(text.strip())
            return page_texts
        finally:
            pdf.close()

    def _read_with_pypdf2(self, data: bytes) -> List[str]:
        """Text layer per page via PyPDF2."""
        reader = PyPDF2.PdfReader(BytesIO(data))

        if reader.is_encrypted:
            # Owner-password-only PDFs open with an empty user password
            reader.decrypt("")

        return [(page.extract_text() or "").strip() for page in reader.pages]

    def _ocr_scanned_pages(
        self,
        data: bytes,
        scanned: List[int],
        texts: List[str],
        confidences: List[float],
    ) -> None:
        """Render and OCR the given pages, replacing their text in place when OCR finds more."""
        pdf = pypdfium2.PdfDocument(data)
        try:
            for page_num in scanned:
                ocr_result = self.ocr.ocr_pdf_page(pdf, page_num)
                text = ocr_result.text.strip()
                if len(text) > len(texts[page_num]):
                    texts[page_num] = text
                    confidences[page_num] = ocr_result.confidence
        finally:
            pdf.close()
