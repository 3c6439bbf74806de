# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import io
import logging
from unittest.mock import Mock

import pytest

from health_insights.core.orchestrator import ReportOrchestrator
from health_insights.extractors.text_extractor import TextExtractionResult
from health_insights.utils.logging import THIRD_PARTY_LOGGERS


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() calls made by a test"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    library_levels = {name: logging.getLogger(name).level for name in THIRD_PARTY_LOGGERS}
    yield
    for name, library_level in library_levels.items():
        logging.getLogger(name).setLevel(library_level)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def healthy_report_text():
    """Report with every metric in its healthy tier"""
    return "Height: 175cm Weight: 75kg Blood Pressure: 118/76mmHg Sugar Level: 95mg/dL"


@pytest.fixture
def high_risk_report_text():
    """Report that crosses the diabetes, hypertension and obesity thresholds"""
    return """
    CITY DIAGNOSTICS - GENERAL HEALTH CHECK

    Patient: Jane Roe
    Height: 170 cm
    Weight: 93 kg
    Blood Pressure: 150/95 mmHg
    Fasting Blood Sugar: 130 mg/dL
    Heart Rate: 88 bpm
    """


@pytest.fixture
def clinical_notes_text():
    """Free-text notes with conditions, medications, symptoms and trends"""
    return (
        "Patient has diabetes.\n"
        "Diagnosed with hypertension.\n"
        "Medication: Metformin 500mg twice daily\n"
        "Currently taking Aspirin 75mg.\n"
        "Complains of headache and fatigue.\n"
        "Doctor's note: reduce salt and walk every evening.\n"
        "Weight decreased since last visit, cholesterol stable.\n"
    )


@pytest.fixture
def report_pdf_bytes():
    """Single-page text PDF rendered with reportlab"""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    c.drawString(100, 750, "General Health Check Report")
    c.drawString(100, 700, "Height: 175 cm")
    c.drawString(100, 650, "Weight: 75 kg")
    c.drawString(100, 600, "Blood Pressure: 118/76 mmHg")
    c.drawString(100, 550, "Blood Sugar: 95 mg/dL")
    c.save()
    return buffer.getvalue()


@pytest.fixture
def blank_pdf_bytes():
    """Two-page PDF with no text layer (a scanned document)"""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    c.showPage()
    c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    """Small white PNG"""
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (200, 100), "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def stub_text_extractor():
    """Text extractor returning a fixed transcript; set .extract.return_value to change it"""
    extractor = Mock()
    extractor.extract.return_value = TextExtractionResult(
        text="Height: 175cm Weight: 75kg",
        method="pypdfium2",
        page_count=1,
        confidence=0.95,
    )
    return extractor


@pytest.fixture
def orchestrator(stub_text_extractor):
    """Orchestrator with text recovery stubbed out"""
    return ReportOrchestrator(text_extractor=stub_text_extractor)
