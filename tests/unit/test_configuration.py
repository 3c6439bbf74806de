# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings, logging setup and the exception hierarchy
"""

import json
import logging

import pytest
from pydantic import ValidationError

from health_insights.config import AnalysisSettings, LoggingSettings, analysis_settings
from health_insights.constants import normalize_media_type
from health_insights.utils.exceptions import (
    DocumentProcessingError,
    EmptyTranscriptError,
    ExtractionFailureError,
    HealthInsightsError,
    UnsupportedMediaTypeError,
)
from health_insights.utils.logging import JsonFormatter, log_performance, setup_logging


# ============================================================================
# SETTINGS
# ============================================================================

def test_analysis_defaults():
    """Test default analysis settings"""
    assert analysis_settings.TRANSCRIPT_PREVIEW_CHARS == 500
    assert analysis_settings.OCR_LANGUAGE == "eng"
    assert analysis_settings.OCR_DPI == 200
    assert analysis_settings.MIN_PDF_TEXT_CHARS == 20


def test_analysis_settings_from_environment(monkeypatch):
    """Test environment variables override defaults"""
    monkeypatch.setenv("OCR_LANGUAGE", "eng+hin")
    monkeypatch.setenv("OCR_DPI", "300")

    settings = AnalysisSettings()

    assert settings.OCR_LANGUAGE == "eng+hin"
    assert settings.OCR_DPI == 300


def test_analysis_settings_validation(monkeypatch):
    """Test out-of-range DPI is rejected"""
    monkeypatch.setenv("OCR_DPI", "10")

    with pytest.raises(ValidationError):
        AnalysisSettings()


def test_logging_level_is_normalised(monkeypatch):
    """Test log level is upper-cased and validated"""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert LoggingSettings().LOG_LEVEL == "DEBUG"

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        LoggingSettings()


def test_normalize_media_type():
    """Test media type normalisation"""
    assert normalize_media_type("Image/PNG") == "image/png"
    assert normalize_media_type("application/pdf; charset=binary") == "application/pdf"
    assert normalize_media_type(None) == ""


# ============================================================================
# EXCEPTIONS
# ============================================================================

def test_exception_hierarchy():
    """Test all document errors share a base"""
    for error in (
        UnsupportedMediaTypeError("text/plain"),
        ExtractionFailureError("failed"),
        EmptyTranscriptError(),
    ):
        assert isinstance(error, DocumentProcessingError)
        assert isinstance(error, HealthInsightsError)


def test_extraction_failure_message_includes_cause():
    """Test cause is kept and shown"""
    cause = OSError("disk on fire")
    error = ExtractionFailureError("OCR failed", cause=cause)

    assert str(error) == "OCR failed: disk on fire"
    assert error.cause is cause


# ============================================================================
# LOGGING
# ============================================================================

def test_setup_logging_writes_file(tmp_path):
    """Test file handler and level"""
    log_file = tmp_path / "logs" / "analysis.log"

    setup_logging(level="DEBUG", log_file=log_file)
    logging.getLogger("health_insights.test").debug("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logging.getLogger().level == logging.DEBUG
    assert "written to file" in log_file.read_text()


def test_json_formatter():
    """Test one JSON object per record"""
    record = logging.LogRecord(
        name="health_insights.core",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Extracted %d metrics",
        args=(5,),
        exc_info=None,
    )

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "Extracted 5 metrics"
    assert data["level"] == "INFO"
    assert data["logger"] == "health_insights.core"


def test_log_performance_reraises(caplog):
    """Test failures are logged and re-raised"""
    logger = logging.getLogger("health_insights.test")

    @log_performance(logger, "Failing stage")
    def fail():
        raise ValueError("bad input")

    with caplog.at_level(logging.ERROR, logger="health_insights.test"):
        with pytest.raises(ValueError):
            fail()

    assert "Failing stage failed" in caplog.text


def test_json_formatter_includes_context_fields():
    """Test extra= context fields become top-level JSON keys"""
    record = logging.LogRecord(
        name="health_insights.core.orchestrator",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=20,
        msg="Transcript analysis completed",
        args=(),
        exc_info=None,
    )
    record.stage = "Transcript analysis"
    record.duration_ms = 12.5

    data = json.loads(JsonFormatter().format(record))

    assert data["stage"] == "Transcript analysis"
    assert data["duration_ms"] == 12.5
    assert "media_type" not in data


def test_setup_logging_quiets_third_party_loggers():
    """Test library loggers stay at WARNING unless debugging"""
    setup_logging(level="INFO")
    assert logging.getLogger("PIL").level == logging.WARNING

    setup_logging(level="DEBUG")
    assert logging.getLogger("PIL").level == logging.DEBUG


def test_log_performance_records_stage_duration(caplog):
    """Test successful calls log their stage and duration"""
    logger = logging.getLogger("health_insights.test")

    @log_performance(logger, "Quick stage")
    def succeed():
        return 42

    with caplog.at_level(logging.DEBUG, logger="health_insights.test"):
        assert succeed() == 42

    record = next(r for r in caplog.records if r.getMessage().startswith("Quick stage completed"))
    assert record.stage == "Quick stage"
    assert record.duration_ms >= 0
