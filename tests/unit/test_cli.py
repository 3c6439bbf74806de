# ============================================================================
# FILE: tests/unit/test_cli.py
# ============================================================================
"""
Unit tests for the command-line interface
"""

import json
from unittest.mock import patch

import pytest

from health_insights.cli import main
from health_insights.extractors.text_extractor import TextExtractionResult
from health_insights.utils.exceptions import ExtractionFailureError


@pytest.fixture
def report_file(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4")
    return path


def _patch_extract(**kwargs):
    return patch("health_insights.extractors.text_extractor.TextExtractor.extract", **kwargs)


def test_cli_prints_json(report_file, capsys, healthy_report_text):
    """Test successful analysis output"""
    transcript = TextExtractionResult(text=healthy_report_text, method="pypdfium2", page_count=1)

    with _patch_extract(return_value=transcript):
        exit_code = main([str(report_file), "--log-level", "warning"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["extractedMetrics"] == 5
    assert output["healthMetrics"]["bmi"]["value"] == 24.5
    assert output["analysis"]["summary"][0] == "Your BMI is 24.5, which is considered Normal"


def test_cli_unsupported_media_type(tmp_path, capsys):
    """Test exit code 2 for unsupported uploads"""
    notes = tmp_path / "notes.txt"
    notes.write_text("Height: 175cm")

    exit_code = main([str(notes)])

    assert exit_code == 2
    assert "Unsupported media type" in capsys.readouterr().err


def test_cli_empty_transcript(report_file, capsys):
    """Test exit code 1 when no text is recovered"""
    with _patch_extract(return_value=TextExtractionResult(text="")):
        exit_code = main([str(report_file)])

    assert exit_code == 1
    assert "No text could be extracted" in capsys.readouterr().err


def test_cli_extraction_failure(report_file, capsys):
    """Test exit code 1 when text recovery fails"""
    with _patch_extract(side_effect=ExtractionFailureError("OCR failed")):
        exit_code = main([str(report_file), "--media-type", "image/png"])

    assert exit_code == 1
    assert "OCR failed" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    """Test unreadable path"""
    exit_code = main([str(tmp_path / "missing.pdf")])

    assert exit_code == 1
    assert "ERROR" in capsys.readouterr().err
