# ============================================================================
# FILE: tests/unit/test_plausibility.py
# ============================================================================
"""
Unit tests for plausibility checker
"""

from health_insights.validators.plausibility import (
    PlausibilityChecker,
    check_plausibility,
    get_plausibility_range
)


def test_plausibility_checker_init():
    """Test plausibility checker initialization"""
    checker = PlausibilityChecker()
    assert checker.ranges is not None
    assert "height" in checker.ranges


def test_check_valid_height():
    """Test valid height value"""
    checker = PlausibilityChecker()
    is_plausible, reason = checker.check("height", 175, "cm")

    assert is_plausible is True
    assert reason is None


def test_check_implausible_high_height():
    """Test implausibly tall height (OCR misread)"""
    checker = PlausibilityChecker()
    is_plausible, reason = checker.check("height", 400, "cm")

    assert is_plausible is False
    assert "above plausible maximum" in reason


def test_check_implausible_low_weight():
    """Test implausibly low weight"""
    checker = PlausibilityChecker()
    is_plausible, reason = checker.check("weight", 5, "kg")

    assert is_plausible is False
    assert "below plausible minimum" in reason


def test_check_band_edges_are_inclusive():
    """Test values on the band edges pass"""
    checker = PlausibilityChecker()

    assert checker.is_plausible("sugarLevel", 50)
    assert checker.is_plausible("sugarLevel", 500)
    assert checker.is_plausible("heartRate", 30)
    assert checker.is_plausible("heartRate", 220)
    assert not checker.is_plausible("heartRate", 221)


def test_check_metric_without_band():
    """Test blood pressure has no band (should pass)"""
    checker = PlausibilityChecker()
    is_plausible, reason = checker.check("bloodPressure", 999)

    assert is_plausible is True
    assert reason is None


def test_check_wrong_unit():
    """Test value with wrong unit"""
    checker = PlausibilityChecker()
    is_plausible, reason = checker.check("sugarLevel", 6.5, "mmol/L")

    assert is_plausible is False
    assert "Unit mismatch" in reason


def test_convenience_functions():
    """Test module-level helpers"""
    assert check_plausibility("cholesterol", 190) is True
    assert check_plausibility("cholesterol", 90) is False
    assert get_plausibility_range("weight") == (20, 300, "kg")
    assert get_plausibility_range("unknown") is None
