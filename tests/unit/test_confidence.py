# ============================================================================
# FILE: tests/unit/test_confidence.py
# ============================================================================
"""
Unit tests for free-text confidence scoring
"""

import pytest

from health_insights.analysis.confidence import clamp, score_response_text
from health_insights.core.models import RecordDescriptor


def _record(record_type):
    return RecordDescriptor(title="Doc", record_type=record_type, service_date="2024-01-15")


def test_base_confidence():
    assert score_response_text("ok", _record("Consultation")) == pytest.approx(0.7)


def test_keywords_are_case_insensitive():
    assert score_response_text("MEDICAL review", _record("other")) == pytest.approx(0.8)
    assert score_response_text("We Suggest rest", _record("other")) == pytest.approx(0.8)


def test_long_text_bonus():
    assert score_response_text("x" * 201, _record("other")) == pytest.approx(0.8)


def test_record_type_bonus():
    assert score_response_text("ok", _record("Imaging")) == pytest.approx(0.75)
    assert score_response_text("ok", _record("lab-result")) == pytest.approx(0.75)


def test_upper_bound():
    text = "health " * 40 + "recommend"
    assert score_response_text(text, _record("Lab Results")) == pytest.approx(0.95)


def test_empty_text():
    assert score_response_text("", _record("other")) == pytest.approx(0.7)
    assert score_response_text(None, _record("other")) == pytest.approx(0.7)


@pytest.mark.parametrize("value,expected", [(-1.0, 0.0), (0.5, 0.5), (2.0, 1.0)])
def test_clamp(value, expected):
    assert clamp(value, 0.0, 1.0) == expected
