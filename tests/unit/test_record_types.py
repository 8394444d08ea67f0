# ============================================================================
# FILE: tests/unit/test_record_types.py
# ============================================================================
"""
Unit tests for record type normalization and clinical signal detection
"""

import pytest

from health_insights.constants.clinical_signals import detect_signals, parse_age
from health_insights.constants.record_types import RecordType, normalize_record_type


@pytest.mark.parametrize("value,expected", [
    ("Lab Results", RecordType.LAB_RESULTS),
    ("lab results", RecordType.LAB_RESULTS),
    ("lab-result", RecordType.LAB_RESULTS),
    ("LAB_RESULTS", RecordType.LAB_RESULTS),
    ("  Lab  ", RecordType.LAB_RESULTS),
    ("Imaging", RecordType.IMAGING),
    ("radiology", RecordType.IMAGING),
    ("Physical Exam", RecordType.PHYSICAL_EXAM),
    ("physical-examination", RecordType.PHYSICAL_EXAM),
    ("prescription", RecordType.PRESCRIPTION),
    ("Prescription", RecordType.PRESCRIPTION),
    ("Consultation Note", RecordType.CONSULTATION),
    ("vaccination", RecordType.OTHER),
    ("", RecordType.OTHER),
    (None, RecordType.OTHER),
])
def test_normalize_record_type(value, expected):
    assert normalize_record_type(value) == expected


def test_record_type_values_are_display_labels():
    assert RecordType.LAB_RESULTS.value == "Lab Results"
    assert RecordType.PRESCRIPTION.value == "prescription"


def test_detect_hard_signals():
    signals = detect_signals("BP 150/95 and LDL elevated, occasional angina")
    assert signals.high_bp
    assert signals.cholesterol
    assert signals.chest_pain
    assert signals.hard_signal
    assert signals.any_condition


def test_detect_case_insensitive():
    signals = detect_signals("HYPERTENSION noted; HbA1c 7.2")
    assert signals.high_bp
    assert signals.diabetes


def test_detect_nothing():
    signals = detect_signals("")
    assert not signals.any_condition
    assert signals.age_years is None


def test_non_smoker_flags_both():
    signals = detect_signals("Non-smoker, exercises daily")
    assert signals.smoking
    assert signals.non_smoker
    assert signals.exercise


@pytest.mark.parametrize("text,expected", [
    ("Patient is 58 years old", 58),
    ("1 year old child", 1),
    ("aged 40", None),
    ("", None),
])
def test_parse_age(text, expected):
    assert parse_age(text) == expected
