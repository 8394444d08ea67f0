# ============================================================================
# FILE: tests/unit/test_similarity.py
# ============================================================================
"""
Unit tests for near-duplicate detection
"""

import pytest

from health_insights.analysis.similarity import are_similar, jaccard, normalize_for_compare


def test_normalize_strips_punctuation_and_case():
    assert normalize_for_compare("  Blood-Pressure:  HIGH!! ") == "blood pressure high"


def test_normalize_none():
    assert normalize_for_compare(None) == ""


def test_identical_after_normalization():
    assert are_similar("Hello, World!", "hello world")


def test_empty_is_never_similar():
    assert not are_similar("", "")
    assert not are_similar(None, "something")
    assert not are_similar("!!!", "???")


def test_high_word_overlap():
    # 4 shared of 6 distinct words
    assert are_similar(
        "take medication daily with food",
        "take medication daily with water",
    )


def test_low_word_overlap():
    assert not are_similar("Continue exercise", "Check cholesterol")


def test_containment_of_long_fragment():
    assert are_similar(
        "blood pressure is elevated",
        "The blood pressure is elevated today and needs follow-up care",
    )


def test_short_fragment_containment_ignored():
    assert not are_similar(
        "high bp",
        "patient has high bp readings noted in chart repeatedly",
    )


@pytest.mark.parametrize("a,b,expected", [
    ("a b c", "a b c", 1.0),
    ("a b", "c d", 0.0),
    ("a b c d", "a b", 0.5),
])
def test_jaccard(a, b, expected):
    assert jaccard(a, b) == pytest.approx(expected)


def test_similarity_is_symmetric():
    a = "Schedule a follow-up appointment with cardiology"
    b = "follow-up appointment with cardiology"
    assert are_similar(a, b) == are_similar(b, a)
