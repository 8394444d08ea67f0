# ============================================================================
# FILE: tests/unit/test_normalizer.py
# ============================================================================
"""
Unit tests for list de-duplication and trimming
"""

from health_insights.analysis.normalizer import (
    ELLIPSIS,
    MAX_ENTRY_LENGTH,
    MAX_LIST_ITEMS,
    dedupe_and_trim,
    truncate_entry,
)


def test_truncate_short_entry_unchanged():
    assert truncate_entry("Check blood pressure") == "Check blood pressure"


def test_truncate_exact_limit_unchanged():
    text = "x" * MAX_ENTRY_LENGTH
    assert truncate_entry(text) == text


def test_truncate_long_entry():
    result = truncate_entry("a" * 300)
    assert result.endswith(ELLIPSIS)
    assert len(result) == 278
    assert len(result) <= MAX_ENTRY_LENGTH


def test_dedupe_drops_blank_non_string_and_repeats():
    items = ["Check BP", "check bp!", "   ", 5, None, "Eat less salt"]
    assert dedupe_and_trim(items, "") == ["Check BP", "Eat less salt"]


def test_dedupe_drops_entries_matching_reference():
    items = ["Patient has hypertension", "Take prescribed medication"]
    assert dedupe_and_trim(items, "patient has hypertension.") == ["Take prescribed medication"]


def test_dedupe_keeps_first_occurrence_order():
    items = ["Zeta item", "Alpha item text here", "zeta item"]
    assert dedupe_and_trim(items, "") == ["Zeta item", "Alpha item text here"]


def test_dedupe_caps_list():
    items = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf"]
    result = dedupe_and_trim(items, "")
    assert len(result) == MAX_LIST_ITEMS
    assert result == ["alpha", "bravo", "charlie", "delta", "echo"]


def test_dedupe_strips_and_truncates():
    result = dedupe_and_trim(["  padded  ", "b" * 400], "")
    assert result[0] == "padded"
    assert len(result[1]) <= MAX_ENTRY_LENGTH


def test_dedupe_none_input():
    assert dedupe_and_trim(None, "summary") == []


def test_dedupe_is_idempotent():
    items = [
        "Monitor blood pressure daily",
        "monitor blood pressure daily.",
        "Reduce sodium intake",
        "word " * 80,
        "",
        "Schedule cardiology consult",
        "Repeat lipid panel in three months",
        "Walk thirty minutes a day",
        "Take statin in the evening",
    ]
    once = dedupe_and_trim(items, "Elevated blood pressure noted")
    twice = dedupe_and_trim(once, "Elevated blood pressure noted")
    assert once == twice
