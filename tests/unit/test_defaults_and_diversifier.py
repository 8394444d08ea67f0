# ============================================================================
# FILE: tests/unit/test_defaults_and_diversifier.py
# ============================================================================
"""
Unit tests for record-type defaults and section diversification
"""

from itertools import combinations

from health_insights.analysis.defaults import defaults_for
from health_insights.analysis.diversifier import ensure_diverse_sections
from health_insights.analysis.similarity import are_similar
from health_insights.core.models import RecordDescriptor


def _record(record_type, service_date="2024-01-15"):
    return RecordDescriptor(title="Doc", record_type=record_type, service_date=service_date)


def test_prescription_defaults():
    defaults = defaults_for(_record("prescription"))
    assert defaults.findings[0] == 'Prescribed medication(s) and dosage instructions documented'
    assert len(defaults.warnings) == 2
    assert 'Adhere strictly to dosing schedule' in defaults.recommendations


def test_lab_defaults_accept_alias():
    defaults = defaults_for(_record("lab-result"))
    assert defaults.warnings == ['Correlate abnormal results clinically before acting']


def test_generic_defaults_use_placeholders():
    defaults = defaults_for(_record("", service_date=""))
    assert defaults.findings == ["Record type: Health Record", "Document date: Unknown"]
    assert defaults.recommendations == ['Review with healthcare provider']


def test_generic_defaults_use_record_values():
    defaults = defaults_for(_record("Consultation", service_date="2024-05-05"))
    assert defaults.findings == ["Record type: Consultation", "Document date: 2024-05-05"]


def test_warning_repeating_summary_is_backfilled(lab_record):
    sections = ensure_diverse_sections(
        "Blood pressure is elevated.",
        ["Systolic reading of 150 mmHg"],
        ["Blood pressure is elevated", "blood pressure is elevated!"],
        ["Reduce sodium intake"],
        lab_record,
    )
    assert sections.warnings == ['Correlate abnormal results clinically before acting']
    assert sections.findings == ["Systolic reading of 150 mmHg"]
    assert sections.recommendations == ["Reduce sodium intake"]


def test_summary_is_trimmed(generic_record):
    sections = ensure_diverse_sections("  Summary text  ", [], [], [], generic_record)
    assert sections.summary == "Summary text"


def test_all_empty_sections_get_defaults(prescription_record):
    sections = ensure_diverse_sections("", None, None, None, prescription_record)
    defaults = defaults_for(prescription_record)
    assert sections.findings == defaults.findings
    assert sections.warnings == defaults.warnings
    assert sections.recommendations == defaults.recommendations


def test_no_duplicates_after_diversification(lab_record):
    summary = "Lipid panel shows elevated LDL cholesterol."
    sections = ensure_diverse_sections(
        summary,
        ["Lipid panel shows elevated LDL cholesterol", "HDL within range", "HDL within range."],
        ["Elevated LDL increases cardiovascular risk", "elevated LDL increases cardiovascular risk"],
        ["Start statin therapy", "Start statin therapy!", "Repeat lipid panel in 3 months"],
        lab_record,
    )
    for section in (sections.findings, sections.warnings, sections.recommendations):
        assert len(section) <= 5
        for entry in section:
            assert not are_similar(entry, sections.summary)
        for a, b in combinations(section, 2):
            assert not are_similar(a, b)
