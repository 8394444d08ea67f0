# ============================================================================
# FILE: tests/unit/test_models.py
# ============================================================================
"""
Unit tests for the record descriptor and analysis result
"""

from dataclasses import FrozenInstanceError

import pytest

from health_insights.constants.record_types import RecordType
from health_insights.core.models import AnalysisResult, RecordDescriptor


def test_from_dict_camel_case():
    record = RecordDescriptor.from_dict({
        "title": "X-Ray",
        "recordType": "Imaging",
        "serviceDate": "2024-04-01",
        "description": None,
        "fileUrl": "https://example.com/a.png",
        "fileName": "a.png",
    })
    assert record.title == "X-Ray"
    assert record.record_type == "Imaging"
    assert record.service_date == "2024-04-01"
    assert record.description == ""
    assert record.file_url == "https://example.com/a.png"
    assert record.normalized_type == RecordType.IMAGING


def test_from_dict_snake_case():
    record = RecordDescriptor.from_dict({
        "title": "Panel",
        "record_type": "Lab Results",
        "service_date": "2024-04-02",
        "file_name": "panel.pdf",
    })
    assert record.record_type == "Lab Results"
    assert record.file_name == "panel.pdf"
    assert record.file_url is None


def test_from_dict_missing_fields():
    record = RecordDescriptor.from_dict({})
    assert record.title == ""
    assert record.normalized_type == RecordType.OTHER


def test_descriptor_is_frozen(lab_record):
    with pytest.raises(FrozenInstanceError):
        lab_record.title = "changed"


@pytest.mark.parametrize("file_name,has_attachment,can_ocr,extension", [
    ("scan.JPG", True, True, "jpg"),
    ("scan.jpeg", True, True, "jpeg"),
    ("scan.png", True, True, "png"),
    ("report.pdf", True, False, "pdf"),
    ("notes.docx", False, False, "docx"),
    ("README", False, False, None),
])
def test_attachment_detection(file_name, has_attachment, can_ocr, extension):
    record = RecordDescriptor(
        title="Doc",
        record_type="other",
        service_date="2024-01-01",
        file_url="https://example.com/file",
        file_name=file_name,
    )
    assert record.has_attachment is has_attachment
    assert record.can_ocr is can_ocr
    assert record.file_extension == extension


def test_attachment_requires_url():
    record = RecordDescriptor(title="Doc", record_type="other", service_date="", file_name="a.png")
    assert not record.has_attachment
    assert not record.can_ocr


def test_result_to_dict_keys():
    result = AnalysisResult(
        summary="s",
        key_findings=["f"],
        risk_warnings=["w"],
        recommendations=["r"],
        confidence=0.8,
        analysis_type="AI Analysis",
    )
    assert result.to_dict() == {
        "summary": "s",
        "keyFindings": ["f"],
        "riskWarnings": ["w"],
        "recommendations": ["r"],
        "confidence": 0.8,
        "analysisType": "AI Analysis",
    }
