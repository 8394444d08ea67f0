# ============================================================================
# src/health_insights/core/models.py
# ============================================================================
"""
Analysis data model
- RecordDescriptor: one medical document awaiting analysis (read-only input)
- AnalysisResult: the structured narrative attached to the record
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants.record_types import RecordType, normalize_record_type

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png")
ATTACHMENT_MARKERS = (".jpg", ".jpeg", ".png", ".pdf")


@dataclass(frozen=True)
class RecordDescriptor:
    title: str
    record_type: str
    service_date: str
    description: str = ""
    file_url: Optional[str] = None
    file_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecordDescriptor":
        """
        Build from the app's camelCase payload (snake_case also accepted).
        Missing text fields become empty strings.
        """
        def pick(*keys):
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return None

        return cls(
            title=str(pick("title") or ""),
            record_type=str(pick("recordType", "record_type") or ""),
            service_date=str(pick("serviceDate", "service_date", "date") or ""),
            description=str(pick("description") or ""),
            file_url=pick("fileUrl", "file_url"),
            file_name=pick("fileName", "file_name"),
        )

    @property
    def normalized_type(self) -> RecordType:
        return normalize_record_type(self.record_type)

    @property
    def file_extension(self) -> Optional[str]:
        if not self.file_name or "." not in self.file_name:
            return None
        return self.file_name.rsplit(".", 1)[-1].lower()

    @property
    def has_attachment(self) -> bool:
        """Uploaded file is a recognized image or PDF."""
        if not self.file_url or not self.file_name:
            return False
        lowered = self.file_name.lower()
        return any(marker in lowered for marker in ATTACHMENT_MARKERS)

    @property
    def can_ocr(self) -> bool:
        """Attachment is an image type we run text extraction on (PDFs are skipped)."""
        return self.has_attachment and self.file_extension in IMAGE_EXTENSIONS


@dataclass
class AnalysisResult:
    summary: str
    key_findings: List[str] = field(default_factory=list)
    risk_warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    confidence: float = 0.0
    analysis_type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialized with the keys the records table stores."""
        return {
            "summary": self.summary,
            "keyFindings": list(self.key_findings),
            "riskWarnings": list(self.risk_warnings),
            "recommendations": list(self.recommendations),
            "confidence": self.confidence,
            "analysisType": self.analysis_type,
        }
