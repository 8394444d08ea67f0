# ============================================================================
# src/health_insights/constants/record_types.py
# ============================================================================
"""
Record Types
- Closed set of record types the analysis understands
- Single normalization point for the free-form tags the app sends
"""

import re
from enum import Enum
from typing import Optional

class RecordType(str, Enum):
    """
    Record types that drive prompt framing, defaults and local branches.
    Values are the display labels used in prompts and summaries.
    """
    LAB_RESULTS = "Lab Results"
    IMAGING = "Imaging"
    PHYSICAL_EXAM = "Physical Exam"
    PRESCRIPTION = "prescription"
    CONSULTATION = "Consultation"
    OTHER = "other"

# Lowercased, separator-collapsed tag -> type
RECORD_TYPE_ALIASES = {
    "lab results": RecordType.LAB_RESULTS,
    "lab result": RecordType.LAB_RESULTS,
    "lab": RecordType.LAB_RESULTS,
    "labs": RecordType.LAB_RESULTS,
    "labresult": RecordType.LAB_RESULTS,
    "labresults": RecordType.LAB_RESULTS,
    "imaging": RecordType.IMAGING,
    "imaging study": RecordType.IMAGING,
    "radiology": RecordType.IMAGING,
    "physical exam": RecordType.PHYSICAL_EXAM,
    "physical examination": RecordType.PHYSICAL_EXAM,
    "prescription": RecordType.PRESCRIPTION,
    "consultation": RecordType.CONSULTATION,
    "consultation note": RecordType.CONSULTATION,
}

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize_record_type(value: Optional[str]) -> RecordType:
    """
    Map a free-form record type tag onto RecordType.

    "Lab Results", "lab-result", "LAB_RESULTS" and "lab" all resolve to
    LAB_RESULTS; unknown or empty tags resolve to OTHER.
    """
    if not value:
        return RecordType.OTHER
    key = _SEPARATORS.sub(" ", str(value).strip().lower()).strip()
    return RECORD_TYPE_ALIASES.get(key, RecordType.OTHER)
