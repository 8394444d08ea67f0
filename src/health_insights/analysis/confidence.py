# ============================================================================
# src/health_insights/analysis/confidence.py
# ============================================================================
"""
Confidence scoring for free-text provider replies.

Used only when a reply could not be decoded as structured JSON; structured
replies carry their own confidence.
"""

from ..constants.record_types import RecordType
from ..core.models import RecordDescriptor

BASE_CONFIDENCE = 0.7
MIN_TEXT_CONFIDENCE = 0.6
MAX_TEXT_CONFIDENCE = 0.95


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def score_response_text(raw_text: str, record: RecordDescriptor) -> float:
    """
    Score a reply from simple quality signals.

    Returns:
        Confidence in [0.6, 0.95]
    """
    text = raw_text or ""
    lowered = text.lower()
    confidence = BASE_CONFIDENCE

    if len(text) > 200:
        confidence += 0.1
    if "medical" in lowered or "health" in lowered:
        confidence += 0.1
    if "recommend" in lowered or "suggest" in lowered:
        confidence += 0.1

    record_type = record.normalized_type
    if record_type == RecordType.LAB_RESULTS:
        confidence += 0.05
    if record_type == RecordType.IMAGING:
        confidence += 0.05

    return clamp(confidence, MIN_TEXT_CONFIDENCE, MAX_TEXT_CONFIDENCE)
