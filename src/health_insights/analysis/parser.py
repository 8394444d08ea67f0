# ============================================================================
# src/health_insights/analysis/parser.py
# ============================================================================
"""
Provider Response Parser

Turns raw provider output into an AnalysisResult.

Strategy:
1. Structured: strip a ``` / ```json fence, decode as a JSON object
   (json_repair is tried on object-shaped text that fails strict decoding)
2. Unstructured: first line as summary, bullet lists found under
   section headers, confidence scored from the text itself

Both paths end in ensure_diverse_sections(). Nothing here raises to the
caller; malformed, partial or empty output degrades to fallback text.
"""

import json
import logging
import re
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional

from json_repair import repair_json

from .confidence import clamp, score_response_text
from .diversifier import ensure_diverse_sections
from .normalizer import MAX_LIST_ITEMS
from ..core.models import AnalysisResult, RecordDescriptor
from ..utils.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

DEFAULT_STRUCTURED_CONFIDENCE = 0.85
DEFAULT_STRUCTURED_LABEL = "Groq AI Analysis"
UNSTRUCTURED_LABEL = "AI Analysis"

FINDINGS_KEYWORDS = ("findings", "key findings", "observations")
WARNINGS_KEYWORDS = ("warnings", "risks", "concerns", "urgent")
RECOMMENDATIONS_KEYWORDS = ("recommendations", "suggestions", "advice", "next steps")

_OPEN_FENCE = re.compile(r"^```(?:json)?\s*", re.I)
_CLOSE_FENCE = re.compile(r"\s*```$")
_BULLET = re.compile(r"^[-•*]\s*")
_NUMBERED = re.compile(r"^\d+\.\s*")


def synthesized_summary(record: RecordDescriptor) -> str:
    return (
        f'This {record.record_type} record titled "{record.title}" '
        f'was created on {record.service_date}.'
    )


def fallback_findings(record: RecordDescriptor) -> List[str]:
    return [
        f"Record type: {record.record_type}",
        f"Document date: {record.service_date}",
        f"File provided: {record.file_name}" if record.file_name else f"Title: {record.title}",
    ]


def fallback_warnings() -> List[str]:
    return [
        'Limited clinical details available for comprehensive assessment',
        'Obtain additional clinical context if available',
    ]


def fallback_recommendations() -> List[str]:
    return [
        'Discuss document with healthcare provider for detailed interpretation',
        'Maintain regular follow-up appointments',
        'Keep this document for future medical reference',
    ]


def strip_code_fence(text: str) -> str:
    """Remove a leading ```/```json marker and a trailing ``` marker."""
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        cleaned = _CLOSE_FENCE.sub("", _OPEN_FENCE.sub("", cleaned))
    return cleaned


def decode_structured(text: str) -> Dict[str, Any]:
    """
    Decode provider text as a JSON object.

    Raises:
        ResponseParseError: text is not (repairable) object-shaped JSON
    """
    cleaned = strip_code_fence(text)
    if not cleaned:
        raise ResponseParseError("Empty provider response")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        if not cleaned.startswith("{"):
            raise ResponseParseError(f"Response is not JSON: {e}") from e
        repaired = repair_json(cleaned, return_objects=True)
        if not isinstance(repaired, dict) or not repaired:
            raise ResponseParseError(f"Response JSON could not be repaired: {e}") from e
        logger.warning(
            f"json_repair fixed provider response - potential data loss. "
            f"Original (first 200 chars): {cleaned[:200]}"
        )
        parsed = repaired

    if not isinstance(parsed, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def extract_list_items(text: str, keywords: Iterable[str]) -> List[str]:
    """
    Collect bullet / numbered items under the first line mentioning a keyword.

    Collection starts on the line after the anchor and stops at a blank line
    or a line containing ':' (the next section header). Other lines are
    skipped.
    """
    keywords = tuple(keywords)
    lines = (text or "").split("\n")

    for index, line in enumerate(lines):
        lowered = line.lower()
        if not any(keyword in lowered for keyword in keywords):
            continue

        items: List[str] = []
        for next_line in lines[index + 1:]:
            stripped = next_line.strip()
            if _BULLET.match(stripped) or _NUMBERED.match(stripped):
                items.append(_NUMBERED.sub("", _BULLET.sub("", stripped, count=1), count=1))
            elif stripped == "" or ":" in stripped:
                break
        return items[:MAX_LIST_ITEMS]

    return []


def _read_list(payload: Dict[str, Any], key: str) -> List[Any]:
    value = payload.get(key)
    return value if isinstance(value, list) else []


def _read_confidence(payload: Dict[str, Any]) -> float:
    value = payload.get("confidence")
    # bool is an int subclass; "true" is not a score
    if isinstance(value, Real) and not isinstance(value, bool):
        return clamp(float(value), 0.0, 1.0)
    return DEFAULT_STRUCTURED_CONFIDENCE


def _read_text(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def parse_structured(payload: Dict[str, Any], record: RecordDescriptor) -> AnalysisResult:
    summary = _read_text(payload, "summary") or synthesized_summary(record)
    findings = _read_list(payload, "keyFindings") or fallback_findings(record)
    warnings = _read_list(payload, "riskWarnings") or fallback_warnings()
    recommendations = _read_list(payload, "recommendations") or fallback_recommendations()

    sections = ensure_diverse_sections(summary, findings, warnings, recommendations, record)
    return AnalysisResult(
        summary=sections.summary,
        key_findings=sections.findings,
        risk_warnings=sections.warnings,
        recommendations=sections.recommendations,
        confidence=_read_confidence(payload),
        analysis_type=_read_text(payload, "analysisType") or DEFAULT_STRUCTURED_LABEL,
    )


def parse_unstructured(raw_text: str, record: RecordDescriptor) -> AnalysisResult:
    text = raw_text or ""
    first_line = next((line.strip() for line in text.split("\n") if line.strip()), "")
    summary = first_line or (
        synthesized_summary(record)
        + " The record provides important medical information that requires"
          " proper analysis and follow-up."
    )

    findings = extract_list_items(text, FINDINGS_KEYWORDS) or fallback_findings(record)
    warnings = extract_list_items(text, WARNINGS_KEYWORDS) or fallback_warnings()
    recommendations = extract_list_items(text, RECOMMENDATIONS_KEYWORDS) or fallback_recommendations()

    sections = ensure_diverse_sections(summary, findings, warnings, recommendations, record)
    return AnalysisResult(
        summary=sections.summary,
        key_findings=sections.findings,
        risk_warnings=sections.warnings,
        recommendations=sections.recommendations,
        confidence=score_response_text(text, record),
        analysis_type=UNSTRUCTURED_LABEL,
    )


def _minimal_result(record: RecordDescriptor) -> AnalysisResult:
    sections = ensure_diverse_sections(
        synthesized_summary(record),
        fallback_findings(record),
        fallback_warnings(),
        fallback_recommendations(),
        record,
    )
    return AnalysisResult(
        summary=sections.summary,
        key_findings=sections.findings,
        risk_warnings=sections.warnings,
        recommendations=sections.recommendations,
        confidence=score_response_text("", record),
        analysis_type=UNSTRUCTURED_LABEL,
    )


def parse_ai_response(
    raw_text: str,
    record: RecordDescriptor,
    structured_label: Optional[str] = None,
) -> AnalysisResult:
    """
    Parse raw provider output into a normalized AnalysisResult.

    Args:
        raw_text: Provider message content (JSON, fenced JSON or free text)
        record: Record the analysis belongs to
        structured_label: analysis_type for JSON replies (default: the reply's own)

    Returns:
        AnalysisResult; never raises
    """
    try:
        payload = decode_structured(raw_text)
    except ResponseParseError as e:
        logger.info(f"Structured parse failed, using text parsing: {e}")
    except Exception as e:
        logger.warning(f"Unexpected error decoding provider response: {e}")
    else:
        try:
            result = parse_structured(payload, record)
            if structured_label:
                result.analysis_type = structured_label
            return result
        except Exception as e:
            logger.warning(f"Structured result could not be built, using text parsing: {e}")

    try:
        return parse_unstructured(raw_text, record)
    except Exception as e:
        logger.error(f"Text parsing failed, returning fallback sections: {e}", exc_info=True)
        return _minimal_result(record)
