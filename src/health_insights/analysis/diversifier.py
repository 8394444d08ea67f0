# ============================================================================
# src/health_insights/analysis/diversifier.py
# ============================================================================
"""
Section diversification.

The one place where the cross-section rule is enforced: no list entry
repeats the summary, no list repeats itself, and no section is left empty.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .defaults import defaults_for
from .normalizer import dedupe_and_trim
from ..core.models import RecordDescriptor

logger = logging.getLogger(__name__)


@dataclass
class DiversifiedSections:
    summary: str
    findings: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def ensure_diverse_sections(
    summary: str,
    findings: Optional[Iterable],
    warnings: Optional[Iterable],
    recommendations: Optional[Iterable],
    record: RecordDescriptor,
) -> DiversifiedSections:
    clean_summary = (summary or "").strip()
    clean_findings = dedupe_and_trim(findings, clean_summary)
    clean_warnings = dedupe_and_trim(warnings, clean_summary)
    clean_recs = dedupe_and_trim(recommendations, clean_summary)

    defaults = defaults_for(record)
    if not clean_findings:
        logger.debug("Findings empty after normalization, using record-type defaults")
        clean_findings = defaults.findings
    if not clean_warnings:
        logger.debug("Warnings empty after normalization, using record-type defaults")
        clean_warnings = defaults.warnings
    if not clean_recs:
        logger.debug("Recommendations empty after normalization, using record-type defaults")
        clean_recs = defaults.recommendations

    return DiversifiedSections(
        summary=clean_summary,
        findings=clean_findings,
        warnings=clean_warnings,
        recommendations=clean_recs,
    )
