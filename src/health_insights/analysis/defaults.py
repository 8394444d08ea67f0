# ============================================================================
# src/health_insights/analysis/defaults.py
# ============================================================================
"""
Per-record-type backfill content, used when normalization leaves a
section empty.
"""

from dataclasses import dataclass, field
from typing import List

from ..constants.record_types import RecordType
from ..core.models import RecordDescriptor


@dataclass
class SectionDefaults:
    findings: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def defaults_for(record: RecordDescriptor) -> SectionDefaults:
    record_type = record.normalized_type

    if record_type == RecordType.PRESCRIPTION:
        return SectionDefaults(
            findings=[
                'Prescribed medication(s) and dosage instructions documented',
                'Prescriber identity and authorization present',
                'Patient identification and prescription date recorded',
            ],
            warnings=[
                'Check for potential drug–drug interactions',
                'Monitor for medication-specific adverse effects',
            ],
            recommendations=[
                'Adhere strictly to dosing schedule',
                'Report side effects to provider promptly',
                'Bring prescription to follow-up review',
            ],
        )

    if record_type == RecordType.LAB_RESULTS:
        return SectionDefaults(
            findings=[
                'Key analytes reported with reference ranges',
                'Flagged abnormal values require review',
            ],
            warnings=[
                'Correlate abnormal results clinically before acting',
            ],
            recommendations=[
                'Repeat or extend tests if clinically indicated',
                'Discuss results with healthcare provider',
            ],
        )

    return SectionDefaults(
        findings=[
            f"Record type: {record.record_type or 'Health Record'}",
            f"Document date: {record.service_date or 'Unknown'}",
        ],
        warnings=['Limited clinical details available for assessment'],
        recommendations=['Review with healthcare provider'],
    )
