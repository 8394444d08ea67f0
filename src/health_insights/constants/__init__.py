# ============================================================================
# src/health_insights/constants/__init__.py
# ============================================================================

from .record_types import RecordType, RECORD_TYPE_ALIASES, normalize_record_type
from .clinical_signals import ClinicalSignals, SIGNAL_PATTERNS, detect_signals, parse_age
