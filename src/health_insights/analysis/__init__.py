# ============================================================================
# src/health_insights/analysis/__init__.py
# ============================================================================
"""
Analysis result normalization: similarity, de-duplication, section
diversification, response parsing and the local heuristic generator.
"""

from .similarity import are_similar, jaccard, normalize_for_compare
from .normalizer import dedupe_and_trim, truncate_entry, MAX_LIST_ITEMS, MAX_ENTRY_LENGTH
from .defaults import SectionDefaults, defaults_for
from .diversifier import DiversifiedSections, ensure_diverse_sections
from .confidence import score_response_text
from .parser import parse_ai_response, extract_list_items
from .local_analysis import generate_local_analysis, LOCAL_ANALYSIS_LABEL

__all__ = [
    "are_similar",
    "jaccard",
    "normalize_for_compare",
    "dedupe_and_trim",
    "truncate_entry",
    "MAX_LIST_ITEMS",
    "MAX_ENTRY_LENGTH",
    "SectionDefaults",
    "defaults_for",
    "DiversifiedSections",
    "ensure_diverse_sections",
    "score_response_text",
    "parse_ai_response",
    "extract_list_items",
    "generate_local_analysis",
    "LOCAL_ANALYSIS_LABEL",
]
