# ============================================================================
# src/health_insights/analysis/normalizer.py
# ============================================================================
"""
List normalization: stable de-duplication, length limits and list caps.
"""

from typing import Iterable, List, Optional

from .similarity import are_similar

MAX_LIST_ITEMS = 5
MAX_ENTRY_LENGTH = 280
ELLIPSIS = "…"


def truncate_entry(text: str, limit: int = MAX_ENTRY_LENGTH) -> str:
    """Cut entries longer than `limit` to limit-3 chars plus an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit - 3].rstrip() + ELLIPSIS


def dedupe_and_trim(items: Optional[Iterable], reference_text: str) -> List[str]:
    """
    Keep the first occurrence of each distinct entry.

    Entries that are blank, not strings, near-duplicates of `reference_text`
    or of an entry already kept are dropped. Order is preserved and the
    result is capped at MAX_LIST_ITEMS.

    Running this again on its own output changes nothing.
    """
    kept: List[str] = []
    for raw in items or []:
        if not isinstance(raw, str):
            continue
        item = raw.strip()
        if not item:
            continue
        # Compare the truncated form so a second pass sees exactly what we kept
        item = truncate_entry(item)
        if are_similar(item, reference_text):
            continue
        if any(are_similar(existing, item) for existing in kept):
            continue
        kept.append(item)
        if len(kept) == MAX_LIST_ITEMS:
            break
    return kept
