# ============================================================================
# src/health_insights/analysis/similarity.py
# ============================================================================
"""
Near-duplicate detection for short text fragments.

Providers tend to repeat the same sentence across summary, findings and
recommendations with light rewording, so exact equality is not enough.
Two fragments are near-duplicates when, after normalization:
- they are identical, or
- their word sets overlap with Jaccard >= 0.6, or
- the shorter one (at least 20 chars) appears verbatim inside the longer.
"""

import re
from typing import Optional

JACCARD_THRESHOLD = 0.6
MIN_CONTAINMENT_LENGTH = 20

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_for_compare(text: Optional[str]) -> str:
    """Lowercase, replace punctuation with spaces, collapse whitespace."""
    lowered = (text or "").lower()
    return _WHITESPACE.sub(" ", _NON_ALNUM.sub(" ", lowered)).strip()


def jaccard(a: str, b: str) -> float:
    tokens_a = set(a.split(" "))
    tokens_b = set(b.split(" "))
    union = tokens_a | tokens_b
    if not union:
        return 1.0
    return len(tokens_a & tokens_b) / len(union)


def are_similar(a: Optional[str], b: Optional[str]) -> bool:
    na = normalize_for_compare(a)
    nb = normalize_for_compare(b)
    if not na or not nb:
        return False
    if na == nb:
        return True
    if jaccard(na, nb) >= JACCARD_THRESHOLD:
        return True

    shorter, longer = (na, nb) if len(na) < len(nb) else (nb, na)
    return len(shorter) >= MIN_CONTAINMENT_LENGTH and shorter in longer
