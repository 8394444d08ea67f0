# ============================================================================
# src/health_insights/extractors/__init__.py
# ============================================================================
"""
Text extraction from record attachments.
"""

from .ocr_extractor import OCRExtractor, collapse_whitespace, truncate_snippet

__all__ = ["OCRExtractor", "collapse_whitespace", "truncate_snippet"]
