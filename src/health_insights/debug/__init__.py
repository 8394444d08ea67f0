# ============================================================================
# src/health_insights/debug/__init__.py
# ============================================================================
"""
Debug tooling for exercising the analysis chain by hand.
"""

from .harness import DebugHarness, sample_records

__all__ = ["DebugHarness", "sample_records"]
