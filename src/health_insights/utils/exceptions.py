# ============================================================================
# src/health_insights/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the health record insights engine.

None of these reach the caller of analyze_health_record(): providers raise
them internally and the orchestrator turns them into a local fallback.
"""

from typing import Optional


class HealthInsightsError(Exception):
    """Base exception for all health insights errors."""
    pass


class ProviderError(HealthInsightsError):
    """A text-generation provider could not produce a response."""
    def __init__(self, message: str, provider: str = "unknown", status: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status = status


class ProviderResponseError(ProviderError):
    """Provider answered, but the body was malformed or empty."""
    pass


class OCRError(HealthInsightsError):
    """Error extracting text from an attachment image."""
    pass


class ResponseParseError(HealthInsightsError):
    """Provider output could not be decoded as a structured result."""
    pass
