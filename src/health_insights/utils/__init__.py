# ============================================================================
# src/health_insights/utils/__init__.py
# ============================================================================
"""
Utility modules for the health insights engine.
"""

from .exceptions import (
    HealthInsightsError,
    ProviderError,
    ProviderResponseError,
    OCRError,
    ResponseParseError,
)

from .logging import (
    setup_logging,
    mask_secret,
    JsonFormatter,
)

__all__ = [
    "HealthInsightsError",
    "ProviderError",
    "ProviderResponseError",
    "OCRError",
    "ResponseParseError",
    "setup_logging",
    "mask_secret",
    "JsonFormatter",
]
