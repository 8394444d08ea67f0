# ============================================================================
# src/health_insights/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .provider_config import provider_settings, ProviderSettings, PLACEHOLDER_API_KEY
from .analysis_config import analysis_settings, AnalysisSettings
from .logging_config import logging_settings, LoggingSettings
