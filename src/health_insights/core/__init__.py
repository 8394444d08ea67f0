# ============================================================================
# src/health_insights/core/__init__.py
# ============================================================================
"""
Core components: configuration and the record / result data model.

The orchestrator lives in health_insights.core.orchestrator and is imported
from there directly.
"""

from .config import get_config, merge_config, reload_config
from .models import RecordDescriptor, AnalysisResult
