# ============================================================================
# src/health_insights/providers/__init__.py
# ============================================================================
"""
Text-generation providers and the local heuristic fallback.
"""

from .base import BaseAnalysisProvider, RemoteAnalysisProvider, ProviderType, is_usable_key
from .groq_client import GroqProvider, resolve_groq_api_key
from .openai_client import OpenAIProvider
from .huggingface_client import HuggingFaceProvider
from .local_provider import LocalHeuristicProvider
from .client import create_provider, build_default_chain

__all__ = [
    "BaseAnalysisProvider",
    "RemoteAnalysisProvider",
    "ProviderType",
    "is_usable_key",
    "GroqProvider",
    "resolve_groq_api_key",
    "OpenAIProvider",
    "HuggingFaceProvider",
    "LocalHeuristicProvider",
    "create_provider",
    "build_default_chain",
]
