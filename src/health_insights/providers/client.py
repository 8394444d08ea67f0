# ============================================================================
# src/health_insights/providers/client.py
# ============================================================================
"""
Analysis Provider Factory

Usage:
    from health_insights.providers.client import create_provider, build_default_chain

    provider = create_provider("groq", {'groq_api_key': 'gsk_...'})
    result = await provider.analyze(record)

    # Providers tried by the orchestrator, in order
    chain = build_default_chain()

Configuration is loaded from .env and merged with any passed config.
Passed config values take precedence over .env values.
"""

import logging
from typing import Any, Dict, List, Optional

from .base import BaseAnalysisProvider, ProviderType
from .groq_client import GroqProvider
from .huggingface_client import HuggingFaceProvider
from .local_provider import LocalHeuristicProvider
from .openai_client import OpenAIProvider
from ..core.config import merge_config

_logger = logging.getLogger(__name__)

PROVIDER_CLASSES = {
    ProviderType.GROQ: GroqProvider,
    ProviderType.OPENAI: OpenAIProvider,
    ProviderType.HUGGINGFACE: HuggingFaceProvider,
    ProviderType.LOCAL: LocalHeuristicProvider,
}

# Remote providers tried before the local fallback
DEFAULT_CHAIN = (ProviderType.GROQ,)


def create_provider(name: str, config: Optional[Dict[str, Any]] = None) -> BaseAnalysisProvider:
    """
    Create a provider by name.

    Args:
        name: "groq" | "openai" | "huggingface" | "local"
        config: Overrides merged over the environment config

    Raises:
        ValueError: If the provider name is not supported
    """
    try:
        provider_type = ProviderType(name.lower())
    except ValueError:
        supported = ", ".join(t.value for t in ProviderType)
        raise ValueError(f"Unknown provider: {name}. Supported providers: {supported}")

    config = merge_config(config)
    _logger.debug(f"Creating {provider_type.value} provider")
    return PROVIDER_CLASSES[provider_type](config)


def build_default_chain(config: Optional[Dict[str, Any]] = None) -> List[BaseAnalysisProvider]:
    """Remote providers in the order they are tried."""
    return [create_provider(provider_type.value, config) for provider_type in DEFAULT_CHAIN]


__all__ = [
    "create_provider",
    "build_default_chain",
    "PROVIDER_CLASSES",
    "DEFAULT_CHAIN",
]
