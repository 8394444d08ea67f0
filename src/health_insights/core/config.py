# ============================================================================
# src/health_insights/core/config.py
# ============================================================================
"""
Centralized Configuration Management

Loads configuration from environment variables (.env file) with sensible defaults.
All config values flow from this single source of truth.

Usage:
    from health_insights.core.config import get_config

    config = get_config()
    print(config['groq_model'])

Components accept an optional config dict and merge it over these values,
so tests and debug tooling can override single keys:

    provider = GroqProvider({'groq_api_key': 'gsk_test'})
"""

from pathlib import Path
from typing import Dict, Any
from functools import lru_cache

from dotenv import load_dotenv

from ..config.provider_config import ProviderSettings
from ..config.analysis_config import AnalysisSettings
from ..config.logging_config import LoggingSettings


def _load_dotenv() -> bool:
    """Load .env file if it exists (project root first, then cwd)."""
    env_path = Path(__file__).parent.parent.parent.parent / '.env'
    if env_path.exists():
        load_dotenv(env_path)
        return True

    cwd_env = Path.cwd() / '.env'
    if cwd_env.exists():
        load_dotenv(cwd_env)
        return True

    return False


def _build_config() -> Dict[str, Any]:
    providers = ProviderSettings()
    analysis = AnalysisSettings()
    logs = LoggingSettings()

    return {
        # Primary provider
        'groq_api_key': providers.GROQ_API_KEY,
        'vite_groq_api_key': providers.VITE_GROQ_API_KEY,
        # Runtime override for local debugging; only set programmatically
        'debug_groq_api_key': None,
        'groq_base_url': providers.GROQ_BASE_URL,
        'groq_model': providers.GROQ_MODEL,
        'groq_temperature': providers.GROQ_TEMPERATURE,
        'groq_max_tokens': providers.GROQ_MAX_TOKENS,

        # Alternate provider
        'openai_api_key': providers.OPENAI_API_KEY or providers.VITE_OPENAI_API_KEY,
        'openai_base_url': providers.OPENAI_BASE_URL,
        'openai_model': providers.OPENAI_MODEL,
        'openai_temperature': providers.OPENAI_TEMPERATURE,
        'openai_max_tokens': providers.OPENAI_MAX_TOKENS,

        # Secondary provider
        'huggingface_api_key': providers.HUGGINGFACE_API_KEY,
        'huggingface_base_url': providers.HUGGINGFACE_BASE_URL,
        'huggingface_models': list(providers.HUGGINGFACE_MODELS),
        'huggingface_temperature': providers.HUGGINGFACE_TEMPERATURE,
        'huggingface_max_length': providers.HUGGINGFACE_MAX_LENGTH,

        # Transport
        'provider_timeout': providers.PROVIDER_TIMEOUT,

        # Analysis
        'enable_ocr': analysis.ENABLE_OCR,
        'ocr_language': analysis.OCR_LANGUAGE,
        'ocr_snippet_limit': analysis.OCR_SNIPPET_LIMIT,
        'local_analysis_seed': analysis.LOCAL_ANALYSIS_SEED,

        # Logging
        'log_level': logs.LOG_LEVEL,
        'log_json': logs.LOG_JSON,
    }


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """
    Get configuration dictionary.

    Cached for performance - call once and pass to components.
    Callers must not mutate the returned dict; merge instead.
    """
    _load_dotenv()
    return _build_config()


def merge_config(config: Dict[str, Any] = None) -> Dict[str, Any]:
    """Env config overlaid with explicitly passed values (passed wins)."""
    return {**get_config(), **(config or {})}


def reload_config() -> Dict[str, Any]:
    """Reload configuration from environment."""
    get_config.cache_clear()
    return get_config()
