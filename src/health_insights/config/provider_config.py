# ============================================================================
# src/health_insights/config/provider_config.py
# ============================================================================
"""
Text-Generation Provider Settings
- Credentials (primary + alternates)
- Endpoints and model identifiers
- Sampling parameters
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

# Value shipped in the sample .env; treated the same as "no key"
PLACEHOLDER_API_KEY = "gsk_your_api_key_here"


class ProviderSettings(BaseSettings):
    # --- Primary provider (Groq, OpenAI-compatible chat completions) ---
    GROQ_API_KEY: str = Field(
        default="",
        description="Bearer token for the primary provider"
    )
    VITE_GROQ_API_KEY: str = Field(
        default="",
        description="Key name used by the web frontend build; read as a fallback"
    )
    GROQ_BASE_URL: str = Field(
        default="https://api.groq.com/openai/v1",
        description="Base URL for the primary provider"
    )
    GROQ_MODEL: str = Field(
        default="llama-3.3-70b-versatile",
        description="Chat model used for record analysis"
    )
    GROQ_TEMPERATURE: float = Field(
        default=0.3,
        ge=0.0, le=2.0,
        description="Sampling temperature for the primary provider"
    )
    GROQ_MAX_TOKENS: int = Field(
        default=2000,
        description="Token budget for the primary provider reply"
    )

    # --- Alternate provider (OpenAI), not on the default chain ---
    OPENAI_API_KEY: str = Field(default="", description="Alternate provider key")
    VITE_OPENAI_API_KEY: str = Field(default="", description="Frontend-style alternate key name")
    OPENAI_BASE_URL: str = Field(default="https://api.openai.com/v1")
    OPENAI_MODEL: str = Field(default="gpt-3.5-turbo")
    OPENAI_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)
    OPENAI_MAX_TOKENS: int = Field(default=1000)

    # --- Secondary inference provider (Hugging Face), not on the default chain ---
    HUGGINGFACE_API_KEY: str = Field(default="", description="Hugging Face inference token")
    HUGGINGFACE_BASE_URL: str = Field(default="https://api-inference.huggingface.co/models")
    HUGGINGFACE_MODELS: List[str] = Field(
        default_factory=lambda: ["microsoft/DialoGPT-medium", "gpt2", "distilgpt2"],
        description="Models tried in order until one answers"
    )
    HUGGINGFACE_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)
    HUGGINGFACE_MAX_LENGTH: int = Field(default=300)

    # --- Transport ---
    PROVIDER_TIMEOUT: Optional[int] = Field(
        default=None,
        description="Total request timeout in seconds; None keeps the aiohttp default"
    )

provider_settings = ProviderSettings()
