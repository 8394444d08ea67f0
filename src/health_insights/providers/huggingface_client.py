# ============================================================================
# src/health_insights/providers/huggingface_client.py
# ============================================================================
"""
Hugging Face Inference Provider (secondary, not on the default chain)

Tries each configured model in order and keeps the first one that answers
with status 200. The reply is free text, so it always goes through the
text parser, then gets this provider's label.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from .base import ProviderType, RemoteAnalysisProvider
from .prompts import build_alternate_prompt
from ..core.models import AnalysisResult, RecordDescriptor
from ..utils.exceptions import ProviderError, ProviderResponseError

HUGGINGFACE_LABEL = "Hugging Face AI Analysis"
DEFAULT_MODELS = ["microsoft/DialoGPT-medium", "gpt2", "distilgpt2"]


def read_generated_text(data: Any) -> str:
    """generated_text (or text) from a list-of-objects or object body."""
    if isinstance(data, list):
        data = data[0] if data else {}
    if not isinstance(data, dict):
        return ""
    text = data.get('generated_text') or data.get('text') or ""
    return text if isinstance(text, str) else ""


class HuggingFaceProvider(RemoteAnalysisProvider):
    """
    Config options:
        huggingface_api_key: Inference API token
        huggingface_base_url: Model endpoint root
        huggingface_models: Models tried in order
        huggingface_temperature: Sampling temperature (default: 0.7)
        huggingface_max_length: Generation length (default: 300)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.base_url = self.config.get(
            'huggingface_base_url', 'https://api-inference.huggingface.co/models'
        ).rstrip('/')
        self.models: List[str] = list(self.config.get('huggingface_models') or DEFAULT_MODELS)
        self.temperature = self.config.get('huggingface_temperature', 0.7)
        self.max_length = self.config.get('huggingface_max_length', 300)

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.HUGGINGFACE

    @property
    def label(self) -> str:
        return HUGGINGFACE_LABEL

    @property
    def api_key(self) -> Optional[str]:
        return self.config.get('huggingface_api_key')

    async def generate(self, record: RecordDescriptor) -> str:
        payload = {
            "inputs": build_alternate_prompt(record, as_json=False),
            "parameters": {
                "max_length": self.max_length,
                "temperature": self.temperature,
                "return_full_text": False,
            },
        }

        last_error: Optional[Exception] = None
        for model in self.models:
            try:
                self.logger.info(f"Trying model: {model}")
                data = await self._post_json(f"{self.base_url}/{model}", payload)
            except (ProviderError, aiohttp.ClientError, asyncio.TimeoutError) as e:
                self.logger.info(f"Model {model} failed: {e}")
                last_error = e
                continue

            text = read_generated_text(data)
            if not text.strip():
                raise ProviderResponseError(
                    f"Empty generation from {model}", provider=self.provider_type.value
                )
            self.logger.info(f"Success with model: {model}")
            return text

        raise ProviderError(
            f"All Hugging Face models failed (last error: {last_error})",
            provider=self.provider_type.value,
        )

    def parse(self, text: str, record: RecordDescriptor) -> AnalysisResult:
        result = super().parse(text, record)
        result.analysis_type = self.label
        return result
