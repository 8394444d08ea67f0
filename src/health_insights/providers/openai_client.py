# ============================================================================
# src/health_insights/providers/openai_client.py
# ============================================================================
"""
OpenAI Analysis Provider (alternate, not on the default chain)
"""

from typing import Any, Dict, Optional

from .base import ProviderType, RemoteAnalysisProvider
from .groq_client import read_chat_content
from .prompts import ALTERNATE_SYSTEM_PROMPT, build_alternate_prompt
from ..analysis.parser import parse_ai_response
from ..core.models import AnalysisResult, RecordDescriptor

OPENAI_LABEL = "OpenAI GPT-3.5 Analysis"


class OpenAIProvider(RemoteAnalysisProvider):
    """
    Config options:
        openai_api_key: Credential (OPENAI_API_KEY or VITE_OPENAI_API_KEY)
        openai_base_url: API base URL (default: https://api.openai.com/v1)
        openai_model: Chat model (default: gpt-3.5-turbo)
        openai_temperature: Sampling temperature (default: 0.7)
        openai_max_tokens: Reply token budget (default: 1000)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.base_url = self.config.get('openai_base_url', 'https://api.openai.com/v1').rstrip('/')
        self.model = self.config.get('openai_model', 'gpt-3.5-turbo')
        self.temperature = self.config.get('openai_temperature', 0.7)
        self.max_tokens = self.config.get('openai_max_tokens', 1000)

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.OPENAI

    @property
    def label(self) -> str:
        return OPENAI_LABEL

    @property
    def api_key(self) -> Optional[str]:
        return self.config.get('openai_api_key')

    async def generate(self, record: RecordDescriptor) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": ALTERNATE_SYSTEM_PROMPT},
                {"role": "user", "content": build_alternate_prompt(record)},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        data = await self._post_json(f"{self.base_url}/chat/completions", payload)
        return read_chat_content(data)

    def parse(self, text: str, record: RecordDescriptor) -> AnalysisResult:
        """JSON replies carry this provider's label; free text keeps the parser's."""
        return parse_ai_response(text, record, structured_label=self.label)
