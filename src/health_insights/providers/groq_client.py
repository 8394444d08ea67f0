# ============================================================================
# src/health_insights/providers/groq_client.py
# ============================================================================
"""
Groq Analysis Provider (primary)

OpenAI-compatible chat completions endpoint serving llama-3.3-70b-versatile.

Records with an image attachment get a document prompt framed by record
type; JPG/PNG attachments are run through OCR first and the text snippet is
embedded in the prompt. Records without an attachment get the plain
record prompt.
"""

from typing import Any, Dict, Optional

from .base import ProviderType, RemoteAnalysisProvider, is_usable_key
from .prompts import SYSTEM_PROMPT, build_document_prompt, build_record_prompt
from ..core.models import RecordDescriptor
from ..extractors.ocr_extractor import OCRExtractor, truncate_snippet
from ..utils.exceptions import ProviderResponseError
from ..utils.logging import mask_secret

GROQ_LABEL = "Groq AI Analysis"


def resolve_groq_api_key(config: Dict[str, Any]) -> Optional[str]:
    """
    First usable key among groq_api_key, vite_groq_api_key and the
    debug_groq_api_key runtime override. Placeholders are skipped.
    """
    for key in ('groq_api_key', 'vite_groq_api_key', 'debug_groq_api_key'):
        value = config.get(key)
        if is_usable_key(value):
            return value
    return None


def read_chat_content(data: Any) -> str:
    """
    Pull choices[0].message.content out of a chat completions body.

    Raises:
        ProviderResponseError: content missing or empty
    """
    try:
        content = data['choices'][0]['message']['content']
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderResponseError(f"No message content in completion body: {e}") from e
    if not isinstance(content, str) or not content.strip():
        raise ProviderResponseError("Completion message content is empty")
    return content


class GroqProvider(RemoteAnalysisProvider):
    """
    Config options:
        groq_api_key / vite_groq_api_key / debug_groq_api_key: Credentials
        groq_base_url: API base URL (default: https://api.groq.com/openai/v1)
        groq_model: Chat model (default: llama-3.3-70b-versatile)
        groq_temperature: Sampling temperature (default: 0.3)
        groq_max_tokens: Reply token budget (default: 2000)
        enable_ocr: Run OCR on JPG/PNG attachments (default: True)
        ocr_snippet_limit: Max OCR chars in the prompt (default: 2000)
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        ocr_extractor: Optional[OCRExtractor] = None,
    ):
        super().__init__(config)
        self._api_key = resolve_groq_api_key(self.config)
        self.base_url = self.config.get('groq_base_url', 'https://api.groq.com/openai/v1').rstrip('/')
        self.model = self.config.get('groq_model', 'llama-3.3-70b-versatile')
        self.temperature = self.config.get('groq_temperature', 0.3)
        self.max_tokens = self.config.get('groq_max_tokens', 2000)
        self.enable_ocr = self.config.get('enable_ocr', True)
        self.snippet_limit = self.config.get('ocr_snippet_limit', 2000)
        self.ocr = ocr_extractor or OCRExtractor(self.config)

        self.logger.info(f"Initialized Groq provider: {self.model} (key: {mask_secret(self._api_key)})")

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.GROQ

    @property
    def label(self) -> str:
        return GROQ_LABEL

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    async def build_prompt(self, record: RecordDescriptor) -> str:
        if not record.has_attachment:
            return build_record_prompt(record)

        snippet = None
        if self.enable_ocr and record.can_ocr:
            text = await self.ocr.extract_text(record.file_url)
            if text:
                snippet = truncate_snippet(text, self.snippet_limit)
        return build_document_prompt(record, snippet)

    async def generate(self, record: RecordDescriptor) -> str:
        prompt = await self.build_prompt(record)
        self.logger.debug(f"Sending {len(prompt)} char prompt to {self.model}")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        data = await self._post_json(f"{self.base_url}/chat/completions", payload)
        return read_chat_content(data)
