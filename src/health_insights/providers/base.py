# ============================================================================
# src/health_insights/providers/base.py
# ============================================================================
"""
Base Analysis Provider Interface

Every way of producing an analysis shares one interface: analyze(record)
returns an AnalysisResult, or None when this source had nothing to offer.
Supported providers:
- groq: primary chat-completions provider (default chain)
- openai: alternate chat-completions provider
- huggingface: secondary inference provider with a model fallback list
- local: heuristic generator, never fails
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
import asyncio
import logging

import aiohttp

from ..analysis.parser import parse_ai_response
from ..config.provider_config import PLACEHOLDER_API_KEY
from ..core.config import merge_config
from ..core.models import AnalysisResult, RecordDescriptor
from ..utils.exceptions import ProviderError, ProviderResponseError


class ProviderType(Enum):
    """Supported analysis providers."""
    GROQ = "groq"
    OPENAI = "openai"
    HUGGINGFACE = "huggingface"
    LOCAL = "local"


def is_usable_key(api_key: Optional[str]) -> bool:
    """Empty keys and the sample-.env placeholder count as missing."""
    return bool(api_key) and api_key.strip() != "" and api_key != PLACEHOLDER_API_KEY


class BaseAnalysisProvider(ABC):
    """
    Abstract base class for analysis providers.

    All providers must implement:
    - provider_type / label
    - analyze(): AnalysisResult or None
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = merge_config(config)
        self.logger = logging.getLogger(self.__class__.__name__)

        self._call_count = 0
        self._failure_count = 0
        self._total_time = 0.0

    @property
    @abstractmethod
    def provider_type(self) -> ProviderType:
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """analysisType reported when this provider does not supply one."""
        pass

    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def analyze(self, record: RecordDescriptor) -> Optional[AnalysisResult]:
        pass

    async def close(self):
        """Release network resources (no-op by default)."""
        return None

    def get_statistics(self) -> Dict[str, Any]:
        avg_time = self._total_time / self._call_count if self._call_count > 0 else 0.0
        return {
            "provider": self.provider_type.value,
            "calls": self._call_count,
            "failures": self._failure_count,
            "total_time": self._total_time,
            "average_time": avg_time,
        }


class RemoteAnalysisProvider(BaseAnalysisProvider):
    """
    Provider backed by an HTTPS text-generation endpoint.

    Subclasses implement generate(), which returns the raw reply text or
    raises ProviderError. analyze() wraps it: any failure is logged and
    reported as None so the caller can fall through.

    Config options:
        provider_timeout: Total request timeout in seconds (default: aiohttp's)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.timeout = self.config.get('provider_timeout')
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    @abstractmethod
    def api_key(self) -> Optional[str]:
        pass

    def is_configured(self) -> bool:
        return is_usable_key(self.api_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session for the current event loop."""
        current_loop = asyncio.get_running_loop()
        if (
            self._session is None
            or self._session.closed
            or self._session_loop is not current_loop
        ):
            if self._session is not None and not self._session.closed:
                await self._session.close()
            session_kwargs = {}
            if self.timeout:
                session_kwargs['timeout'] = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(**session_kwargs)
            self._session_loop = current_loop
        return self._session

    async def close(self):
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        self._session_loop = None

    async def _post_json(self, url: str, payload: Dict[str, Any]) -> Any:
        """
        POST a JSON body and decode the JSON reply.

        Raises:
            ProviderError: non-2xx status
            ProviderResponseError: body is not JSON
        """
        session = await self._get_session()
        async with session.post(url, json=payload, headers=self._headers()) as response:
            if not 200 <= response.status < 300:
                error_text = await response.text()
                raise ProviderError(
                    f"{self.provider_type.value} error ({response.status}): {error_text[:200]}",
                    provider=self.provider_type.value,
                    status=response.status,
                )
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise ProviderResponseError(
                    f"{self.provider_type.value} returned a non-JSON body: {e}",
                    provider=self.provider_type.value,
                    status=response.status,
                ) from e

    @abstractmethod
    async def generate(self, record: RecordDescriptor) -> str:
        """
        Produce raw analysis text for a record.

        Raises:
            ProviderError: transport failure or unusable reply
        """
        pass

    def parse(self, text: str, record: RecordDescriptor) -> AnalysisResult:
        return parse_ai_response(text, record)

    async def analyze(self, record: RecordDescriptor) -> Optional[AnalysisResult]:
        if not self.is_configured():
            self.logger.info(f"{self.provider_type.value} has no usable credentials, skipping")
            return None

        start_time = datetime.now()
        self._call_count += 1
        try:
            text = await self.generate(record)
        except (ProviderError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            self._failure_count += 1
            self.logger.warning(f"{self.provider_type.value} request failed: {e}")
            return None
        except Exception as e:
            self._failure_count += 1
            self.logger.error(f"{self.provider_type.value} unexpected error: {e}", exc_info=True)
            return None
        finally:
            self._total_time += (datetime.now() - start_time).total_seconds()

        self.logger.info(f"{self.provider_type.value} reply received ({len(text)} chars)")
        return self.parse(text, record)
