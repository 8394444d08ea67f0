# ============================================================================
# src/health_insights/core/orchestrator.py
# ============================================================================
"""
Analysis Orchestrator

Single entry point for attaching an analysis to a health record.

Flow:
1. Resolve primary-provider credentials; none usable -> local analysis
2. Try each remote provider in order; first result wins
3. Every provider declined or failed -> local analysis

analyze() never raises. Whatever goes wrong is logged and the record
still gets the local heuristic result.
"""

import logging
import random
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import merge_config
from .models import AnalysisResult, RecordDescriptor
from ..providers.base import BaseAnalysisProvider
from ..providers.client import build_default_chain
from ..providers.groq_client import resolve_groq_api_key
from ..providers.local_provider import LocalHeuristicProvider
from ..utils.logging import mask_secret

logger = logging.getLogger(__name__)

RecordInput = Union[RecordDescriptor, Mapping[str, Any]]

_EMPTY_RECORD = RecordDescriptor(title="", record_type="", service_date="")


def coerce_record(record: Any) -> RecordDescriptor:
    """RecordDescriptor from a descriptor or an app payload dict."""
    if isinstance(record, RecordDescriptor):
        return record
    if isinstance(record, Mapping):
        return RecordDescriptor.from_dict(dict(record))
    raise TypeError(f"Cannot analyze record of type {type(record).__name__}")


class AnalysisOrchestrator:
    """
    Runs the provider chain with a local fallback.

    Args:
        config: Overrides merged over the environment config
        providers: Remote providers to try in order (default: build_default_chain)
        local_provider: Fallback provider (default: LocalHeuristicProvider)
        rng: Random source for the local confidence jitter
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        providers: Optional[List[BaseAnalysisProvider]] = None,
        local_provider: Optional[LocalHeuristicProvider] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = merge_config(config)
        self._providers = providers
        self.local_provider = local_provider or LocalHeuristicProvider(self.config, rng=rng)

    def _local(self, record: RecordDescriptor) -> AnalysisResult:
        return self.local_provider.analyze_sync(record)

    async def _run_chain(self, record: RecordDescriptor) -> Optional[AnalysisResult]:
        providers = self._providers if self._providers is not None else build_default_chain(self.config)
        try:
            for provider in providers:
                logger.info(f"Trying {provider.provider_type.value} provider")
                result = await provider.analyze(record)
                if result is not None:
                    logger.info(f"{provider.provider_type.value} provider succeeded")
                    return result
                logger.info(f"{provider.provider_type.value} provider returned nothing")
            return None
        finally:
            for provider in providers:
                try:
                    await provider.close()
                except Exception as e:
                    logger.warning(f"Error closing {provider.provider_type.value} provider: {e}")

    async def analyze(self, record: RecordInput) -> AnalysisResult:
        """
        Analyze a record.

        Returns:
            AnalysisResult; never raises
        """
        try:
            descriptor = coerce_record(record)
        except Exception as e:
            logger.error(f"Invalid record input, using empty record: {e}")
            return self._local(_EMPTY_RECORD)

        try:
            api_key = resolve_groq_api_key(self.config)
            logger.info(f"Primary provider key: {'found' if api_key else 'not found'} ({mask_secret(api_key)})")
            if not api_key:
                logger.info("No valid provider key, using local analysis")
                return self._local(descriptor)

            result = await self._run_chain(descriptor)
            if result is not None:
                return result
            logger.info("All providers failed, using local analysis")
        except Exception as e:
            logger.error(f"Analysis error, falling back to local analysis: {e}", exc_info=True)

        try:
            return self._local(descriptor)
        except Exception as e:
            logger.error(f"Local analysis failed, using empty record: {e}", exc_info=True)
            return self._local(_EMPTY_RECORD)


async def analyze_health_record(
    record: RecordInput,
    config: Optional[Dict[str, Any]] = None,
    rng: Optional[random.Random] = None,
) -> AnalysisResult:
    """
    Analyze one health record with the default provider chain.

    Args:
        record: RecordDescriptor or camelCase payload dict
        config: Overrides merged over the environment config
        rng: Random source for the local confidence jitter

    Returns:
        AnalysisResult; never raises
    """
    try:
        orchestrator = AnalysisOrchestrator(config, rng=rng)
    except Exception as e:
        logger.error(f"Could not build orchestrator, using local analysis: {e}", exc_info=True)
        local = LocalHeuristicProvider({}, rng=rng)
        try:
            return local.analyze_sync(coerce_record(record))
        except Exception:
            return local.analyze_sync(_EMPTY_RECORD)
    return await orchestrator.analyze(record)
