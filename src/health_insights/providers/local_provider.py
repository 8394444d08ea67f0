# ============================================================================
# src/health_insights/providers/local_provider.py
# ============================================================================
"""
Local heuristic provider: the always-available end of the chain.
"""

import random
from datetime import datetime
from typing import Any, Dict, Optional

from .base import BaseAnalysisProvider, ProviderType
from ..analysis.local_analysis import LOCAL_ANALYSIS_LABEL, generate_local_analysis
from ..core.models import AnalysisResult, RecordDescriptor


class LocalHeuristicProvider(BaseAnalysisProvider):
    """
    Wraps generate_local_analysis(). Never returns None.

    Config options:
        local_analysis_seed: Seed for the confidence jitter when no rng is given
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(config)
        self.rng = rng or random.Random(self.config.get('local_analysis_seed', 42))

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.LOCAL

    @property
    def label(self) -> str:
        return LOCAL_ANALYSIS_LABEL

    async def analyze(self, record: RecordDescriptor) -> AnalysisResult:
        return self.analyze_sync(record)

    def analyze_sync(self, record: RecordDescriptor) -> AnalysisResult:
        start_time = datetime.now()
        self._call_count += 1
        try:
            return generate_local_analysis(record, self.rng)
        finally:
            self._total_time += (datetime.now() - start_time).total_seconds()
