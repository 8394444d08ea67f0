# ============================================================================
# src/health_insights/debug/harness.py
# ============================================================================
"""
Debug Harness

Runs the full analysis chain over a fixed set of sample records so the
provider setup can be checked from a shell without touching the app.

Usage:
    python -m health_insights.debug                 # every sample
    python -m health_insights.debug --sample prescription
    python -m health_insights.debug --key gsk_...   # runtime key override
"""

import argparse
import asyncio
import json
import logging
import random
import sys
from datetime import date
from typing import Any, Dict, List, Optional

from ..core.config import merge_config
from ..core.models import AnalysisResult, RecordDescriptor
from ..core.orchestrator import AnalysisOrchestrator
from ..providers.base import is_usable_key
from ..providers.groq_client import resolve_groq_api_key
from ..utils.logging import mask_secret, setup_logging

logger = logging.getLogger(__name__)


def sample_records(service_date: Optional[str] = None) -> Dict[str, RecordDescriptor]:
    service_date = service_date or date.today().isoformat()
    return {
        "prescription": RecordDescriptor(
            title="Test Health Record",
            record_type="prescription",
            service_date=service_date,
            description="Test prescription for blood pressure medication",
        ),
        "lab_results": RecordDescriptor(
            title="Annual Blood Panel",
            record_type="Lab Results",
            service_date=service_date,
            description=(
                "Blood pressure 150/95. Total cholesterol elevated at 245 mg/dL. "
                "Patient is 58 years old with a family history of heart disease."
            ),
        ),
        "imaging": RecordDescriptor(
            title="Chest X-Ray",
            record_type="Imaging",
            service_date=service_date,
            description="Follow-up imaging for exertional shortness of breath.",
        ),
        "physical_exam": RecordDescriptor(
            title="Annual Physical",
            record_type="Physical Exam",
            service_date=service_date,
            description="Routine exam, values normal, exercises three times a week.",
        ),
        "empty": RecordDescriptor(
            title="Uploaded Lab Report",
            record_type="Lab Results",
            service_date=service_date,
        ),
    }


class DebugHarness:
    """
    Explicitly constructed debug entry points.

    Args:
        config: Overrides merged over the environment config
            (e.g. {'debug_groq_api_key': 'gsk_...'})
        rng: Random source for the local confidence jitter
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = merge_config(config)
        self.rng = rng or random.Random(self.config.get('local_analysis_seed', 42))
        self.samples = sample_records()

    def provider_status(self) -> Dict[str, Any]:
        """Which credentials are usable, with masked previews."""
        groq_key = resolve_groq_api_key(self.config)
        return {
            "groq": {"configured": groq_key is not None, "key": mask_secret(groq_key)},
            "openai": {"configured": is_usable_key(self.config.get('openai_api_key'))},
            "huggingface": {"configured": is_usable_key(self.config.get('huggingface_api_key'))},
        }

    async def run_record(self, record: RecordDescriptor) -> AnalysisResult:
        orchestrator = AnalysisOrchestrator(self.config, rng=self.rng)
        return await orchestrator.analyze(record)

    async def run_sample(self, name: str) -> AnalysisResult:
        """
        Raises:
            KeyError: unknown sample name
        """
        if name not in self.samples:
            raise KeyError(f"Unknown sample: {name}. Available: {', '.join(self.samples)}")
        logger.info(f"Running sample '{name}'")
        return await self.run_record(self.samples[name])

    async def run_all(self) -> Dict[str, AnalysisResult]:
        results = {}
        for name in self.samples:
            results[name] = await self.run_sample(name)
        return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run sample records through the analysis chain")
    parser.add_argument('--sample', help="Sample name (default: all)")
    parser.add_argument('--key', help="Runtime primary-provider key override")
    parser.add_argument('--verbose', '-v', action='store_true', help="Debug logging")
    args = parser.parse_args(argv)

    # --verbose overrides LOG_LEVEL; LOG_JSON always applies
    setup_logging("DEBUG" if args.verbose else None)

    config = {'debug_groq_api_key': args.key} if args.key else None
    harness = DebugHarness(config)
    print(json.dumps(harness.provider_status(), indent=2))

    if args.sample:
        try:
            results = {args.sample: asyncio.run(harness.run_sample(args.sample))}
        except KeyError as e:
            print(e, file=sys.stderr)
            return 1
    else:
        results = asyncio.run(harness.run_all())

    print(json.dumps({name: result.to_dict() for name, result in results.items()}, indent=2))
    return 0
