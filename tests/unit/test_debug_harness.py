# ============================================================================
# FILE: tests/unit/test_debug_harness.py
# ============================================================================
"""
Unit tests for the debug harness
"""

from unittest.mock import patch

import pytest

from health_insights.analysis.local_analysis import LOCAL_ANALYSIS_LABEL
from health_insights.debug.harness import DebugHarness, main, sample_records


def test_sample_records_use_given_date():
    samples = sample_records("2024-06-01")
    assert {record.service_date for record in samples.values()} == {"2024-06-01"}
    assert samples["prescription"].description == "Test prescription for blood pressure medication"


def test_provider_status_masks_keys(no_credentials_config):
    harness = DebugHarness({**no_credentials_config, "debug_groq_api_key": "gsk_debug_override"})
    status = harness.provider_status()

    assert status["groq"]["configured"] is True
    assert status["groq"]["key"] == "gsk_de..."
    assert status["openai"]["configured"] is False


@pytest.mark.asyncio
async def test_run_sample_without_credentials(no_credentials_config, seeded_rng):
    harness = DebugHarness(no_credentials_config, rng=seeded_rng)
    result = await harness.run_sample("prescription")

    assert result.analysis_type == LOCAL_ANALYSIS_LABEL
    assert result.summary.startswith("Prescription Analysis of Test Health Record")


@pytest.mark.asyncio
async def test_run_all(no_credentials_config, seeded_rng):
    harness = DebugHarness(no_credentials_config, rng=seeded_rng)
    results = await harness.run_all()

    assert set(results) == set(harness.samples)
    assert all(0.4 <= result.confidence <= 0.95 for result in results.values())


@pytest.mark.asyncio
async def test_unknown_sample(no_credentials_config):
    with pytest.raises(KeyError):
        await DebugHarness(no_credentials_config).run_sample("missing")


def test_main_unknown_sample_exit_code(capsys):
    assert main(["--sample", "missing"]) == 1
    assert "Unknown sample" in capsys.readouterr().err


def test_main_leaves_log_level_to_config(capsys):
    with patch("health_insights.debug.harness.setup_logging") as configure:
        main(["--sample", "missing"])
    configure.assert_called_once_with(None)


def test_main_verbose_forces_debug(capsys):
    with patch("health_insights.debug.harness.setup_logging") as configure:
        main(["--sample", "missing", "-v"])
    configure.assert_called_once_with("DEBUG")
