# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings, the config dict and logging utilities
"""

import json
import logging
from unittest.mock import patch

import pytest

from health_insights.config import (
    PLACEHOLDER_API_KEY,
    AnalysisSettings,
    LoggingSettings,
    ProviderSettings,
)
from health_insights.core.config import get_config, merge_config, reload_config
from health_insights.utils.logging import JsonFormatter, mask_secret, setup_logging


def test_config_has_expected_keys():
    config = get_config()
    for key in (
        "groq_api_key",
        "vite_groq_api_key",
        "debug_groq_api_key",
        "groq_model",
        "huggingface_models",
        "enable_ocr",
        "ocr_snippet_limit",
        "local_analysis_seed",
        "log_level",
    ):
        assert key in config


def test_debug_key_never_from_environment():
    assert get_config()["debug_groq_api_key"] is None


def test_merge_config_overrides():
    merged = merge_config({"groq_model": "test-model"})
    assert merged["groq_model"] == "test-model"
    assert merged is not get_config()
    assert merged["enable_ocr"] == get_config()["enable_ocr"]


def test_merge_config_none():
    assert merge_config(None) == get_config()


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GROQ_MODEL", "llama-test")
    monkeypatch.setenv("OCR_SNIPPET_LIMIT", "500")
    monkeypatch.setenv("LOG_JSON", "true")

    assert ProviderSettings().GROQ_MODEL == "llama-test"
    assert AnalysisSettings().OCR_SNIPPET_LIMIT == 500
    assert LoggingSettings().LOG_JSON is True


def test_reload_config_picks_up_environment(monkeypatch):
    monkeypatch.setenv("GROQ_MODEL", "llama-reloaded")
    assert reload_config()["groq_model"] == "llama-reloaded"

    monkeypatch.undo()
    reload_config()


def test_openai_key_falls_back_to_vite_name(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("VITE_OPENAI_API_KEY", "sk-vite")
    assert reload_config()["openai_api_key"] == "sk-vite"

    monkeypatch.undo()
    reload_config()


def test_provider_defaults():
    settings = ProviderSettings()
    assert ProviderSettings.model_fields["GROQ_MAX_TOKENS"].default == 2000
    assert ProviderSettings.model_fields["GROQ_TEMPERATURE"].default == 0.3
    assert settings.HUGGINGFACE_MODELS
    assert PLACEHOLDER_API_KEY == "gsk_your_api_key_here"


def test_mask_secret():
    assert mask_secret(None) == "None"
    assert mask_secret("abc") == "***"
    assert mask_secret("gsk_1234567890") == "gsk_12..."


def test_json_formatter():
    record = logging.LogRecord(
        name="health_insights.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Provider %s failed",
        args=("groq",),
        exc_info=None,
    )
    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "health_insights.test"
    assert data["message"] == "Provider groq failed"
    assert data["timestamp"].endswith("+00:00")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_reads_config(restore_root_logger):
    with patch("health_insights.utils.logging.get_config",
               return_value={"log_level": "WARNING", "log_json": True}):
        setup_logging()

    assert restore_root_logger.level == logging.WARNING
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_setup_logging_explicit_level_wins(restore_root_logger):
    with patch("health_insights.utils.logging.get_config",
               return_value={"log_level": "WARNING", "log_json": False}):
        setup_logging("DEBUG")

    assert restore_root_logger.level == logging.DEBUG
    assert not isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)
